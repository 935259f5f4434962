"""
User Schemas

Request/response models for user and authentication endpoints.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from pinboard.shared.schemas.common import BaseSchema


USERNAME_PATTERN = r"^[a-zA-Z0-9_]+$"


class UserBase(BaseModel):
    """Base user schema."""

    email: EmailStr


class UserCreate(UserBase):
    """Schema for user registration."""

    first_name: str = Field(min_length=3, max_length=100)
    surname: Optional[str] = Field(default=None, min_length=3, max_length=100)
    username: str = Field(
        min_length=3,
        max_length=50,
        pattern=USERNAME_PATTERN,
        description="Letters, digits and underscore",
    )
    password: str = Field(
        min_length=6,
        description="Password (minimum 6 characters)",
    )


class UserLogin(UserBase):
    """Schema for user login."""

    password: str = Field(
        min_length=6,
        description="Password (minimum 6 characters)",
    )


class UserUpdate(BaseModel):
    """Partial profile update. Omitted fields are unchanged."""

    first_name: Optional[str] = Field(default=None, min_length=3, max_length=100)
    surname: Optional[str] = Field(default=None, min_length=3, max_length=100)
    username: Optional[str] = Field(
        default=None,
        min_length=3,
        max_length=50,
        pattern=USERNAME_PATTERN,
    )
    bio: Optional[str] = Field(default=None, max_length=160)
    profile_image: Optional[str] = None


class UserResponse(BaseSchema):
    """Schema for user response."""

    id: str
    first_name: str
    surname: Optional[str] = None
    full_name: str
    email: str
    username: str
    bio: str
    profile_image: str
    created_at: datetime


class UserDetailResponse(UserResponse):
    """A user with the ids of everything linked to them."""

    created_pins: list[str] = Field(default_factory=list)
    saved_pins: list[str] = Field(default_factory=list)
    boards: list[str] = Field(default_factory=list)
    public_boards: list[str] = Field(default_factory=list)
    following: list[str] = Field(default_factory=list)
    followers: list[str] = Field(default_factory=list)


class AuthResponse(BaseModel):
    """Schema for authentication response."""

    user: UserResponse
    access_token: str
    token_type: str = "bearer"
    expires_in: int  # seconds


class FollowResponse(BaseModel):
    """Result of a follow toggle."""

    message: str
    following: bool
    following_count: int
    followers_count: int
