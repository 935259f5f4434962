"""
Pin Schemas

Request/response models for pin endpoints.

The media itself is uploaded to blob storage by the client beforehand;
requests carry only the resulting descriptor.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from pinboard.shared.models.enums import Category, MediaType
from pinboard.shared.schemas.comment import CommentResponse
from pinboard.shared.schemas.common import BaseSchema


class MediaFile(BaseModel):
    """Descriptor of an uploaded media file."""

    file_id: str = Field(min_length=1, description="Blob storage identifier")
    file_url: str = Field(min_length=1, description="Public URL of the media")
    file_type: MediaType = Field(default=MediaType.IMAGE_JPEG, description="MIME type")


class PinCreate(BaseModel):
    """Schema for creating a pin."""

    title: Optional[str] = Field(default=None, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    file: MediaFile
    category: Optional[Category] = None
    tags: list[str] = Field(default_factory=list)


class PinUpdate(BaseModel):
    """Partial pin update. Omitted fields are unchanged."""

    title: Optional[str] = Field(default=None, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    category: Optional[Category] = None
    tags: Optional[list[str]] = None


class PinResponse(BaseSchema):
    """A pin with the ids of its likers, savers and top-level comments."""

    id: str
    title: str
    description: str
    file: MediaFile
    created_by: str
    category: Category
    tags: list[str]
    likes: list[str] = Field(default_factory=list)
    saved_by: list[str] = Field(default_factory=list)
    comments: list[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class PinDetailResponse(PinResponse):
    """A pin with its top-level comments expanded."""

    comment_details: list[CommentResponse] = Field(default_factory=list)


class LikeResponse(BaseModel):
    """Result of a like toggle."""

    liked: bool
    likes_count: int


class SavePinRequest(BaseModel):
    """Save a pin, optionally onto one of your boards."""

    board_id: Optional[UUID] = None


class SaveResponse(BaseModel):
    message: str
    pin_id: str
    board_id: Optional[str] = None
    saved_by_count: int
