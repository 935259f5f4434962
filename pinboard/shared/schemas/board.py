"""
Board Schemas

Request/response models for board endpoints.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from pinboard.shared.models.enums import Category
from pinboard.shared.schemas.common import BaseSchema


class BoardCreate(BaseModel):
    """Schema for creating a board."""

    title: str = Field(min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    category: Optional[Category] = None
    tags: list[str] = Field(default_factory=list)
    collaborators: list[UUID] = Field(default_factory=list)
    is_secret: bool = False


class BoardUpdate(BaseModel):
    """Partial board update. Omitted fields are unchanged."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    category: Optional[Category] = None
    tags: Optional[list[str]] = None
    collaborators: Optional[list[UUID]] = None
    is_secret: Optional[bool] = None


class BoardResponse(BaseSchema):
    """A board with its ordered pin ids and collaborator ids."""

    id: str
    title: str
    description: str
    created_by: str
    category: Category
    tags: list[str]
    pins: list[str] = Field(default_factory=list)
    collaborators: list[str] = Field(default_factory=list)
    is_secret: bool
    created_at: datetime
    updated_at: datetime
