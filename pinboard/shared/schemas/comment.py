"""
Comment Schemas

Request/response models for comments and replies.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from pinboard.shared.schemas.common import BaseSchema


class CommentCreate(BaseModel):
    """A new comment or reply."""

    text: str = Field(min_length=1, max_length=300)
    image: Optional[str] = None


class CommentUpdate(BaseModel):
    text: Optional[str] = Field(default=None, min_length=1, max_length=300)
    image: Optional[str] = None


class CommentResponse(BaseSchema):
    """A comment with the ids of its likers and direct replies."""

    id: str
    text: str
    image: str
    created_by: str
    pin_id: str
    parent_id: Optional[str] = None
    is_reply: bool = False
    likes: list[str] = Field(default_factory=list)
    replies: list[str] = Field(default_factory=list)
    created_at: datetime
