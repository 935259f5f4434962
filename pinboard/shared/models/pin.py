"""
Pin Entity Model

A single media post (image, video or audio) with its metadata.

The media itself lives in external blob storage; the pin keeps only the
descriptor handed back by that storage (file_id, file_url, file_type).

Derived Collections:
====================
    likes     ← pin_likes.user_id
    saved_by  ← pin_saves.user_id
    comments  ← comments (pin_id = id AND parent_id IS NULL) ordered by position

SAMPLE PIN RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 550e8400-e29b-41d4-a716-446655440000                      │
│ title            │ "Glazed bowl"                                             │
│ file_id          │ "pinboard/abc123"                                         │
│ file_url         │ "https://cdn.example.com/pinboard/abc123.jpg"             │
│ file_type        │ IMAGE_JPEG                                                │
│ created_by       │ 660e8400-e29b-41d4-a716-446655440000                      │
│ category         │ ART                                                       │
│ tags             │ ["ceramics", "blue"]                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

import uuid

from sqlalchemy import JSON, ForeignKey, String, Text, Uuid, Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column

from pinboard.shared.models.base import Base, TimestampMixin
from pinboard.shared.models.enums import Category, MediaType


class Pin(Base, TimestampMixin):
    """
    Pin model - a media post created by a user.

    Attributes:
        id: Unique identifier (UUID v4)
        title: Short title (at most 100 characters)
        description: Longer text (at most 500 characters)
        file_id: Blob storage identifier of the media
        file_url: Public URL of the media
        file_type: MIME type of the media
        created_by: Owner of the pin
        category: Topic category
        tags: Free-form tags
    """

    __tablename__ = "pins"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # CONTENT
    # ═══════════════════════════════════════════════════════════════════════════

    title: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        default="",
    )

    description: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
        default="",
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # MEDIA DESCRIPTOR
    # ═══════════════════════════════════════════════════════════════════════════

    file_id: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    file_url: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    file_type: Mapped[MediaType] = mapped_column(
        SQLEnum(MediaType),
        nullable=False,
        default=MediaType.IMAGE_JPEG,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # OWNERSHIP & CLASSIFICATION
    # ═══════════════════════════════════════════════════════════════════════════

    created_by: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    category: Mapped[Category] = mapped_column(
        SQLEnum(Category),
        nullable=False,
        default=Category.OTHER,
        index=True,
    )

    tags: Mapped[list[str]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Pin(id={self.id}, created_by={self.created_by})>"
