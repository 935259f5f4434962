"""
Comment Entity Model

A comment on a pin, or a reply to another comment.

A reply is an ordinary Comment whose parent_id points at the comment it
answers. Top-level comments have parent_id = NULL. ``position`` orders a
comment among its siblings (the pin's top-level comments, or the parent's
replies), so a reply is never part of its pin's top-level list.

SAMPLE COMMENT RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 550e8400-e29b-41d4-a716-446655440000                      │
│ text             │ "Love the glaze!"                                         │
│ created_by       │ 660e8400-e29b-41d4-a716-446655440000                      │
│ pin_id           │ 770e8400-e29b-41d4-a716-446655440000                      │
│ parent_id        │ NULL                                                      │
│ image            │ ""                                                        │
│ position         │ 0                                                         │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import Optional
import uuid

from sqlalchemy import ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from pinboard.shared.models.base import Base, TimestampMixin


class Comment(Base, TimestampMixin):
    """
    Comment model.

    Attributes:
        id: Unique identifier (UUID v4)
        text: Comment body (1 to 300 characters)
        created_by: Author
        pin_id: Pin the comment (or reply) belongs to
        parent_id: Comment being replied to, NULL for top-level comments
        image: Optional image reference
        position: Order among siblings
    """

    __tablename__ = "comments"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    text: Mapped[str] = mapped_column(
        String(300),
        nullable=False,
    )

    created_by: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    pin_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("pins.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    parent_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )

    image: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
    )

    position: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
    )

    @property
    def is_reply(self) -> bool:
        """True when this comment answers another comment."""
        return self.parent_id is not None

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Comment(id={self.id}, pin_id={self.pin_id}, parent_id={self.parent_id})>"
