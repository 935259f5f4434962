"""
Board Entity Model

A named, ordered collection of pins owned by one user, optionally secret.

Derived Collections:
====================
    pins           ← board_pins.pin_id ordered by position
    collaborators  ← board_collaborators.user_id

Visibility:
===========
A secret board is readable only by its owner. Collaborators are stored
but are not granted read access to a secret board.

SAMPLE BOARD RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 550e8400-e29b-41d4-a716-446655440000                      │
│ title            │ "Kitchen ideas"                                           │
│ description      │ "Things to try when we remodel"                           │
│ created_by       │ 660e8400-e29b-41d4-a716-446655440000                      │
│ category         │ DIY                                                       │
│ tags             │ ["kitchen"]                                               │
│ is_secret        │ false                                                     │
└──────────────────────────────────────────────────────────────────────────────┘
"""

import uuid

from sqlalchemy import JSON, Boolean, ForeignKey, String, Uuid, Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column

from pinboard.shared.models.base import Base, TimestampMixin
from pinboard.shared.models.enums import Category


class Board(Base, TimestampMixin):
    """
    Board model - an owner's collection of pins.

    Attributes:
        id: Unique identifier (UUID v4)
        title: Board title (1 to 100 characters)
        description: Optional text (at most 500 characters)
        created_by: Owner of the board
        category: Topic category
        tags: Free-form tags
        is_secret: Hidden from everyone except the owner
    """

    __tablename__ = "boards"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    title: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
    )

    description: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
        default="",
    )

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
    )

    tags: Mapped[list[str]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
    )

    is_secret: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Board(id={self.id}, created_by={self.created_by}, is_secret={self.is_secret})>"
