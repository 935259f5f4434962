"""
User Entity Model

Represents a registered Pinboard user.

Derived Collections:
====================
None of a user's collections are stored on the row itself. Each is read
from the table that owns the relation:

    created_pins   ← pins.created_by
    saved_pins     ← pin_saves.user_id
    boards         ← boards.created_by
    public_boards  ← boards.created_by AND NOT boards.is_secret
    following      ← user_follows.follower_id
    followers      ← user_follows.followee_id

SAMPLE USER RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 550e8400-e29b-41d4-a716-446655440000                      │
│ first_name       │ "Alice"                                                   │
│ surname          │ "Smith"                                                   │
│ email            │ "alice@example.com"                                       │
│ username         │ "alice_s"                                                 │
│ password_hash    │ "$2b$12$..."                                              │
│ bio              │ "Collecting ceramics"                                     │
│ profile_image    │ "default.jpg"                                             │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import Optional
import uuid

from sqlalchemy import String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from pinboard.shared.models.base import Base, TimestampMixin


class User(Base, TimestampMixin):
    """
    User model representing a registered application user.

    Attributes:
        id: Unique identifier (UUID v4)
        first_name: Given name (at least 3 characters)
        surname: Family name (optional)
        email: Lower-cased email address (unique, indexed)
        username: Public handle (unique, indexed)
        password_hash: Bcrypt hashed password
        bio: Short profile text (at most 160 characters)
        profile_image: Reference to the avatar in blob storage
    """

    __tablename__ = "users"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # IDENTITY
    # ═══════════════════════════════════════════════════════════════════════════

    first_name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
    )

    surname: Mapped[Optional[str]] = mapped_column(
        String(100),
        nullable=True,
    )

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )

    username: Mapped[str] = mapped_column(
        String(50),
        unique=True,
        nullable=False,
        index=True,
    )

    # Bcrypt hashed password, never serialized
    password_hash: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # PROFILE
    # ═══════════════════════════════════════════════════════════════════════════

    bio: Mapped[str] = mapped_column(
        String(160),
        nullable=False,
        default="",
    )

    profile_image: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="default.jpg",
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    @property
    def full_name(self) -> str:
        """First name and surname joined, without trailing space."""
        return f"{self.first_name} {self.surname or ''}".strip()

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<User(id={self.id}, username={self.username})>"
