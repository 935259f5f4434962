"""
PinLike Entity Model

Link table holding the set of users who like a pin.
"""

import uuid

from sqlalchemy import ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from pinboard.shared.models.base import Base, TimestampMixin


class PinLike(Base, TimestampMixin):
    """
    PinLike model - one user's like of one pin.

    Attributes:
        pin_id: The liked pin (part of composite PK)
        user_id: The user who likes it (part of composite PK)
    """

    __tablename__ = "pin_likes"

    pin_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("pins.id", ondelete="CASCADE"),
        primary_key=True,
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<PinLike(pin_id={self.pin_id}, user_id={self.user_id})>"
