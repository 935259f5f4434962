"""
PinSave Entity Model

Link table recording that a user saved a pin.

Backs both User.saved_pins and Pin.saved_by, so the two views can never
disagree.

SAMPLE PIN_SAVE RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ user_id          │ 550e8400-e29b-41d4-a716-446655440000                      │
│ pin_id           │ 770e8400-e29b-41d4-a716-446655440000                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

import uuid

from sqlalchemy import ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from pinboard.shared.models.base import Base, TimestampMixin


class PinSave(Base, TimestampMixin):
    """
    PinSave model - a user's save of a pin.

    Attributes:
        user_id: The user who saved (part of composite PK)
        pin_id: The saved pin (part of composite PK)
    """

    __tablename__ = "pin_saves"

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )

    pin_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("pins.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<PinSave(user_id={self.user_id}, pin_id={self.pin_id})>"
