"""
BoardPin Entity Model

Ordered membership of pins in a board.

``position`` keeps the board's pin list in insertion order; a new entry
always gets max(position) + 1 for its board.

SAMPLE BOARD_PIN RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ board_id         │ 550e8400-e29b-41d4-a716-446655440000                      │
│ pin_id           │ 770e8400-e29b-41d4-a716-446655440000                      │
│ position         │ 3                                                         │
└──────────────────────────────────────────────────────────────────────────────┘
"""

import uuid

from sqlalchemy import ForeignKey, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from pinboard.shared.models.base import Base, TimestampMixin


class BoardPin(Base, TimestampMixin):
    """
    BoardPin model - a pin placed on a board.

    Attributes:
        board_id: The board (part of composite PK)
        pin_id: The pin on the board (part of composite PK)
        position: Order of the pin within the board
    """

    __tablename__ = "board_pins"

    board_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("boards.id", ondelete="CASCADE"),
        primary_key=True,
    )

    pin_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("pins.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )

    position: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<BoardPin(board_id={self.board_id}, pin_id={self.pin_id}, position={self.position})>"
