"""
BoardCollaborator Entity Model

Link table holding the collaborators of a board.
"""

import uuid

from sqlalchemy import ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from pinboard.shared.models.base import Base, TimestampMixin


class BoardCollaborator(Base, TimestampMixin):
    """
    BoardCollaborator model - a user invited to work on a board.

    Attributes:
        board_id: The board (part of composite PK)
        user_id: The collaborator (part of composite PK)
    """

    __tablename__ = "board_collaborators"

    board_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("boards.id", ondelete="CASCADE"),
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
        return f"<BoardCollaborator(board_id={self.board_id}, user_id={self.user_id})>"
