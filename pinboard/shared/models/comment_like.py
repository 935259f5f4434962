"""
CommentLike Entity Model

Link table holding the set of users who like a comment.
"""

import uuid

from sqlalchemy import ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from pinboard.shared.models.base import Base, TimestampMixin


class CommentLike(Base, TimestampMixin):
    """
    CommentLike model - one user's like of one comment.

    Attributes:
        comment_id: The liked comment (part of composite PK)
        user_id: The user who likes it (part of composite PK)
    """

    __tablename__ = "comment_likes"

    comment_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("comments.id", ondelete="CASCADE"),
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
        return f"<CommentLike(comment_id={self.comment_id}, user_id={self.user_id})>"
