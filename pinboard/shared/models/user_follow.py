"""
UserFollow Entity Model

Link table for the follow graph.

One row means "follower_id follows followee_id". It is the single source of
truth for both directions of the relation:

    A.following  = SELECT followee_id WHERE follower_id = A
    B.followers  = SELECT follower_id WHERE followee_id = B

so B ∈ A.following ⟺ A ∈ B.followers holds by construction.

SAMPLE USER_FOLLOW RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ follower_id      │ 550e8400-e29b-41d4-a716-446655440000                      │
│ followee_id      │ 660e8400-e29b-41d4-a716-446655440000                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

import uuid

from sqlalchemy import CheckConstraint, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from pinboard.shared.models.base import Base, TimestampMixin


class UserFollow(Base, TimestampMixin):
    """
    UserFollow model - directed edge of the follow graph.

    Attributes:
        follower_id: The user who follows (part of composite PK)
        followee_id: The user being followed (part of composite PK)
    """

    __tablename__ = "user_follows"
    __table_args__ = (
        CheckConstraint("follower_id <> followee_id", name="ck_user_follows_no_self_follow"),
    )

    follower_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )

    followee_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<UserFollow(follower_id={self.follower_id}, followee_id={self.followee_id})>"
