"""
UserFollow Repository

The follow graph. One row per (follower, followee) pair:

    targets_of(A)  → A.following
    sources_of(B)  → B.followers
"""

from sqlalchemy.ext.asyncio import AsyncSession

from pinboard.shared.models.user_follow import UserFollow
from pinboard.shared.repositories.base import LinkRepository


class UserFollowRepository(LinkRepository[UserFollow]):
    """Repository for follow edges."""

    left_column = "follower_id"
    right_column = "followee_id"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(UserFollow, session)
