"""
CommentLike Repository

Likes on comments and replies. targets_of(comment) is the comment's
``likes`` set.
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from pinboard.shared.models.comment_like import CommentLike
from pinboard.shared.repositories.base import LinkRepository


class CommentLikeRepository(LinkRepository[CommentLike]):
    left_column = "comment_id"
    right_column = "user_id"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(CommentLike, session)

    async def remove_for_comments(self, comment_ids: Sequence[UUID]) -> int:
        """Delete every like on any of the given comments."""
        if not comment_ids:
            return 0
        result = await self.session.execute(
            delete(CommentLike).where(CommentLike.comment_id.in_(comment_ids))
        )
        return result.rowcount or 0
