"""
Comment Repository

Database operations specific to the Comment model.

Comments form a tree per pin: top-level comments have no parent, replies
point at the comment they answer. Siblings are ordered by ``position``.

Common Operations:
==================
- top_level_ids()    → A pin's ``comments`` list (replies excluded)
- reply_ids()        → A comment's ``replies`` list
- next_position()    → Position for a new sibling at the end of the list
- subtree_ids()      → A comment and every reply below it
- ids_for_pin()      → Every comment on a pin, at any depth
- ids_by_author()    → Every comment a user wrote
- delete_many()      → Remove a batch of comments (a subtree, a pin's thread)
"""

from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from pinboard.shared.models.comment import Comment
from pinboard.shared.repositories.base import BaseRepository


class CommentRepository(BaseRepository[Comment]):
    """Repository for Comment database operations."""

    required_fields = ("text", "created_by", "pin_id")
    min_lengths = {"text": 1}
    max_lengths = {"text": 300}

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Comment, session)

    async def top_level_ids(self, pin_id: UUID) -> list[UUID]:
        """Ids of the pin's top-level comments, in order."""
        result = await self.session.execute(
            select(Comment.id)
            .where(Comment.pin_id == pin_id, Comment.parent_id.is_(None))
            .order_by(Comment.position, Comment.created_at)
        )
        return [comment_id for comment_id in result.scalars().all()]

    async def reply_ids(self, parent_id: UUID) -> list[UUID]:
        """Ids of the direct replies to a comment, in order."""
        result = await self.session.execute(
            select(Comment.id)
            .where(Comment.parent_id == parent_id)
            .order_by(Comment.position, Comment.created_at)
        )
        return [comment_id for comment_id in result.scalars().all()]

    async def next_position(self, pin_id: UUID, parent_id: Optional[UUID] = None) -> int:
        """
        Position that appends a new comment to its sibling list.

        Args:
            pin_id: Pin the comment belongs to
            parent_id: Comment being replied to, None for a top-level comment

        Returns:
            max(position) + 1 among the siblings, or 0 for the first one
        """
        query = select(func.max(Comment.position))
        if parent_id is None:
            query = query.where(Comment.pin_id == pin_id, Comment.parent_id.is_(None))
        else:
            query = query.where(Comment.parent_id == parent_id)

        result = await self.session.execute(query)
        current = result.scalar()
        return 0 if current is None else current + 1

    async def subtree_ids(self, comment_id: UUID) -> list[UUID]:
        """
        The comment and all of its replies at any depth.

        Returns:
            Ids ordered parents before children
        """
        collected = [comment_id]
        frontier = [comment_id]
        while frontier:
            result = await self.session.execute(
                select(Comment.id).where(Comment.parent_id.in_(frontier))
            )
            frontier = [child_id for child_id in result.scalars().all()]
            collected.extend(frontier)
        return collected

    async def ids_for_pin(self, pin_id: UUID) -> list[UUID]:
        result = await self.session.execute(select(Comment.id).where(Comment.pin_id == pin_id))
        return [comment_id for comment_id in result.scalars().all()]

    async def ids_by_author(self, user_id: UUID) -> list[UUID]:
        result = await self.session.execute(select(Comment.id).where(Comment.created_by == user_id))
        return [comment_id for comment_id in result.scalars().all()]

    async def delete_many(self, comment_ids: Sequence[UUID]) -> int:
        """Delete the given comments in one statement. Returns rows removed."""
        if not comment_ids:
            return 0
        result = await self.session.execute(delete(Comment).where(Comment.id.in_(comment_ids)))
        return result.rowcount or 0
