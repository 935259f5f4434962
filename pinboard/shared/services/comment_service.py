"""
Comment Service

Reading, editing and deleting comments. Creating comments and replies is
a relation between a pin and its thread and lives in RelationService.

Usage:
======
    service = CommentService(db)
    view = await service.get_comment(user_id, pin_id, comment_id)
    view.reply_ids      # Direct replies, in order
"""

from dataclasses import dataclass, field
from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from pinboard.shared.core.exceptions import CommentNotFoundError
from pinboard.shared.core.logging import get_logger
from pinboard.shared.models.comment import Comment
from pinboard.shared.repositories.comment_like_repository import CommentLikeRepository
from pinboard.shared.repositories.comment_repository import CommentRepository
from pinboard.shared.services.access_gate import AccessGate


logger = get_logger(__name__)


@dataclass
class CommentView:
    """A comment with its likes and replies."""

    comment: Comment
    like_ids: List[UUID] = field(default_factory=list)
    reply_ids: List[UUID] = field(default_factory=list)


class CommentService:
    """Service for existing comments and replies."""

    def __init__(self, session: AsyncSession, gate: Optional[AccessGate] = None) -> None:
        self.session = session
        self.gate = gate or AccessGate(session)
        self.comment_repo = CommentRepository(session)
        self.like_repo = CommentLikeRepository(session)

    async def build_view(self, comment: Comment) -> CommentView:
        return CommentView(
            comment=comment,
            like_ids=await self.like_repo.targets_of(comment.id),
            reply_ids=await self.comment_repo.reply_ids(comment.id),
        )

    async def _get_or_raise(self, pin_id: UUID, comment_id: UUID) -> Comment:
        comment = await self.comment_repo.get(comment_id)
        if comment is None or comment.pin_id != pin_id:
            raise CommentNotFoundError(str(comment_id))
        return comment

    async def get_comment(self, caller_id: UUID, pin_id: UUID, comment_id: UUID) -> CommentView:
        """
        Raises:
            AuthenticationError: Unknown caller
            CommentNotFoundError: Unknown comment, or not on this pin
        """
        await self.gate.require_caller(caller_id)
        return await self.build_view(await self._get_or_raise(pin_id, comment_id))

    async def update_comment(
        self,
        caller_id: UUID,
        pin_id: UUID,
        comment_id: UUID,
        text: Optional[str] = None,
        image: Optional[str] = None,
    ) -> CommentView:
        """
        Edit a comment's text or image.

        Raises:
            AuthenticationError: Unknown caller
            CommentNotFoundError: Unknown comment, or not on this pin
            AuthorizationError: Caller is not the author (when enforced)
            ValidationError: Empty or over-long text
        """
        await self.gate.require_caller(caller_id)
        comment = await self._get_or_raise(pin_id, comment_id)
        self.gate.ensure_content_owner(comment.created_by, caller_id, "comment")

        comment = await self.comment_repo.update(comment_id, text=text, image=image)

        logger.info("Comment updated", comment_id=str(comment_id))
        return await self.build_view(comment)

    async def delete_comment(self, caller_id: UUID, pin_id: UUID, comment_id: UUID) -> int:
        """
        Delete a comment, all replies below it, and their likes.

        Returns:
            Number of comments removed

        Raises:
            AuthenticationError: Unknown caller
            CommentNotFoundError: Unknown comment, or not on this pin
            AuthorizationError: Caller is not the author (when enforced)
        """
        await self.gate.require_caller(caller_id)
        comment = await self._get_or_raise(pin_id, comment_id)
        self.gate.ensure_content_owner(comment.created_by, caller_id, "comment")

        thread_ids = await self.comment_repo.subtree_ids(comment_id)
        await self.like_repo.remove_for_comments(thread_ids)
        removed = await self.comment_repo.delete_many(thread_ids)

        logger.info("Comment deleted", comment_id=str(comment_id), removed=removed)
        return removed
