"""
Engagement Service

Toggle-style engagement: like / unlike on pins and comments.

A toggle reads the actor's current membership in a link table and writes
the opposite: a missing row is inserted (active=True), an existing one is
deleted (active=False). Calling it twice restores the previous membership.

The membership row's composite primary key makes a racing duplicate insert
fail with DuplicateResourceError (409) instead of double counting.

Usage:
======
    service = EngagementService(db)
    result = await service.like_pin(user_id, pin_id)
    result.active   # True: now liked
    result.count    # Likes on the pin after the toggle
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from pinboard.shared.core.exceptions import CommentNotFoundError, PinNotFoundError
from pinboard.shared.core.logging import get_logger
from pinboard.shared.repositories.base import LinkRepository
from pinboard.shared.repositories.comment_like_repository import CommentLikeRepository
from pinboard.shared.repositories.comment_repository import CommentRepository
from pinboard.shared.repositories.pin_like_repository import PinLikeRepository
from pinboard.shared.repositories.pin_repository import PinRepository
from pinboard.shared.services.access_gate import AccessGate


logger = get_logger(__name__)


@dataclass
class ToggleResult:
    """Membership after a toggle."""

    active: bool
    count: int


class EngagementService:
    """
    Service for like toggles.

    Handles:
    - Liking / unliking pins
    - Liking / unliking comments and replies
    """

    def __init__(self, session: AsyncSession, gate: Optional[AccessGate] = None) -> None:
        self.session = session
        self.gate = gate or AccessGate(session)
        self.pin_repo = PinRepository(session)
        self.comment_repo = CommentRepository(session)
        self.pin_like_repo = PinLikeRepository(session)
        self.comment_like_repo = CommentLikeRepository(session)

    @staticmethod
    async def toggle(links: LinkRepository, entity_id: UUID, actor_id: UUID) -> ToggleResult:
        """
        Flip actor_id's membership of entity_id's collection.

        Args:
            links: Link repository whose left side is the entity
            entity_id: Pin or comment id
            actor_id: User id

        Returns:
            ToggleResult with the new membership and the collection size
        """
        if await links.contains(entity_id, actor_id):
            await links.remove(entity_id, actor_id)
            active = False
        else:
            await links.add(entity_id, actor_id)
            active = True

        return ToggleResult(active=active, count=await links.count_targets(entity_id))

    async def like_pin(self, actor_id: UUID, pin_id: UUID) -> ToggleResult:
        """
        Like the pin, or unlike it if already liked.

        Raises:
            AuthenticationError: Unknown actor
            PinNotFoundError: Unknown pin
        """
        await self.gate.require_caller(actor_id)

        if not await self.pin_repo.exists(pin_id):
            raise PinNotFoundError(str(pin_id))

        result = await self.toggle(self.pin_like_repo, pin_id, actor_id)
        logger.info(
            "Pin like toggled",
            pin_id=str(pin_id),
            user_id=str(actor_id),
            liked=result.active,
            likes=result.count,
        )
        return result

    async def like_comment(
        self,
        actor_id: UUID,
        comment_id: UUID,
        pin_id: Optional[UUID] = None,
    ) -> ToggleResult:
        """
        Like the comment (or reply), or unlike it if already liked.

        Args:
            actor_id: User toggling the like
            comment_id: Comment or reply
            pin_id: When given, the comment must belong to this pin

        Raises:
            AuthenticationError: Unknown actor
            CommentNotFoundError: Unknown comment, or not on pin_id
        """
        await self.gate.require_caller(actor_id)

        comment = await self.comment_repo.get(comment_id)
        if comment is None or (pin_id is not None and comment.pin_id != pin_id):
            raise CommentNotFoundError(str(comment_id))

        result = await self.toggle(self.comment_like_repo, comment_id, actor_id)
        logger.info(
            "Comment like toggled",
            comment_id=str(comment_id),
            user_id=str(actor_id),
            liked=result.active,
            likes=result.count,
        )
        return result
