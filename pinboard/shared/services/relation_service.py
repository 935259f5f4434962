"""
Relation Service

Mutations that link two entities: follow, save-to-board, unsave, comment,
reply.

Consistency:
============
Each relation is one row in a link table (user_follows, pin_saves,
board_pins) or a foreign key on the comment, and both directions are read
from that row. There is nothing to pair up and nothing half written: the
row is either there or not. All writes of one call share the request's
transaction, so a failure anywhere rolls the whole call back.

Usage:
======
    service = RelationService(db)
    result = await service.follow_toggle(alice_id, bob_id)
    result.following        # True
    await service.save_to_board(alice_id, pin_id, board_id)
    comment = await service.add_comment(alice_id, pin_id, "Nice!")
    reply = await service.add_reply(bob_id, pin_id, comment.id, "Thanks")
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from pinboard.shared.core.exceptions import (
    CommentNotFoundError,
    ConflictError,
    InvalidOperationError,
    PinNotFoundError,
    UserNotFoundError,
)
from pinboard.shared.core.logging import get_logger
from pinboard.shared.models.comment import Comment
from pinboard.shared.repositories.board_collaborator_repository import BoardCollaboratorRepository
from pinboard.shared.repositories.board_pin_repository import BoardPinRepository
from pinboard.shared.repositories.board_repository import BoardRepository
from pinboard.shared.repositories.comment_repository import CommentRepository
from pinboard.shared.repositories.pin_repository import PinRepository
from pinboard.shared.repositories.pin_save_repository import PinSaveRepository
from pinboard.shared.repositories.user_follow_repository import UserFollowRepository
from pinboard.shared.repositories.user_repository import UserRepository
from pinboard.shared.services.access_gate import AccessGate


logger = get_logger(__name__)


@dataclass
class FollowResult:
    """Follow state between two users after a toggle."""

    follower_id: UUID
    followee_id: UUID
    following: bool
    following_count: int
    followers_count: int
    followee_name: str = ""

    @property
    def message(self) -> str:
        if self.following:
            return f"You started following {self.followee_name}"
        return f"Now you are not following {self.followee_name}"


@dataclass
class SaveResult:
    """Outcome of saving a pin."""

    pin_id: UUID
    board_id: Optional[UUID]
    saved_by_count: int


class RelationService:
    """
    Service for cross-entity relations.

    Handles:
    - Follow / unfollow
    - Saving a pin (optionally onto a board) and unsaving it
    - Top-level comments and replies
    """

    def __init__(self, session: AsyncSession, gate: Optional[AccessGate] = None) -> None:
        """
        Initialize RelationService.

        Args:
            session: Async database session
            gate: AccessGate to use (one is built from settings if omitted)
        """
        self.session = session
        self.gate = gate or AccessGate(session)
        self.user_repo = UserRepository(session)
        self.pin_repo = PinRepository(session)
        self.board_repo = BoardRepository(session)
        self.comment_repo = CommentRepository(session)
        self.follow_repo = UserFollowRepository(session)
        self.save_repo = PinSaveRepository(session)
        self.board_pin_repo = BoardPinRepository(session)
        self.collaborator_repo = BoardCollaboratorRepository(session)

    # ═══════════════════════════════════════════════════════════════════════════
    # FOLLOW
    # ═══════════════════════════════════════════════════════════════════════════

    async def follow_toggle(self, actor_id: UUID, target_id: UUID) -> FollowResult:
        """
        Follow target_id, or unfollow if already following.

        Args:
            actor_id: User doing the (un)following
            target_id: User being (un)followed

        Returns:
            FollowResult with the new state and both users' counts

        Raises:
            AuthenticationError: Unknown actor
            InvalidOperationError: actor_id == target_id
            UserNotFoundError: Unknown target
        """
        await self.gate.require_caller(actor_id)

        if actor_id == target_id:
            raise InvalidOperationError("You cannot follow yourself")

        target = await self.user_repo.get(target_id)
        if target is None:
            raise UserNotFoundError(str(target_id))

        if await self.follow_repo.contains(actor_id, target_id):
            await self.follow_repo.remove(actor_id, target_id)
            following = False
        else:
            await self.follow_repo.add(actor_id, target_id)
            following = True

        logger.info(
            "Follow toggled",
            follower_id=str(actor_id),
            followee_id=str(target_id),
            following=following,
        )

        return FollowResult(
            follower_id=actor_id,
            followee_id=target_id,
            following=following,
            following_count=await self.follow_repo.count_targets(actor_id),
            followers_count=await self.follow_repo.count_sources(target_id),
            followee_name=target.full_name,
        )

    # ═══════════════════════════════════════════════════════════════════════════
    # SAVES
    # ═══════════════════════════════════════════════════════════════════════════

    async def save_to_board(
        self,
        actor_id: UUID,
        pin_id: UUID,
        board_id: Optional[UUID] = None,
    ) -> SaveResult:
        """
        Save a pin for the actor, optionally appending it to a board.

        Flow:
        1. Pin must exist and not already be in the actor's saved pins
        2. With a board: the board must exist and accept pins from the actor,
           and must not hold the pin yet; the pin goes to the end of its list
        3. Record the save (actor.saved_pins / pin.saved_by)

        Raises:
            AuthenticationError: Unknown actor
            PinNotFoundError: Unknown pin
            ConflictError: Already saved, or already on the board
            InvalidOperationError: Board missing or not writable by the actor
        """
        await self.gate.require_caller(actor_id)

        if not await self.pin_repo.exists(pin_id):
            raise PinNotFoundError(str(pin_id))

        if await self.save_repo.contains(actor_id, pin_id):
            raise ConflictError("Pin already saved", details={"pin_id": str(pin_id)})

        if board_id is not None:
            board = await self.board_repo.get(board_id)
            if board is None:
                raise InvalidOperationError(
                    "Board not found or you cannot add pins to it",
                    details={"board_id": str(board_id)},
                )

            collaborator_ids = await self.collaborator_repo.targets_of(board_id)
            if not self.gate.can_add_to_board(board, actor_id, collaborator_ids):
                raise InvalidOperationError(
                    "Board not found or you cannot add pins to it",
                    details={"board_id": str(board_id)},
                )

            if await self.board_pin_repo.contains(board_id, pin_id):
                raise ConflictError(
                    "Pin already on this board",
                    details={"pin_id": str(pin_id), "board_id": str(board_id)},
                )

            await self.board_pin_repo.append(board_id, pin_id)

        await self.save_repo.add(actor_id, pin_id)

        logger.info(
            "Pin saved",
            user_id=str(actor_id),
            pin_id=str(pin_id),
            board_id=str(board_id) if board_id else None,
        )

        return SaveResult(
            pin_id=pin_id,
            board_id=board_id,
            saved_by_count=await self.save_repo.count_sources(pin_id),
        )

    async def unsave(self, actor_id: UUID, pin_id: UUID) -> SaveResult:
        """
        Remove a pin from the actor's saved pins and from the actor's boards.

        Raises:
            AuthenticationError: Unknown actor
            PinNotFoundError: Unknown pin
            InvalidOperationError: The pin was not saved
        """
        await self.gate.require_caller(actor_id)

        if not await self.pin_repo.exists(pin_id):
            raise PinNotFoundError(str(pin_id))

        if not await self.save_repo.remove(actor_id, pin_id):
            raise InvalidOperationError("Pin is not saved", details={"pin_id": str(pin_id)})

        own_boards = await self.board_repo.ids_by_owner(actor_id)
        removed = await self.board_pin_repo.remove_from_boards(pin_id, own_boards)

        logger.info(
            "Pin unsaved",
            user_id=str(actor_id),
            pin_id=str(pin_id),
            boards_removed_from=removed,
        )

        return SaveResult(
            pin_id=pin_id,
            board_id=None,
            saved_by_count=await self.save_repo.count_sources(pin_id),
        )

    # ═══════════════════════════════════════════════════════════════════════════
    # COMMENTS
    # ═══════════════════════════════════════════════════════════════════════════

    async def add_comment(
        self,
        actor_id: UUID,
        pin_id: UUID,
        text: str,
        image: Optional[str] = None,
    ) -> Comment:
        """
        Append a top-level comment to a pin.

        Raises:
            AuthenticationError: Unknown actor
            PinNotFoundError: Unknown pin
            ValidationError: Empty or over-long text
        """
        await self.gate.require_caller(actor_id)

        if not await self.pin_repo.exists(pin_id):
            raise PinNotFoundError(str(pin_id))

        comment = await self.comment_repo.create(
            text=text,
            image=image or "",
            created_by=actor_id,
            pin_id=pin_id,
            parent_id=None,
            position=await self.comment_repo.next_position(pin_id),
        )

        logger.info("Comment added", comment_id=str(comment.id), pin_id=str(pin_id))
        return comment

    async def add_reply(
        self,
        actor_id: UUID,
        pin_id: UUID,
        parent_comment_id: UUID,
        text: str,
        image: Optional[str] = None,
    ) -> Comment:
        """
        Append a reply to a comment.

        The reply joins the parent's replies only; the pin's top-level
        comment list is unchanged.

        Raises:
            AuthenticationError: Unknown actor
            PinNotFoundError: Unknown pin
            CommentNotFoundError: Unknown parent comment
            InvalidOperationError: The parent belongs to another pin
            ValidationError: Empty or over-long text
        """
        await self.gate.require_caller(actor_id)

        if not await self.pin_repo.exists(pin_id):
            raise PinNotFoundError(str(pin_id))

        parent = await self.comment_repo.get(parent_comment_id)
        if parent is None:
            raise CommentNotFoundError(str(parent_comment_id))

        if parent.pin_id != pin_id:
            raise InvalidOperationError(
                "Comment does not belong to this pin",
                details={"comment_id": str(parent_comment_id), "pin_id": str(pin_id)},
            )

        reply = await self.comment_repo.create(
            text=text,
            image=image or "",
            created_by=actor_id,
            pin_id=pin_id,
            parent_id=parent.id,
            position=await self.comment_repo.next_position(pin_id, parent.id),
        )

        logger.info(
            "Reply added",
            comment_id=str(reply.id),
            parent_id=str(parent.id),
            pin_id=str(pin_id),
        )
        return reply
