"""
User Service

Business logic for accounts and profiles.

A user's collections are assembled from the tables that own them into a
UserView. The caller's own view lists every board; a profile seen by
anyone lists public boards only.

Usage:
======
    service = UserService(db)
    me = await service.get_current(caller_id)
    bob = await service.get_profile(caller_id, "bob")
"""

from dataclasses import dataclass, field
from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from pinboard.shared.core.exceptions import UserNotFoundError
from pinboard.shared.core.logging import get_logger
from pinboard.shared.models.user import User
from pinboard.shared.repositories.board_collaborator_repository import BoardCollaboratorRepository
from pinboard.shared.repositories.board_pin_repository import BoardPinRepository
from pinboard.shared.repositories.board_repository import BoardRepository
from pinboard.shared.repositories.comment_like_repository import CommentLikeRepository
from pinboard.shared.repositories.comment_repository import CommentRepository
from pinboard.shared.repositories.pin_like_repository import PinLikeRepository
from pinboard.shared.repositories.pin_repository import PinRepository
from pinboard.shared.repositories.pin_save_repository import PinSaveRepository
from pinboard.shared.repositories.user_follow_repository import UserFollowRepository
from pinboard.shared.repositories.user_repository import UserRepository
from pinboard.shared.services.access_gate import AccessGate
from pinboard.shared.services.pin_service import PinService


logger = get_logger(__name__)


@dataclass
class UserView:
    """A user with its derived collections."""

    user: User
    created_pin_ids: List[UUID] = field(default_factory=list)
    saved_pin_ids: List[UUID] = field(default_factory=list)
    board_ids: List[UUID] = field(default_factory=list)
    public_board_ids: List[UUID] = field(default_factory=list)
    following_ids: List[UUID] = field(default_factory=list)
    follower_ids: List[UUID] = field(default_factory=list)


class UserService:
    """
    Service for user accounts.

    Handles:
    - The caller's own account view
    - Public profiles by username
    - Profile updates
    - Account deletion with full cleanup
    """

    def __init__(self, session: AsyncSession, gate: Optional[AccessGate] = None) -> None:
        self.session = session
        self.gate = gate or AccessGate(session)
        self.user_repo = UserRepository(session)
        self.pin_repo = PinRepository(session)
        self.board_repo = BoardRepository(session)
        self.comment_repo = CommentRepository(session)
        self.follow_repo = UserFollowRepository(session)
        self.save_repo = PinSaveRepository(session)
        self.pin_like_repo = PinLikeRepository(session)
        self.comment_like_repo = CommentLikeRepository(session)
        self.board_pin_repo = BoardPinRepository(session)
        self.collaborator_repo = BoardCollaboratorRepository(session)

    async def build_view(self, user: User, include_secret: bool) -> UserView:
        """
        Assemble a user's collections.

        Args:
            user: The user
            include_secret: List secret boards in board_ids

        Returns:
            UserView; public_board_ids is always a subset of board_ids
        """
        public_board_ids = await self.board_repo.ids_by_owner(user.id, include_secret=False)
        board_ids = (
            await self.board_repo.ids_by_owner(user.id)
            if include_secret
            else list(public_board_ids)
        )

        return UserView(
            user=user,
            created_pin_ids=[pin.id for pin in await self.pin_repo.list_by_owner(user.id)],
            saved_pin_ids=await self.save_repo.targets_of(user.id),
            board_ids=board_ids,
            public_board_ids=public_board_ids,
            following_ids=await self.follow_repo.targets_of(user.id),
            follower_ids=await self.follow_repo.sources_of(user.id),
        )

    async def get_current(self, caller_id: UUID) -> UserView:
        """
        The caller's own account, secret boards included.

        Raises:
            AuthenticationError: Unknown caller
        """
        user = await self.gate.require_caller(caller_id)
        return await self.build_view(user, include_secret=True)

    async def get_profile(self, caller_id: UUID, username: str) -> UserView:
        """
        A user's public profile.

        Raises:
            AuthenticationError: Unknown caller
            UserNotFoundError: No user with this username
        """
        await self.gate.require_caller(caller_id)

        user = await self.user_repo.get_by_username(username)
        if user is None:
            raise UserNotFoundError(username)

        return await self.build_view(user, include_secret=False)

    async def update_profile(
        self,
        caller_id: UUID,
        first_name: Optional[str] = None,
        surname: Optional[str] = None,
        username: Optional[str] = None,
        bio: Optional[str] = None,
        profile_image: Optional[str] = None,
    ) -> UserView:
        """
        Partially update the caller's profile.

        Fields left as None are unchanged.

        Raises:
            AuthenticationError: Unknown caller
            ValidationError: Invalid value or username taken
        """
        await self.gate.require_caller(caller_id)

        user = await self.user_repo.update(
            caller_id,
            first_name=first_name,
            surname=surname,
            username=username,
            bio=bio,
            profile_image=profile_image,
        )

        logger.info("Profile updated", user_id=str(caller_id))
        return await self.build_view(user, include_secret=True)

    async def delete_account(self, caller_id: UUID) -> None:
        """
        Delete the caller and everything that belongs to them.

        Removes their pins (with likes, saves, board entries and comment
        threads), their boards, their comments with replies, and every
        follow, like, save and collaboration row that names them.

        Raises:
            AuthenticationError: Unknown caller
        """
        await self.gate.require_caller(caller_id)

        pin_service = PinService(self.session, gate=self.gate)
        for pin_id in await self.pin_repo.ids_by_owner(caller_id):
            await pin_service.purge_pin(pin_id)

        for board_id in await self.board_repo.ids_by_owner(caller_id):
            await self.board_pin_repo.remove_for_left(board_id)
            await self.collaborator_repo.remove_for_left(board_id)
            await self.board_repo.delete(board_id)

        thread_ids = []
        for comment_id in await self.comment_repo.ids_by_author(caller_id):
            if comment_id not in thread_ids:
                thread_ids.extend(await self.comment_repo.subtree_ids(comment_id))
        await self.comment_like_repo.remove_for_comments(thread_ids)
        await self.comment_repo.delete_many(thread_ids)

        await self.follow_repo.remove_for_left(caller_id)
        await self.follow_repo.remove_for_right(caller_id)
        await self.save_repo.remove_for_left(caller_id)
        await self.pin_like_repo.remove_for_right(caller_id)
        await self.comment_like_repo.remove_for_right(caller_id)
        await self.collaborator_repo.remove_for_right(caller_id)

        await self.user_repo.delete(caller_id)
        logger.info("Account deleted", user_id=str(caller_id))
