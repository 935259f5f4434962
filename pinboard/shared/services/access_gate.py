"""
Access Gate

Authorization checks applied before any state change.

Rules:
======
- Every mutating call needs a caller that resolves to an existing user
  (AuthenticationError otherwise).
- A secret board is readable by its owner only (AuthorizationError).
- Only the owner may update or delete a board (AuthorizationError).
- Pins can be added to a board by its owner and, when
  ALLOW_COLLABORATOR_SAVES is on, by its collaborators.
- Pins and comments may be edited or deleted by their author only, when
  ENFORCE_CONTENT_OWNERSHIP is on. With it off any signed-in user may.

Usage:
======
    gate = AccessGate(db)
    caller = await gate.require_caller(caller_id)
    gate.ensure_board_owner(board, caller.id)
"""

from typing import Iterable, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from pinboard.config.settings import settings
from pinboard.shared.core.exceptions import AuthenticationError, AuthorizationError
from pinboard.shared.core.logging import get_logger
from pinboard.shared.models.board import Board
from pinboard.shared.models.user import User
from pinboard.shared.repositories.user_repository import UserRepository


logger = get_logger(__name__)


class AccessGate:
    """
    Caller resolution and permission checks.

    Attributes:
        users: UserRepository used to resolve callers
        allow_collaborator_saves: Collaborators may add pins to boards
        enforce_content_ownership: Only authors may edit/delete pins and comments
    """

    def __init__(
        self,
        session: AsyncSession,
        allow_collaborator_saves: Optional[bool] = None,
        enforce_content_ownership: Optional[bool] = None,
    ) -> None:
        """
        Initialize AccessGate.

        Args:
            session: Async database session
            allow_collaborator_saves: Override settings.ALLOW_COLLABORATOR_SAVES
            enforce_content_ownership: Override settings.ENFORCE_CONTENT_OWNERSHIP
        """
        self.users = UserRepository(session)
        self.allow_collaborator_saves = (
            settings.ALLOW_COLLABORATOR_SAVES
            if allow_collaborator_saves is None
            else allow_collaborator_saves
        )
        self.enforce_content_ownership = (
            settings.ENFORCE_CONTENT_OWNERSHIP
            if enforce_content_ownership is None
            else enforce_content_ownership
        )

    async def require_caller(self, caller_id: Optional[UUID]) -> User:
        """
        Resolve the caller to a user.

        Raises:
            AuthenticationError: No caller id, or it matches no user
        """
        if caller_id is None:
            raise AuthenticationError("Authentication required")

        user = await self.users.get(caller_id)
        if user is None:
            logger.warning("Caller does not resolve to a user", caller_id=str(caller_id))
            raise AuthenticationError("User not found for token")

        return user

    def ensure_board_readable(self, board: Board, caller_id: Optional[UUID]) -> None:
        """
        Raises:
            AuthorizationError: The board is secret and the caller is not its owner
        """
        if board.is_secret and board.created_by != caller_id:
            raise AuthorizationError("This board is secret")

    def ensure_board_owner(self, board: Board, caller_id: UUID) -> None:
        """
        Raises:
            AuthorizationError: The caller does not own the board
        """
        if board.created_by != caller_id:
            raise AuthorizationError("Only the board owner can modify this board")

    def can_add_to_board(
        self,
        board: Board,
        caller_id: UUID,
        collaborator_ids: Iterable[UUID] = (),
    ) -> bool:
        """Whether the caller may append pins to the board."""
        if board.created_by == caller_id:
            return True
        return self.allow_collaborator_saves and caller_id in set(collaborator_ids)

    def ensure_content_owner(self, owner_id: UUID, caller_id: UUID, resource: str) -> None:
        """
        Check authorship of a pin or comment before it is changed.

        Args:
            owner_id: Author of the content
            caller_id: User attempting the change
            resource: "pin" or "comment", used in the error message

        Raises:
            AuthorizationError: Ownership is enforced and the caller is not the author
        """
        if not self.enforce_content_ownership:
            return

        if owner_id != caller_id:
            raise AuthorizationError(f"Only the author can modify this {resource}")
