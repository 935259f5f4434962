"""
Board Service

Business logic for boards.

Boards are readable by anyone unless secret; only the owner reads a
secret board, and only the owner updates or deletes a board. Ownership is
checked before anything is written, so a refused delete leaves the board
as it was.

Usage:
======
    service = BoardService(db)
    view = await service.create_board(owner_id, title="Kitchen", is_secret=True)
    await service.update_board(owner_id, view.board.id, is_secret=False)
"""

from dataclasses import dataclass, field
from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from pinboard.shared.core.exceptions import BoardNotFoundError, ValidationError
from pinboard.shared.core.logging import get_logger
from pinboard.shared.models.board import Board
from pinboard.shared.models.enums import Category
from pinboard.shared.repositories.board_collaborator_repository import BoardCollaboratorRepository
from pinboard.shared.repositories.board_pin_repository import BoardPinRepository
from pinboard.shared.repositories.board_repository import BoardRepository
from pinboard.shared.repositories.user_repository import UserRepository
from pinboard.shared.services.access_gate import AccessGate


logger = get_logger(__name__)


@dataclass
class BoardView:
    """A board with its ordered pins and collaborators."""

    board: Board
    pin_ids: List[UUID] = field(default_factory=list)
    collaborator_ids: List[UUID] = field(default_factory=list)


class BoardService:
    """
    Service for board-related business logic.

    Handles:
    - Creating boards with collaborators
    - Reading boards (secret boards for their owner only)
    - Partial updates and deletes by the owner
    """

    def __init__(self, session: AsyncSession, gate: Optional[AccessGate] = None) -> None:
        self.session = session
        self.gate = gate or AccessGate(session)
        self.board_repo = BoardRepository(session)
        self.user_repo = UserRepository(session)
        self.board_pin_repo = BoardPinRepository(session)
        self.collaborator_repo = BoardCollaboratorRepository(session)

    async def build_view(self, board: Board) -> BoardView:
        return BoardView(
            board=board,
            pin_ids=await self.board_pin_repo.targets_of(board.id),
            collaborator_ids=await self.collaborator_repo.targets_of(board.id),
        )

    async def _get_or_raise(self, board_id: UUID) -> Board:
        board = await self.board_repo.get(board_id)
        if board is None:
            raise BoardNotFoundError(str(board_id))
        return board

    async def _set_collaborators(self, board: Board, collaborator_ids: List[UUID]) -> None:
        """
        Replace the board's collaborators.

        Raises:
            ValidationError: An id does not resolve to a user
        """
        wanted = list(dict.fromkeys(collaborator_ids))
        found = await self.user_repo.get_by_ids(wanted)
        if len(found) != len(wanted):
            raise ValidationError("Unknown collaborator", fields=["collaborators"])

        current = set(await self.collaborator_repo.targets_of(board.id))
        for user_id in current - set(wanted):
            await self.collaborator_repo.remove(board.id, user_id)
        for user_id in wanted:
            if user_id not in current:
                await self.collaborator_repo.add(board.id, user_id)

    async def create_board(
        self,
        caller_id: UUID,
        title: str,
        description: Optional[str] = None,
        category: Optional[Category] = None,
        tags: Optional[List[str]] = None,
        collaborators: Optional[List[UUID]] = None,
        is_secret: bool = False,
    ) -> BoardView:
        """
        Create a board owned by the caller.

        The board joins the caller's boards, and their public boards
        unless it is secret.

        Raises:
            AuthenticationError: Unknown caller
            ValidationError: Invalid field values or unknown collaborator
        """
        await self.gate.require_caller(caller_id)

        board = await self.board_repo.create(
            title=title,
            description=description or "",
            created_by=caller_id,
            category=category or Category.OTHER,
            tags=list(tags or []),
            is_secret=is_secret,
        )

        if collaborators:
            await self._set_collaborators(board, collaborators)

        logger.info(
            "Board created",
            board_id=str(board.id),
            user_id=str(caller_id),
            is_secret=board.is_secret,
        )
        return await self.build_view(board)

    async def get_board(self, caller_id: UUID, board_id: UUID) -> BoardView:
        """
        Raises:
            AuthenticationError: Unknown caller
            BoardNotFoundError: Unknown board
            AuthorizationError: Secret board of another user
        """
        await self.gate.require_caller(caller_id)
        board = await self._get_or_raise(board_id)
        self.gate.ensure_board_readable(board, caller_id)
        return await self.build_view(board)

    async def update_board(
        self,
        caller_id: UUID,
        board_id: UUID,
        title: Optional[str] = None,
        description: Optional[str] = None,
        category: Optional[Category] = None,
        tags: Optional[List[str]] = None,
        collaborators: Optional[List[UUID]] = None,
        is_secret: Optional[bool] = None,
    ) -> BoardView:
        """
        Partially update a board. None leaves a field unchanged;
        is_secret=False makes a secret board public again.

        Raises:
            AuthenticationError: Unknown caller
            BoardNotFoundError: Unknown board
            AuthorizationError: Caller is not the owner
            ValidationError: Invalid field values or unknown collaborator
        """
        await self.gate.require_caller(caller_id)
        board = await self._get_or_raise(board_id)
        self.gate.ensure_board_owner(board, caller_id)

        board = await self.board_repo.update(
            board_id,
            title=title,
            description=description,
            category=category,
            tags=list(tags) if tags is not None else None,
            is_secret=is_secret,
        )

        if collaborators is not None:
            await self._set_collaborators(board, collaborators)

        logger.info("Board updated", board_id=str(board_id), is_secret=board.is_secret)
        return await self.build_view(board)

    async def delete_board(self, caller_id: UUID, board_id: UUID) -> None:
        """
        Delete a board with its pin entries and collaborators.

        The pins themselves, and saves of them, are kept.

        Raises:
            AuthenticationError: Unknown caller
            BoardNotFoundError: Unknown board
            AuthorizationError: Caller is not the owner (nothing is changed)
        """
        await self.gate.require_caller(caller_id)
        board = await self._get_or_raise(board_id)
        self.gate.ensure_board_owner(board, caller_id)

        await self.board_pin_repo.remove_for_left(board_id)
        await self.collaborator_repo.remove_for_left(board_id)
        await self.board_repo.delete(board_id)

        logger.info("Board deleted", board_id=str(board_id), user_id=str(caller_id))
