"""
Board Repository

Database operations specific to the Board model.

A user's ``boards`` and ``public_boards`` are not stored on the user; both
come from boards.created_by, the second filtered on is_secret. That makes
public_boards a subset of boards whatever is_secret is toggled to.

Common Operations:
==================
- list_by_owner()   → Boards owned by a user, optionally excluding secret ones
- ids_by_owner()    → Same, ids only
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pinboard.shared.models.board import Board
from pinboard.shared.models.enums import Category
from pinboard.shared.repositories.base import BaseRepository


class BoardRepository(BaseRepository[Board]):
    """Repository for Board database operations."""

    required_fields = ("title", "created_by")
    min_lengths = {"title": 1}
    max_lengths = {"title": 100, "description": 500}
    enum_fields = {"category": Category}

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Board, session)

    async def list_by_owner(self, owner_id: UUID, include_secret: bool = True) -> list[Board]:
        """
        Boards owned by a user, oldest first.

        Args:
            owner_id: Board owner
            include_secret: False to return only the public boards

        Returns:
            Matching boards
        """
        query = select(Board).where(Board.created_by == owner_id)
        if not include_secret:
            query = query.where(Board.is_secret.is_(False))
        result = await self.session.execute(query.order_by(Board.created_at, Board.id))
        return [board for board in result.scalars().all()]

    async def ids_by_owner(self, owner_id: UUID, include_secret: bool = True) -> list[UUID]:
        query = select(Board.id).where(Board.created_by == owner_id)
        if not include_secret:
            query = query.where(Board.is_secret.is_(False))
        result = await self.session.execute(query.order_by(Board.created_at, Board.id))
        return [board_id for board_id in result.scalars().all()]
