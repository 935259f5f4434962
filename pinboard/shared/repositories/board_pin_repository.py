"""
BoardPin Repository

Ordered pin membership of boards.

    targets_of(board)  → board.pins, in the order they were added
    sources_of(pin)    → every board holding the pin

append() puts a pin at the end of the board's list.
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from pinboard.shared.models.board_pin import BoardPin
from pinboard.shared.repositories.base import LinkRepository


class BoardPinRepository(LinkRepository[BoardPin]):
    """Repository for board ↔ pin membership."""

    left_column = "board_id"
    right_column = "pin_id"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(BoardPin, session)

    def _order_by(self) -> tuple:
        return (BoardPin.position, BoardPin.created_at)

    async def next_position(self, board_id: UUID) -> int:
        result = await self.session.execute(
            select(func.max(BoardPin.position)).where(BoardPin.board_id == board_id)
        )
        current = result.scalar()
        return 0 if current is None else current + 1

    async def append(self, board_id: UUID, pin_id: UUID) -> BoardPin:
        """
        Add pin_id at the end of the board's pin list.

        Raises:
            DuplicateResourceError: If the pin is already on the board
        """
        position = await self.next_position(board_id)
        return await self.add(board_id, pin_id, position=position)

    async def remove_from_boards(self, pin_id: UUID, board_ids: Sequence[UUID]) -> int:
        """Take pin_id off each of the given boards. Returns rows removed."""
        if not board_ids:
            return 0
        result = await self.session.execute(
            delete(BoardPin).where(BoardPin.pin_id == pin_id, BoardPin.board_id.in_(board_ids))
        )
        return result.rowcount or 0
