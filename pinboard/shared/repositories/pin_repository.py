"""
Pin Repository

Database operations specific to the Pin model.

Common Operations:
==================
- list_feed()        → Home feed, newest first, paginated
- list_by_owner()    → Pins a user created (their ``created_pins``)
- ids_by_owner()     → Ids of those pins, for cleanup on account deletion
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pinboard.shared.models.enums import Category, MediaType
from pinboard.shared.models.pin import Pin
from pinboard.shared.repositories.base import BaseRepository


class PinRepository(BaseRepository[Pin]):
    """Repository for Pin database operations."""

    required_fields = ("file_id", "file_url", "created_by")
    max_lengths = {"title": 100, "description": 500}
    enum_fields = {"category": Category, "file_type": MediaType}

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Pin, session)

    async def list_feed(self, offset: int = 0, limit: int = 20) -> list[Pin]:
        """
        Get one page of the home feed.

        Args:
            offset: Pins to skip
            limit: Page size

        Returns:
            Pins ordered newest first (id breaks ties)
        """
        return await self.list(offset=offset, limit=limit, order_by="created_at")

    async def list_by_owner(self, owner_id: UUID) -> list[Pin]:
        """All pins created by owner_id, oldest first."""
        result = await self.session.execute(
            select(Pin).where(Pin.created_by == owner_id).order_by(Pin.created_at, Pin.id)
        )
        return [pin for pin in result.scalars().all()]

    async def ids_by_owner(self, owner_id: UUID) -> list[UUID]:
        result = await self.session.execute(select(Pin.id).where(Pin.created_by == owner_id))
        return [pin_id for pin_id in result.scalars().all()]
