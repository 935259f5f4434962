"""
PinSave Repository

Saved pins. One row per (user, pin) pair:

    targets_of(user)  → user.saved_pins
    sources_of(pin)   → pin.saved_by
"""

from sqlalchemy.ext.asyncio import AsyncSession

from pinboard.shared.models.pin_save import PinSave
from pinboard.shared.repositories.base import LinkRepository


class PinSaveRepository(LinkRepository[PinSave]):
    """Repository for pin saves."""

    left_column = "user_id"
    right_column = "pin_id"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(PinSave, session)
