"""
PinLike Repository

Likes on pins. targets_of(pin) is the pin's ``likes`` set.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from pinboard.shared.models.pin_like import PinLike
from pinboard.shared.repositories.base import LinkRepository


class PinLikeRepository(LinkRepository[PinLike]):
    left_column = "pin_id"
    right_column = "user_id"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(PinLike, session)
