"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_db(), DbSession
- Authentication: get_current_user_id(), CurrentUserId
- Pagination: get_pagination()
- Services: get_*_service() functions

Type Aliases:
=============
Type aliases provide cleaner route signatures:

    # Instead of this:
    async def handler(
        db: AsyncSession = Depends(get_db),
        user_id: UUID = Depends(get_current_user_id)
    ):

    # Write this:
    async def handler(db: DbSession, user_id: CurrentUserId):
"""

from pinboard.api.dependencies.database import (
    get_db,
    DbSession,
)
from pinboard.api.dependencies.auth import (
    get_current_user_id,
    get_current_user_token,
    CurrentUserId,
)
from pinboard.api.dependencies.pagination import get_pagination

__all__ = [
    # Database
    "get_db",
    "DbSession",
    # Authentication
    "get_current_user_id",
    "get_current_user_token",
    "CurrentUserId",
    # Pagination
    "get_pagination",
]
