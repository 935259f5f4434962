"""
Database Dependency

FastAPI dependency for database sessions.

get_db is the shared session generator itself, so FastAPI throws a
handler's exception straight into it: the session is committed on
success and rolled back on error.

Usage:
======
    from pinboard.api.dependencies.database import DbSession

    @router.get("/ready")
    async def readiness_check(db: DbSession):
        await db.execute(text("SELECT 1"))

The test suite overrides get_db to point at an in-memory database.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from pinboard.shared.db import get_db


# Type alias for cleaner route signatures
DbSession = Annotated[AsyncSession, Depends(get_db)]

__all__ = ["get_db", "DbSession"]
