"""
Database Module

Database connectivity and session management.

    FastAPI Route
        │  Depends(get_db)
        ▼
    AsyncSession (one per request, commit/rollback/close)
        │
        ▼
    Repositories (UserRepository, PinRepository, BoardRepository, ...)
        │
        ▼
    PostgreSQL

Usage:
======
    from pinboard.shared.db import get_db
    from pinboard.shared.repositories import UserRepository

    @app.get("/users/{user_id}")
    async def get_user(user_id: UUID, db: AsyncSession = Depends(get_db)):
        return await UserRepository(db).get(user_id)
"""

from pinboard.shared.db.session import (
    get_db,
    init_db,
    close_db,
    AsyncSessionLocal,
    engine,
)

__all__ = [
    "get_db",
    "init_db",
    "close_db",
    "AsyncSessionLocal",
    "engine",
]
