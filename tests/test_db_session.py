"""
Tests for the request-scoped session generator and the test database setup.
"""

import pytest
from sqlalchemy import text

from pinboard.api.dependencies import database as api_database
from pinboard.shared.db import session as db_session_module
from pinboard.shared.repositories import UserRepository


async def add_user(session, username):
    return await UserRepository(session).create(
        first_name="Tester",
        email=f"{username}@example.com",
        username=username,
        password_hash="not-a-real-hash",
    )


class TestGetDb:
    """Tests for get_db commit and rollback."""

    @pytest.fixture(autouse=True)
    def use_test_sessions(self, monkeypatch, session_factory):
        monkeypatch.setattr(db_session_module, "AsyncSessionLocal", session_factory)

    def test_api_dependency_is_shared_generator(self):
        assert api_database.get_db is db_session_module.get_db

    async def test_commits_on_success(self, session_factory):
        sessions = db_session_module.get_db()
        session = await sessions.__anext__()
        await add_user(session, "alice")

        with pytest.raises(StopAsyncIteration):
            await sessions.__anext__()

        async with session_factory() as fresh:
            assert await UserRepository(fresh).get_by_username("alice") is not None

    async def test_rolls_back_on_handler_error(self, session_factory):
        """An exception thrown into the generator discards the work and re-raises."""
        sessions = db_session_module.get_db()
        session = await sessions.__anext__()
        await add_user(session, "alice")

        with pytest.raises(RuntimeError, match="handler failed"):
            await sessions.athrow(RuntimeError("handler failed"))

        async with session_factory() as fresh:
            assert await UserRepository(fresh).get_by_username("alice") is None


class TestForeignKeys:
    """The test database enforces foreign keys."""

    async def test_pragma_enabled(self, db_session):
        result = await db_session.execute(text("PRAGMA foreign_keys"))

        assert result.scalar() == 1
