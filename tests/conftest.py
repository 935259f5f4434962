"""
Shared fixtures.

Every test gets a fresh in-memory SQLite database built from the model
metadata, with foreign keys enforced as on PostgreSQL. Service tests use
one session directly; API tests go through httpx against the FastAPI app
with get_db overridden to open sessions on the same database.
"""

import itertools

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from pinboard.api.dependencies.database import get_db
from pinboard.api.main import create_application
from pinboard.shared.models import Base
from pinboard.shared.repositories import BoardRepository, PinRepository, UserRepository


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # SQLite leaves foreign keys off unless asked, per connection
    @event.listens_for(engine.sync_engine, "connect")
    def enable_foreign_keys(dbapi_connection, _connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    """HTTP client for the app, backed by the test database."""
    app = create_application()

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


# ═══════════════════════════════════════════════════════════════════════════════
# FACTORIES
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def make_user(db_session):
    """Create users directly through the repository (no password hashing)."""
    counter = itertools.count(1)

    async def _make(username=None, **overrides):
        username = username or f"user_{next(counter)}"
        values = {
            "first_name": "Tester",
            "email": f"{username}@example.com",
            "username": username,
            "password_hash": "not-a-real-hash",
        }
        values.update(overrides)
        return await UserRepository(db_session).create(**values)

    return _make


@pytest.fixture
def make_pin(db_session):
    counter = itertools.count(1)

    async def _make(owner, **overrides):
        n = next(counter)
        values = {
            "title": f"Pin {n}",
            "file_id": f"pinboard/{n}",
            "file_url": f"https://cdn.example.com/pinboard/{n}.jpg",
            "created_by": owner.id,
        }
        values.update(overrides)
        return await PinRepository(db_session).create(**values)

    return _make


@pytest.fixture
def make_board(db_session):
    counter = itertools.count(1)

    async def _make(owner, **overrides):
        values = {
            "title": f"Board {next(counter)}",
            "created_by": owner.id,
        }
        values.update(overrides)
        return await BoardRepository(db_session).create(**values)

    return _make
