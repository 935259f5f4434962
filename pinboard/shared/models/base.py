"""
Base Model Classes

Declarative base and shared mixins for all Pinboard models.

Model Hierarchy:
================
    Base                    ← SQLAlchemy declarative base
       │
       └── TimestampMixin   ← Automatic created_at/updated_at

Usage:
======
    from pinboard.shared.models.base import Base, TimestampMixin

    class Pin(Base, TimestampMixin):
        __tablename__ = "pins"
        id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Columns use portable types (Uuid, JSON) so the schema builds on
    PostgreSQL in production and on SQLite in the test suite.
    """


class TimestampMixin:
    """
    Mixin that adds automatic timestamp tracking to models.

    - created_at: Set by the database on INSERT
    - updated_at: Set on INSERT, refreshed by SQLAlchemy on UPDATE

    Link tables order their members by created_at.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
