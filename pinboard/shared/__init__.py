"""
Shared Module

Contains code used by the API layer and by migrations:
- Models: SQLAlchemy ORM models
- Repositories: Data access layer
- Services: Business logic layer
- Schemas: Pydantic request/response models
- Core: Logging, exceptions

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← Database session management
    ├── models/         ← SQLAlchemy models
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    ├── migrations/     ← Alembic environment and versions
    └── utils/          ← Password hashing, JWT

Usage:
======
    from pinboard.shared.models import User, Pin, Board
    from pinboard.shared.repositories import UserRepository
    from pinboard.shared.services import AuthService
    from pinboard.shared.schemas import UserCreate, AuthResponse
    from pinboard.shared.core import get_logger, PinboardException
"""
