"""
Base Repositories

Generic repositories shared by every entity and every link table.

What This Provides:
===================
BaseRepository[ModelType] (entities keyed by a UUID ``id``):
- get(id)              → Fetch single record by UUID
- get_by_ids()         → Fetch multiple records by UUIDs
- get_by_field()       → Fetch by a unique column (email, username, ...)
- list() / count()     → Pagination and equality filtering
- exists()             → Check if record exists
- create()             → Validate and insert a record
- update()             → Validate and apply a partial update
- delete()             → Hard delete a record

LinkRepository[LinkType] (link tables keyed by a (left, right) pair):
- contains()           → Is (left, right) a member?
- add() / remove()     → Insert or delete one membership
- targets_of()         → All right ids for a left id
- sources_of()         → All left ids for a right id
- count_targets() / count_sources()
- remove_for_left() / remove_for_right() → Cleanup when an entity is deleted

Write-time Validation:
======================
Each entity repository declares its column constraints as class attributes:

    class BoardRepository(BaseRepository[Board]):
        required_fields = ("title", "created_by")
        min_lengths = {"title": 1}
        max_lengths = {"title": 100, "description": 500}
        enum_fields = {"category": Category}

create() and update() check every supplied value against them and raise
ValidationError listing all offending fields at once:

    ValidationError("Invalid field values", fields=["title", "category"])

flush() vs commit():
====================
Repository methods only flush(). The request-level session from get_db()
commits once the handler succeeds and rolls everything back otherwise, so
several repository writes made by one service call land together.
"""

import re
from enum import Enum
from typing import Any, Generic, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import FlushError
from sqlalchemy.sql.functions import count as sql_count

from pinboard.shared.core.exceptions import DuplicateResourceError, ValidationError
from pinboard.shared.models.base import Base


ModelType = TypeVar("ModelType", bound=Base)
LinkType = TypeVar("LinkType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    Type Parameter:
        ModelType: The SQLAlchemy model class this repository manages

    Attributes:
        model: The SQLAlchemy model class
        session: The async database session

    Example:
        class PinRepository(BaseRepository[Pin]):
            def __init__(self, session: AsyncSession):
                super().__init__(Pin, session)
    """

    # Write-time constraints, overridden per entity
    required_fields: tuple[str, ...] = ()
    min_lengths: dict[str, int] = {}
    max_lengths: dict[str, int] = {}
    enum_fields: dict[str, Type[Enum]] = {}
    patterns: dict[str, "re.Pattern[str]"] = {}

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        """
        Initialize the repository.

        Args:
            model: SQLAlchemy model class (e.g., User, Pin, Board)
            session: Async database session from get_db()
        """
        self.model = model
        self.session = session

    # ═══════════════════════════════════════════════════════════════════════════
    # VALIDATION
    # ═══════════════════════════════════════════════════════════════════════════

    def validate_fields(self, values: dict[str, Any], *, partial: bool = False) -> dict[str, Any]:
        """
        Check values against the repository's declared constraints.

        Enum fields given as plain strings are coerced to their enum member.

        Args:
            values: Field values about to be written
            partial: True for updates (missing required fields are fine,
                     but a required field may not be blanked)

        Returns:
            The values with enum fields coerced

        Raises:
            ValidationError: With every offending field name
        """
        invalid = []
        cleaned = dict(values)

        for field in self.required_fields:
            if partial and field not in values:
                continue
            if values.get(field) is None or values.get(field) == "":
                invalid.append(field)

        for field, value in values.items():
            if value is None or field in invalid:
                continue

            if field in self.enum_fields:
                try:
                    cleaned[field] = self.enum_fields[field](value)
                except ValueError:
                    invalid.append(field)
                continue

            if field in self.min_lengths and len(value) < self.min_lengths[field]:
                invalid.append(field)
            elif field in self.max_lengths and len(value) > self.max_lengths[field]:
                invalid.append(field)
            elif field in self.patterns and not self.patterns[field].match(value):
                invalid.append(field)

        if invalid:
            raise ValidationError("Invalid field values", fields=invalid)

        return cleaned

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get(self, record_id: UUID) -> Optional[ModelType]:
        """
        Get a single record by its UUID.

        Args:
            record_id: The UUID of the record to fetch

        Returns:
            The model instance if found, None otherwise
        """
        result = await self.session.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def get_by_ids(self, ids: list[UUID]) -> list[ModelType]:
        """
        Get multiple records by their UUIDs, in the order the ids were given.

        Args:
            ids: List of UUIDs to fetch

        Returns:
            Found model instances (missing ids are skipped)
        """
        if not ids:
            return []

        result = await self.session.execute(select(self.model).where(self.model.id.in_(ids)))
        by_id = {record.id: record for record in result.scalars().all()}
        return [by_id[record_id] for record_id in ids if record_id in by_id]

    async def get_by_field(self, field: str, value: Any) -> Optional[ModelType]:
        """
        Get a single record by a unique column.

        Args:
            field: Column name (must be unique on the model)
            value: Value to match

        Returns:
            The model instance if found, None otherwise

        Raises:
            ValueError: If the model has no such column
        """
        if not hasattr(self.model, field):
            raise ValueError(f"{self.model.__name__} has no field '{field}'")

        result = await self.session.execute(
            select(self.model).where(getattr(self.model, field) == value)
        )
        return result.scalar_one_or_none()

    async def count(self, filters: Optional[dict[str, Any]] = None) -> int:
        """
        Count records with optional equality filtering.

        Args:
            filters: Dict of field=value for WHERE clauses

        Returns:
            Number of matching records
        """
        query = select(sql_count()).select_from(self.model)

        if filters:
            for field, value in filters.items():
                if hasattr(self.model, field):
                    query = query.where(getattr(self.model, field) == value)

        result = await self.session.execute(query)
        return result.scalar() or 0

    async def exists(self, record_id: UUID) -> bool:
        """
        Check if a record exists without loading it.

        Args:
            record_id: The UUID to check

        Returns:
            True if record exists, False otherwise
        """
        result = await self.session.execute(
            select(sql_count()).select_from(self.model).where(self.model.id == record_id)
        )
        return (result.scalar() or 0) > 0

    async def list(
        self,
        *,
        offset: int = 0,
        limit: int = 100,
        filters: Optional[dict[str, Any]] = None,
        order_by: Optional[str] = None,
        order_desc: bool = True,
    ) -> "list[ModelType]":
        """
        List records with pagination and optional filtering.

        Args:
            offset: Number of records to skip
            limit: Maximum records to return
            filters: Dict of field=value for WHERE clauses
            order_by: Field name to order results by
            order_desc: If True, order descending; if False, ascending

        Returns:
            List of model instances

        Example:
            # Second page of the home feed, newest first
            pins = await repo.list(offset=20, limit=20, order_by="created_at")
        """
        query = select(self.model)

        if filters:
            for field, value in filters.items():
                if hasattr(self.model, field):
                    query = query.where(getattr(self.model, field) == value)

        if order_by and hasattr(self.model, order_by):
            order_field = getattr(self.model, order_by)
            # id breaks ties
            query = query.order_by(order_field.desc() if order_desc else order_field, self.model.id)

        query = query.offset(offset).limit(limit)

        result = await self.session.execute(query)
        return [record for record in result.scalars().all()]

    # ═══════════════════════════════════════════════════════════════════════════
    # CREATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Validate and create a new record.

        Args:
            **kwargs: Field values for the new record

        Returns:
            The created model instance with all DB-generated values

        Raises:
            ValidationError: If any value violates the declared constraints
        """
        values = self.validate_fields(kwargs)

        instance = self.model(**values)
        self.session.add(instance)

        # Flush to get DB-generated values, then reload them
        await self.session.flush()
        await self.session.refresh(instance)

        return instance

    # ═══════════════════════════════════════════════════════════════════════════
    # UPDATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def update(
        self,
        record_id: UUID,
        **kwargs: Any,
    ) -> Optional[ModelType]:
        """
        Validate and apply a partial update to a record.

        Fields that are None or unknown to the model are ignored.

        Args:
            record_id: UUID of the record to update
            **kwargs: Fields to update

        Returns:
            Updated model instance, or None if not found

        Raises:
            ValidationError: If any supplied value violates the constraints
        """
        instance = await self.get(record_id)
        if not instance:
            return None

        changes = {
            field: value
            for field, value in kwargs.items()
            if value is not None and hasattr(instance, field)
        }
        changes = self.validate_fields(changes, partial=True)

        for field, value in changes.items():
            setattr(instance, field, value)

        await self.session.flush()
        await self.session.refresh(instance)

        return instance

    # ═══════════════════════════════════════════════════════════════════════════
    # DELETE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def delete(self, record_id: UUID) -> bool:
        """
        Hard delete a record by ID.

        Link rows pointing at the record are not touched here; services
        remove them first so no dangling ids are left behind.

        Args:
            record_id: UUID of the record to delete

        Returns:
            True if deleted, False if not found
        """
        instance = await self.get(record_id)
        if not instance:
            return False

        await self.session.delete(instance)
        await self.session.flush()
        return True


class LinkRepository(Generic[LinkType]):
    """
    Generic repository for a two-column link table.

    Every membership is one row keyed by (left, right). Both directions of
    the relation are answered from that single row, so they cannot drift.

    Subclasses name their two key columns:

        class PinLikeRepository(LinkRepository[PinLike]):
            left_column = "pin_id"
            right_column = "user_id"

    Attributes:
        model: The SQLAlchemy link model
        session: The async database session
    """

    left_column: str = ""
    right_column: str = ""

    def __init__(self, model: Type[LinkType], session: AsyncSession) -> None:
        self.model = model
        self.session = session

    @property
    def left(self):
        return getattr(self.model, self.left_column)

    @property
    def right(self):
        return getattr(self.model, self.right_column)

    def _order_by(self) -> tuple:
        """Ordering used when listing members."""
        return (self.model.created_at, self.left, self.right)

    # ═══════════════════════════════════════════════════════════════════════════
    # MEMBERSHIP
    # ═══════════════════════════════════════════════════════════════════════════

    async def contains(self, left_id: UUID, right_id: UUID) -> bool:
        """Return True if the (left_id, right_id) row exists."""
        result = await self.session.execute(
            select(sql_count())
            .select_from(self.model)
            .where(self.left == left_id, self.right == right_id)
        )
        return (result.scalar() or 0) > 0

    async def add(self, left_id: UUID, right_id: UUID, **extra: Any) -> LinkType:
        """
        Insert the (left_id, right_id) row.

        Raises:
            DuplicateResourceError: If the row already exists (for instance
                a concurrent request inserted it first)
        """
        instance = self.model(**{self.left_column: left_id, self.right_column: right_id}, **extra)
        self.session.add(instance)
        try:
            await self.session.flush()
        except (IntegrityError, FlushError) as e:
            raise DuplicateResourceError(
                f"{self.model.__name__} already exists",
                details={self.left_column: str(left_id), self.right_column: str(right_id)},
            ) from e
        return instance

    async def remove(self, left_id: UUID, right_id: UUID) -> bool:
        """
        Delete the (left_id, right_id) row.

        Returns:
            True if a row was deleted, False if it did not exist
        """
        result = await self.session.execute(
            delete(self.model).where(self.left == left_id, self.right == right_id)
        )
        return (result.rowcount or 0) > 0

    # ═══════════════════════════════════════════════════════════════════════════
    # DERIVED COLLECTIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def targets_of(self, left_id: UUID) -> list[UUID]:
        """All right ids linked from left_id, in membership order."""
        result = await self.session.execute(
            select(self.right).where(self.left == left_id).order_by(*self._order_by())
        )
        return [row for row in result.scalars().all()]

    async def sources_of(self, right_id: UUID) -> list[UUID]:
        """All left ids linked to right_id, in membership order."""
        result = await self.session.execute(
            select(self.left).where(self.right == right_id).order_by(*self._order_by())
        )
        return [row for row in result.scalars().all()]

    async def count_targets(self, left_id: UUID) -> int:
        result = await self.session.execute(
            select(sql_count()).select_from(self.model).where(self.left == left_id)
        )
        return result.scalar() or 0

    async def count_sources(self, right_id: UUID) -> int:
        result = await self.session.execute(
            select(sql_count()).select_from(self.model).where(self.right == right_id)
        )
        return result.scalar() or 0

    # ═══════════════════════════════════════════════════════════════════════════
    # CLEANUP
    # ═══════════════════════════════════════════════════════════════════════════

    async def remove_for_left(self, left_id: UUID) -> int:
        """Delete every row whose left side is left_id. Returns rows removed."""
        result = await self.session.execute(delete(self.model).where(self.left == left_id))
        return result.rowcount or 0

    async def remove_for_right(self, right_id: UUID) -> int:
        """Delete every row whose right side is right_id. Returns rows removed."""
        result = await self.session.execute(delete(self.model).where(self.right == right_id))
        return result.rowcount or 0
