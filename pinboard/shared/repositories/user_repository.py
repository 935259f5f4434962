"""
User Repository

Database operations specific to the User model.
Extends BaseRepository with user-specific query methods.

Common Operations:
==================
- get_by_email()      → Find user by email address (case-insensitive)
- get_by_username()   → Find user by public handle
- email_exists()      → Check if email is already registered
- username_exists()   → Check if username is already taken

Uniqueness:
===========
create() and update() reject a taken email or username with a
ValidationError naming the field, before the database unique index is hit:

    ValidationError("Invalid field values", fields=["email"])

Usage Example:
==============
    async def authenticate_user(db: AsyncSession, email: str, password: str):
        repo = UserRepository(db)
        user = await repo.get_by_email(email)
        if not user:
            raise AuthenticationError("Invalid credentials")
        # Verify password...
        return user
"""

import re
from typing import Any, Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from pinboard.shared.core.exceptions import ValidationError
from pinboard.shared.models.user import User
from pinboard.shared.repositories.base import BaseRepository


EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9_]+$")


class UserRepository(BaseRepository[User]):
    """
    Repository for User database operations.

    Provides methods for common user queries beyond basic CRUD:
    - Looking up users by email or username
    - Checking email and username availability
    """

    required_fields = ("first_name", "email", "username", "password_hash")
    min_lengths = {"first_name": 3, "surname": 3, "username": 3}
    max_lengths = {"first_name": 100, "surname": 100, "username": 50, "email": 255, "bio": 160}
    patterns = {"email": EMAIL_PATTERN, "username": USERNAME_PATTERN}

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize UserRepository.

        Args:
            session: Async database session
        """
        super().__init__(User, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address.

        Emails are stored lower-cased, so the lookup is case-insensitive.

        Args:
            email: Email address to search for

        Returns:
            User if found, None otherwise

        SQL Generated:
            SELECT * FROM users WHERE email = 'user@example.com'
        """
        result = await self.session.execute(select(User).where(User.email == email.strip().lower()))
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> Optional[User]:
        """
        Get user by username.

        Args:
            username: Public handle, matched exactly

        Returns:
            User if found, None otherwise
        """
        return await self.get_by_field("username", username)

    async def email_exists(self, email: str, exclude_id: Optional[UUID] = None) -> bool:
        """
        Check if email already exists.

        Args:
            email: Email address to check
            exclude_id: User to ignore (the one being updated)

        Returns:
            True if email exists, False if available
        """
        query = select(func.count()).select_from(User).where(User.email == email.strip().lower())
        if exclude_id is not None:
            query = query.where(User.id != exclude_id)
        result = await self.session.execute(query)
        return (result.scalar() or 0) > 0

    async def username_exists(self, username: str, exclude_id: Optional[UUID] = None) -> bool:
        """Check if username is already taken (optionally ignoring one user)."""
        query = select(func.count()).select_from(User).where(User.username == username)
        if exclude_id is not None:
            query = query.where(User.id != exclude_id)
        result = await self.session.execute(query)
        return (result.scalar() or 0) > 0

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITE METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **kwargs: Any) -> User:
        """
        Create a user after checking email and username uniqueness.

        The email is normalized to lower case before it is stored.

        Raises:
            ValidationError: Constraint violation, or taken email/username
        """
        if kwargs.get("email"):
            kwargs["email"] = kwargs["email"].strip().lower()

        await self._ensure_unique(kwargs.get("email"), kwargs.get("username"))
        return await super().create(**kwargs)

    async def update(self, record_id: UUID, **kwargs: Any) -> Optional[User]:
        """
        Partially update a user, keeping email and username unique.

        Raises:
            ValidationError: Constraint violation, or taken email/username
        """
        if kwargs.get("email"):
            kwargs["email"] = kwargs["email"].strip().lower()

        await self._ensure_unique(kwargs.get("email"), kwargs.get("username"), exclude_id=record_id)
        return await super().update(record_id, **kwargs)

    async def _ensure_unique(
        self,
        email: Optional[str],
        username: Optional[str],
        exclude_id: Optional[UUID] = None,
    ) -> None:
        taken = []
        if email and await self.email_exists(email, exclude_id=exclude_id):
            taken.append("email")
        if username and await self.username_exists(username, exclude_id=exclude_id):
            taken.append("username")

        if taken:
            raise ValidationError(
                f"{' and '.join(taken).capitalize()} already in use",
                fields=taken,
            )
