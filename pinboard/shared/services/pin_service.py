"""
Pin Service

Business logic for pins.

Usage:
======
    service = PinService(db)
    view = await service.create_pin(
        user_id, file_id="pinboard/abc", file_url="https://cdn/abc.jpg",
        title="Glazed bowl", category="Art", tags=["ceramics"],
    )
    page = await service.list_pins(user_id, page=1, per_page=20)
"""

from dataclasses import dataclass, field
from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from pinboard.shared.core.exceptions import PinNotFoundError
from pinboard.shared.core.logging import get_logger
from pinboard.shared.models.comment import Comment
from pinboard.shared.models.enums import Category, MediaType
from pinboard.shared.models.pin import Pin
from pinboard.shared.repositories.board_pin_repository import BoardPinRepository
from pinboard.shared.repositories.comment_like_repository import CommentLikeRepository
from pinboard.shared.repositories.comment_repository import CommentRepository
from pinboard.shared.repositories.pin_like_repository import PinLikeRepository
from pinboard.shared.repositories.pin_repository import PinRepository
from pinboard.shared.repositories.pin_save_repository import PinSaveRepository
from pinboard.shared.services.access_gate import AccessGate


logger = get_logger(__name__)


@dataclass
class PinView:
    """A pin with its derived collections."""

    pin: Pin
    like_ids: List[UUID] = field(default_factory=list)
    saved_by_ids: List[UUID] = field(default_factory=list)
    comment_ids: List[UUID] = field(default_factory=list)
    comments: List[Comment] = field(default_factory=list)


@dataclass
class PaginatedPins:
    """One page of the home feed."""

    items: List[PinView]
    total: int
    page: int
    page_size: int
    has_next: bool
    has_prev: bool


class PinService:
    """
    Service for pin-related business logic.

    Handles:
    - Creating pins from an uploaded media descriptor
    - Home feed, created pins and saved pins
    - Updates and deletes, gated by authorship
    """

    def __init__(self, session: AsyncSession, gate: Optional[AccessGate] = None) -> None:
        """
        Initialize PinService.

        Args:
            session: Async database session
            gate: AccessGate to use (one is built from settings if omitted)
        """
        self.session = session
        self.gate = gate or AccessGate(session)
        self.pin_repo = PinRepository(session)
        self.comment_repo = CommentRepository(session)
        self.like_repo = PinLikeRepository(session)
        self.save_repo = PinSaveRepository(session)
        self.board_pin_repo = BoardPinRepository(session)
        self.comment_like_repo = CommentLikeRepository(session)

    async def build_view(self, pin: Pin, with_comments: bool = False) -> PinView:
        """Assemble a pin's likes, savers and top-level comments."""
        comment_ids = await self.comment_repo.top_level_ids(pin.id)
        return PinView(
            pin=pin,
            like_ids=await self.like_repo.targets_of(pin.id),
            saved_by_ids=await self.save_repo.sources_of(pin.id),
            comment_ids=comment_ids,
            comments=await self.comment_repo.get_by_ids(comment_ids) if with_comments else [],
        )

    async def _get_or_raise(self, pin_id: UUID) -> Pin:
        pin = await self.pin_repo.get(pin_id)
        if pin is None:
            raise PinNotFoundError(str(pin_id))
        return pin

    # ═══════════════════════════════════════════════════════════════════════════
    # CREATE / READ
    # ═══════════════════════════════════════════════════════════════════════════

    async def create_pin(
        self,
        caller_id: UUID,
        file_id: str,
        file_url: str,
        file_type: Optional[MediaType] = None,
        title: Optional[str] = None,
        description: Optional[str] = None,
        category: Optional[Category] = None,
        tags: Optional[List[str]] = None,
    ) -> PinView:
        """
        Create a pin owned by the caller.

        The new pin shows up in the caller's created pins.

        Args:
            caller_id: Owner
            file_id: Blob storage identifier of the uploaded media
            file_url: Public URL of the uploaded media
            file_type: MIME type (default image/jpeg)
            title: Optional title
            description: Optional description
            category: Optional category (default Other)
            tags: Optional tags

        Raises:
            AuthenticationError: Unknown caller
            ValidationError: Invalid field values
        """
        await self.gate.require_caller(caller_id)

        pin = await self.pin_repo.create(
            title=title or "",
            description=description or "",
            file_id=file_id,
            file_url=file_url,
            file_type=file_type or MediaType.IMAGE_JPEG,
            created_by=caller_id,
            category=category or Category.OTHER,
            tags=list(tags or []),
        )

        logger.info("Pin created", pin_id=str(pin.id), user_id=str(caller_id))
        return await self.build_view(pin)

    async def get_pin(self, caller_id: UUID, pin_id: UUID) -> PinView:
        """
        A pin together with its top-level comments.

        Raises:
            AuthenticationError: Unknown caller
            PinNotFoundError: Unknown pin
        """
        await self.gate.require_caller(caller_id)
        pin = await self._get_or_raise(pin_id)
        return await self.build_view(pin, with_comments=True)

    async def list_pins(self, caller_id: UUID, page: int = 1, per_page: int = 20) -> PaginatedPins:
        """
        Home feed, newest first.

        Args:
            caller_id: Requesting user
            page: 1-based page number
            per_page: Page size

        Returns:
            PaginatedPins for the requested page
        """
        await self.gate.require_caller(caller_id)

        offset = (page - 1) * per_page
        pins = await self.pin_repo.list_feed(offset=offset, limit=per_page)
        total = await self.pin_repo.count()

        return PaginatedPins(
            items=[await self.build_view(pin) for pin in pins],
            total=total,
            page=page,
            page_size=per_page,
            has_next=offset + len(pins) < total,
            has_prev=page > 1,
        )

    async def list_created(self, caller_id: UUID) -> List[PinView]:
        """Pins the caller created, oldest first."""
        await self.gate.require_caller(caller_id)
        return [await self.build_view(pin) for pin in await self.pin_repo.list_by_owner(caller_id)]

    async def list_saved(self, caller_id: UUID) -> List[PinView]:
        """Pins the caller saved, in the order they were saved."""
        await self.gate.require_caller(caller_id)
        pins = await self.pin_repo.get_by_ids(await self.save_repo.targets_of(caller_id))
        return [await self.build_view(pin) for pin in pins]

    # ═══════════════════════════════════════════════════════════════════════════
    # UPDATE / DELETE
    # ═══════════════════════════════════════════════════════════════════════════

    async def update_pin(
        self,
        caller_id: UUID,
        pin_id: UUID,
        title: Optional[str] = None,
        description: Optional[str] = None,
        category: Optional[Category] = None,
        tags: Optional[List[str]] = None,
    ) -> PinView:
        """
        Partially update a pin's metadata. None leaves a field unchanged.

        Raises:
            AuthenticationError: Unknown caller
            PinNotFoundError: Unknown pin
            AuthorizationError: Caller is not the author (when enforced)
            ValidationError: Invalid field values
        """
        await self.gate.require_caller(caller_id)
        pin = await self._get_or_raise(pin_id)
        self.gate.ensure_content_owner(pin.created_by, caller_id, "pin")

        pin = await self.pin_repo.update(
            pin_id,
            title=title,
            description=description,
            category=category,
            tags=list(tags) if tags is not None else None,
        )

        logger.info("Pin updated", pin_id=str(pin_id), user_id=str(caller_id))
        return await self.build_view(pin)

    async def delete_pin(self, caller_id: UUID, pin_id: UUID) -> None:
        """
        Delete a pin and everything hanging off it.

        Raises:
            AuthenticationError: Unknown caller
            PinNotFoundError: Unknown pin
            AuthorizationError: Caller is not the author (when enforced)
        """
        await self.gate.require_caller(caller_id)
        pin = await self._get_or_raise(pin_id)
        self.gate.ensure_content_owner(pin.created_by, caller_id, "pin")

        await self.purge_pin(pin_id)
        logger.info("Pin deleted", pin_id=str(pin_id), user_id=str(caller_id))

    async def purge_pin(self, pin_id: UUID) -> None:
        """Remove a pin with its likes, saves, board entries and comment threads."""
        comment_ids = await self.comment_repo.ids_for_pin(pin_id)
        await self.comment_like_repo.remove_for_comments(comment_ids)
        await self.comment_repo.delete_many(comment_ids)

        await self.like_repo.remove_for_left(pin_id)
        await self.save_repo.remove_for_right(pin_id)
        await self.board_pin_repo.remove_for_right(pin_id)

        await self.pin_repo.delete(pin_id)
