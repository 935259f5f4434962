"""
Service Dependencies

FastAPI dependencies for service injection.

These dependencies create service instances with proper database session injection.
Services are created per-request, which is fine because:
- Services are stateless (only hold db session reference)
- Each request gets its own db session
- No shared state between requests

Usage:
======
    from pinboard.api.dependencies.services import get_pin_service

    @router.get("/pins/{pin_id}")
    async def get_pin(
        pin_id: UUID,
        current_user_id: CurrentUserId,
        pin_service: PinService = Depends(get_pin_service),
    ):
        return await pin_service.get_pin(current_user_id, pin_id)
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from pinboard.api.dependencies.database import get_db
from pinboard.shared.services.auth_service import AuthService
from pinboard.shared.services.board_service import BoardService
from pinboard.shared.services.comment_service import CommentService
from pinboard.shared.services.engagement_service import EngagementService
from pinboard.shared.services.pin_service import PinService
from pinboard.shared.services.relation_service import RelationService
from pinboard.shared.services.user_service import UserService


async def get_auth_service(
    db: AsyncSession = Depends(get_db),
) -> AuthService:
    """
    Dependency to get AuthService instance.

    Creates a new service instance per request with the request's db session.
    """
    return AuthService(db)


async def get_user_service(
    db: AsyncSession = Depends(get_db),
) -> UserService:
    return UserService(db)


async def get_pin_service(
    db: AsyncSession = Depends(get_db),
) -> PinService:
    return PinService(db)


async def get_board_service(
    db: AsyncSession = Depends(get_db),
) -> BoardService:
    return BoardService(db)


async def get_comment_service(
    db: AsyncSession = Depends(get_db),
) -> CommentService:
    return CommentService(db)


async def get_relation_service(
    db: AsyncSession = Depends(get_db),
) -> RelationService:
    """
    Dependency to get RelationService instance (follow, save, comment, reply).
    """
    return RelationService(db)


async def get_engagement_service(
    db: AsyncSession = Depends(get_db),
) -> EngagementService:
    """
    Dependency to get EngagementService instance (like toggles).
    """
    return EngagementService(db)
