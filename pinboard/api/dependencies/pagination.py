"""
Pagination dependency.
"""
from fastapi import Query

from pinboard.config.settings import settings
from pinboard.shared.schemas.common import PaginationParams


async def get_pagination(
    page: int = Query(1, ge=1, description="Page number (1-indexed)"),
    per_page: int = Query(
        settings.DEFAULT_PAGE_SIZE,
        ge=1,
        le=settings.MAX_PAGE_SIZE,
        description="Items per page",
    ),
) -> PaginationParams:
    """Pagination parameters dependency."""
    return PaginationParams(page=page, per_page=per_page)
