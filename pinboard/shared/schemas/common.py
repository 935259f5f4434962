"""
Common Schemas

Shared schemas used across the application for consistent API responses.

Schema Types:
=============
- BaseSchema: Base with common config (from_attributes, populate_by_name)
- Pagination: Parameters and response metadata
- Generic Responses: PaginatedResponse[T], MessageResponse, ErrorResponse

Usage:
======
    from pinboard.shared.schemas.common import PaginatedResponse, PaginationMeta

    return PaginatedResponse[PinResponse](
        data=pins,
        pagination=PaginationMeta.create(page=1, per_page=20, total=100),
    )
"""

from datetime import datetime, timezone
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field


# Generic type for paginated responses
DataT = TypeVar("DataT")


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    Provides:
    - from_attributes: Allow creating from ORM models
    - populate_by_name: Allow field population by name or alias
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# PAGINATION
# ═══════════════════════════════════════════════════════════════════════════════


class PaginationParams(BaseModel):
    """
    Pagination query parameters.

    Built by the get_pagination dependency, which clamps per_page to
    settings.MAX_PAGE_SIZE.
    """

    page: int = Field(default=1, ge=1, description="Page number (1-indexed)")
    per_page: int = Field(default=20, ge=1, description="Items per page")

    @property
    def offset(self) -> int:
        """Calculate offset for database query."""
        return (self.page - 1) * self.per_page

    @property
    def limit(self) -> int:
        """Get limit for database query."""
        return self.per_page


class PaginationMeta(BaseModel):
    """
    Pagination metadata in response.

    Provides all pagination info for clients to navigate results.
    """

    page: int = Field(description="Current page number")
    per_page: int = Field(description="Items per page")
    total: int = Field(description="Total number of items")
    total_pages: int = Field(description="Total number of pages")
    has_next: bool = Field(default=False, description="A later page exists")
    has_prev: bool = Field(default=False, description="An earlier page exists")

    @classmethod
    def create(cls, page: int, per_page: int, total: int) -> "PaginationMeta":
        """
        Create pagination meta from parameters.

        Automatically calculates total_pages, has_next and has_prev.
        """
        total_pages = (total + per_page - 1) // per_page if per_page > 0 else 0
        return cls(
            page=page,
            per_page=per_page,
            total=total,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_prev=page > 1,
        )


class PaginatedResponse(BaseModel, Generic[DataT]):
    """
    Generic paginated response.

    Example:
        PaginatedResponse[PinResponse](
            data=[pin1, pin2],
            pagination=PaginationMeta.create(page=1, per_page=20, total=50)
        )
    """

    data: list[DataT]
    pagination: PaginationMeta


# ═══════════════════════════════════════════════════════════════════════════════
# STANDARD RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class MessageResponse(BaseModel):
    """Simple message response for success confirmations."""

    message: str
    success: bool = True


class ErrorDetail(BaseModel):
    """Error detail structure in error responses."""

    code: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error message")
    details: Optional[dict[str, Any]] = Field(
        default=None,
        description="Additional error context",
    )


class ErrorResponse(BaseModel):
    """
    Standard error response schema.

    Example:
        {
            "error": {
                "code": "NOT_FOUND",
                "message": "Pin with id 'abc-123' not found",
                "details": {}
            }
        }
    """

    error: ErrorDetail


# ═══════════════════════════════════════════════════════════════════════════════
# HEALTH CHECK
# ═══════════════════════════════════════════════════════════════════════════════


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = "healthy"
    service: str = "pinboard"
    version: str = "1.0.0"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
