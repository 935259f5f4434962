"""
Health Check Handler

Provides health check endpoints for monitoring and load balancers.
"""

from fastapi import APIRouter
from sqlalchemy import text

from pinboard.api.dependencies.database import DbSession
from pinboard.config.settings import settings
from pinboard.shared.schemas.common import HealthResponse


router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Basic health check endpoint.

    Returns:
        HealthResponse with service status
    """
    return HealthResponse(
        status="healthy",
        service=settings.APP_NAME.lower(),
        version=settings.APP_VERSION,
    )


@router.get("/ready")
async def readiness_check(db: DbSession):
    """
    Readiness check for load balancers: the database answers a query.
    """
    await db.execute(text("SELECT 1"))
    return {"status": "ready"}


@router.get("/live")
async def liveness_check():
    """
    Liveness check.

    Returns:
        Simple alive status
    """
    return {"status": "alive"}
