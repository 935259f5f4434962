"""
Pinboard API Application Entry Point

FastAPI application setup with all routers, middleware, and lifecycle management.

Application Architecture:
=========================
┌─────────────────────────────────────────────────────────────────────────────┐
│                           PINBOARD API                                      │
├─────────────────────────────────────────────────────────────────────────────┤
│   Middleware:   CORS → Request context → Exception handlers                 │
│                              │                                              │
│                              ▼                                              │
│   Routers:      Health │ Auth │ Users │ Pins │ Comments │ Boards            │
│                              │                                              │
│                              ▼                                              │
│   Dependencies: Database session │ Caller id (JWT) │ Services               │
│                              │                                              │
│                              ▼                                              │
│   Services:     AccessGate → Engagement / Relation / entity services        │
└─────────────────────────────────────────────────────────────────────────────┘

Lifecycle:
==========
1. Application starts → lifespan startup
2. Database connection verified
3. Application serves requests
4. Application stops → lifespan shutdown
5. Database connections closed

Usage:
======
    # Run with uvicorn
    uvicorn pinboard.api.main:app --host 0.0.0.0 --port 5000 --reload

    # Or programmatically
    from pinboard.api.main import create_application
    app = create_application()
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pinboard.api.middleware import setup_exception_handlers, setup_request_context
from pinboard.api.routes import register_routes
from pinboard.config.settings import settings
from pinboard.shared.core.logging import logger
from pinboard.shared.db import close_db, init_db


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup:
    - Verify the database is reachable

    Shutdown:
    - Close database connections
    """
    # ═══════════════════════════════════════════════════════════════════════════
    # STARTUP
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info(
        "Starting Pinboard API",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
    )

    await init_db()

    logger.info("Pinboard API started successfully")

    yield

    # ═══════════════════════════════════════════════════════════════════════════
    # SHUTDOWN
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info("Shutting down Pinboard API")

    await close_db()

    logger.info("Pinboard API shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance

    This factory function:
    1. Creates the FastAPI app with settings
    2. Adds middleware (CORS, request context)
    3. Sets up exception handlers
    4. Registers all routes
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="Pins, boards, follows, likes and comments",
        version=settings.APP_VERSION,
        # Only show docs in development
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # MIDDLEWARE
    # ═══════════════════════════════════════════════════════════════════════════

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_request_context(app)

    # ═══════════════════════════════════════════════════════════════════════════
    # EXCEPTION HANDLERS
    # ═══════════════════════════════════════════════════════════════════════════

    setup_exception_handlers(app)

    # ═══════════════════════════════════════════════════════════════════════════
    # ROUTES
    # ═══════════════════════════════════════════════════════════════════════════

    register_routes(app)

    return app


# Create the application instance
app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "pinboard.api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development,
    )
