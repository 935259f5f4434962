"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready, /live   → Health check endpoints
    /auth                    → Authentication (register, login)
    /users                   → Accounts, profiles, follows
    /pins                    → Pins, likes, saves, comments
    /boards                  → Boards

Usage:
======
    from pinboard.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

from pinboard.api.handlers import (
    auth_handler,
    board_handler,
    comment_handler,
    health_handler,
    pin_handler,
    user_handler,
)
from pinboard.shared.schemas.common import ErrorResponse


# Error bodies documented for every router except health
ERROR_RESPONSES = {
    status_code: {"model": ErrorResponse}
    for status_code in (400, 401, 403, 404, 409)
}


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, root level)
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    # Authentication endpoints
    app.include_router(
        auth_handler.router,
        prefix="/auth",
        tags=["Authentication"],
        responses=ERROR_RESPONSES,
    )

    # Users and the follow graph
    app.include_router(
        user_handler.router,
        prefix="/users",
        tags=["Users"],
        responses=ERROR_RESPONSES,
    )

    # Pins, likes and saves
    app.include_router(
        pin_handler.router,
        prefix="/pins",
        tags=["Pins"],
        responses=ERROR_RESPONSES,
    )

    # Comments and replies, nested under pins
    app.include_router(
        comment_handler.router,
        prefix="/pins",
        tags=["Comments"],
        responses=ERROR_RESPONSES,
    )

    # Boards
    app.include_router(
        board_handler.router,
        prefix="/boards",
        tags=["Boards"],
        responses=ERROR_RESPONSES,
    )
