"""
Request Context Middleware

Binds per-request values to the structlog context so every log line
emitted while handling a request carries them.

Bound Keys:
===========
    request_id  ← X-Request-ID header, or a fresh uuid4 hex
    method      ← HTTP method
    path        ← URL path

The request id is echoed back in the X-Request-ID response header.

Usage:
======
    from pinboard.api.middleware.request_context import setup_request_context

    app = FastAPI()
    setup_request_context(app)
"""

import uuid

from fastapi import FastAPI, Request

from pinboard.shared.core.logging import clear_log_context, log_context


REQUEST_ID_HEADER = "X-Request-ID"


def setup_request_context(app: FastAPI) -> None:
    """
    Register the request context middleware.

    Args:
        app: FastAPI application instance
    """

    @app.middleware("http")
    async def bind_request_context(request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex

        clear_log_context()
        log_context(request_id=request_id, method=request.method, path=request.url.path)
        try:
            response = await call_next(request)
        finally:
            clear_log_context()

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
