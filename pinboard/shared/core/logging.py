"""
Logging Configuration

Structured logging for the Pinboard backend, built on structlog.

Log Output:
===========
Development:
    2026-01-15 10:30:00 [info     ] Pin liked          pin_id=550e8400-... user_id=660e...

Production (JSON):
    {"timestamp": "2026-01-15T10:30:00", "level": "info", "event": "Pin liked", "pin_id": "..."}

Usage:
======
    from pinboard.shared.core.logging import logger, get_logger, log_context

    logger.info("Board created", board_id=board.id, is_secret=board.is_secret)

    relation_logger = get_logger("relations")
    relation_logger.debug("Follow toggled", follower_id=a, followee_id=b)

    # Bind values to every log line emitted while handling this request
    log_context(request_id=request_id, user_id=user_id)
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import Processor

from pinboard.config.settings import settings


def setup_logging() -> None:
    """
    Configure structlog and the stdlib root logger.

    Development gets colored console output, every other environment
    gets one JSON object per line. Called once on module import.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.LOG_LEVEL.upper()),
    )

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.is_development:
        processors: list[Processor] = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a named structured logger.

    Args:
        name: Logger name (e.g. "relations", "engagement")

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """
    Bind key/value pairs to all subsequent log calls in this context.

    Args:
        **kwargs: Values to attach (request_id, user_id, ...)
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """Drop every value bound with log_context()."""
    structlog.contextvars.clear_contextvars()


setup_logging()

logger = get_logger("pinboard")
