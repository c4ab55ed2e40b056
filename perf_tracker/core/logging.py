"""
Logging setup - HR Performance Scoring
perf_tracker/core/logging.py

Configures structlog for the scoring engine. Engine modules only call
`structlog.get_logger(__name__)`; the host decides rendering here.
"""

import logging
from typing import Optional

import structlog

from perf_tracker.config import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure structlog with the level and renderer from settings."""
    settings = settings or get_settings()
    level = getattr(logging, settings.LOG_LEVEL)

    if settings.LOG_FORMAT == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )
    structlog.get_logger(__name__).debug(
        "logging_configured",
        app=settings.APP_NAME,
        env=settings.APP_ENV,
        level=settings.LOG_LEVEL,
        format=settings.LOG_FORMAT,
    )
