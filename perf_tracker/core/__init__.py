"""
Core Package - HR Performance Scoring
perf_tracker/core/__init__.py

Core infrastructure: exceptions, logging.
"""

from perf_tracker.core.exceptions import (
    CatalogException,
    DuplicateEventError,
    NotFoundError,
)
from perf_tracker.core.logging import configure_logging

__all__ = [
    # Exceptions
    "CatalogException",
    "DuplicateEventError",
    "NotFoundError",
    # Logging
    "configure_logging",
]
