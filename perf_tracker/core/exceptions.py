"""
Custom Exceptions - HR Performance Scoring
perf_tracker/core/exceptions.py

Custom exception classes for event catalog and subject operations.
"""


class CatalogException(Exception):
    """Base exception for catalog and subject operations."""

    pass


class NotFoundError(CatalogException):
    """Event or subject not found."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} '{entity_id}' not found")


class DuplicateEventError(CatalogException):
    """Event name already present in the catalog."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Event '{name}' already exists")
