"""Entity store errors for the governance projection.

This module provides exception classes for entity store operations.
These exceptions are raised by EntityStoreProtocol implementations when
storage-related failures occur.

A store failure aborts projection of the current event. Entities already
saved for that event stay saved; the ingestion layer re-delivers the event.
"""

from src.domain.exceptions import ProjectionError


class EntityStoreError(ProjectionError):
    """Base exception for entity store operations.

    Raised when storage-related failures occur in EntityStoreProtocol
    implementations. This includes:
    - Connection failures
    - Transaction failures
    - Serialization failures

    Usage:
        raise EntityStoreError("Failed to save TokenHolder 0xabc: timeout")
    """

    def __init__(self, message: str, entity_type: str = "", entity_id: str = "") -> None:
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message)


class EntityStoreConnectionError(EntityStoreError):
    """Raised when connection to the entity store fails.

    This indicates infrastructure issues that may require
    operational intervention.
    """


class UnknownEntityTypeError(EntityStoreError):
    """Raised when a store is asked for an entity type it cannot decode."""

    def __init__(self, entity_type: str) -> None:
        super().__init__(f"Unknown entity type: {entity_type}", entity_type=entity_type)
