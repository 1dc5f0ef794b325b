"""Domain errors for the governance projection.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from ProjectionError.
"""

from src.domain.errors.entity_store import (
    EntityStoreConnectionError,
    EntityStoreError,
    UnknownEntityTypeError,
)
from src.domain.errors.projection import EventLogFormatError, UnsupportedEventError

__all__: list[str] = [
    "EntityStoreError",
    "EntityStoreConnectionError",
    "UnknownEntityTypeError",
    "EventLogFormatError",
    "UnsupportedEventError",
]
