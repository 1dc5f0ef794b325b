"""Entity store port definition.

Defines the abstract interface for persisting projected entities.
Infrastructure adapters must implement this protocol.

Store Contract:
- Key-value access by (entity_type, entity_id); no range queries
- Read-your-writes: a put is durable before the next get of that entity
- Single-entity writes only; no cross-entity transactions
- I/O failures raise EntityStoreError (never return partial results)
"""

from typing import Protocol, runtime_checkable

from src.domain.models import Entity


@runtime_checkable
class EntityStoreProtocol(Protocol):
    """Protocol for projected entity storage.

    Entities are immutable values; a handler reads an entity, derives the
    updated instance and puts it back whole.
    """

    def get(self, entity_type: str, entity_id: str) -> Entity | None:
        """Load an entity.

        Args:
            entity_type: The model's ENTITY_TYPE (e.g. "TokenHolder").
            entity_id: The entity id.

        Returns:
            The stored entity, or None if it was never saved.

        Raises:
            EntityStoreError: If the store cannot be read.
        """
        ...

    def put(self, entity_type: str, entity_id: str, entity: Entity) -> None:
        """Insert or replace an entity.

        Args:
            entity_type: The model's ENTITY_TYPE.
            entity_id: The entity id.
            entity: The full entity to store.

        Raises:
            EntityStoreError: If the write fails. Nothing is stored.
        """
        ...
