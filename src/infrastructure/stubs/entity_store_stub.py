"""In-memory entity store stub for development and testing.

This module provides an in-memory implementation of EntityStoreProtocol
with:
1. Dict-backed storage keyed by (entity_type, entity_id)
2. Configurable failure modes
3. Operation recording for assertions
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from src.application.ports.entity_store import EntityStoreProtocol
from src.domain.errors.entity_store import EntityStoreConnectionError
from src.domain.models import Entity


@dataclass
class StoreFailureMode:
    """Configuration for simulating store failures.

    Attributes:
        get_fails: Every get raises.
        put_fails: Every put raises.
        put_fails_for: Only puts of this entity type raise.
    """

    get_fails: bool = False
    put_fails: bool = False
    put_fails_for: str | None = None


@dataclass(frozen=True)
class StoreOperation:
    """A recorded store call."""

    operation: str
    entity_type: str
    entity_id: str


class InMemoryEntityStore(EntityStoreProtocol):
    """In-memory implementation of EntityStoreProtocol.

    Entities are immutable, so they are stored by reference.

    Usage:
        store = InMemoryEntityStore()
        projector = GovernanceProjector(store=store)
        projector.project(event)

        # Test failure modes
        store.set_failure_mode(StoreFailureMode(put_fails_for="Governance"))

        # Reset for next test
        store.clear()
    """

    def __init__(self) -> None:
        """Initialize the stub with empty storage."""
        self._entities: dict[tuple[str, str], Entity] = {}
        self._failure_mode = StoreFailureMode()
        self._operations: list[StoreOperation] = []

    def set_failure_mode(self, mode: StoreFailureMode) -> None:
        """Configure failure simulation for testing."""
        self._failure_mode = mode

    def clear_failure_mode(self) -> None:
        self._failure_mode = StoreFailureMode()

    def clear(self) -> None:
        """Clear all state for test isolation."""
        self._entities.clear()
        self._failure_mode = StoreFailureMode()
        self._operations.clear()

    @property
    def operations(self) -> list[StoreOperation]:
        """Recorded calls, oldest first (for test assertions)."""
        return list(self._operations)

    def get(self, entity_type: str, entity_id: str) -> Entity | None:
        self._operations.append(StoreOperation("get", entity_type, entity_id))
        if self._failure_mode.get_fails:
            raise EntityStoreConnectionError(
                f"Simulated read failure for {entity_type} {entity_id}",
                entity_type=entity_type,
                entity_id=entity_id,
            )
        return self._entities.get((entity_type, entity_id))

    def put(self, entity_type: str, entity_id: str, entity: Entity) -> None:
        self._operations.append(StoreOperation("put", entity_type, entity_id))
        mode = self._failure_mode
        if mode.put_fails or mode.put_fails_for == entity_type:
            raise EntityStoreConnectionError(
                f"Simulated write failure for {entity_type} {entity_id}",
                entity_type=entity_type,
                entity_id=entity_id,
            )
        self._entities[(entity_type, entity_id)] = entity

    def count(self, entity_type: str | None = None) -> int:
        """Number of stored entities, optionally of one type."""
        if entity_type is None:
            return len(self._entities)
        return sum(1 for stored_type, _ in self._entities if stored_type == entity_type)

    def snapshot(self) -> dict[str, dict[str, dict[str, Any]]]:
        """Serialize every stored entity, ordered by type then id.

        Two stores holding the same entities produce equal snapshots, and
        json.dumps(snapshot, sort_keys=True) of them is byte-identical.
        """
        result: dict[str, dict[str, dict[str, Any]]] = {}
        for entity_type, entity_id in sorted(self._entities):
            entity = self._entities[(entity_type, entity_id)]
            result.setdefault(entity_type, {})[entity_id] = entity.to_dict()
        return result
