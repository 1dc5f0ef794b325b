"""Infrastructure stubs for development and testing.

Available stubs:
- InMemoryEntityStore: Dict-backed entity store with failure injection

WARNING: These stubs are NOT for production use.
Production implementations are in src/infrastructure/adapters/.
"""

from src.infrastructure.stubs.entity_store_stub import (
    InMemoryEntityStore,
    StoreFailureMode,
    StoreOperation,
)

__all__: list[str] = [
    "InMemoryEntityStore",
    "StoreFailureMode",
    "StoreOperation",
]
