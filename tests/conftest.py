"""
Pytest configuration and shared fixtures for the governance projection tests.

Testing Standards:
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
- Handlers are synchronous; no async fixtures are needed
"""

from collections.abc import Iterator

import pytest
import structlog
from prometheus_client import CollectorRegistry

from src.application.services.entity_factory_service import EntityFactoryService
from src.application.services.governance_projector import GovernanceProjector
from src.infrastructure.monitoring import ProjectionMetrics
from src.infrastructure.stubs import InMemoryEntityStore


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """Undo any structlog configuration a test applied."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def store() -> InMemoryEntityStore:
    """Provide an empty in-memory entity store."""
    return InMemoryEntityStore()


@pytest.fixture
def factory(store: InMemoryEntityStore) -> EntityFactoryService:
    """Provide an entity factory bound to the store."""
    return EntityFactoryService(store)


@pytest.fixture
def metrics() -> ProjectionMetrics:
    """Provide projection metrics on an isolated registry."""
    return ProjectionMetrics(registry=CollectorRegistry())


@pytest.fixture
def projector(
    store: InMemoryEntityStore, metrics: ProjectionMetrics
) -> GovernanceProjector:
    """Provide a projector over the in-memory store with 18 decimals."""
    return GovernanceProjector(store=store, metrics=metrics)
