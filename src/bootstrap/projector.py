"""Bootstrap wiring for the governance projector.

Chooses the entity store from configuration: the SQL store when a
database URL is configured, the in-memory store otherwise.
"""

from __future__ import annotations

from src.application.ports.entity_store import EntityStoreProtocol
from src.application.ports.projection_metrics import ProjectionMetricsProtocol
from src.application.services.governance_projector import GovernanceProjector
from src.bootstrap.database import get_session_factory
from src.config import IndexerConfig
from src.infrastructure.adapters.persistence import SqlAlchemyEntityStore
from src.infrastructure.monitoring import get_projection_metrics
from src.infrastructure.stubs import InMemoryEntityStore


def build_entity_store(config: IndexerConfig) -> EntityStoreProtocol:
    """Create the entity store selected by config."""
    if config.uses_database:
        return SqlAlchemyEntityStore(get_session_factory(config.database_url))
    return InMemoryEntityStore()


def build_projector(
    config: IndexerConfig,
    store: EntityStoreProtocol | None = None,
    metrics: ProjectionMetricsProtocol | None = None,
) -> GovernanceProjector:
    """Wire a projector for the given configuration.

    Args:
        config: Projection configuration.
        store: Entity store override; built from config when omitted.
        metrics: Metrics sink override; the process-wide Prometheus
            metrics are used when omitted.

    Returns:
        A ready GovernanceProjector.
    """
    return GovernanceProjector(
        store=store if store is not None else build_entity_store(config),
        decimals=config.token_decimals,
        metrics=metrics if metrics is not None else get_projection_metrics(),
    )


__all__ = ["build_entity_store", "build_projector"]
