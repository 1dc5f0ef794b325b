"""Application ports - Abstract interfaces for infrastructure adapters.

This module defines the contracts that infrastructure adapters must implement.
Ports enable dependency inversion and make the application layer testable.

Available ports:
- EntityStoreProtocol: Key-value persistence for projected entities
- ProjectionMetricsProtocol: Progress metrics sink for the projector
"""

from src.application.ports.entity_store import EntityStoreProtocol
from src.application.ports.projection_metrics import ProjectionMetricsProtocol

__all__: list[str] = ["EntityStoreProtocol", "ProjectionMetricsProtocol"]
