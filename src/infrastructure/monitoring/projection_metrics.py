"""Prometheus metrics for the governance projection.

Operational metrics only: how many events were projected, how many failed,
and how far along the chain the projection has got.

Metrics:
- governance_events_projected_total{event_type}
- governance_event_projection_failures_total{event_type}
- governance_last_projected_block
"""

from __future__ import annotations

import threading

from prometheus_client import CollectorRegistry, Counter, Gauge, generate_latest

# Thread lock for singleton initialization
_collector_lock = threading.Lock()


class ProjectionMetrics:
    """Collects projection progress metrics.

    Attributes:
        events_projected_total: Counter of successfully projected events.
        event_projection_failures_total: Counter of events whose handler raised.
        last_projected_block: Gauge holding the newest projected block number.
    """

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize the metric families.

        Args:
            registry: Optional custom registry for testing isolation.
        """
        self._registry = registry or CollectorRegistry()

        self.events_projected_total = Counter(
            name="governance_events_projected_total",
            documentation="Total chain events projected into the entity store",
            labelnames=["event_type"],
            registry=self._registry,
        )

        self.event_projection_failures_total = Counter(
            name="governance_event_projection_failures_total",
            documentation="Total chain events whose projection raised",
            labelnames=["event_type"],
            registry=self._registry,
        )

        self.last_projected_block = Gauge(
            name="governance_last_projected_block",
            documentation="Block number of the most recently projected event",
            registry=self._registry,
        )

    @property
    def registry(self) -> CollectorRegistry:
        return self._registry

    def record_projected(self, event_type: str, block_number: int) -> None:
        """Record a successfully projected event.

        Args:
            event_type: Event name, e.g. "Transfer".
            block_number: Block the event was emitted in.
        """
        self.events_projected_total.labels(event_type=event_type).inc()
        self.last_projected_block.set(block_number)

    def record_failure(self, event_type: str) -> None:
        self.event_projection_failures_total.labels(event_type=event_type).inc()

    def generate(self) -> bytes:
        """Render the registry in Prometheus exposition format."""
        return generate_latest(self._registry)


_projection_metrics: ProjectionMetrics | None = None


def get_projection_metrics() -> ProjectionMetrics:
    """Get the process-wide metrics instance, creating it on first call."""
    global _projection_metrics
    if _projection_metrics is None:
        with _collector_lock:
            if _projection_metrics is None:
                _projection_metrics = ProjectionMetrics()
    return _projection_metrics


def reset_projection_metrics() -> None:
    """Reset the singleton (testing cleanup)."""
    global _projection_metrics
    _projection_metrics = None
