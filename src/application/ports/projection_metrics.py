"""Projection metrics port definition.

Lets the projector report progress without depending on a particular
metrics backend.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ProjectionMetricsProtocol(Protocol):
    """Sink for projection progress metrics."""

    def record_projected(self, event_type: str, block_number: int) -> None:
        """Record a successfully projected event.

        Args:
            event_type: Event name, e.g. "Transfer".
            block_number: Block the event was emitted in.
        """
        ...

    def record_failure(self, event_type: str) -> None:
        """Record an event whose projection raised.

        Args:
            event_type: Event name, e.g. "Transfer".
        """
        ...
