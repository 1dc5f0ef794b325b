"""Monitoring infrastructure for the governance projection."""

from src.infrastructure.monitoring.projection_metrics import (
    ProjectionMetrics,
    get_projection_metrics,
    reset_projection_metrics,
)

__all__ = [
    "ProjectionMetrics",
    "get_projection_metrics",
    "reset_projection_metrics",
]
