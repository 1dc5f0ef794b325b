"""Bootstrap wiring for logging configuration."""

from __future__ import annotations

from src.config import IndexerConfig
from src.infrastructure.observability import configure_structlog as _configure_structlog


def configure_logging(config: IndexerConfig) -> None:
    """Configure structlog for the configured environment."""
    _configure_structlog(environment=config.environment)


__all__ = ["configure_logging"]
