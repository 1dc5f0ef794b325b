"""Structured logging and per-event correlation for the projector.

configure_structlog() is called once by the bootstrap layer; the projector
wraps each handler call in correlation_scope() so log entries written while
projecting a chain log carry its ``<tx_hash>-<log_index>`` id.
"""

from src.infrastructure.observability.correlation import (
    correlation_id_processor,
    correlation_scope,
    get_correlation_id,
    set_correlation_id,
)
from src.infrastructure.observability.logging import (
    configure_structlog,
    get_logger_for_component,
)

__all__: list[str] = [
    "configure_structlog",
    "correlation_id_processor",
    "correlation_scope",
    "get_correlation_id",
    "get_logger_for_component",
    "set_correlation_id",
]
