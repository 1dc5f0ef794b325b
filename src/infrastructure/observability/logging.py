"""structlog setup for the projection process.

Two renderings are supported:
- production: one JSON object per line, exceptions as structured dicts
- anything else: colored console output with pretty tracebacks

Every entry carries the correlation id of the chain log being projected
when one is in scope, e.g.:

    {"event": "negative_token_balance", "level": "warning",
     "correlation_id": "0xabc...-12", "service": "TransferProjectionService",
     "holder_id": "0x...", "balance": "-300", "timestamp": "..."}

The level threshold comes from LOG_LEVEL (default INFO) unless passed
explicitly.
"""

import logging
import os
from typing import cast

import structlog
from structlog.typing import Processor

from src.infrastructure.observability.correlation import correlation_id_processor

LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
PRODUCTION_ENVIRONMENT = "production"


def _resolve_log_level(log_level: str | None) -> int:
    level_name = (log_level or os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)).upper()
    return logging.getLevelNamesMapping().get(level_name, logging.INFO)


def _render_processors(environment: str) -> list[Processor]:
    if environment == PRODUCTION_ENVIRONMENT:
        return [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    return [structlog.dev.ConsoleRenderer(colors=True)]


def configure_structlog(
    environment: str = PRODUCTION_ENVIRONMENT,
    log_level: str | None = None,
) -> None:
    """Configure structlog once, before the first event is projected.

    Args:
        environment: "production" for JSON lines, anything else for console.
        log_level: Level name overriding LOG_LEVEL, e.g. "DEBUG".
    """
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        cast(Processor, correlation_id_processor),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        *_render_processors(environment),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            _resolve_log_level(log_level)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger_for_component(
    name: str, component: str = "projection"
) -> structlog.BoundLogger:
    """Logger for code outside the service classes (adapters, scripts).

    Args:
        name: Bound as ``service``; usually the class or module name.
        component: Bound as ``component``.
    """
    return structlog.get_logger().bind(service=name, component=component)
