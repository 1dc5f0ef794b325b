"""Correlation ids tying log entries to the chain log being projected.

The id has the form ``<tx_hash>-<log_index>`` and lives in a contextvar
while a handler runs; correlation_id_processor copies it onto every entry.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Current id, or "" outside any correlation_scope."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    _correlation_id.set(correlation_id)


@contextmanager
def correlation_scope(correlation_id: str) -> Iterator[str]:
    """Bind ``correlation_id`` for the block; the previous id comes back on exit.

    Usage:
        with correlation_scope(event.metadata.correlation_id):
            handler(event)
    """
    token = _correlation_id.set(correlation_id)
    try:
        yield correlation_id
    finally:
        _correlation_id.reset(token)


def correlation_id_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """structlog processor. An explicitly bound correlation_id wins."""
    correlation_id = get_correlation_id()
    if correlation_id:
        event_dict.setdefault("correlation_id", correlation_id)
    return event_dict
