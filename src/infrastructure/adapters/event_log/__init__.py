"""Event log ingestion adapters."""

from src.infrastructure.adapters.event_log.jsonl_event_source import JsonlEventSource
from src.infrastructure.adapters.event_log.models import (
    EVENT_RECORD_ADAPTER,
    parse_event_json,
)

__all__: list[str] = ["EVENT_RECORD_ADAPTER", "JsonlEventSource", "parse_event_json"]
