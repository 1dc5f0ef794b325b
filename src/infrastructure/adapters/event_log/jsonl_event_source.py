"""JSON-lines event source.

Reads a recorded event log, one JSON object per line, and yields decoded
domain events in file order. File order is taken to be chain order.
Blank lines are skipped.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from pydantic import ValidationError

from src.domain.errors.projection import EventLogFormatError
from src.domain.events import ChainEvent
from src.infrastructure.adapters.event_log.models import parse_event_json
from src.infrastructure.observability import get_logger_for_component


class JsonlEventSource:
    """Iterable over the events in a JSON-lines log file.

    Usage:
        source = JsonlEventSource(Path("events.jsonl"))
        projector.replay(source)
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def __iter__(self) -> Iterator[ChainEvent]:
        """Yield events lazily, line by line.

        Raises:
            EventLogFormatError: On the first line that is not a valid event.
        """
        log = get_logger_for_component(
            self.__class__.__name__, component="ingestion"
        ).bind(source=str(self._path))
        log.info("event_log_opened")

        with self._path.open(encoding="utf-8") as handle:
            for line_number, line in enumerate(handle, start=1):
                if not line.strip():
                    continue
                try:
                    yield parse_event_json(line)
                except ValidationError as exc:
                    log.error(
                        "event_log_line_invalid",
                        line_number=line_number,
                        errors=exc.error_count(),
                    )
                    raise EventLogFormatError(str(exc), line_number=line_number) from exc
