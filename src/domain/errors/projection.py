"""Projection errors for the governance projection."""

from src.domain.exceptions import ProjectionError


class UnsupportedEventError(ProjectionError):
    """Raised when the projector receives an event it has no handler for."""

    def __init__(self, event_type: str) -> None:
        self.event_type = event_type
        super().__init__(f"No projection handler for event type: {event_type}")


class EventLogFormatError(ProjectionError):
    """Raised when a recorded event cannot be decoded.

    Attributes:
        line_number: 1-based line in the event log, if known.
    """

    def __init__(self, message: str, line_number: int | None = None) -> None:
        self.line_number = line_number
        prefix = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"{prefix}{message}")
