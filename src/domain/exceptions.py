"""Base exception classes for the governance projection domain layer."""


class ProjectionError(Exception):
    """Base exception for all domain errors.

    All domain-specific exceptions MUST inherit from this class.
    This enables consistent error handling across the application.

    Anomalies in the event feed (negative balances, unknown delegates)
    are NOT errors; they are logged and the projection continues.
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
