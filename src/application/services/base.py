"""Logging mixin shared by the projection services.

Services log through two channels:
- _log_operation(): an operation-scoped logger for ordinary progress entries
- _warn_anomaly(): the one-way diagnostics sink for feed anomalies

Anomalies (a negative balance, a delegate that should already exist) never
change control flow. They are written at warning level and the handler
carries on with the values as reported.

Usage:
    class TransferProjectionService(LoggingMixin):
        def __init__(self, factory: EntityFactoryService) -> None:
            self._factory = factory
            self._init_logger()

        def handle_transfer(self, event: Transfer) -> None:
            ...
            self._warn_anomaly(
                "handle_transfer", "negative_token_balance", holder_id=holder.id
            )
"""

import structlog

from src.infrastructure.observability.correlation import get_correlation_id


class LoggingMixin:
    """Structured logging for projection services.

    The service logger carries ``service`` (the class name) and
    ``component``. Loggers handed out per operation add ``operation`` and
    the ``correlation_id`` of the chain log currently being projected.
    """

    _log: structlog.BoundLogger

    def _init_logger(self, component: str = "projection") -> None:
        """Bind the service logger. Call at the end of __init__."""
        self._log = structlog.get_logger().bind(
            service=self.__class__.__name__,
            component=component,
        )

    def _log_operation(
        self,
        operation: str,
        **context: object,
    ) -> structlog.BoundLogger:
        """Logger bound to one operation on the current chain log.

        Args:
            operation: Handler or method name.
            **context: Extra fields to bind.
        """
        return self._log.bind(
            operation=operation,
            correlation_id=get_correlation_id(),
            **context,
        )

    def _warn_anomaly(self, operation: str, anomaly: str, **context: object) -> None:
        """Report a feed anomaly. Never raises and never alters the projection.

        Args:
            operation: Handler or method that detected it.
            anomaly: Event name, e.g. "negative_token_balance".
            **context: Identifying fields (entity ids, tx hash, values).
        """
        self._log_operation(operation).warning(anomaly, **context)
