"""Governance projector - routes chain events to their handlers.

The projector is the single entry point the ingestion side calls. It
projects one event at a time, strictly in delivery order, and each handler
runs to completion before the next event is admitted.

Failure Rules:
- A handler exception aborts the current event and is re-raised
- No retry at this layer; redelivery belongs to the ingestion side
- Out-of-order delivery is logged, never corrected
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from src.application.ports.entity_store import EntityStoreProtocol
from src.application.ports.projection_metrics import ProjectionMetricsProtocol
from src.application.services.base import LoggingMixin
from src.application.services.delegation_projection_service import (
    DelegationProjectionService,
)
from src.application.services.entity_factory_service import EntityFactoryService
from src.application.services.proposal_projection_service import (
    ProposalProjectionService,
)
from src.application.services.transfer_projection_service import (
    TransferProjectionService,
)
from src.domain.errors.projection import UnsupportedEventError
from src.domain.events import (
    ChainEvent,
    DelegateChanged,
    DelegateVotesChanged,
    ProposalCanceled,
    ProposalCreated,
    ProposalExecuted,
    ProposalQueued,
    Transfer,
    VoteCast,
)
from src.domain.services.decimals import DEFAULT_DECIMALS
from src.infrastructure.observability.correlation import correlation_scope


class GovernanceProjector(LoggingMixin):
    """Projects governor and token events into the entity store.

    Example:
        projector = GovernanceProjector(store=InMemoryEntityStore())
        projector.replay(JsonlEventSource(path))
    """

    def __init__(
        self,
        store: EntityStoreProtocol,
        decimals: int = DEFAULT_DECIMALS,
        metrics: ProjectionMetricsProtocol | None = None,
    ) -> None:
        """Initialize the projector and its handler services.

        Args:
            store: Entity store holding the projection.
            decimals: Token decimal precision used for every scaled amount.
            metrics: Optional progress metrics sink.
        """
        self._factory = EntityFactoryService(store)
        self._metrics = metrics
        self._last_position: tuple[int, int] | None = None
        self._init_logger()

        proposals = ProposalProjectionService(self._factory, decimals)
        delegation = DelegationProjectionService(self._factory, decimals)
        transfers = TransferProjectionService(self._factory, decimals)

        self._handlers: dict[type[Any], Callable[[Any], None]] = {
            ProposalCreated: proposals.handle_proposal_created,
            ProposalCanceled: proposals.handle_proposal_canceled,
            ProposalQueued: proposals.handle_proposal_queued,
            ProposalExecuted: proposals.handle_proposal_executed,
            VoteCast: proposals.handle_vote_cast,
            DelegateChanged: delegation.handle_delegate_changed,
            DelegateVotesChanged: delegation.handle_delegate_votes_changed,
            Transfer: transfers.handle_transfer,
        }

    @property
    def factory(self) -> EntityFactoryService:
        return self._factory

    def project(self, event: ChainEvent) -> None:
        """Apply a single event to the projection.

        Args:
            event: A decoded chain event.

        Raises:
            UnsupportedEventError: If no handler exists for the event type.
            EntityStoreError: If the store fails; the event is aborted.
        """
        handler = self._handlers.get(type(event))
        if handler is None:
            raise UnsupportedEventError(type(event).__name__)

        event_type = event.EVENT_TYPE
        metadata = event.metadata

        with correlation_scope(metadata.correlation_id):
            log = self._log_operation(
                "project",
                event_type=event_type,
                block_number=metadata.block_number,
            )

            position = (metadata.block_number, metadata.log_index)
            if self._last_position is not None and position < self._last_position:
                log.warning(
                    "out_of_order_event",
                    previous_block=self._last_position[0],
                    previous_log_index=self._last_position[1],
                )

            try:
                handler(event)
            except Exception:
                log.exception("event_projection_failed")
                if self._metrics is not None:
                    self._metrics.record_failure(event_type)
                raise

            self._last_position = position
            if self._metrics is not None:
                self._metrics.record_projected(event_type, metadata.block_number)
            log.debug("event_projected")

    def replay(self, events: Iterable[ChainEvent]) -> int:
        """Project events in order until the iterable is exhausted.

        Args:
            events: Events in chain order.

        Returns:
            Number of events projected.
        """
        count = 0
        for event in events:
            self.project(event)
            count += 1

        self._log_operation("replay").info("replay_completed", events=count)
        return count
