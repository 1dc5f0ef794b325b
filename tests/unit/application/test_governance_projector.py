"""Unit tests for GovernanceProjector."""

from __future__ import annotations

from dataclasses import dataclass

import pytest
from structlog.testing import capture_logs

from src.application.ports.projection_metrics import ProjectionMetricsProtocol
from src.application.services.governance_projector import GovernanceProjector
from src.domain.errors import EntityStoreConnectionError, UnsupportedEventError
from src.domain.events import ChainEventMetadata
from src.domain.models import TokenHolder
from src.infrastructure.monitoring import ProjectionMetrics
from src.infrastructure.observability import get_correlation_id
from src.infrastructure.stubs import InMemoryEntityStore, StoreFailureMode
from tests.helpers.chain_events import (
    ALICE,
    BOB,
    delegate_votes_changed,
    meta,
    proposal_created,
    transfer,
)


@dataclass(frozen=True)
class _UnknownEvent:
    EVENT_TYPE = "Approval"

    metadata: ChainEventMetadata


def _sample(
    metrics: ProjectionMetrics, name: str, labels: dict[str, str] | None = None
) -> float | None:
    return metrics.registry.get_sample_value(name, labels or {})


class TestDispatch:
    """Tests for event routing."""

    def test_routes_each_event_type(
        self, projector: GovernanceProjector, store: InMemoryEntityStore
    ) -> None:
        projector.project(transfer(to_address=ALICE, value=10))
        projector.project(proposal_created(proposal_id=4, log_index=1))

        assert isinstance(store.get("TokenHolder", ALICE), TokenHolder)
        assert store.get("Proposal", "4") is not None

    def test_unsupported_event_raises(self, projector: GovernanceProjector) -> None:
        with pytest.raises(UnsupportedEventError) as exc_info:
            projector.project(_UnknownEvent(metadata=meta()))  # type: ignore[arg-type]

        assert exc_info.value.event_type == "_UnknownEvent"

    def test_replay_returns_count(self, projector: GovernanceProjector) -> None:
        events = [
            transfer(to_address=ALICE, value=10, block=1),
            transfer(from_address=ALICE, to_address=BOB, value=5, block=2),
            delegate_votes_changed(delegate=BOB, new_balance=5, block=3),
        ]

        assert projector.replay(events) == 3
        assert projector.replay([]) == 0


class TestCorrelation:
    """Each event is projected under its own correlation id."""

    def test_logs_carry_event_correlation_id(self, projector: GovernanceProjector) -> None:
        event = transfer(from_address=ALICE, to_address=BOB, value=1)

        with capture_logs() as logs:
            projector.project(event)

        warning = next(entry for entry in logs if entry["event"] == "negative_token_balance")
        assert warning["correlation_id"] == event.metadata.correlation_id

    def test_scope_is_restored_after_event(self, projector: GovernanceProjector) -> None:
        projector.project(transfer(to_address=ALICE, value=1))

        assert get_correlation_id() == ""


class TestFailureHandling:
    """Store failures abort the event and propagate."""

    def test_store_failure_is_logged_and_reraised(
        self,
        projector: GovernanceProjector,
        store: InMemoryEntityStore,
        metrics: ProjectionMetrics,
    ) -> None:
        store.set_failure_mode(StoreFailureMode(put_fails=True))

        with capture_logs() as logs, pytest.raises(EntityStoreConnectionError):
            projector.project(transfer(to_address=ALICE, value=10))

        failures = [entry for entry in logs if entry["event"] == "event_projection_failed"]
        assert len(failures) == 1
        assert failures[0]["log_level"] == "error"
        assert failures[0]["event_type"] == "Transfer"
        assert _sample(
            metrics,
            "governance_event_projection_failures_total",
            {"event_type": "Transfer"},
        ) == 1.0

    def test_failed_write_leaves_entity_unchanged(
        self, projector: GovernanceProjector, store: InMemoryEntityStore
    ) -> None:
        """A rejected put never stores a half-updated entity."""
        projector.project(transfer(to_address=ALICE, value=10, block=1))
        store.set_failure_mode(StoreFailureMode(put_fails_for="TokenHolder"))

        with pytest.raises(EntityStoreConnectionError):
            projector.project(transfer(from_address=ALICE, to_address=BOB, value=4, block=2))

        alice = store.get("TokenHolder", ALICE)
        assert isinstance(alice, TokenHolder)
        assert alice.token_balance_raw == 10

    def test_projection_continues_after_failure_is_cleared(
        self, projector: GovernanceProjector, store: InMemoryEntityStore
    ) -> None:
        store.set_failure_mode(StoreFailureMode(get_fails=True))
        with pytest.raises(EntityStoreConnectionError):
            projector.project(transfer(to_address=ALICE, value=10, block=1))

        store.clear_failure_mode()
        projector.project(transfer(to_address=ALICE, value=10, block=1))

        assert projector.factory.get_governance().current_token_holders == 1


class TestOrdering:
    """Delivery order is assumed; regressions are only logged."""

    def test_out_of_order_event_logged_and_applied(
        self, projector: GovernanceProjector, store: InMemoryEntityStore
    ) -> None:
        projector.project(transfer(to_address=ALICE, value=10, block=5, log_index=2))

        with capture_logs() as logs:
            projector.project(transfer(to_address=BOB, value=10, block=5, log_index=1))

        warnings = [entry for entry in logs if entry["event"] == "out_of_order_event"]
        assert len(warnings) == 1
        assert warnings[0]["previous_block"] == 5
        assert warnings[0]["previous_log_index"] == 2
        assert store.get("TokenHolder", BOB) is not None

    def test_in_order_events_not_logged(self, projector: GovernanceProjector) -> None:
        with capture_logs() as logs:
            projector.project(transfer(to_address=ALICE, value=1, block=1, log_index=0))
            projector.project(transfer(to_address=ALICE, value=1, block=1, log_index=1))
            projector.project(transfer(to_address=ALICE, value=1, block=2, log_index=0))

        assert not [entry for entry in logs if entry["event"] == "out_of_order_event"]


class TestMetrics:
    """Progress metrics are reported per event."""

    def test_projected_counter_and_block_gauge(
        self, projector: GovernanceProjector, metrics: ProjectionMetrics
    ) -> None:
        projector.project(transfer(to_address=ALICE, value=1, block=7))
        projector.project(transfer(to_address=ALICE, value=1, block=9))
        projector.project(proposal_created(block=9, log_index=1))

        assert _sample(
            metrics, "governance_events_projected_total", {"event_type": "Transfer"}
        ) == 2.0
        assert _sample(
            metrics, "governance_events_projected_total", {"event_type": "ProposalCreated"}
        ) == 1.0
        assert _sample(metrics, "governance_last_projected_block") == 9.0

    def test_metrics_are_optional(self, store: InMemoryEntityStore) -> None:
        projector = GovernanceProjector(store=store)

        projector.project(transfer(to_address=ALICE, value=1))

    def test_prometheus_metrics_satisfy_port(self, metrics: ProjectionMetrics) -> None:
        assert isinstance(metrics, ProjectionMetricsProtocol)
