"""Unit tests for delegation projection."""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal

from structlog.testing import capture_logs

from src.application.services.governance_projector import GovernanceProjector
from src.domain.events import ZERO_ADDRESS
from src.domain.models import Delegate, TokenHolder
from src.infrastructure.stubs import InMemoryEntityStore
from tests.helpers.chain_events import (
    ALICE,
    BOB,
    CAROL,
    DAVE,
    delegate_changed,
    delegate_votes_changed,
)


def _delegate(store: InMemoryEntityStore, address: str) -> Delegate:
    delegate = store.get("Delegate", address)
    assert isinstance(delegate, Delegate)
    return delegate


class TestDelegateChanged:
    """Tests for DelegateChanged."""

    def test_first_delegation(
        self, projector: GovernanceProjector, store: InMemoryEntityStore
    ) -> None:
        projector.project(delegate_changed(delegator=ALICE, to_delegate=BOB))

        holder = store.get("TokenHolder", ALICE)
        assert isinstance(holder, TokenHolder)
        assert holder.delegate == BOB
        assert _delegate(store, BOB).token_holders_represented_amount == 1
        # The zero address is never floored
        assert _delegate(store, ZERO_ADDRESS).token_holders_represented_amount == -1

    def test_redelegation_moves_representation(
        self, projector: GovernanceProjector, store: InMemoryEntityStore
    ) -> None:
        projector.project(delegate_changed(delegator=ALICE, to_delegate=BOB, block=1))
        projector.project(delegate_changed(delegator=DAVE, to_delegate=BOB, block=2))
        projector.project(
            delegate_changed(delegator=ALICE, from_delegate=BOB, to_delegate=CAROL, block=3)
        )

        assert _delegate(store, BOB).token_holders_represented_amount == 1
        assert _delegate(store, CAROL).token_holders_represented_amount == 1

    def test_unknown_previous_delegate_goes_negative_and_is_logged(
        self, projector: GovernanceProjector, store: InMemoryEntityStore
    ) -> None:
        with capture_logs() as logs:
            projector.project(
                delegate_changed(delegator=ALICE, from_delegate=CAROL, to_delegate=BOB)
            )

        assert _delegate(store, CAROL).token_holders_represented_amount == -1
        missing = [
            entry["delegate_id"]
            for entry in logs
            if entry["event"] == "delegate_not_found"
        ]
        assert missing == [CAROL]

    def test_zero_address_previous_delegate_not_logged(
        self, projector: GovernanceProjector
    ) -> None:
        with capture_logs() as logs:
            projector.project(delegate_changed(delegator=ALICE, to_delegate=BOB))

        assert not [entry for entry in logs if entry["event"] == "delegate_not_found"]

    def test_same_delegate_nets_out(
        self, projector: GovernanceProjector, store: InMemoryEntityStore
    ) -> None:
        projector.project(delegate_changed(delegator=ALICE, to_delegate=BOB, block=1))
        projector.project(
            delegate_changed(delegator=ALICE, from_delegate=BOB, to_delegate=BOB, block=2)
        )

        assert _delegate(store, BOB).token_holders_represented_amount == 1


class TestDelegateVotesChanged:
    """Tests for DelegateVotesChanged."""

    def test_threshold_crossing_up_and_back(
        self, projector: GovernanceProjector, store: InMemoryEntityStore
    ) -> None:
        start = projector.factory.get_governance()

        projector.project(
            delegate_votes_changed(delegate=BOB, previous_balance=0, new_balance=500, block=1)
        )
        governance = projector.factory.get_governance()
        assert governance.current_delegates == start.current_delegates + 1
        assert governance.delegated_votes_raw == start.delegated_votes_raw + 500
        assert _delegate(store, BOB).delegated_votes_raw == 500

        projector.project(
            delegate_votes_changed(delegate=BOB, previous_balance=500, new_balance=0, block=2)
        )
        governance = projector.factory.get_governance()
        assert governance.current_delegates == start.current_delegates
        assert governance.delegated_votes_raw == start.delegated_votes_raw
        assert _delegate(store, BOB).delegated_votes_raw == 0

    def test_votes_returning_to_zero_serialize_like_a_fresh_record(
        self, projector: GovernanceProjector, store: InMemoryEntityStore
    ) -> None:
        start = projector.factory.get_governance()

        projector.project(
            delegate_votes_changed(delegate=BOB, previous_balance=0, new_balance=500, block=1)
        )
        projector.project(
            delegate_votes_changed(delegate=BOB, previous_balance=500, new_balance=0, block=2)
        )

        assert _delegate(store, BOB).to_dict() == Delegate(id=BOB).to_dict()
        expected = replace(start, total_delegates=start.total_delegates + 1)
        assert projector.factory.get_governance().to_dict() == expected.to_dict()

    def test_positive_to_positive_only_moves_votes(
        self, projector: GovernanceProjector
    ) -> None:
        projector.project(
            delegate_votes_changed(delegate=BOB, previous_balance=0, new_balance=500, block=1)
        )
        projector.project(
            delegate_votes_changed(delegate=BOB, previous_balance=500, new_balance=800, block=2)
        )

        governance = projector.factory.get_governance()
        assert governance.current_delegates == 1
        assert governance.delegated_votes_raw == 800

    def test_zero_to_zero_does_not_decrement(
        self, projector: GovernanceProjector
    ) -> None:
        projector.project(
            delegate_votes_changed(delegate=BOB, previous_balance=0, new_balance=0)
        )

        assert projector.factory.get_governance().current_delegates == 0

    def test_scaled_mirrors(
        self, projector: GovernanceProjector, store: InMemoryEntityStore
    ) -> None:
        projector.project(
            delegate_votes_changed(delegate=BOB, previous_balance=0, new_balance=15 * 10**17)
        )

        assert _delegate(store, BOB).delegated_votes == Decimal("1.5")
        assert projector.factory.get_governance().delegated_votes == Decimal("1.5")

    def test_respects_configured_decimals(self, store: InMemoryEntityStore) -> None:
        projector = GovernanceProjector(store=store, decimals=6)

        projector.project(
            delegate_votes_changed(delegate=BOB, previous_balance=0, new_balance=2_500_000)
        )

        assert _delegate(store, BOB).delegated_votes == Decimal("2.5")
