"""Delegation projection service - token delegation events.

Projects DelegateChanged and DelegateVotesChanged onto TokenHolder,
Delegate and the Governance vote totals.

Counter Rules:
- token_holders_represented_amount is plain +1/-1 arithmetic, never floored
- current_delegates moves only when a delegate's balance crosses zero
- delegated_votes_raw accumulates new_balance - previous_balance
"""

from __future__ import annotations

from dataclasses import replace

from src.application.services.base import LoggingMixin
from src.application.services.entity_factory_service import EntityFactoryService
from src.domain.events.chain_event import ZERO_ADDRESS
from src.domain.events.token import DelegateChanged, DelegateVotesChanged
from src.domain.services.decimals import DEFAULT_DECIMALS
from src.domain.services.zero_crossing import zero_crossing_delta


class DelegationProjectionService(LoggingMixin):
    """Applies delegation events to the projection."""

    def __init__(
        self,
        factory: EntityFactoryService,
        decimals: int = DEFAULT_DECIMALS,
    ) -> None:
        self._factory = factory
        self._decimals = decimals
        self._init_logger()

    def handle_delegate_changed(self, event: DelegateChanged) -> None:
        """Move a holder's delegation from one delegate to another.

        The previous delegate is expected to be known unless it is the zero
        address, which every first delegation moves away from.

        Args:
            event: The decoded DelegateChanged log.
        """
        holder = self._factory.get_or_create_token_holder(event.delegator)
        previous = self._factory.get_or_create_delegate(
            event.from_delegate,
            assume_exists=event.from_delegate != ZERO_ADDRESS,
            tx_hash=event.metadata.transaction_hash,
        )
        new = self._factory.get_or_create_delegate(event.to_delegate)

        self._factory.save(replace(holder, delegate=new.id))

        if previous.id == new.id:
            # Re-delegation to the same address nets out
            return

        self._factory.save(previous.with_represented_delta(-1))
        self._factory.save(new.with_represented_delta(1))

    def handle_delegate_votes_changed(self, event: DelegateVotesChanged) -> None:
        """Set a delegate's voting power and roll the change into Governance.

        Args:
            event: The decoded DelegateVotesChanged log.
        """
        delegate = self._factory.get_or_create_delegate(event.delegate)
        self._factory.save(
            delegate.with_delegated_votes(event.new_balance, self._decimals)
        )

        governance = self._factory.get_governance()
        governance = governance.with_delegated_votes_delta(
            event.new_balance - event.previous_balance, self._decimals
        )
        crossing = zero_crossing_delta(event.previous_balance, event.new_balance)
        if crossing:
            governance = replace(
                governance,
                current_delegates=governance.current_delegates + crossing,
            )
            self._log_operation(
                "handle_delegate_votes_changed", delegate_id=delegate.id
            ).debug("delegate_threshold_crossed", delta=crossing)
        self._factory.save(governance)
