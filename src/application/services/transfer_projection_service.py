"""Transfer projection service - token balance movements.

Projects Transfer onto the two TokenHolders involved and the Governance
current_token_holders counter.

Balance Rules:
- Transfers from the zero address are mints: no sender-side accounting
- A negative sender balance is logged and kept as reported
- Each holder-count adjustment is saved as soon as it is computed
"""

from __future__ import annotations

from dataclasses import replace

from src.application.services.base import LoggingMixin
from src.application.services.entity_factory_service import EntityFactoryService
from src.domain.events.chain_event import ZERO_ADDRESS
from src.domain.events.token import Transfer
from src.domain.models import TokenHolder
from src.domain.services.decimals import DEFAULT_DECIMALS
from src.domain.services.zero_crossing import zero_crossing_delta


class TransferProjectionService(LoggingMixin):
    """Applies token transfers to holder balances."""

    def __init__(
        self,
        factory: EntityFactoryService,
        decimals: int = DEFAULT_DECIMALS,
    ) -> None:
        self._factory = factory
        self._decimals = decimals
        self._init_logger()

    def handle_transfer(self, event: Transfer) -> None:
        """Debit the sender (unless minting) and credit the receiver.

        Both holders are created up front, so Governance lifetime counters
        are settled before the current_token_holders adjustments read it.

        Args:
            event: The decoded Transfer log.
        """
        # Creation bumps Governance counters; must finish before any Governance read
        self._factory.get_or_create_token_holder(event.from_address)
        self._factory.get_or_create_token_holder(event.to_address)

        if event.from_address != ZERO_ADDRESS:
            sender = self._factory.get_or_create_token_holder(event.from_address)
            debited = sender.debited(event.value, self._decimals)
            if debited.token_balance_raw < 0:
                self._warn_anomaly(
                    "handle_transfer",
                    "negative_token_balance",
                    block_number=event.metadata.block_number,
                    holder_id=debited.id,
                    balance=str(debited.token_balance_raw),
                    tx_hash=event.metadata.transaction_hash,
                )
            self._adjust_holder_count(sender, debited)
            self._factory.save(debited)

        # Reloaded so a self-transfer credits the already-debited record
        receiver = self._factory.get_or_create_token_holder(event.to_address)
        credited = receiver.credited(event.value, self._decimals)
        self._adjust_holder_count(receiver, credited)
        self._factory.save(credited)

    def _adjust_holder_count(self, before: TokenHolder, after: TokenHolder) -> None:
        crossing = zero_crossing_delta(before.token_balance_raw, after.token_balance_raw)
        if not crossing:
            return
        governance = self._factory.get_governance()
        self._factory.save(
            replace(
                governance,
                current_token_holders=governance.current_token_holders + crossing,
            )
        )
