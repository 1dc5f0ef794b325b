"""Governance token contract event payloads.

This module defines the decoded events emitted by the governance token:
- DelegateChanged: A holder moved its delegation
- DelegateVotesChanged: A delegate's voting power changed
- Transfer: Tokens moved between addresses (from == ZERO_ADDRESS on mint)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from src.domain.events.chain_event import ChainEventMetadata

DELEGATE_CHANGED_EVENT_TYPE: str = "DelegateChanged"
DELEGATE_VOTES_CHANGED_EVENT_TYPE: str = "DelegateVotesChanged"
TRANSFER_EVENT_TYPE: str = "Transfer"


@dataclass(frozen=True, eq=True)
class DelegateChanged:
    """Payload for DelegateChanged.

    Attributes:
        delegator: Holder address changing its delegation.
        from_delegate: Previous delegate (ZERO_ADDRESS on first delegation).
        to_delegate: New delegate.
        metadata: Emission position.
    """

    EVENT_TYPE = DELEGATE_CHANGED_EVENT_TYPE

    delegator: str
    from_delegate: str
    to_delegate: str
    metadata: ChainEventMetadata

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.EVENT_TYPE,
            **self.metadata.to_dict(),
            "delegator": self.delegator,
            "from_delegate": self.from_delegate,
            "to_delegate": self.to_delegate,
        }


@dataclass(frozen=True, eq=True)
class DelegateVotesChanged:
    """Payload for DelegateVotesChanged.

    Attributes:
        delegate: Delegate address.
        previous_balance: Voting power before the change.
        new_balance: Voting power after the change.
        metadata: Emission position.
    """

    EVENT_TYPE = DELEGATE_VOTES_CHANGED_EVENT_TYPE

    delegate: str
    previous_balance: int
    new_balance: int
    metadata: ChainEventMetadata

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.EVENT_TYPE,
            **self.metadata.to_dict(),
            "delegate": self.delegate,
            "previous_balance": str(self.previous_balance),
            "new_balance": str(self.new_balance),
        }


@dataclass(frozen=True, eq=True)
class Transfer:
    """Payload for Transfer.

    Attributes:
        from_address: Sender (ZERO_ADDRESS for mints).
        to_address: Receiver.
        value: Amount in the smallest unit.
        metadata: Emission position.
    """

    EVENT_TYPE = TRANSFER_EVENT_TYPE

    from_address: str
    to_address: str
    value: int
    metadata: ChainEventMetadata

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.EVENT_TYPE,
            **self.metadata.to_dict(),
            "from_address": self.from_address,
            "to_address": self.to_address,
            "value": str(self.value),
        }
