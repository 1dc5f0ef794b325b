"""Delegate domain model.

A Delegate is an address that receives voting power from token holders.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Any, ClassVar

from src.domain.services.decimals import (
    BIGDECIMAL_ZERO,
    DEFAULT_DECIMALS,
    format_decimal,
    to_decimal,
)


@dataclass(frozen=True, eq=True)
class Delegate:
    """Voting power record for one address.

    token_holders_represented_amount is plain arithmetic over
    DelegateChanged events and may go negative, e.g. for the zero address
    that every first-time delegation moves away from. It is never floored.

    Attributes:
        id: Delegate address (lowercase hex).
        token_holders_represented_amount: Net holders delegating here.
        delegated_votes_raw: Voting power in the smallest unit.
        delegated_votes: Scaled mirror of delegated_votes_raw.
    """

    ENTITY_TYPE: ClassVar[str] = "Delegate"

    id: str
    token_holders_represented_amount: int = 0
    delegated_votes_raw: int = 0
    delegated_votes: Decimal = BIGDECIMAL_ZERO

    def with_represented_delta(self, delta: int) -> Delegate:
        return replace(
            self,
            token_holders_represented_amount=self.token_holders_represented_amount + delta,
        )

    def with_delegated_votes(self, raw: int, decimals: int = DEFAULT_DECIMALS) -> Delegate:
        return replace(
            self,
            delegated_votes_raw=raw,
            delegated_votes=to_decimal(raw, decimals),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "token_holders_represented_amount": self.token_holders_represented_amount,
            "delegated_votes_raw": str(self.delegated_votes_raw),
            "delegated_votes": format_decimal(self.delegated_votes),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Delegate:
        return cls(
            id=data["id"],
            token_holders_represented_amount=int(data["token_holders_represented_amount"]),
            delegated_votes_raw=int(data["delegated_votes_raw"]),
            delegated_votes=Decimal(data["delegated_votes"]),
        )
