"""TokenHolder domain model.

A TokenHolder is an address's custody record for the governance token,
independent of whether the address is also a delegate.
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
class TokenHolder:
    """Token custody record for one address.

    Attributes:
        id: Holder address (lowercase hex).
        token_balance_raw: Current balance in the smallest unit. Kept as
            reported even when negative.
        token_balance: Scaled mirror of token_balance_raw.
        total_tokens_held_raw: Lifetime inflow; never decreases.
        total_tokens_held: Scaled mirror of total_tokens_held_raw.
        delegate: Id of the Delegate this holder currently delegates to.
    """

    ENTITY_TYPE: ClassVar[str] = "TokenHolder"

    id: str
    token_balance_raw: int = 0
    token_balance: Decimal = BIGDECIMAL_ZERO
    total_tokens_held_raw: int = 0
    total_tokens_held: Decimal = BIGDECIMAL_ZERO
    delegate: str | None = None

    def debited(self, value: int, decimals: int = DEFAULT_DECIMALS) -> TokenHolder:
        """Return a copy with value moved out of the balance."""
        raw = self.token_balance_raw - value
        return replace(self, token_balance_raw=raw, token_balance=to_decimal(raw, decimals))

    def credited(self, value: int, decimals: int = DEFAULT_DECIMALS) -> TokenHolder:
        """Return a copy with value added to the balance and lifetime inflow."""
        raw = self.token_balance_raw + value
        total = self.total_tokens_held_raw + value
        return replace(
            self,
            token_balance_raw=raw,
            token_balance=to_decimal(raw, decimals),
            total_tokens_held_raw=total,
            total_tokens_held=to_decimal(total, decimals),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "token_balance_raw": str(self.token_balance_raw),
            "token_balance": format_decimal(self.token_balance),
            "total_tokens_held_raw": str(self.total_tokens_held_raw),
            "total_tokens_held": format_decimal(self.total_tokens_held),
            "delegate": self.delegate,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TokenHolder:
        return cls(
            id=data["id"],
            token_balance_raw=int(data["token_balance_raw"]),
            token_balance=Decimal(data["token_balance"]),
            total_tokens_held_raw=int(data["total_tokens_held_raw"]),
            total_tokens_held=Decimal(data["total_tokens_held"]),
            delegate=data.get("delegate"),
        )
