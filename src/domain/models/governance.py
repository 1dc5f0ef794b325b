"""Governance summary domain model.

This module defines the singleton Governance record that carries the
governance-wide running totals maintained by the projection handlers.

Counter Rules:
- current_token_holders / current_delegates move only on zero-crossings
- proposals_queued moves on ProposalQueued (+1) and ProposalExecuted (-1)
- delegated_votes is always the scaled mirror of delegated_votes_raw
- Counters are never clamped; a negative value means the feed is incomplete
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

# Well-known id of the singleton record
GOVERNANCE_ID: str = "GOVERNANCE"


@dataclass(frozen=True, eq=True)
class Governance:
    """Governance-wide aggregate counters.

    There is exactly one Governance record, fetched by GOVERNANCE_ID at the
    start of every handler that updates it and saved explicitly afterwards.

    Attributes:
        id: Always GOVERNANCE_ID.
        proposals_queued: Proposals currently queued for execution.
        current_token_holders: Holders with a strictly positive balance.
        current_delegates: Delegates with strictly positive voting power.
        delegated_votes_raw: Sum of all delegate balance deltas (unscaled).
        delegated_votes: Scaled mirror of delegated_votes_raw.
        total_token_holders: TokenHolders ever created (zero address excluded).
        total_delegates: Delegates ever created (zero address excluded).
        proposals: Proposals ever created.
    """

    ENTITY_TYPE: ClassVar[str] = "Governance"

    id: str = GOVERNANCE_ID
    proposals_queued: int = 0
    current_token_holders: int = 0
    current_delegates: int = 0
    delegated_votes_raw: int = 0
    delegated_votes: Decimal = BIGDECIMAL_ZERO
    total_token_holders: int = 0
    total_delegates: int = 0
    proposals: int = 0

    def with_delegated_votes_delta(
        self, delta: int, decimals: int = DEFAULT_DECIMALS
    ) -> Governance:
        """Return a copy with delta added to the delegated votes total."""
        raw = self.delegated_votes_raw + delta
        return replace(
            self,
            delegated_votes_raw=raw,
            delegated_votes=to_decimal(raw, decimals),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-safe dict for storage and snapshots."""
        return {
            "id": self.id,
            "proposals_queued": self.proposals_queued,
            "current_token_holders": self.current_token_holders,
            "current_delegates": self.current_delegates,
            "delegated_votes_raw": str(self.delegated_votes_raw),
            "delegated_votes": format_decimal(self.delegated_votes),
            "total_token_holders": self.total_token_holders,
            "total_delegates": self.total_delegates,
            "proposals": self.proposals,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Governance:
        """Rebuild a Governance record from to_dict() output."""
        return cls(
            id=data["id"],
            proposals_queued=int(data["proposals_queued"]),
            current_token_holders=int(data["current_token_holders"]),
            current_delegates=int(data["current_delegates"]),
            delegated_votes_raw=int(data["delegated_votes_raw"]),
            delegated_votes=Decimal(data["delegated_votes"]),
            total_token_holders=int(data["total_token_holders"]),
            total_delegates=int(data["total_delegates"]),
            proposals=int(data["proposals"]),
        )
