"""Vote domain model."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, ClassVar

from src.domain.services.decimals import BIGDECIMAL_ZERO, format_decimal


def vote_id_for(voter: str, proposal_id: str) -> str:
    """Build the Vote id for a voter and proposal: ``<voter>-<proposalId>``."""
    return f"{voter}-{proposal_id}"


@dataclass(frozen=True, eq=True)
class Vote:
    """A delegate's vote on one proposal.

    Attributes:
        id: ``<voter>-<proposalId>``.
        proposal: Proposal id.
        voter: Delegate id of the voter.
        votes_raw: Voting weight in the smallest unit.
        votes: Scaled mirror of votes_raw.
        support: True for a vote in favour.
    """

    ENTITY_TYPE: ClassVar[str] = "Vote"

    id: str
    proposal: str | None = None
    voter: str | None = None
    votes_raw: int = 0
    votes: Decimal = BIGDECIMAL_ZERO
    support: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "proposal": self.proposal,
            "voter": self.voter,
            "votes_raw": str(self.votes_raw),
            "votes": format_decimal(self.votes),
            "support": self.support,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Vote:
        return cls(
            id=data["id"],
            proposal=data.get("proposal"),
            voter=data.get("voter"),
            votes_raw=int(data["votes_raw"]),
            votes=Decimal(data["votes"]),
            support=bool(data["support"]),
        )
