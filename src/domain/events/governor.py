"""Governor contract event payloads.

This module defines the decoded events emitted by the governor contract:
- ProposalCreated: A proposal was submitted
- ProposalCanceled: A proposal was cancelled
- ProposalQueued: A succeeded proposal was queued in the timelock
- ProposalExecuted: A queued proposal was executed
- VoteCast: A delegate voted on a proposal

Proposal ids are uint256 on chain; they are carried as int and
stringified when used as entity ids.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from src.domain.events.chain_event import ChainEventMetadata

PROPOSAL_CREATED_EVENT_TYPE: str = "ProposalCreated"
PROPOSAL_CANCELED_EVENT_TYPE: str = "ProposalCanceled"
PROPOSAL_QUEUED_EVENT_TYPE: str = "ProposalQueued"
PROPOSAL_EXECUTED_EVENT_TYPE: str = "ProposalExecuted"
VOTE_CAST_EVENT_TYPE: str = "VoteCast"


@dataclass(frozen=True, eq=True)
class ProposalCreated:
    """Payload for ProposalCreated.

    Attributes:
        id: On-chain proposal id.
        proposer: Proposer address.
        targets: Call target addresses.
        values: Call values in wei.
        signatures: Call function signatures.
        calldatas: Call payloads.
        start_block: First block of the voting period.
        end_block: Last block of the voting period.
        description: Proposal description text.
        metadata: Emission position.
    """

    EVENT_TYPE = PROPOSAL_CREATED_EVENT_TYPE

    id: int
    proposer: str
    targets: tuple[str, ...]
    values: tuple[int, ...]
    signatures: tuple[str, ...]
    calldatas: tuple[bytes, ...]
    start_block: int
    end_block: int
    description: str
    metadata: ChainEventMetadata

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.EVENT_TYPE,
            **self.metadata.to_dict(),
            "id": str(self.id),
            "proposer": self.proposer,
            "targets": list(self.targets),
            "values": [str(value) for value in self.values],
            "signatures": list(self.signatures),
            "calldatas": ["0x" + calldata.hex() for calldata in self.calldatas],
            "start_block": self.start_block,
            "end_block": self.end_block,
            "description": self.description,
        }


@dataclass(frozen=True, eq=True)
class ProposalCanceled:
    """Payload for ProposalCanceled."""

    EVENT_TYPE = PROPOSAL_CANCELED_EVENT_TYPE

    id: int
    metadata: ChainEventMetadata

    def to_dict(self) -> dict[str, Any]:
        return {"event_type": self.EVENT_TYPE, **self.metadata.to_dict(), "id": str(self.id)}


@dataclass(frozen=True, eq=True)
class ProposalQueued:
    """Payload for ProposalQueued.

    Attributes:
        id: On-chain proposal id.
        eta: Timelock timestamp after which the proposal can execute.
        metadata: Emission position.
    """

    EVENT_TYPE = PROPOSAL_QUEUED_EVENT_TYPE

    id: int
    eta: int
    metadata: ChainEventMetadata

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.EVENT_TYPE,
            **self.metadata.to_dict(),
            "id": str(self.id),
            "eta": str(self.eta),
        }


@dataclass(frozen=True, eq=True)
class ProposalExecuted:
    """Payload for ProposalExecuted."""

    EVENT_TYPE = PROPOSAL_EXECUTED_EVENT_TYPE

    id: int
    metadata: ChainEventMetadata

    def to_dict(self) -> dict[str, Any]:
        return {"event_type": self.EVENT_TYPE, **self.metadata.to_dict(), "id": str(self.id)}


@dataclass(frozen=True, eq=True)
class VoteCast:
    """Payload for VoteCast.

    Attributes:
        voter: Voting delegate address.
        proposal_id: On-chain proposal id.
        support: True for a vote in favour.
        votes: Voting weight in the smallest unit.
        metadata: Emission position.
    """

    EVENT_TYPE = VOTE_CAST_EVENT_TYPE

    voter: str
    proposal_id: int
    support: bool
    votes: int
    metadata: ChainEventMetadata

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.EVENT_TYPE,
            **self.metadata.to_dict(),
            "voter": self.voter,
            "proposal_id": str(self.proposal_id),
            "support": self.support,
            "votes": str(self.votes),
        }
