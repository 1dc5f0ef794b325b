"""Proposal domain model.

This module defines the Proposal record and its lifecycle status.

Lifecycle:
    (absent) -> PENDING | ACTIVE    on ProposalCreated
    PENDING  -> ACTIVE              on the first VoteCast
    any      -> QUEUED              on ProposalQueued
    any      -> EXECUTED            on ProposalExecuted
    any      -> CANCELLED           on ProposalCanceled

Transitions are applied as the governor emits them. No predecessor status
is checked; the governor contract has already enforced legality.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, ClassVar


class ProposalStatus(StrEnum):
    """Status of a governor proposal."""

    PENDING = "PENDING"
    ACTIVE = "ACTIVE"
    QUEUED = "QUEUED"
    EXECUTED = "EXECUTED"
    CANCELLED = "CANCELLED"


@dataclass(frozen=True, eq=True)
class Proposal:
    """A governor proposal.

    A Proposal may be created by any event that references its id. Only
    ProposalCreated fills the static fields; until then they keep their
    defaults and status stays None unless a later transition sets it.

    Attributes:
        id: Decimal string of the on-chain proposal id.
        proposer: Delegate id of the proposer.
        targets: Call target addresses, in order.
        values: Call values in wei, in order.
        signatures: Call function signatures, in order.
        calldatas: Call payloads, in order.
        start_block: First block of the voting period.
        end_block: Last block of the voting period.
        description: Proposal description text.
        status: Current lifecycle status.
        execution_eta: Timelock ETA while queued; None otherwise.
    """

    ENTITY_TYPE: ClassVar[str] = "Proposal"

    id: str
    proposer: str | None = None
    targets: tuple[str, ...] = field(default_factory=tuple)
    values: tuple[int, ...] = field(default_factory=tuple)
    signatures: tuple[str, ...] = field(default_factory=tuple)
    calldatas: tuple[bytes, ...] = field(default_factory=tuple)
    start_block: int | None = None
    end_block: int | None = None
    description: str = ""
    status: ProposalStatus | None = None
    execution_eta: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "proposer": self.proposer,
            "targets": list(self.targets),
            "values": [str(value) for value in self.values],
            "signatures": list(self.signatures),
            "calldatas": ["0x" + calldata.hex() for calldata in self.calldatas],
            "start_block": self.start_block,
            "end_block": self.end_block,
            "description": self.description,
            "status": self.status.value if self.status is not None else None,
            "execution_eta": str(self.execution_eta) if self.execution_eta is not None else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Proposal:
        status = data.get("status")
        eta = data.get("execution_eta")
        return cls(
            id=data["id"],
            proposer=data.get("proposer"),
            targets=tuple(data.get("targets", ())),
            values=tuple(int(value) for value in data.get("values", ())),
            signatures=tuple(data.get("signatures", ())),
            calldatas=tuple(
                bytes.fromhex(calldata.removeprefix("0x"))
                for calldata in data.get("calldatas", ())
            ),
            start_block=data.get("start_block"),
            end_block=data.get("end_block"),
            description=data.get("description", ""),
            status=ProposalStatus(status) if status is not None else None,
            execution_eta=int(eta) if eta is not None else None,
        )
