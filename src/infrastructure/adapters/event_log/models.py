"""Event log record models.

Pydantic models for one line of a JSON-lines event log. The line layout
is the one produced by the domain events' to_dict(): an ``event_type``
discriminator, the flattened emission position, then the event fields.
Large integers may be given as JSON numbers or decimal strings.
"""

from __future__ import annotations

import re
from typing import Annotated, Literal

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    TypeAdapter,
)

from src.domain.events import (
    ChainEvent,
    ChainEventMetadata,
    DelegateChanged,
    DelegateVotesChanged,
    ProposalCanceled,
    ProposalCreated,
    ProposalExecuted,
    ProposalQueued,
    Transfer,
    VoteCast,
)

_ADDRESS_PATTERN = re.compile(r"^0x[0-9a-fA-F]{40}$")


def _normalize_address(value: str) -> str:
    """Validate a hex address and lowercase it."""
    if not _ADDRESS_PATTERN.match(value):
        raise ValueError(f"not a 20-byte hex address: {value!r}")
    return value.lower()


def _decode_hex(value: object) -> bytes:
    """Decode 0x-prefixed hex calldata."""
    if not isinstance(value, str) or not value.startswith("0x"):
        raise ValueError("calldata must be 0x-prefixed hex")
    return bytes.fromhex(value[2:])


Address = Annotated[str, AfterValidator(_normalize_address)]
HexBytes = Annotated[bytes, BeforeValidator(_decode_hex)]
Uint = Annotated[int, Field(ge=0)]


class EventRecord(BaseModel):
    """Fields common to every event log line.

    Attributes:
        block_number: Block the log was emitted in.
        log_index: Position of the log within the block.
        transaction_hash: Emitting transaction, for diagnostics only.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    block_number: Uint
    log_index: Uint = 0
    transaction_hash: str = ""

    def metadata(self) -> ChainEventMetadata:
        return ChainEventMetadata(
            block_number=self.block_number,
            log_index=self.log_index,
            transaction_hash=self.transaction_hash.lower(),
        )


class ProposalCreatedRecord(EventRecord):
    event_type: Literal["ProposalCreated"]
    id: Uint
    proposer: Address
    targets: list[Address] = Field(default_factory=list)
    values: list[Uint] = Field(default_factory=list)
    signatures: list[str] = Field(default_factory=list)
    calldatas: list[HexBytes] = Field(default_factory=list)
    start_block: Uint
    end_block: Uint
    description: str = ""

    def to_event(self) -> ProposalCreated:
        return ProposalCreated(
            id=self.id,
            proposer=self.proposer,
            targets=tuple(self.targets),
            values=tuple(self.values),
            signatures=tuple(self.signatures),
            calldatas=tuple(self.calldatas),
            start_block=self.start_block,
            end_block=self.end_block,
            description=self.description,
            metadata=self.metadata(),
        )


class ProposalCanceledRecord(EventRecord):
    event_type: Literal["ProposalCanceled"]
    id: Uint

    def to_event(self) -> ProposalCanceled:
        return ProposalCanceled(id=self.id, metadata=self.metadata())


class ProposalQueuedRecord(EventRecord):
    event_type: Literal["ProposalQueued"]
    id: Uint
    eta: Uint

    def to_event(self) -> ProposalQueued:
        return ProposalQueued(id=self.id, eta=self.eta, metadata=self.metadata())


class ProposalExecutedRecord(EventRecord):
    event_type: Literal["ProposalExecuted"]
    id: Uint

    def to_event(self) -> ProposalExecuted:
        return ProposalExecuted(id=self.id, metadata=self.metadata())


class VoteCastRecord(EventRecord):
    event_type: Literal["VoteCast"]
    voter: Address
    proposal_id: Uint
    support: bool
    votes: Uint

    def to_event(self) -> VoteCast:
        return VoteCast(
            voter=self.voter,
            proposal_id=self.proposal_id,
            support=self.support,
            votes=self.votes,
            metadata=self.metadata(),
        )


class DelegateChangedRecord(EventRecord):
    event_type: Literal["DelegateChanged"]
    delegator: Address
    from_delegate: Address
    to_delegate: Address

    def to_event(self) -> DelegateChanged:
        return DelegateChanged(
            delegator=self.delegator,
            from_delegate=self.from_delegate,
            to_delegate=self.to_delegate,
            metadata=self.metadata(),
        )


class DelegateVotesChangedRecord(EventRecord):
    event_type: Literal["DelegateVotesChanged"]
    delegate: Address
    previous_balance: Uint
    new_balance: Uint

    def to_event(self) -> DelegateVotesChanged:
        return DelegateVotesChanged(
            delegate=self.delegate,
            previous_balance=self.previous_balance,
            new_balance=self.new_balance,
            metadata=self.metadata(),
        )


class TransferRecord(EventRecord):
    event_type: Literal["Transfer"]
    from_address: Address
    to_address: Address
    value: Uint

    def to_event(self) -> Transfer:
        return Transfer(
            from_address=self.from_address,
            to_address=self.to_address,
            value=self.value,
            metadata=self.metadata(),
        )


AnyEventRecord = Annotated[
    ProposalCreatedRecord
    | ProposalCanceledRecord
    | ProposalQueuedRecord
    | ProposalExecutedRecord
    | VoteCastRecord
    | DelegateChangedRecord
    | DelegateVotesChangedRecord
    | TransferRecord,
    Field(discriminator="event_type"),
]

EVENT_RECORD_ADAPTER: TypeAdapter[AnyEventRecord] = TypeAdapter(AnyEventRecord)


def parse_event_json(line: str) -> ChainEvent:
    """Validate one JSON event line and convert it to a domain event.

    Raises:
        pydantic.ValidationError: If the line is not a valid event record.
    """
    record = EVENT_RECORD_ADAPTER.validate_json(line)
    return record.to_event()
