"""
Domain events for the governance projection.

Decoded contract log events, delivered one at a time in chain order.
All events are immutable and carry their emission position.
"""

from src.domain.events.chain_event import ZERO_ADDRESS, ChainEventMetadata
from src.domain.events.governor import (
    ProposalCanceled,
    ProposalCreated,
    ProposalExecuted,
    ProposalQueued,
    VoteCast,
)
from src.domain.events.token import DelegateChanged, DelegateVotesChanged, Transfer

ChainEvent = (
    ProposalCreated
    | ProposalCanceled
    | ProposalQueued
    | ProposalExecuted
    | VoteCast
    | DelegateChanged
    | DelegateVotesChanged
    | Transfer
)

__all__: list[str] = [
    "ChainEvent",
    "ChainEventMetadata",
    "DelegateChanged",
    "DelegateVotesChanged",
    "ProposalCanceled",
    "ProposalCreated",
    "ProposalExecuted",
    "ProposalQueued",
    "Transfer",
    "VoteCast",
    "ZERO_ADDRESS",
]
