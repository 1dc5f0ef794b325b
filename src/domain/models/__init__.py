"""Domain models for the governance projection.

Contains the projected entities. These models are immutable and contain
no infrastructure dependencies; updates produce new instances.
"""

from typing import Any

from src.domain.models.delegate import Delegate
from src.domain.models.governance import GOVERNANCE_ID, Governance
from src.domain.models.proposal import Proposal, ProposalStatus
from src.domain.models.token_holder import TokenHolder
from src.domain.models.vote import Vote, vote_id_for

Entity = Governance | TokenHolder | Delegate | Proposal | Vote

# Entity type name -> model class, for stores that persist serialized payloads
ENTITY_TYPES: dict[str, type[Any]] = {
    model.ENTITY_TYPE: model
    for model in (Governance, TokenHolder, Delegate, Proposal, Vote)
}

__all__: list[str] = [
    "Delegate",
    "ENTITY_TYPES",
    "Entity",
    "GOVERNANCE_ID",
    "Governance",
    "Proposal",
    "ProposalStatus",
    "TokenHolder",
    "Vote",
    "vote_id_for",
]
