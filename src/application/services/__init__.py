"""Application services for the governance projection."""

from src.application.services.delegation_projection_service import (
    DelegationProjectionService,
)
from src.application.services.entity_factory_service import EntityFactoryService
from src.application.services.governance_projector import GovernanceProjector
from src.application.services.proposal_projection_service import (
    ProposalProjectionService,
)
from src.application.services.transfer_projection_service import (
    TransferProjectionService,
)

__all__ = [
    "DelegationProjectionService",
    "EntityFactoryService",
    "GovernanceProjector",
    "ProposalProjectionService",
    "TransferProjectionService",
]
