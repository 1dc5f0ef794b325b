"""Proposal projection service - governor lifecycle events.

Projects ProposalCreated, ProposalCanceled, ProposalQueued,
ProposalExecuted and VoteCast onto Proposal, Vote, Delegate and the
Governance record.

Projection Rules:
- Status transitions are applied unconditionally, in event order
- Each entity is fully derived before its single save
- Governance is read after every factory call in the handler
"""

from __future__ import annotations

from dataclasses import replace

from src.application.services.base import LoggingMixin
from src.application.services.entity_factory_service import EntityFactoryService
from src.domain.events.governor import (
    ProposalCanceled,
    ProposalCreated,
    ProposalExecuted,
    ProposalQueued,
    VoteCast,
)
from src.domain.models import ProposalStatus, vote_id_for
from src.domain.services.decimals import DEFAULT_DECIMALS, to_decimal


class ProposalProjectionService(LoggingMixin):
    """Applies governor events to the projection."""

    def __init__(
        self,
        factory: EntityFactoryService,
        decimals: int = DEFAULT_DECIMALS,
    ) -> None:
        """Initialize the service.

        Args:
            factory: Entity factory bound to the projection's store.
            decimals: Token decimal precision for vote weights.
        """
        self._factory = factory
        self._decimals = decimals
        self._init_logger()

    def handle_proposal_created(self, event: ProposalCreated) -> None:
        """Fill in a new proposal and resolve its proposer.

        Status is ACTIVE when the creation block has already reached the
        voting start block, PENDING otherwise.
        """
        proposal = self._factory.get_or_create_proposal(str(event.id))
        proposer = self._factory.get_or_create_delegate(event.proposer)

        status = (
            ProposalStatus.ACTIVE
            if event.metadata.block_number >= event.start_block
            else ProposalStatus.PENDING
        )
        proposal = replace(
            proposal,
            proposer=proposer.id,
            targets=tuple(event.targets),
            values=tuple(event.values),
            signatures=tuple(event.signatures),
            calldatas=tuple(event.calldatas),
            start_block=event.start_block,
            end_block=event.end_block,
            description=event.description,
            status=status,
        )
        self._factory.save(proposal)

        self._log_operation(
            "handle_proposal_created", proposal_id=proposal.id
        ).debug("proposal_created", status=status.value)

    def handle_proposal_canceled(self, event: ProposalCanceled) -> None:
        proposal = self._factory.get_or_create_proposal(str(event.id))
        self._factory.save(replace(proposal, status=ProposalStatus.CANCELLED))

    def handle_proposal_queued(self, event: ProposalQueued) -> None:
        """Queue a proposal and count it in proposals_queued."""
        proposal = self._factory.get_or_create_proposal(str(event.id))
        governance = self._factory.get_governance()

        self._factory.save(
            replace(proposal, status=ProposalStatus.QUEUED, execution_eta=event.eta)
        )
        self._factory.save(
            replace(governance, proposals_queued=governance.proposals_queued + 1)
        )

    def handle_proposal_executed(self, event: ProposalExecuted) -> None:
        """Mark a proposal executed and release it from proposals_queued."""
        proposal = self._factory.get_or_create_proposal(str(event.id))
        governance = self._factory.get_governance()

        self._factory.save(
            replace(proposal, status=ProposalStatus.EXECUTED, execution_eta=None)
        )
        self._factory.save(
            replace(governance, proposals_queued=governance.proposals_queued - 1)
        )

    def handle_vote_cast(self, event: VoteCast) -> None:
        """Record a vote and activate a still-pending proposal.

        The voter should already be known as a delegate; if not, the gap is
        logged and the delegate is created so the vote is still recorded.
        """
        proposal_id = str(event.proposal_id)
        proposal = self._factory.get_or_create_proposal(proposal_id)
        vote = self._factory.get_or_create_vote(vote_id_for(event.voter, proposal_id))
        voter = self._factory.get_or_create_delegate(
            event.voter,
            assume_exists=True,
            tx_hash=event.metadata.transaction_hash,
        )

        self._factory.save(
            replace(
                vote,
                proposal=proposal.id,
                voter=voter.id,
                votes_raw=event.votes,
                votes=to_decimal(event.votes, self._decimals),
                support=event.support,
            )
        )

        # First vote past the start block is the activation signal
        if proposal.status == ProposalStatus.PENDING:
            self._factory.save(replace(proposal, status=ProposalStatus.ACTIVE))
