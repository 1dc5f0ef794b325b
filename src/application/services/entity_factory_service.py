"""Entity factory service - get-or-create for projected entities.

Every projected entity is created on first reference. Factories load by id
and, when the record is absent, construct it with zeroed defaults and save
it immediately, so repeated calls with the same id are idempotent.

Lifetime counters on the Governance record (total_token_holders,
total_delegates, proposals) are bumped at creation time and saved right
away. Handlers must therefore read Governance only after their factory
calls, or they would save back a stale copy.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TypeVar, cast

from src.application.ports.entity_store import EntityStoreProtocol
from src.application.services.base import LoggingMixin
from src.domain.events.chain_event import ZERO_ADDRESS
from src.domain.models import (
    GOVERNANCE_ID,
    Delegate,
    Entity,
    Governance,
    Proposal,
    TokenHolder,
    Vote,
)

EntityT = TypeVar("EntityT", Governance, TokenHolder, Delegate, Proposal, Vote)


class EntityFactoryService(LoggingMixin):
    """Get-or-create operations for every projected entity type.

    Also the single place entities are written back, so all saves go
    through save().
    """

    def __init__(self, store: EntityStoreProtocol) -> None:
        """Initialize the factory.

        Args:
            store: Entity store holding the projection.
        """
        self._store = store
        self._init_logger()

    def save(self, entity: Entity) -> None:
        """Persist an entity under its type and id."""
        self._store.put(entity.ENTITY_TYPE, entity.id, entity)

    def _load(self, model: type[EntityT], entity_id: str) -> EntityT | None:
        return cast("EntityT | None", self._store.get(model.ENTITY_TYPE, entity_id))

    def get_governance(self) -> Governance:
        """Load the singleton Governance record, creating it on first use."""
        governance = self._load(Governance, GOVERNANCE_ID)
        if governance is None:
            governance = Governance()
            self.save(governance)
        return governance

    def get_or_create_token_holder(self, address: str) -> TokenHolder:
        """Load or create the TokenHolder for an address.

        Args:
            address: Holder address.

        Returns:
            The stored TokenHolder.
        """
        holder = self._load(TokenHolder, address)
        if holder is None:
            holder = TokenHolder(id=address)
            self.save(holder)
            if address != ZERO_ADDRESS:
                governance = self.get_governance()
                self.save(
                    replace(
                        governance,
                        total_token_holders=governance.total_token_holders + 1,
                    )
                )
        return holder

    def get_or_create_delegate(
        self,
        address: str,
        assume_exists: bool = False,
        tx_hash: str = "",
    ) -> Delegate:
        """Load or create the Delegate for an address.

        When the caller expects the delegate to exist already (a vote, or a
        delegation moving away from it) its absence points at a gap in the
        event feed. That is logged, and the delegate is created regardless.

        Args:
            address: Delegate address.
            assume_exists: Log a warning if the delegate is absent.
            tx_hash: Transaction hash for the warning.

        Returns:
            The stored Delegate.
        """
        delegate = self._load(Delegate, address)
        if delegate is None:
            if assume_exists:
                self._warn_anomaly(
                    "get_or_create_delegate",
                    "delegate_not_found",
                    delegate_id=address,
                    tx_hash=tx_hash,
                )
            delegate = Delegate(id=address)
            self.save(delegate)
            if address != ZERO_ADDRESS:
                governance = self.get_governance()
                self.save(
                    replace(governance, total_delegates=governance.total_delegates + 1)
                )
        return delegate

    def get_or_create_proposal(self, proposal_id: str) -> Proposal:
        """Load or create the Proposal with the given id."""
        proposal = self._load(Proposal, proposal_id)
        if proposal is None:
            proposal = Proposal(id=proposal_id)
            self.save(proposal)
            governance = self.get_governance()
            self.save(replace(governance, proposals=governance.proposals + 1))
        return proposal

    def get_or_create_vote(self, vote_id: str) -> Vote:
        """Load or create the Vote with the given id."""
        vote = self._load(Vote, vote_id)
        if vote is None:
            vote = Vote(id=vote_id)
            self.save(vote)
        return vote

