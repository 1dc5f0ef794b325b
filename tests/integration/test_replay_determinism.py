"""Integration tests for full event log replay.

Replays one mixed governance history through every ingestion and storage
path and checks the resulting state is identical each time.
"""

from __future__ import annotations

import json
import runpy
import sys
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from src.application.services.governance_projector import GovernanceProjector
from src.domain.events import ZERO_ADDRESS, ChainEvent
from src.domain.models import ENTITY_TYPES, Governance, ProposalStatus
from src.infrastructure.adapters.event_log import JsonlEventSource
from src.infrastructure.adapters.persistence import SqlAlchemyEntityStore
from src.infrastructure.monitoring import reset_projection_metrics
from src.infrastructure.stubs import InMemoryEntityStore
from tests.helpers.chain_events import (
    ALICE,
    BOB,
    CAROL,
    DAVE,
    delegate_changed,
    delegate_votes_changed,
    proposal_canceled,
    proposal_created,
    proposal_executed,
    proposal_queued,
    transfer,
    vote_cast,
)

pytestmark = pytest.mark.integration

TOKEN = 10**18
SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "run_replay.py"


def _history() -> list[ChainEvent]:
    """A small but complete governance history, in chain order."""
    return [
        transfer(ZERO_ADDRESS, ALICE, 1000 * TOKEN, block=1, log_index=0),
        transfer(ZERO_ADDRESS, BOB, 500 * TOKEN, block=1, log_index=1),
        delegate_changed(ALICE, ZERO_ADDRESS, ALICE, block=2, log_index=0),
        delegate_votes_changed(ALICE, 0, 1000 * TOKEN, block=2, log_index=1),
        delegate_changed(BOB, ZERO_ADDRESS, ALICE, block=3, log_index=0),
        delegate_votes_changed(ALICE, 1000 * TOKEN, 1500 * TOKEN, block=3, log_index=1),
        proposal_created(1, proposer=ALICE, start_block=10, end_block=20, block=4),
        proposal_created(2, proposer=ALICE, start_block=5, end_block=20, block=5),
        vote_cast(ALICE, 1, True, 1500 * TOKEN, block=11, log_index=0),
        vote_cast(CAROL, 1, False, 0, block=11, log_index=1),
        transfer(BOB, CAROL, 500 * TOKEN, block=12, log_index=0),
        delegate_changed(BOB, ALICE, DAVE, block=12, log_index=1),
        delegate_votes_changed(ALICE, 1500 * TOKEN, 1000 * TOKEN, block=12, log_index=2),
        proposal_queued(1, eta=1_700_000_000, block=21),
        proposal_canceled(2, block=22),
        proposal_executed(1, block=30),
        transfer(ALICE, DAVE, 1000 * TOKEN, block=31, log_index=0),
        delegate_votes_changed(ALICE, 1000 * TOKEN, 0, block=31, log_index=1),
    ]


def _write_log(path: Path, events: list[ChainEvent]) -> Path:
    path.write_text(
        "".join(json.dumps(event.to_dict()) + "\n" for event in events),
        encoding="utf-8",
    )
    return path


def _replay_in_memory(events: list[ChainEvent] | JsonlEventSource) -> InMemoryEntityStore:
    store = InMemoryEntityStore()
    GovernanceProjector(store=store).replay(events)
    return store


class TestReplayDeterminism:
    """Replays from empty stores reproduce identical state."""

    def test_two_replays_are_byte_identical(self) -> None:
        first = _replay_in_memory(_history())
        second = _replay_in_memory(_history())

        assert json.dumps(first.snapshot(), sort_keys=True) == json.dumps(
            second.snapshot(), sort_keys=True
        )

    def test_jsonl_replay_matches_direct_replay(self, tmp_path: Path) -> None:
        direct = _replay_in_memory(_history())
        from_log = _replay_in_memory(
            JsonlEventSource(_write_log(tmp_path / "events.jsonl", _history()))
        )

        assert from_log.snapshot() == direct.snapshot()

    def test_sql_store_matches_in_memory_store(self, tmp_path: Path) -> None:
        engine = create_engine(f"sqlite:///{tmp_path / 'projection.db'}")
        SqlAlchemyEntityStore.create_schema(engine)
        sql_store = SqlAlchemyEntityStore(sessionmaker(bind=engine, expire_on_commit=False))
        GovernanceProjector(store=sql_store).replay(_history())

        memory = _replay_in_memory(_history())
        for entity_type, entities in memory.snapshot().items():
            assert entity_type in ENTITY_TYPES
            for entity_id, payload in entities.items():
                stored = sql_store.get(entity_type, entity_id)
                assert stored is not None
                assert stored.to_dict() == payload


class TestReplayFinalState:
    """The mixed history ends in the expected aggregate state."""

    def test_governance_totals(self) -> None:
        store = _replay_in_memory(_history())
        governance = store.get("Governance", "GOVERNANCE")

        assert isinstance(governance, Governance)
        # ALICE emptied, BOB emptied; CAROL and DAVE hold tokens
        assert governance.current_token_holders == 2
        assert governance.current_delegates == 0
        assert governance.delegated_votes_raw == 0
        assert governance.proposals_queued == 0
        assert governance.proposals == 2
        assert governance.total_token_holders == 4
        # ALICE, CAROL (first seen voting) and DAVE; BOB never receives a delegation
        assert governance.total_delegates == 3

    def test_proposal_statuses(self) -> None:
        store = _replay_in_memory(_history())

        first = store.get("Proposal", "1")
        second = store.get("Proposal", "2")
        assert first is not None and first.status == ProposalStatus.EXECUTED
        assert second is not None and second.status == ProposalStatus.CANCELLED


class TestReplayScript:
    """scripts/run_replay.py end to end."""

    def test_prints_governance_summary(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        log = _write_log(tmp_path / "events.jsonl", _history())
        snapshot = tmp_path / "snapshot.json"
        monkeypatch.delenv("DATABASE_URL", raising=False)
        monkeypatch.setattr(
            sys,
            "argv",
            ["run_replay.py", "--events", str(log), "--env", "test", "--snapshot", str(snapshot)],
        )
        reset_projection_metrics()

        try:
            runpy.run_path(str(SCRIPT), run_name="__main__")
        finally:
            reset_projection_metrics()

        output = capsys.readouterr().out
        assert f"Events projected: {len(_history())}" in output
        assert '"proposals": 2' in output
        assert json.loads(snapshot.read_text())["Proposal"]["1"]["status"] == "EXECUTED"

    def test_missing_log_exits_nonzero(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(
            sys, "argv", ["run_replay.py", "--events", str(tmp_path / "absent.jsonl")]
        )

        with pytest.raises(SystemExit) as exc_info:
            runpy.run_path(str(SCRIPT), run_name="__main__")

        assert exc_info.value.code == 1
