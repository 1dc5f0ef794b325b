#!/usr/bin/env python3
"""Replay a recorded governance event log into the entity store.

Replays every event of a JSON-lines log, in file order, and prints the
resulting Governance summary.

Store selection:
- --database-url (or DATABASE_URL) set -> SQL store, persisted
- otherwise -> in-memory store, optionally dumped with --snapshot

Usage:
    python scripts/run_replay.py --events events.jsonl
    python scripts/run_replay.py --events events.jsonl --database-url sqlite:///gov.db
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

load_dotenv()

from src.bootstrap.logging import configure_logging  # noqa: E402
from src.bootstrap.projector import build_entity_store, build_projector  # noqa: E402
from src.config import IndexerConfig  # noqa: E402
from src.domain.exceptions import ProjectionError  # noqa: E402
from src.infrastructure.adapters.event_log import JsonlEventSource  # noqa: E402
from src.infrastructure.monitoring import get_projection_metrics  # noqa: E402
from src.infrastructure.stubs import InMemoryEntityStore  # noqa: E402


def _save_json(path: Path, obj: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(obj, f, indent=2, sort_keys=True)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Replay a governance event log into the entity store",
    )
    parser.add_argument(
        "--events",
        type=Path,
        required=True,
        help="Path to the JSON-lines event log",
    )
    parser.add_argument(
        "--database-url",
        default=None,
        help="SQLAlchemy URL of the entity store (default: DATABASE_URL, else in-memory)",
    )
    parser.add_argument(
        "--env",
        default=None,
        help="Environment name; 'production' logs JSON (default: ENVIRONMENT)",
    )
    parser.add_argument(
        "--snapshot",
        type=Path,
        default=None,
        help="Write every projected entity to this JSON file (in-memory store only)",
    )
    parser.add_argument(
        "--print-metrics",
        action="store_true",
        help="Print Prometheus metrics after the replay",
    )
    args = parser.parse_args()

    config = IndexerConfig.from_environment()
    if args.database_url:
        config = replace(config, database_url=args.database_url)
    if args.env:
        config = replace(config, environment=args.env)
    configure_logging(config)

    if not args.events.exists():
        print(f"Error: event log not found: {args.events}")
        sys.exit(1)

    store = build_entity_store(config)
    projector = build_projector(config, store=store)

    try:
        count = projector.replay(JsonlEventSource(args.events))
    except ProjectionError as e:
        print(f"Error: replay aborted: {e}")
        sys.exit(1)

    governance = projector.factory.get_governance()

    print("\n" + "-" * 60)
    print("REPLAY COMPLETE")
    print("-" * 60)
    print(f"Events projected: {count}")
    print(json.dumps(governance.to_dict(), indent=2))
    print("-" * 60 + "\n")

    if args.snapshot is not None:
        if isinstance(store, InMemoryEntityStore):
            _save_json(args.snapshot, store.snapshot())
            print(f"Snapshot written to {args.snapshot}")
        else:
            print("Warning: --snapshot ignored for the SQL store")

    if args.print_metrics:
        print(get_projection_metrics().generate().decode("utf-8"))


if __name__ == "__main__":
    main()
