"""Shared parts of decoded chain log events.

Every projected event is a decoded contract log carrying its typed
parameters plus the position it was emitted at. The position is used to
order events and to correlate log entries; the transaction hash is
diagnostic only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Sender of minted tokens in Transfer events
ZERO_ADDRESS: str = "0x0000000000000000000000000000000000000000"


@dataclass(frozen=True, eq=True, order=True)
class ChainEventMetadata:
    """Where an event was emitted.

    Ordering compares (block_number, log_index), i.e. canonical chain order.

    Attributes:
        block_number: Block the log was emitted in.
        log_index: Position of the log within the block.
        transaction_hash: Hash of the emitting transaction.
    """

    block_number: int
    log_index: int = 0
    transaction_hash: str = ""

    @property
    def correlation_id(self) -> str:
        """Identifier of this log, used to correlate log entries."""
        return f"{self.transaction_hash}-{self.log_index}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "block_number": self.block_number,
            "log_index": self.log_index,
            "transaction_hash": self.transaction_hash,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ChainEventMetadata:
        return cls(
            block_number=int(data["block_number"]),
            log_index=int(data.get("log_index", 0)),
            transaction_hash=data.get("transaction_hash", ""),
        )
