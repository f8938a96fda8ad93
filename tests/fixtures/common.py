"""
Common test fixtures shared by all modules.

Provides factory functions for structured values used by the storage tests:
- Block / Transaction (PersistableModel subclasses, nested)
- Receipt (pydantic model with a different shape than Block)
- LedgerEntry (dataclass implementing the Persistable to_dict/from_dict contract)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import Field

from chainutil.schemas.timestamp import Timestamp
from chainutil.storage.objects import PersistableModel


# =============================================================================
# Models
# =============================================================================

class Transaction(PersistableModel):
    """A single transaction inside a block."""

    tx_id: str
    payload: bytes = b""
    amount: int = 0
    fee: float = 0.0


class Block(PersistableModel):
    """Nested structure: a block holding transactions and metadata."""

    number: int
    previous_hash: bytes
    created_at: Timestamp
    transactions: list[Transaction] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)
    note: str | None = None


class Receipt(PersistableModel):
    """Structurally unrelated to Block."""

    receipt_id: str
    status: int


@dataclass
class LedgerEntry:
    """Non-pydantic type opting into persistence via to_dict/from_dict."""

    key: str
    version: int
    tags: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"key": self.key, "version": self.version, "tags": list(self.tags)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LedgerEntry":
        return cls(key=data["key"], version=data["version"], tags=list(data.get("tags", [])))


# =============================================================================
# Factories
# =============================================================================

def make_transaction(
    tx_id: str = "tx_001",
    payload: bytes = b"\x00\xffpayload\x80",
    amount: int = 42,
    fee: float = 0.25,
) -> Transaction:
    """Create a Transaction for testing. The default payload is not valid UTF-8."""
    return Transaction(tx_id=tx_id, payload=payload, amount=amount, fee=fee)


def make_block(
    number: int = 7,
    tx_count: int = 3,
    metadata: dict[str, Any] | None = None,
) -> Block:
    """Create a Block with tx_count transactions and nested metadata."""
    if metadata is None:
        metadata = {
            "proposer": "node-a",
            "votes": [1, 2, 3],
            "extra": {"nested": {"deep": True}, "ratio": 0.5},
        }
    return Block(
        number=number,
        previous_hash=bytes(range(64)),
        created_at=Timestamp(seconds=1_767_225_600, nanos=123_456_789),
        transactions=[make_transaction(tx_id=f"tx_{i:03d}", amount=i) for i in range(tx_count)],
        metadata=metadata,
        note=None,
    )


def make_ledger_entry(key: str = "account/alice", version: int = 3) -> LedgerEntry:
    """Create a LedgerEntry for testing."""
    return LedgerEntry(key=key, version=version, tags=["hot", "replicated"])
