"""
Test fixtures package for chainutil tests.

Usage:
    from fixtures import make_block

    def test_something(tmp_path):
        block = make_block(tx_count=2)
"""

from .common import (
    Block,
    LedgerEntry,
    Receipt,
    Transaction,
    make_block,
    make_ledger_entry,
    make_transaction,
)

__all__ = [
    "Block",
    "LedgerEntry",
    "Receipt",
    "Transaction",
    "make_block",
    "make_ledger_entry",
    "make_transaction",
]
