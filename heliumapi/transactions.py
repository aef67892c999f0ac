"""Transaction endpoints."""

from __future__ import annotations

from .client import Client
from .transaction import Transaction, parse_transaction


async def get(client: Client, txn_hash: str) -> Transaction:
    """Get a specific transaction by its hash."""
    return parse_transaction(await client.fetch(f"/transactions/{txn_hash}"))