"""Submitting transactions and checking on those not yet in a block."""

from __future__ import annotations

import base64

from .client import Client
from .transaction_types import PendingTxnStatus


async def submit(client: Client, txn: bytes) -> PendingTxnStatus:
    """Submit an encoded transaction to the blockchain."""
    body = {"txn": base64.b64encode(bytes(txn)).decode("ascii")}
    return PendingTxnStatus.from_dict(await client.post("/pending_transactions", body))


async def get(client: Client, txn_hash: str) -> PendingTxnStatus:
    """Get the status of a pending transaction by its hash."""
    return PendingTxnStatus.from_dict(await client.fetch(f"/pending_transactions/{txn_hash}"))