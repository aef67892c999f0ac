"""Block endpoints."""

from __future__ import annotations

from .client import Client
from .models import Height


async def height(client: Client) -> int:
    """Get the current height of the blockchain."""
    return Height.from_dict(await client.fetch("/blocks/height")).height