"""Hotspot endpoints."""

from __future__ import annotations

from collections.abc import AsyncIterator

from .client import Client
from .models import Hotspot


def all_hotspots(client: Client) -> AsyncIterator[Hotspot]:
    """Stream all known hotspots."""
    return client.fetch_stream("/hotspots", None, Hotspot.from_dict)


async def get(client: Client, address: str) -> Hotspot:
    """Get a specific hotspot by its address."""
    return Hotspot.from_dict(await client.fetch(f"/hotspots/{address}"))