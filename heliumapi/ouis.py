"""OUI endpoints."""

from __future__ import annotations

from collections.abc import AsyncIterator

from .client import Client
from .models import Oui, OuiStats


def all_ouis(client: Client) -> AsyncIterator[Oui]:
    """Stream all OUIs."""
    return client.fetch_stream("/ouis", None, Oui.from_dict)


async def get(client: Client, oui: int) -> Oui:
    """Get a specific OUI."""
    return Oui.from_dict(await client.fetch(f"/ouis/{oui}"))


async def last(client: Client) -> Oui:
    """Get the last assigned OUI."""
    return Oui.from_dict(await client.fetch("/ouis/last"))


async def stats(client: Client) -> OuiStats:
    """Get statistics for OUIs."""
    return OuiStats.from_dict(await client.fetch("/ouis/stats"))