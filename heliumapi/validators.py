"""Validator endpoints."""

from __future__ import annotations

from collections.abc import AsyncIterator

from .client import Client
from .models import QueryTimeRange, Reward, Validator, ValidatorStats


def all_validators(client: Client) -> AsyncIterator[Validator]:
    """Stream all known validators."""
    return client.fetch_stream("/validators", None, Validator.from_dict)


async def get(client: Client, address: str) -> Validator:
    """Get a specific validator by its address."""
    return Validator.from_dict(await client.fetch(f"/validators/{address}"))


async def stats(client: Client) -> ValidatorStats:
    """Get statistics for validators."""
    return ValidatorStats.from_dict(await client.fetch("/validators/stats"))


def rewards(client: Client, address: str, query: QueryTimeRange) -> AsyncIterator[Reward]:
    """Stream a validator's rewards per reward block within a time range.

    The block that holds the ``max_time`` timestamp is excluded.
    """
    return client.fetch_stream(f"/validators/{address}/rewards", query, Reward.from_dict)