"""Oracle price endpoints."""

from __future__ import annotations

from collections.abc import AsyncIterator

from .client import Client
from .models import OraclePrediction, OraclePrice, _list


def all_prices(client: Client) -> AsyncIterator[OraclePrice]:
    """Stream all inferred oracle prices."""
    return client.fetch_stream("/oracle/prices", None, OraclePrice.from_dict)


async def current_price(client: Client) -> OraclePrice:
    """Get the currently valid oracle price."""
    return OraclePrice.from_dict(await client.fetch("/oracle/prices/current"))


async def price_at_block(client: Client, block: int) -> OraclePrice:
    """Get the oracle price that was valid at the given block."""
    return OraclePrice.from_dict(await client.fetch(f"/oracle/prices/{block}"))


async def predictions(client: Client) -> list[OraclePrediction]:
    """Get oracle price predictions from received reports and the current price."""
    return _list(OraclePrediction.from_dict, await client.fetch("/oracle/predictions"))