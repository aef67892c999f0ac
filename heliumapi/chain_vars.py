"""Chain variable endpoint."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .client import Client
from .errors import UnexpectedValueError


async def get(client: Client) -> dict[str, Any]:
    """Get the current chain variables as a mapping of name to value."""
    result = await client.fetch("/vars")
    if not isinstance(result, Mapping):
        raise UnexpectedValueError(result)
    return dict(result)