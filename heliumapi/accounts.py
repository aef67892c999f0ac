"""Account endpoints: wallets, what they own and their activity."""

from __future__ import annotations

from collections.abc import AsyncIterator

from .client import Client
from .models import Account, Hotspot, Oui, QueryTimeRange, Validator, _list
from .transaction import Transaction, parse_transaction

DEFAULT_RICHEST_LIMIT = 1000


def all_accounts(client: Client) -> AsyncIterator[Account]:
    """Stream all known accounts."""
    return client.fetch_stream("/accounts", None, Account.from_dict)


async def get(client: Client, address: str) -> Account:
    """Get a specific account by its address."""
    return Account.from_dict(await client.fetch(f"/accounts/{address}"))


def hotspots(client: Client, address: str) -> AsyncIterator[Hotspot]:
    """Stream all hotspots owned by an account."""
    return client.fetch_stream(f"/accounts/{address}/hotspots", None, Hotspot.from_dict)


def ouis(client: Client, address: str) -> AsyncIterator[Oui]:
    """Stream all OUIs owned by an account."""
    return client.fetch_stream(f"/accounts/{address}/ouis", None, Oui.from_dict)


def validators(client: Client, address: str) -> AsyncIterator[Validator]:
    """Stream all validators owned by an account."""
    return client.fetch_stream(f"/accounts/{address}/validators", None, Validator.from_dict)


async def richest(client: Client, limit: int | None = None) -> list[Account]:
    """Get up to ``limit`` (at most 1000) accounts, richest first."""
    count = DEFAULT_RICHEST_LIMIT if limit is None else limit
    data = await client.fetch(f"/accounts/rich?limit={count}")
    return _list(Account.from_dict, data)


def activity(client: Client, address: str, query: QueryTimeRange) -> AsyncIterator[Transaction]:
    """Stream transactions in which the account takes part, as payer, payee or owner."""
    return client.fetch_stream(f"/accounts/{address}/activity", query, parse_transaction)