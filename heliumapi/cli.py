"""Command line access to common queries against the blockchain API."""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Awaitable, Callable, Sequence

from . import accounts, blocks, hotspots, oracle, ouis, validators
from .client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, Client, collect
from .errors import HeliumError
from .models import QueryTimeRange

_REWARDS_SHOWN = 10


def _time_range(args: argparse.Namespace) -> QueryTimeRange:
    return QueryTimeRange(min_time=args.min_time, max_time=args.max_time)


async def _account(client: Client, args: argparse.Namespace) -> None:
    account = await accounts.get(client, args.address)
    print(f"Account: {account!r}")
    async for txn in accounts.activity(client, args.address, _time_range(args)):
        print(repr(txn))


async def _height(client: Client, args: argparse.Namespace) -> None:
    print(f"Block Height: {await blocks.height(client)}")


async def _hotspot(client: Client, args: argparse.Namespace) -> None:
    hotspot = await hotspots.get(client, args.address)
    print(f"Hotspot: {hotspot!r}")
    owner = args.owner or hotspot.owner
    owned = await collect(accounts.hotspots(client, owner))
    print(f"Account {owner} Hotspots: {len(owned)}")


async def _oracle_price(client: Client, args: argparse.Namespace) -> None:
    price = await oracle.current_price(client)
    print(f"Current: {price!r}")


async def _oui(client: Client, args: argparse.Namespace) -> None:
    print(f"Stats {await ouis.stats(client)!r}")
    print(repr(await ouis.get(client, args.oui)))


async def _validator(client: Client, args: argparse.Namespace) -> None:
    print(f"Stats {await validators.stats(client)!r}")
    found = await collect(validators.all_validators(client))
    print(f"Fetched {len(found)} validators.")
    if not found:
        return
    last = found[-1]
    print(f"Validator: {last!r}")
    rewards = await collect(validators.rewards(client, last.address, _time_range(args)))
    print(f"Last {_REWARDS_SHOWN} rewards:")
    for reward in rewards[:_REWARDS_SHOWN]:
        print(f"Block: {reward.block}: {reward.amount} HNT")


_Command = Callable[[Client, argparse.Namespace], Awaitable[None]]

_COMMANDS: dict[str, _Command] = {
    "account": _account,
    "height": _height,
    "hotspot": _hotspot,
    "oracle-price": _oracle_price,
    "oui": _oui,
    "validator": _validator,
}


def _add_time_range(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--min-time", default="-30 day", help="start of the time range")
    parser.add_argument("--max-time", default="-1 hour", help="end of the time range")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="heliumapi", description="Query the blockchain API.")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL, help="API base URL")
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT, help="seconds")
    commands = parser.add_subparsers(dest="command", required=True)

    account = commands.add_parser("account", help="show an account and its activity")
    account.add_argument("address")
    _add_time_range(account)

    commands.add_parser("height", help="show the current block height")

    hotspot = commands.add_parser("hotspot", help="show a hotspot and its owner's hotspot count")
    hotspot.add_argument("address")
    hotspot.add_argument("--owner", default=None, help="account whose hotspots are counted")

    commands.add_parser("oracle-price", help="show the current oracle price")

    oui = commands.add_parser("oui", help="show OUI statistics and one OUI")
    oui.add_argument("oui", type=int, nargs="?", default=1)

    validator = commands.add_parser("validator", help="show validators and recent rewards")
    _add_time_range(validator)
    return parser


async def _run(args: argparse.Namespace) -> None:
    async with Client(args.base_url, args.timeout) as client:
        await _COMMANDS[args.command](client, args)


def main(argv: Sequence[str] | None = None) -> int:
    """Run a command and return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        asyncio.run(_run(args))
    except HeliumError as exc:
        cause = getattr(exc, "cause", None)
        detail = f": {cause}" if cause is not None else ""
        print(f"error: {exc}{detail}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())