# heliumapi

An asynchronous Python client for the Helium blockchain HTTP API. It covers
the read endpoints for accounts, hotspots, blocks, oracle prices, OUIs,
validators, chain variables and transactions. It also submits transactions
that are already encoded. The JSON responses come back as typed dataclasses.

## Installation

```
pip install heliumapi
```

## Quick start

```python
import asyncio

from heliumapi import blocks
from heliumapi.client import Client


async def main():
    async with Client() as client:
        print("Block height:", await blocks.height(client))


asyncio.run(main())
```

By default `Client()` uses the hosted API at `https://api.helium.io/v1`
(`DEFAULT_BASE_URL`) and a 120 second request timeout (`DEFAULT_TIMEOUT`).
To use another deployment, pass `base_url` and `timeout`:

```python
client = Client(base_url="https://testnet-api.helium.wtf/v1", timeout=30)
```

The client keeps its HTTP connections open. Use it as an async context
manager, or call `await client.aclose()` when you have finished with it.

## Single objects and streams

Endpoints that return one object are coroutines:

```python
from heliumapi import accounts, blocks, chain_vars, hotspots, oracle, ouis, validators

account = await accounts.get(client, account_address)
hotspot = await hotspots.get(client, hotspot_address)
oui = await ouis.get(client, 1)
last_oui = await ouis.last(client)
oui_stats = await ouis.stats(client)
price = await oracle.current_price(client)
old_price = await oracle.price_at_block(client, 763816)
predictions = await oracle.predictions(client)
validator_stats = await validators.stats(client)
richest = await accounts.richest(client, 10)   # limit defaults to 1000
variables = await chain_vars.get(client)       # dict of name to value
```

Endpoints that list many objects return an async iterator. It follows the
API's paging cursors and requests the next page only when the current one is
used up:

- `accounts.all_accounts`, `accounts.hotspots`, `accounts.ouis`,
  `accounts.validators`, `accounts.activity`
- `hotspots.all_hotspots`
- `oracle.all_prices`
- `ouis.all_ouis`
- `validators.all_validators`, `validators.rewards`

```python
async for hotspot in accounts.hotspots(client, account_address):
    print(hotspot.name, hotspot.mode)
```

To read a whole stream into a list, use `collect`:

```python
from heliumapi.client import collect

owned = await collect(accounts.hotspots(client, account_address))
```

## Time ranges

`accounts.activity` and `validators.rewards` take a `QueryTimeRange`. Each
bound is an ISO 8601 timestamp or a relative time such as `"-30 day"`:

```python
from heliumapi.models import QueryTimeRange

window = QueryTimeRange(min_time="-30 day", max_time="-1 hour")

async for txn in accounts.activity(client, account_address, window):
    print(txn)

rewards = await collect(validators.rewards(client, validator_address, window))
```

## Token amounts

Balances, stakes and prices are exact `Decimal` values, never floats. They
are held in the classes of `heliumapi.values`. `Hnt`, `Hst` and `Usd` use
eight decimal places and `Dbi` (antenna gain) uses one. `from_units` and
`to_units` convert to and from the integer units the chain uses. `parse`
reads text, in plain or scientific notation:

```python
from heliumapi.values import Hnt

amount = Hnt.from_units(150_000_000)
print(amount)                       # 1.50000000
assert amount.to_units() == 150_000_000
Hnt.parse("2.5")
```

`parse` raises `DecimalsError` if the text has more than eight decimal places
or is not a number. `from_units` raises `NumberError` if it is given
something other than an integer.

## Transactions

`transactions.get(client, txn_hash)` returns the model that matches the
response's `type` field, such as `PaymentV2`, `PocReceiptsV1` or `RoutingV1`.
The models live in `heliumapi.transaction_types`. A type the package does not
decode comes back as `UnknownTransaction`, whose `kind` is the type name; it
does not raise. You can decode a transaction object you already have with
`heliumapi.transaction.parse_transaction`.

`pending_transactions.submit(client, txn)` takes the bytes of a transaction
that is already encoded and signed, base64-encodes them, and posts them. It
returns a `PendingTxnStatus` holding the pending hash. You can later look
that hash up with `pending_transactions.get`.

## Errors

Every error the package raises derives from `HeliumError` in
`heliumapi.errors`:

- `RequestError`: the request failed, the server returned an error status,
  or the body was not a JSON object with a `data` member. The underlying
  exception is in its `cause` attribute.
- `UnexpectedValueError`: a field is missing or has the wrong type, or a
  response has an unexpected shape. The offending value is in its `value`
  attribute.
- `DecimalsError`: decimal text is malformed or has too many decimal places.
- `NumberError`: a value given as integer units is not an integer.

## Command line

Installing the package also installs a `heliumapi` command with a few
common lookups:

```
heliumapi height
heliumapi account ADDRESS [--min-time "-30 day"] [--max-time "-1 hour"]
heliumapi hotspot ADDRESS [--owner ACCOUNT]
heliumapi oracle-price
heliumapi oui [OUI]
heliumapi validator [--min-time "-30 day"] [--max-time "-1 hour"]
```

What each command prints:

- `height`: the block height.
- `account`: the account, then its activity in the time range.
- `hotspot`: the hotspot, then how many hotspots its owner (or `--owner`)
  has.
- `oracle-price`: the current oracle price.
- `oui`: OUI statistics, then one OUI (1 if you give none).
- `validator`: validator statistics, how many validators there are, the last
  validator listed, and that validator's first ten rewards in the time range.

`--base-url` and `--timeout` go before the command name:

```
heliumapi --base-url https://testnet-api.helium.wtf/v1 validator
```

The command exits with status 1 and prints the message to standard error if
a request or a response fails. Run `heliumapi --help` to see every option.

## What the package does not do

The package reads from the API and forwards transactions. It does not create,
encode or sign transactions, and it does not manage keys or wallets.
`pending_transactions.submit` expects bytes that some other tool has already
produced. Nothing is cached or stored locally: every call is a fresh HTTP
request.