"""Typed records for the individual transaction kinds found on chain."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields
from decimal import Decimal
from typing import Annotated, Any, Optional, TypeVar

from .errors import UnexpectedValueError
from .models import _float, _hnt, _int, _list, _mapping, _optional, _require, _str, _uint, _usd
from .values import Hnt, Usd

T = TypeVar("T")
R = TypeVar("R", bound="_Record")


def _json(value: Any) -> Any:
    """Check that a value is plain JSON data and return a copy of it."""
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, list):
        return [_json(item) for item in value]
    if isinstance(value, Mapping):
        if not all(isinstance(key, str) for key in value):
            raise UnexpectedValueError(value)
        return {key: _json(item) for key, item in value.items()}
    raise UnexpectedValueError(value)


def _u8(value: Any) -> int:
    number = _uint(value)
    if number > 0xFF:
        raise UnexpectedValueError(value)
    return number


def _bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise UnexpectedValueError(value)
    return value


def _hnt_decimal(value: Any) -> Hnt:
    """Read an HNT amount given as a decimal value rather than as units."""
    if isinstance(value, str):
        return Hnt.parse(value)
    if isinstance(value, bool):
        raise UnexpectedValueError(value)
    if isinstance(value, int):
        return Hnt(Decimal(value))
    if isinstance(value, float):
        return Hnt.parse(repr(value))
    raise UnexpectedValueError(value)


def _list_of(parse: Callable[[Any], T]) -> Callable[[Any], list[T]]:
    return lambda value: _list(parse, value)


@dataclass(frozen=True)
class _Spec:
    """How one field is read from a decoded JSON object."""

    parse: Callable[[Any], Any]
    optional: bool = False
    key: Optional[str] = None


_Str = Annotated[str, _Spec(_str)]
_OptStr = Annotated[Optional[str], _Spec(_str, optional=True)]
_UInt = Annotated[int, _Spec(_uint)]
_Int = Annotated[int, _Spec(_int)]
_U8 = Annotated[int, _Spec(_u8)]
_Float = Annotated[float, _Spec(_float)]
_HntUnits = Annotated[Hnt, _Spec(_hnt)]
_UsdUnits = Annotated[Usd, _Spec(_usd)]
_StrList = Annotated[list, _Spec(_list_of(_str))]
_Json = Annotated[Any, _Spec(_json)]
_JsonList = Annotated[list, _Spec(_list_of(_json))]


def _nested(kind: type, *, optional: bool = False) -> Any:
    return Annotated[kind, _Spec(kind.from_dict, optional=optional)]


def _records(kind: type) -> Any:
    return Annotated[list, _Spec(_list_of(kind.from_dict))]


class _Record:
    """Base for records built field by field from a decoded JSON object."""

    @classmethod
    def from_dict(cls: type[R], data: Mapping) -> R:
        """Build the record from a decoded JSON object."""
        data = _mapping(data)
        values = {}
        for item in fields(cls):
            spec: _Spec = item.type.__metadata__[0]
            key = spec.key or item.name
            if spec.optional:
                values[item.name] = _optional(spec.parse, data.get(key))
            else:
                values[item.name] = spec.parse(_require(data, key))
        return cls(**values)


@dataclass
class AddGatewayV1(_Record):
    """A hotspot added to the network."""

    hash: _Str
    fee: _UInt
    owner: _Str
    payer: _Str
    gateway: _Str
    staking_fee: _HntUnits


@dataclass
class AssertLocationV1(_Record):
    """A hotspot location assertion."""

    hash: _Str
    fee: _UInt
    nonce: _UInt
    owner: _Str
    payer: _OptStr
    gateway: _Str
    location: _Str
    staking_fee: _HntUnits


@dataclass
class AssertLocationV2(_Record):
    """A hotspot location assertion with gain and elevation."""

    hash: _Str
    fee: _UInt
    gain: _Int
    nonce: _UInt
    owner: _Str
    payer: _OptStr
    gateway: _Str
    location: _Str
    elevation: _Int
    staking_fee: _HntUnits


@dataclass
class CoinbaseV1(_Record):
    """A genesis HNT grant."""

    hash: _Str
    payee: _Str
    amount: _HntUnits


@dataclass
class ConsensusGroupFailureV1(_Record):
    """A report of consensus group members that failed."""

    delay: _UInt
    hash: _Str
    block: _UInt
    height: _UInt
    members: _StrList
    failed_members: _StrList
    signatures: _StrList


@dataclass
class ConsensusGroupV1(_Record):
    """A new consensus group election."""

    delay: _UInt
    hash: _Str
    height: _UInt
    members: _StrList
    proof: _Str


@dataclass
class CreateHtlcV1(_Record):
    """A hashed timelock contract creation."""

    fee: _UInt
    hash: _Str
    nonce: _UInt
    payee: _Str
    payer: _Str
    amount: _HntUnits
    address: _Str
    hashlock: _Str
    timelock: _UInt


@dataclass
class DcCoinbaseV1(_Record):
    """A genesis data credit grant."""

    hash: _Str
    payee: _Str
    amount: _HntUnits


@dataclass
class GenGatewayV1(_Record):
    """A genesis hotspot."""

    hash: _Str
    nonce: _UInt
    owner: _Str
    gateway: _Str
    location: _Str


@dataclass
class GenPriceOracleV1(_Record):
    """The genesis oracle price."""

    hash: _Str
    price: _UsdUnits


@dataclass
class OuiV1(_Record):
    """An OUI registration."""

    fee: _UInt
    oui: _UInt
    hash: _Str
    owner: _Str
    payer: _Str
    filter: _Str
    addresses: _StrList
    staking_fee: _HntUnits
    requested_subnet_size: _UInt


@dataclass
class PaymentV1(_Record):
    """A single payment."""

    hash: _Str
    amount: _HntUnits
    fee: _UInt
    nonce: _UInt
    payer: _Str
    payee: _Str


@dataclass
class PaymentV2Payment(_Record):
    """One payee within a multi-payment."""

    amount: _HntUnits
    memo: _OptStr
    payee: _Str


@dataclass
class PaymentV2(_Record):
    """A payment to one or more payees; the fee is in data credits."""

    hash: _Str
    fee: _UInt
    nonce: _UInt
    payer: _Str
    payments: _records(PaymentV2Payment)


@dataclass
class PendingTxnStatus(_Record):
    """The status handle of a submitted transaction."""

    hash: _Str


@dataclass
class Receipt(_Record):
    """The receipt of a challengee in a proof of coverage path."""

    channel: _U8
    data: _Str
    datarate: _OptStr
    frequency: _Float
    gateway: _Str
    origin: _Str
    signal: _Int
    snr: _Float
    timestamp: _UInt


@dataclass
class Witness(_Record):
    """A witness report in a proof of coverage path."""

    channel: _U8
    datarate: _Str
    frequency: _Float
    gateway: _Str
    is_valid: Annotated[Optional[bool], _Spec(_bool, optional=True)]
    packet_hash: _Str
    signal: _Int
    snr: _Float
    timestamp: _UInt


@dataclass
class PathElement(_Record):
    """One hop of a proof of coverage path."""

    challengee: _Str
    receipt: _nested(Receipt, optional=True)
    witnesses: _records(Witness)


@dataclass
class PocReceiptsV1(_Record):
    """The receipts of a proof of coverage challenge."""

    hash: _Str
    challenger: _Str
    fee: _UInt
    onion_key_hash: _Str
    path: _records(PathElement)
    request_block_hash: _Str
    secret: _Str


@dataclass
class PocRequestV1(_Record):
    """A proof of coverage challenge request."""

    hash: _Str
    block_hash: _Str
    challenger: _Str
    fee: _UInt
    onion_key_hash: _Str
    secret_hash: _Str
    version: _UInt


@dataclass
class PriceOracleV1(_Record):
    """A price report from an oracle."""

    fee: _UInt
    hash: _Str
    price: _UsdUnits
    public_key: _Str
    block_height: _UInt


@dataclass
class RedeemHtlcV1(_Record):
    """A hashed timelock contract redemption."""

    fee: _UInt
    hash: _Str
    payee: _Str
    address: _Str
    preimage: _Str


@dataclass
class TxnReward(_Record):
    """One reward entry inside a rewards transaction, amount in units."""

    account: _OptStr
    amount: _UInt
    gateway: _OptStr
    kind: Annotated[str, _Spec(_str, key="type")]


@dataclass
class RewardsV1(_Record):
    """Rewards paid for a range of epochs."""

    hash: _Str
    start_epoch: _UInt
    end_epoch: _UInt
    rewards: _records(TxnReward)


@dataclass
class RewardsV2(RewardsV1):
    """Rewards paid for a range of epochs."""


@dataclass
class NewXor(_Record):
    """Add a new xor filter to an OUI."""

    filter: _Str


@dataclass
class UpdateXor(_Record):
    """Replace the xor filter at an index."""

    filter: _Str
    index: _UInt


@dataclass
class UpdateRouters(_Record):
    """Replace the router addresses of an OUI."""

    addresses: _StrList


@dataclass
class RequestSubnet(_Record):
    """Request a new subnet for an OUI."""

    requested_subnet_size: _UInt


RoutingAction = NewXor | UpdateXor | UpdateRouters | RequestSubnet

_ROUTING_ACTIONS: dict[str, type[_Record]] = {
    "new_xor": NewXor,
    "update_xor": UpdateXor,
    "update_routers": UpdateRouters,
    "request_subnet": RequestSubnet,
}


def parse_routing_action(data: Mapping) -> RoutingAction:
    """Parse a routing action tagged by its ``action`` key."""
    tag = _require(data, "action")
    kind = _ROUTING_ACTIONS.get(tag) if isinstance(tag, str) else None
    if kind is None:
        raise UnexpectedValueError(tag)
    return kind.from_dict(data)


@dataclass
class RoutingV1(_Record):
    """A routing update for an OUI."""

    fee: _UInt
    oui: _UInt
    hash: _Str
    nonce: _UInt
    owner: _Str
    action: Annotated[RoutingAction, _Spec(parse_routing_action)]


@dataclass
class SecurityCoinbaseV1(_Record):
    """A genesis security token grant; the amount is a decimal value."""

    hash: _Str
    payee: _Str
    amount: Annotated[Hnt, _Spec(_hnt_decimal)]


@dataclass
class SecurityExchangeV1(_Record):
    """A security token transfer."""

    fee: _UInt
    hash: _Str
    nonce: _UInt
    payee: _Str
    payer: _Str
    amount: _HntUnits


@dataclass
class StakeValidatorV1(_Record):
    """A validator stake."""

    address: _Str
    fee: _UInt
    hash: _Str
    owner: _Str
    stake: _HntUnits
    owner_signature: _Str


@dataclass
class StateChannelSummary(_Record):
    """Packet and data credit totals for one client of a state channel."""

    owner: _Str
    num_packets: _UInt
    num_dcs: _UInt
    location: _Str
    client: _Str


@dataclass
class StateChannel(_Record):
    """The final state of a state channel."""

    summaries: _records(StateChannelSummary)
    state: _Str
    root_hash: _Str
    owner: _Str
    nonce: _UInt
    id: _Str
    expire_at_block: _UInt


@dataclass
class StateChannelCloseV1(_Record):
    """A state channel close."""

    height: _UInt
    hash: _Str
    time: _UInt
    state_channel: _nested(StateChannel)
    conflicts_with: _OptStr
    closer: _Str


@dataclass
class StateChannelOpenV1(_Record):
    """A state channel open."""

    id: _Str
    fee: _UInt
    oui: _UInt
    hash: _Str
    nonce: _UInt
    owner: _Str
    amount: _HntUnits
    expire_within: _UInt


@dataclass
class TokenBurnV1(_Record):
    """An HNT burn for data credits."""

    fee: _UInt
    hash: _Str
    memo: _Str
    nonce: _UInt
    payee: _Str
    payer: _Str
    amount: _HntUnits


@dataclass
class TokenBurnExchangeRateV1(_Record):
    """A token burn exchange rate change."""

    hash: _Str
    rate: _UInt


@dataclass
class TransferHotspotV1(_Record):
    """A hotspot ownership transfer."""

    hash: _Str
    fee: _UInt
    buyer: _Str
    seller: _Str
    gateway: _Str
    buyer_nonce: _UInt
    amount_to_seller: _HntUnits


@dataclass
class TransferValidatorStakeV1(_Record):
    """A transfer of a validator stake."""

    block: _UInt
    fee: _UInt
    hash: _Str
    new_address: _Str
    new_owner: _Str
    new_owner_signature: _OptStr
    old_address: _Str
    old_owner: _Str
    old_owner_signature: _Str
    payment_amount: _HntUnits
    stake_amount: _HntUnits


@dataclass
class UnstakeValidatorV1(_Record):
    """A validator unstake."""

    address: _Str
    owner: _Str
    owner_signature: _Str
    fee: _UInt
    stake_amount: _HntUnits
    stake_release_height: _UInt
    hash: _Str


@dataclass
class UpdateGatewayOuiV1(_Record):
    """A change of the OUI a hotspot routes to."""

    gateway: _Str
    hash: _Str
    oui: _UInt
    nonce: _UInt
    fee: _UInt
    gateway_owner_signature: _Str
    oui_owner_signature: _Str


@dataclass
class ValidatorHeartbeatV1(_Record):
    """A validator heartbeat."""

    address: _Str
    hash: _Str
    height: _UInt
    signature: _Str
    version: _UInt


@dataclass
class VarsV1(_Record):
    """A change of chain variables."""

    hash: _Str
    vars: _Json
    unsets: _JsonList
    cancels: _JsonList
    nonce: _UInt
    proof: _Str
    version_predicate: _UInt
    time: _UInt
    master_key: _OptStr
    key_proof: _Str
    height: _UInt