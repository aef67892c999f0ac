"""Data models returned by the blockchain API."""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, TypeVar

from .errors import UnexpectedValueError
from .values import Dbi, Hnt, Hst, Usd

T = TypeVar("T")

_TIMESTAMP = re.compile(
    r"(\d{4}-\d{2}-\d{2})[Tt ](\d{2}:\d{2}:\d{2})(?:\.(\d+))?([Zz]|[+-]\d{2}:\d{2})"
)


def _mapping(data: Any) -> Mapping:
    if not isinstance(data, Mapping):
        raise UnexpectedValueError(data)
    return data


def _require(data: Any, key: str) -> Any:
    data = _mapping(data)
    if key not in data:
        raise UnexpectedValueError(data)
    return data[key]


def _uint(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise UnexpectedValueError(value)
    return value


def _int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise UnexpectedValueError(value)
    return value


def _float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise UnexpectedValueError(value)
    return float(value)


def _str(value: Any) -> str:
    if not isinstance(value, str):
        raise UnexpectedValueError(value)
    return value


def _optional(parse: Callable[[Any], T], value: Any) -> T | None:
    return None if value is None else parse(value)


def _list(parse: Callable[[Any], T], value: Any) -> list[T]:
    if not isinstance(value, list):
        raise UnexpectedValueError(value)
    return [parse(item) for item in value]


def _hnt(value: Any) -> Hnt:
    return Hnt.from_units(_uint(value))


def _hst(value: Any) -> Hst:
    return Hst.from_units(_uint(value))


def _usd(value: Any) -> Usd:
    return Usd.from_units(_uint(value))


def _dbi(value: Any) -> Dbi:
    return Dbi.from_units(_uint(value))


def _timestamp(value: Any) -> datetime:
    match = _TIMESTAMP.fullmatch(_str(value))
    if match is None:
        raise UnexpectedValueError(value)
    date, time, fraction, offset = match.groups()
    micros = (fraction or "")[:6].ljust(6, "0")
    if offset in ("Z", "z"):
        offset = "+00:00"
    try:
        parsed = datetime.fromisoformat(f"{date}T{time}.{micros}{offset}")
    except ValueError:
        raise UnexpectedValueError(value) from None
    return parsed.astimezone(timezone.utc)


@dataclass(frozen=True)
class QueryTimeRange:
    """A time range given as ISO 8601 timestamps or relative times like "-3 hour"."""

    min_time: str
    max_time: str

    def to_params(self) -> dict[str, str]:
        """Return the range as query parameters."""
        return {"min_time": self.min_time, "max_time": self.max_time}


@dataclass
class Account:
    """A wallet on the blockchain."""

    address: str
    balance: Hnt
    dc_balance: int
    sec_balance: Hst
    nonce: int
    speculative_nonce: int = 0
    speculative_sec_nonce: int = 0

    @classmethod
    def from_dict(cls, data: Mapping) -> Account:
        data = _mapping(data)
        return cls(
            address=_str(_require(data, "address")),
            balance=_hnt(_require(data, "balance")),
            dc_balance=_uint(_require(data, "dc_balance")),
            sec_balance=_hst(_require(data, "sec_balance")),
            nonce=_uint(_require(data, "nonce")),
            speculative_nonce=_uint(data.get("speculative_nonce", 0)),
            speculative_sec_nonce=_uint(data.get("speculative_sec_nonce", 0)),
        )


@dataclass
class Height:
    """The current block height of the chain."""

    height: int

    @classmethod
    def from_dict(cls, data: Mapping) -> Height:
        return cls(height=_uint(_require(data, "height")))


@dataclass
class Geocode:
    """Reverse geocoded names for an asserted location."""

    long_city: str | None = None
    long_country: str | None = None
    long_state: str | None = None
    long_street: str | None = None
    short_city: str | None = None
    short_country: str | None = None
    short_state: str | None = None
    short_street: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping) -> Geocode:
        data = _mapping(data)
        names = (
            "long_city",
            "long_country",
            "long_state",
            "long_street",
            "short_city",
            "short_country",
            "short_state",
            "short_street",
        )
        return cls(**{name: _optional(_str, data.get(name)) for name in names})


class HotspotStakingMode(Enum):
    """The mode in which a hotspot was added to the network."""

    FULL = "full"
    LIGHT = "light"
    DATA_ONLY = "dataonly"

    @classmethod
    def parse(cls, text: str) -> HotspotStakingMode:
        """Parse a staking mode name, ignoring case."""
        try:
            return cls(text.lower())
        except (ValueError, AttributeError):
            raise UnexpectedValueError(text) from None

    def __str__(self) -> str:
        return self.value


@dataclass
class Hotspot:
    """A hotspot on the blockchain."""

    address: str
    owner: str
    name: str | None
    added_height: int | None
    lat: float | None
    lng: float | None
    location: str | None
    mode: HotspotStakingMode
    elevation: int | None
    gain: Dbi | None
    geocode: Geocode
    nonce: int
    speculative_nonce: int = 0

    @classmethod
    def from_dict(cls, data: Mapping) -> Hotspot:
        data = _mapping(data)
        return cls(
            address=_str(_require(data, "address")),
            owner=_str(_require(data, "owner")),
            name=_optional(_str, data.get("name")),
            added_height=_optional(_uint, data.get("added_height")),
            lat=_optional(_float, data.get("lat")),
            lng=_optional(_float, data.get("lng")),
            location=_optional(_str, data.get("location")),
            mode=HotspotStakingMode.parse(_require(data, "mode")),
            elevation=_optional(_int, data.get("elevation")),
            gain=_optional(_dbi, data.get("gain")),
            geocode=Geocode.from_dict(_require(data, "geocode")),
            nonce=_uint(_require(data, "nonce")),
            speculative_nonce=_uint(data.get("speculative_nonce", 0)),
        )


@dataclass
class OraclePrediction:
    """A predicted oracle price and the time it is expected to take hold."""

    price: Usd
    time: int

    @classmethod
    def from_dict(cls, data: Mapping) -> OraclePrediction:
        return cls(
            price=_usd(_require(data, "price")),
            time=_uint(_require(data, "time")),
        )


@dataclass
class OraclePrice:
    """The oracle price set at a block."""

    price: Usd
    block: int

    @classmethod
    def from_dict(cls, data: Mapping) -> OraclePrice:
        return cls(
            price=_usd(_require(data, "price")),
            block=_uint(_require(data, "block")),
        )


@dataclass(frozen=True)
class Subnet:
    """A device address subnet owned by an OUI."""

    base: int
    mask: int

    @classmethod
    def from_dict(cls, data: Mapping) -> Subnet:
        return cls(
            base=_uint(_require(data, "base")),
            mask=_uint(_require(data, "mask")),
        )

    def __str__(self) -> str:
        return f"{self.base}/{self.mask}"


@dataclass
class Oui:
    """An OUI on the blockchain."""

    oui: int
    owner: str
    nonce: int
    addresses: list[str] = field(default_factory=list)
    subnets: list[Subnet] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping) -> Oui:
        return cls(
            oui=_uint(_require(data, "oui")),
            owner=_str(_require(data, "owner")),
            nonce=_uint(_require(data, "nonce")),
            addresses=_list(_str, _require(data, "addresses")),
            subnets=_list(Subnet.from_dict, _require(data, "subnets")),
        )


@dataclass
class OuiStats:
    """Statistics for OUIs."""

    count: int

    @classmethod
    def from_dict(cls, data: Mapping) -> OuiStats:
        return cls(count=_uint(_require(data, "count")))


class PenaltyType(Enum):
    """The kinds of penalty reported for a validator."""

    PERFORMANCE = "performance"
    TENURE = "tenure"
    DKG = "dkg"


@dataclass
class Penalty:
    """A penalty a validator received."""

    kind: PenaltyType
    height: int
    amount: float

    @classmethod
    def from_dict(cls, data: Mapping) -> Penalty:
        kind = _require(data, "type")
        try:
            penalty_type = PenaltyType(kind)
        except ValueError:
            raise UnexpectedValueError(kind) from None
        return cls(
            kind=penalty_type,
            height=_uint(_require(data, "height")),
            amount=_float(_require(data, "amount")),
        )


@dataclass
class Validator:
    """A validator on the blockchain."""

    address: str
    owner: str
    stake: Hnt
    last_heartbeat: int
    version_heartbeat: int
    stake_status: str
    penalty: float
    penalties: list[Penalty]
    block_added: int
    block: int

    @classmethod
    def from_dict(cls, data: Mapping) -> Validator:
        return cls(
            address=_str(_require(data, "address")),
            owner=_str(_require(data, "owner")),
            stake=_hnt(_require(data, "stake")),
            last_heartbeat=_uint(_require(data, "last_heartbeat")),
            version_heartbeat=_uint(_require(data, "version_heartbeat")),
            stake_status=_str(_require(data, "stake_status")),
            penalty=_float(_require(data, "penalty")),
            penalties=_list(Penalty.from_dict, _require(data, "penalties")),
            block_added=_uint(_require(data, "block_added")),
            block=_uint(_require(data, "block")),
        )


@dataclass
class StakeStats:
    """Stats for one validator stake status."""

    amount: float
    count: int

    @classmethod
    def from_dict(cls, data: Mapping) -> StakeStats:
        return cls(
            amount=_float(_require(data, "amount")),
            count=_uint(_require(data, "count")),
        )


@dataclass
class ValidatorStats:
    """Stats for validators; ``active`` is None when unknown."""

    active: int | None
    staked: StakeStats
    unstaked: StakeStats
    cooldown: StakeStats

    @classmethod
    def from_dict(cls, data: Mapping) -> ValidatorStats:
        data = _mapping(data)
        return cls(
            active=_optional(_uint, data.get("active")),
            staked=StakeStats.from_dict(_require(data, "staked")),
            unstaked=StakeStats.from_dict(_require(data, "unstaked")),
            cooldown=StakeStats.from_dict(_require(data, "cooldown")),
        )


@dataclass
class Reward:
    """A reward earned by a validator in a block."""

    account: str
    amount: Hnt
    block: int
    gateway: str
    hash: str
    timestamp: datetime

    @classmethod
    def from_dict(cls, data: Mapping) -> Reward:
        return cls(
            account=_str(_require(data, "account")),
            amount=_hnt(_require(data, "amount")),
            block=_int(_require(data, "block")),
            gateway=_str(_require(data, "gateway")),
            hash=_str(_require(data, "hash")),
            timestamp=_timestamp(_require(data, "timestamp")),
        )