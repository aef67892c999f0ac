"""Fixed-scale decimal amounts used by the blockchain API."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_DOWN, Decimal, InvalidOperation
from typing import ClassVar

from .errors import DecimalsError, NumberError

_MAX_SCALE = 8


@dataclass(frozen=True)
class ScaledDecimal:
    """A decimal amount stored on chain as an integer number of units."""

    value: Decimal

    SCALE: ClassVar[int] = 8
    SCALAR: ClassVar[int] = 100_000_000

    @classmethod
    def parse(cls, text: str):
        """Parse a plain or scientific decimal string with at most 8 decimals."""
        if not isinstance(text, str) or text != text.strip():
            raise DecimalsError(str(text))
        try:
            number = Decimal(text)
        except InvalidOperation:
            raise DecimalsError(text) from None
        if not number.is_finite():
            raise DecimalsError(text)
        exponent = number.as_tuple().exponent
        if max(0, -exponent) > _MAX_SCALE:
            raise DecimalsError(text)
        return cls(number)

    @classmethod
    def from_units(cls, units: int):
        """Build an amount from its integer number of smallest units."""
        if isinstance(units, bool) or not isinstance(units, int):
            raise NumberError(str(units))
        return cls(Decimal(units).scaleb(-cls.SCALE))

    def to_units(self) -> int:
        """Return the amount as an integer number of smallest units."""
        scaled = self.value * self.SCALAR
        return int(scaled.to_integral_value(rounding=ROUND_DOWN))

    def __str__(self) -> str:
        return format(self.value, "f")


@dataclass(frozen=True)
class Hnt(ScaledDecimal):
    """An amount of HNT, 8 decimal places."""


@dataclass(frozen=True)
class Hst(ScaledDecimal):
    """An amount of security tokens, 8 decimal places."""


@dataclass(frozen=True)
class Usd(ScaledDecimal):
    """A US dollar price, 8 decimal places."""


@dataclass(frozen=True)
class Dbi(ScaledDecimal):
    """An antenna gain in dBi, 1 decimal place."""

    SCALE: ClassVar[int] = 1
    SCALAR: ClassVar[int] = 10