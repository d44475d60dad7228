"""On-wire token amounts.

The API reports every balance as an integer count of the token's smallest
unit. HNT and HST use 8 decimal places ("bones"), data credits have none.
Each amount type has its own parse function so a field can never be decoded
with the wrong unit.
"""

from decimal import Decimal
from dataclasses import dataclass
from typing import Any

from .exceptions import DecodeError


def _parse_units(value: Any, label: str) -> int:
    """Parse a non-negative integer unit count from a JSON value."""
    if isinstance(value, bool):
        raise DecodeError(f"Invalid {label} amount: {value!r}")
    if isinstance(value, int):
        units = value
    elif isinstance(value, float) and value.is_integer():
        units = int(value)
    elif isinstance(value, str) and value.strip().isdigit():
        units = int(value.strip())
    else:
        raise DecodeError(f"Invalid {label} amount: {value!r}")
    if units < 0:
        raise DecodeError(f"Negative {label} amount: {units}")
    return units


@dataclass(frozen=True, order=True)
class _TokenAmount:
    bones: int

    DECIMALS = 8

    def to_decimal(self) -> Decimal:
        return Decimal(self.bones).scaleb(-self.DECIMALS)

    def __str__(self) -> str:
        return f"{self.to_decimal():.{self.DECIMALS}f}"

    def __int__(self) -> int:
        return self.bones


@dataclass(frozen=True, order=True)
class Hnt(_TokenAmount):
    """HNT amount, stored as bones (1 HNT = 100_000_000 bones)."""


@dataclass(frozen=True, order=True)
class Hst(_TokenAmount):
    """Security token amount, stored with the same precision as HNT."""


@dataclass(frozen=True, order=True)
class Dc:
    """Data credit amount. Data credits are not divisible."""
    amount: int

    def to_decimal(self) -> Decimal:
        return Decimal(self.amount)

    def __str__(self) -> str:
        return str(self.amount)

    def __int__(self) -> int:
        return self.amount


def parse_hnt(value: Any) -> Hnt:
    return Hnt(_parse_units(value, "HNT"))


def parse_hst(value: Any) -> Hst:
    return Hst(_parse_units(value, "HST"))


def parse_dc(value: Any) -> Dc:
    return Dc(_parse_units(value, "DC"))
