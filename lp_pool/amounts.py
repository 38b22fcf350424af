"""Typed fixed-point quantities.

Each kind of pool quantity gets its own wrapper so a staked-token balance can
never be added to a base-token balance by accident. Arithmetic is only
defined between values of the same kind; crossing kinds goes through a named
conversion (``Price.convert``, ``Percentage.apply``, ``pro_rata``).

All values are unsigned integers scaled by PRECISION_FACTOR (2^32).
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TypeVar

from lp_pool.math.fixed_point import (
    PRECISION_FACTOR,
    DecimalLike,
    from_scaled,
    mul_down,
    percent_to_scaled,
    to_scaled,
)
from lp_pool.safe_int import S

__all__ = [
    "Quantity",
    "Price",
    "TokenAmount",
    "StakedTokenAmount",
    "LpTokenAmount",
    "Percentage",
]

Q = TypeVar("Q", bound="Quantity")


@dataclass(frozen=True, order=True)
class Quantity:
    """Base class for scaled, non-negative quantities.

    Equality and ordering only hold between instances of the same class;
    comparing a TokenAmount with an LpTokenAmount is a TypeError for ordering
    and always unequal for ``==``.
    """

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError(f"{type(self).__name__} requires int, got {type(self.value).__name__}")
        # Validates non-negative and uint64 range
        S(self.value).to_uint64()

    @classmethod
    def from_decimal(cls: type[Q], x: DecimalLike) -> Q:
        """Create from a decimal value (will be scaled by 2^32)."""
        return cls(to_scaled(x))

    @classmethod
    def zero(cls: type[Q]) -> Q:
        return cls(0)

    def to_decimal(self) -> Decimal:
        """Convert to Decimal for display."""
        return from_scaled(self.value)

    def __add__(self: Q, other: Q) -> Q:
        _require_same_kind(self, other, "+")
        return type(self)((S(self.value) + S(other.value)).to_uint64())

    def __sub__(self: Q, other: Q) -> Q:
        """Subtract other from self.

        Raises:
            Underflow: If other is larger than self
        """
        _require_same_kind(self, other, "-")
        return type(self)((S(self.value) - S(other.value)).value)

    def pro_rata(self: Q, part: Quantity, whole: Quantity) -> Q:
        """Return self * part / whole, rounding down.

        ``part`` and ``whole`` must be of the same kind as each other; the
        result keeps the kind of self.

        Raises:
            DivisionByZero: If whole is zero
        """
        _require_same_kind(part, whole, "/")
        return type(self)(((S(self.value) * S(part.value)) // S(whole.value)).to_uint64())

    def __bool__(self) -> bool:
        return self.value != 0

    def __str__(self) -> str:
        return str(self.to_decimal())


class TokenAmount(Quantity):
    """Amount of base token."""


class StakedTokenAmount(Quantity):
    """Amount of staked token."""


class LpTokenAmount(Quantity):
    """Amount of LP shares."""


class Price(Quantity):
    """Base token paid per one staked token."""

    def convert(self, staked: StakedTokenAmount) -> TokenAmount:
        """Value a staked-token amount in base token at this price."""
        if not isinstance(staked, StakedTokenAmount):
            raise TypeError(f"Price converts StakedTokenAmount, got {type(staked).__name__}")
        return TokenAmount(S(mul_down(staked.value, self.value)).to_uint64())


class Percentage(Quantity):
    """Fee fraction in [0, 1], scaled by 2^32."""

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.value > PRECISION_FACTOR:
            raise ValueError(f"Percentage above 100%: {self.value} > {PRECISION_FACTOR}")

    @classmethod
    def from_percent(cls, p: DecimalLike) -> Percentage:
        """Create from a 0-100 percentage (0.1 means 0.1%)."""
        return cls(percent_to_scaled(p))

    @classmethod
    def one(cls) -> Percentage:
        return cls(PRECISION_FACTOR)

    def complement(self) -> Percentage:
        """Return 1 - self."""
        return Percentage(PRECISION_FACTOR - self.value)

    def apply(self, amount: Q) -> Q:
        """Return this fraction of amount, rounding down."""
        if isinstance(amount, Percentage):
            raise TypeError("Percentage.apply expects an amount, not a Percentage")
        return type(amount)(mul_down(amount.value, self.value))

    def to_percent(self) -> Decimal:
        """Convert back to a 0-100 percentage for display."""
        return self.to_decimal() * 100


def _require_same_kind(a: Quantity, b: Quantity, op: str) -> None:
    if type(a) is not type(b):
        raise TypeError(
            f"Cannot apply '{op}' to {type(a).__name__} and {type(b).__name__}"
        )
