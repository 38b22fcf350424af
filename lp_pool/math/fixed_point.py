"""Binary fixed-point helpers for pool balances.

All values are stored as unsigned integers scaled by 2^32. Conversion from
decimal input rounds half up (away from zero for the non-negative domain);
the same rule is used for every conversion so round trips are deterministic.
Fixed-point multiplication rounds toward zero.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from lp_pool.safe_int import RangeOverflow, S

__all__ = [
    # Constants
    "PRECISION_FACTOR",
    # Types
    "DecimalLike",
    # Functions
    "to_decimal",
    "to_scaled",
    "from_scaled",
    "percent_to_scaled",
    "mul_down",
]

PRECISION_FACTOR = 2**32

# Fee inputs are percentages; stored fees are fractions of 1
PERCENT = Decimal("0.01")

# Inputs at or above this scale past UINT64_MAX
SCALED_INPUT_LIMIT = Decimal(2**32)

# Digits a scaled stored balance can need on top of the input's own
SCALE_DIGITS = 20

DecimalLike = Decimal | int | float | str


def to_decimal(x: DecimalLike) -> Decimal:
    """Coerce user input to Decimal.

    Floats go through their shortest repr, so 1.5 and 0.1 convert to the
    decimals a caller typed rather than their binary expansion.

    Raises:
        ValueError: If x is not a finite number
    """
    if isinstance(x, bool):
        raise ValueError(f"Expected a number, got {x!r}")
    if isinstance(x, float):
        x = repr(x)
    try:
        d = Decimal(x)
    except (InvalidOperation, TypeError) as err:
        raise ValueError(f"Expected a number, got {x!r}") from err
    if not d.is_finite():
        raise ValueError(f"Expected a finite number, got {x!r}")
    return d


def to_scaled(x: DecimalLike) -> int:
    """Convert a decimal value to its scaled integer representation.

    Computes round(x * PRECISION_FACTOR) with ROUND_HALF_UP. The product is
    formed exactly, so the rounding step sees every digit of x.

    Raises:
        ValueError: If x is negative or not a finite number
        RangeOverflow: If the scaled value does not fit a stored balance
    """
    d = to_decimal(x)
    if d < 0:
        raise ValueError(f"to_scaled requires non-negative input, got {d}")
    if d >= SCALED_INPUT_LIMIT:
        raise RangeOverflow(f"Value exceeds uint64 max once scaled: {d}")
    with localcontext() as ctx:
        ctx.prec = len(d.as_tuple().digits) + SCALE_DIGITS
        scaled = (d * PRECISION_FACTOR).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return S(int(scaled)).to_uint64()


def from_scaled(x: int) -> Decimal:
    """Convert a scaled integer back to a Decimal for display."""
    return Decimal(x) / Decimal(PRECISION_FACTOR)


def percent_to_scaled(p: DecimalLike) -> int:
    """Convert a 0-100 percentage to a scaled fraction (0.1 -> 0.001)."""
    d = to_decimal(p)
    with localcontext() as ctx:
        ctx.prec = len(d.as_tuple().digits) + 2
        fraction = d * PERCENT
    return to_scaled(fraction)


def mul_down(a: int, b: int) -> int:
    """Multiply two scaled values: (a * b) // 2^32."""
    return ((S(a) * S(b)) // PRECISION_FACTOR).value
