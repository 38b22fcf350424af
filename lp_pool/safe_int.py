"""Safe integer wrapper for arithmetic on scaled pool balances.

This module provides SafeInt, a lightweight wrapper that makes arithmetic
operations safe by default:
- Division by zero raises DivisionByZero
- Subtraction underflow raises Underflow
- Products that leave the 128-bit intermediate range raise RangeOverflow
- Balances that do not fit an unsigned 64-bit word are caught on conversion

Usage pattern:
    from lp_pool.safe_int import S

    def rescale(amount: int, price: int) -> int:
        # Wrap at entry
        sa, sp = S(amount), S(price)

        # Natural arithmetic - automatically safe
        result = (sa * sp) // PRECISION_FACTOR

        # Unwrap at exit
        return result.to_uint64()
"""

from __future__ import annotations

UINT64_MAX = 2**64 - 1
UINT128_MAX = 2**128 - 1


class SafeIntError(ArithmeticError):
    """Base class for SafeInt arithmetic errors.

    These signal a broken internal invariant, never a bad user request.
    """

    pass


class DivisionByZero(SafeIntError):
    """Division by zero."""

    pass


class Underflow(SafeIntError):
    """Subtraction would produce negative result."""

    pass


class RangeOverflow(SafeIntError):
    """Value exceeds the representable unsigned range."""

    pass


class SafeInt:
    """Unsigned integer with checked arithmetic.

    Arithmetic operators raise descriptive errors instead of producing
    invalid results:
    - Negative results from subtraction raise Underflow
    - Division by zero raises DivisionByZero
    - Sums and products above UINT128_MAX raise RangeOverflow

    Attributes:
        value: The underlying integer value (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | SafeInt) -> None:
        """Create a SafeInt from an integer or another SafeInt.

        Raises:
            TypeError: If value is not an int or SafeInt
            Underflow: If value is negative
        """
        if isinstance(value, SafeInt):
            self._value = value._value
        elif isinstance(value, int) and not isinstance(value, bool):
            if value < 0:
                raise Underflow(f"SafeInt cannot hold negative value {value}")
            self._value = value
        else:
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    def __repr__(self) -> str:
        return f"SafeInt({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def __hash__(self) -> int:
        return hash(self._value)

    # --- Arithmetic operations ---

    def __add__(self, other: SafeInt | int) -> SafeInt:
        return _checked(self._value + _extract_value(other), "+")

    def __sub__(self, other: SafeInt | int) -> SafeInt:
        """Subtract other from self.

        Raises:
            Underflow: If result would be negative
        """
        other_val = _extract_value(other)
        result = self._value - other_val
        if result < 0:
            raise Underflow(f"Underflow: {self._value} - {other_val} = {result}")
        return SafeInt(result)

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        return _checked(self._value * _extract_value(other), "*")

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        """Integer division, rounding toward zero.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Division by zero: {self._value} // 0")
        return SafeInt(self._value // other_val)

    # --- Comparison operations ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeInt):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    # --- Conversion ---

    def __bool__(self) -> bool:
        return self._value != 0

    # --- Named operations ---

    def min(self, other: SafeInt | int) -> SafeInt:
        """Return minimum of self and other."""
        return SafeInt(min(self._value, _extract_value(other)))

    def checked_sub(self, other: SafeInt | int) -> SafeInt | None:
        """Subtract, returning None on underflow instead of raising.

        Unlike __sub__, this returns None instead of raising Underflow.
        Used where an underflow is an expected, user-facing rejection.
        """
        result = self._value - _extract_value(other)
        if result < 0:
            return None
        return SafeInt(result)

    def to_uint64(self) -> int:
        """Convert to int, validating that it fits a stored balance.

        Raises:
            RangeOverflow: If value exceeds 2^64-1
        """
        if self._value > UINT64_MAX:
            raise RangeOverflow(f"Value exceeds uint64 max: {self._value}")
        return self._value


def _checked(result: int, op: str) -> SafeInt:
    if result > UINT128_MAX:
        raise RangeOverflow(f"Intermediate result of '{op}' exceeds uint128 max: {result}")
    return SafeInt(result)


def _extract_value(x: SafeInt | int) -> int:
    """Extract integer value from SafeInt or int."""
    if isinstance(x, SafeInt):
        return x._value
    return x


# Convenience alias for concise code
S = SafeInt
