"""Tests for typed fixed-point quantities."""

from decimal import Decimal

import pytest

from lp_pool.amounts import (
    LpTokenAmount,
    Percentage,
    Price,
    StakedTokenAmount,
    TokenAmount,
)
from lp_pool.math.fixed_point import PRECISION_FACTOR, to_scaled
from lp_pool.safe_int import UINT64_MAX, DivisionByZero, RangeOverflow, Underflow


class TestQuantityConstruction:
    """Tests for constructing quantities."""

    def test_from_decimal_scales(self):
        """from_decimal stores the scaled integer."""
        assert TokenAmount.from_decimal(90).value == 90 * PRECISION_FACTOR

    def test_to_decimal(self):
        """to_decimal converts back for display."""
        assert StakedTokenAmount.from_decimal("6").to_decimal() == Decimal(6)

    def test_negative_rejected(self):
        """Quantities are unsigned."""
        with pytest.raises(Underflow):
            TokenAmount(-1)

    def test_above_uint64_rejected(self):
        """Stored quantities must fit 64 bits."""
        with pytest.raises(RangeOverflow):
            LpTokenAmount(UINT64_MAX + 1)

    def test_requires_int(self):
        """Raw values must be integers."""
        with pytest.raises(TypeError):
            TokenAmount(1.5)  # type: ignore[arg-type]

    def test_str_is_decimal(self):
        """str() shows the decimal value."""
        assert str(TokenAmount.from_decimal("1.5")) == "1.5"


class TestQuantityKinds:
    """Quantities of different kinds never mix implicitly."""

    def test_same_kind_arithmetic(self):
        """Adding and subtracting within a kind works."""
        a = TokenAmount.from_decimal(10)
        b = TokenAmount.from_decimal(4)
        assert (a + b) == TokenAmount.from_decimal(14)
        assert (a - b) == TokenAmount.from_decimal(6)

    def test_cross_kind_addition_raises(self):
        """TokenAmount + LpTokenAmount is a TypeError."""
        with pytest.raises(TypeError, match="TokenAmount and LpTokenAmount"):
            TokenAmount.from_decimal(1) + LpTokenAmount.from_decimal(1)  # type: ignore[operator]

    def test_cross_kind_equality_is_false(self):
        """Equal raw values of different kinds are not equal."""
        assert TokenAmount(5) != StakedTokenAmount(5)

    def test_cross_kind_ordering_raises(self):
        """Ordering across kinds is undefined."""
        with pytest.raises(TypeError):
            _ = TokenAmount(5) < LpTokenAmount(6)  # type: ignore[operator]

    def test_sub_underflow_raises(self):
        """Subtracting more than held raises Underflow."""
        with pytest.raises(Underflow):
            TokenAmount(1) - TokenAmount(2)


class TestProRata:
    """Tests for proportional shares."""

    def test_pro_rata(self):
        """Half the LP supply claims half the reserve."""
        reserve = TokenAmount.from_decimal(190)
        share = reserve.pro_rata(LpTokenAmount.from_decimal(95), LpTokenAmount.from_decimal(190))
        assert share == TokenAmount.from_decimal(95)

    def test_pro_rata_keeps_kind(self):
        """The result has the kind of the scaled quantity."""
        staked = StakedTokenAmount.from_decimal(36)
        share = staked.pro_rata(LpTokenAmount(1), LpTokenAmount(2))
        assert isinstance(share, StakedTokenAmount)
        assert share == StakedTokenAmount.from_decimal(18)

    def test_pro_rata_mixed_ratio_raises(self):
        """Numerator and denominator must share a kind."""
        with pytest.raises(TypeError):
            TokenAmount(10).pro_rata(LpTokenAmount(1), TokenAmount(2))

    def test_pro_rata_zero_whole_raises(self):
        """A zero denominator is an arithmetic defect."""
        with pytest.raises(DivisionByZero):
            TokenAmount(10).pro_rata(LpTokenAmount(1), LpTokenAmount(0))


class TestPrice:
    """Tests for Price conversion."""

    def test_convert(self):
        """6 staked at 1.5 is worth 9 base token."""
        price = Price.from_decimal("1.5")
        assert price.convert(StakedTokenAmount.from_decimal(6)) == TokenAmount.from_decimal(9)

    def test_convert_requires_staked_amount(self):
        """Only staked amounts are priced."""
        with pytest.raises(TypeError):
            Price.from_decimal(1).convert(TokenAmount(1))  # type: ignore[arg-type]


class TestPercentage:
    """Tests for Percentage."""

    def test_from_percent(self):
        """0.1 percent is stored as 0.001."""
        assert Percentage.from_percent("0.1").value == to_scaled("0.001")

    def test_above_one_rejected(self):
        """Percentages cannot exceed 100%."""
        with pytest.raises(ValueError, match="above 100%"):
            Percentage(PRECISION_FACTOR + 1)

    def test_complement(self):
        """complement() is 1 - self."""
        assert Percentage.from_percent(9).complement() == Percentage.from_percent(91)

    def test_apply(self):
        """apply() takes a fraction of an amount and keeps its kind."""
        half = Percentage.from_percent(50)
        result = half.apply(TokenAmount.from_decimal(9))
        assert result == TokenAmount.from_decimal("4.5")

    def test_to_percent(self):
        """to_percent() converts back to 0-100."""
        assert Percentage.one().to_percent() == Decimal(100)
