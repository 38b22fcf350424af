"""Tests for the pydantic boundary models."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from lp_pool.models import AddLiquidity, PoolParams, PoolSnapshot, RemoveLiquidity, Scenario, Swap


class TestPoolParams:
    """Tests for PoolParams parsing."""

    def test_accepts_camel_case_aliases(self):
        """Scenario files use camelCase keys."""
        params = PoolParams.model_validate(
            {"price": "1.5", "liquidityTarget": "90", "minFee": "0.1", "maxFee": "9"}
        )
        assert params.liquidity_target == Decimal(90)
        assert params.min_fee == Decimal("0.1")

    def test_accepts_field_names(self):
        """Python callers can use snake_case names."""
        params = PoolParams(price=Decimal(1), liquidity_target=Decimal(1), min_fee=0, max_fee=1)
        assert params.max_fee == Decimal(1)

    def test_out_of_range_fees_are_left_to_the_pool(self):
        """Fee ordering is validated by Pool.initialize, not the model."""
        params = PoolParams.model_validate(
            {"price": "1", "liquidityTarget": "1", "minFee": "50", "maxFee": "10"}
        )
        assert params.min_fee > params.max_fee


class TestScenario:
    """Tests for Scenario parsing."""

    def test_operations_are_discriminated(self):
        """The op field selects the operation model."""
        scenario = Scenario.model_validate(
            {
                "pool": {"price": "1", "liquidityTarget": "1", "minFee": "0", "maxFee": "1"},
                "operations": [
                    {"op": "add_liquidity", "amount": "1"},
                    {"op": "remove_liquidity", "amount": "2"},
                    {"op": "swap", "amount": "3"},
                ],
            }
        )
        assert [type(op) for op in scenario.operations] == [AddLiquidity, RemoveLiquidity, Swap]

    def test_operations_default_empty(self):
        """A scenario may list no operations."""
        scenario = Scenario.model_validate(
            {"pool": {"price": "1", "liquidityTarget": "1", "minFee": "0", "maxFee": "1"}}
        )
        assert scenario.operations == []

    def test_unknown_operation_rejected(self):
        """Unknown op names fail validation."""
        with pytest.raises(ValidationError):
            Scenario.model_validate(
                {
                    "pool": {"price": "1", "liquidityTarget": "1", "minFee": "0", "maxFee": "1"},
                    "operations": [{"op": "mint", "amount": "1"}],
                }
            )


class TestPoolSnapshot:
    """Tests for PoolSnapshot."""

    def test_json_dump_uses_strings(self):
        """Decimals serialize as strings in JSON mode."""
        snap = PoolSnapshot(
            price=Decimal("1.5"),
            token_amount=Decimal(90),
            st_token_amount=Decimal(0),
            lp_token_amount=Decimal(90),
            liquidity_target=Decimal(90),
            min_fee=Decimal("0.1"),
            max_fee=Decimal(9),
        )
        assert snap.model_dump(mode="json")["price"] == "1.5"
