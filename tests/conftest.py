"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest
import structlog

from lp_pool import VALUE_WEIGHTED_POOL_CONFIG, Pool

FIXTURES_DIR = Path(__file__).parent / "fixtures"
SCENARIOS_DIR = FIXTURES_DIR / "scenarios"

# Canonical pool parameters: price 1.5, target 90, fees 0.1% .. 9%
CANONICAL_PARAMS = {
    "price": "1.5",
    "liquidity_target": "90",
    "min_fee": "0.1",
    "max_fee": "9",
}


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo logging configuration applied by CLI tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def scenarios_dir() -> Path:
    """Return the scenario fixtures directory path."""
    return SCENARIOS_DIR


@pytest.fixture
def pool() -> Pool:
    """A freshly initialized pool with the canonical parameters."""
    return Pool.initialize(**CANONICAL_PARAMS)


@pytest.fixture
def funded_pool(pool: Pool) -> Pool:
    """The canonical pool after add_liquidity(100): 190 base token, 190 LP."""
    pool.add_liquidity(100)
    return pool


@pytest.fixture
def value_weighted_pool() -> Pool:
    """An empty pool that mints LP tokens in proportion to pool value."""
    return Pool.initialize(**CANONICAL_PARAMS, config=VALUE_WEIGHTED_POOL_CONFIG)
