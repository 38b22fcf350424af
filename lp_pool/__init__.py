"""Single-asset LP pool with a reserve-driven fee curve."""

from lp_pool.amounts import LpTokenAmount, Percentage, Price, StakedTokenAmount, TokenAmount
from lp_pool.config import DEFAULT_POOL_CONFIG, VALUE_WEIGHTED_POOL_CONFIG, MintRule, PoolConfig
from lp_pool.errors import (
    InsufficientLiquidity,
    InsufficientStakedTokens,
    InvalidFee,
    InvalidTokenAmount,
    LpPoolError,
)
from lp_pool.math import PRECISION_FACTOR, from_scaled, to_scaled
from lp_pool.pool import Pool

__version__ = "0.1.0"
__all__ = [
    "Pool",
    # Configuration
    "PoolConfig",
    "MintRule",
    "DEFAULT_POOL_CONFIG",
    "VALUE_WEIGHTED_POOL_CONFIG",
    # Quantities
    "Price",
    "TokenAmount",
    "StakedTokenAmount",
    "LpTokenAmount",
    "Percentage",
    # Fixed point
    "PRECISION_FACTOR",
    "to_scaled",
    "from_scaled",
    # Errors
    "LpPoolError",
    "InvalidFee",
    "InvalidTokenAmount",
    "InsufficientLiquidity",
    "InsufficientStakedTokens",
    "__version__",
]
