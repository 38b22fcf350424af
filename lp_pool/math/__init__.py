"""Mathematical utilities for the LP pool.

This package provides the fixed-point primitives used by the pool:
- PRECISION_FACTOR: 2^32 scaling for every stored quantity
- to_scaled / from_scaled: decimal <-> scaled integer conversion
"""

from lp_pool.math.fixed_point import (
    PRECISION_FACTOR,
    from_scaled,
    mul_down,
    percent_to_scaled,
    to_scaled,
)

__all__ = [
    "PRECISION_FACTOR",
    "to_scaled",
    "from_scaled",
    "percent_to_scaled",
    "mul_down",
]
