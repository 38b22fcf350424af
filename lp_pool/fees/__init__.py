"""Fee curve and quote types for the LP pool.

Usage:
    from lp_pool.fees import interpolated_fee, apply_fee

    fee = interpolated_fee(min_fee, max_fee, reserve_after, liquidity_target)
    net = apply_fee(gross, fee)
"""

from lp_pool.fees.curve import apply_fee, interpolated_fee
from lp_pool.fees.result import SwapQuote, WithdrawalQuote

__all__ = [
    # Curve
    "interpolated_fee",
    "apply_fee",
    # Results
    "SwapQuote",
    "WithdrawalQuote",
]
