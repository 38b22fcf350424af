"""Reserve-driven fee curve.

The fee rises linearly from min_fee to max_fee as the projected base-token
reserve falls from liquidity_target to zero:

    fee = max_fee - (max_fee - min_fee) * min(reserve_after, target) / target

At or above the target the pool charges min_fee. Both swaps and
withdrawals price themselves off this curve.
"""

from __future__ import annotations

import structlog

from lp_pool.amounts import Percentage, TokenAmount
from lp_pool.safe_int import S

logger = structlog.get_logger()


def interpolated_fee(
    min_fee: Percentage,
    max_fee: Percentage,
    reserve_after: TokenAmount,
    liquidity_target: TokenAmount,
) -> Percentage:
    """Fee fraction for an operation leaving reserve_after in the pool.

    Args:
        min_fee: Fee charged while the reserve stays at or above the target
        max_fee: Fee charged when the reserve is fully drained
        reserve_after: Projected base-token reserve after the operation
        liquidity_target: Reserve level where the curve bottoms out

    Returns:
        Fee fraction in [min_fee, max_fee]

    Raises:
        DivisionByZero: If liquidity_target is zero
        Underflow: If min_fee > max_fee
    """
    spread = S(max_fee.value) - S(min_fee.value)
    covered = S(reserve_after.value).min(liquidity_target.value)
    discount = (spread * covered) // S(liquidity_target.value)
    fee = Percentage((S(max_fee.value) - discount).value)
    logger.debug(
        "fee_interpolated",
        reserve_after=str(reserve_after),
        liquidity_target=str(liquidity_target),
        fee_percent=str(fee.to_percent()),
    )
    return fee


def apply_fee(amount: TokenAmount, fee: Percentage) -> TokenAmount:
    """Return amount * (1 - fee), rounding down."""
    return fee.complement().apply(amount)
