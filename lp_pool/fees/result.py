"""Computed results of pool operations.

Quotes are produced before any pool field is written, so a quote that
exists is a quote the pool can commit.
"""

from dataclasses import dataclass

from lp_pool.amounts import LpTokenAmount, Percentage, StakedTokenAmount, TokenAmount


@dataclass(frozen=True)
class SwapQuote:
    """Result of pricing a swap of staked token into base token.

    Attributes:
        staked_in: Staked token the caller pays in
        gross_out: Base token owed at the undiscounted price
        fee: Fee fraction taken from gross_out
        net_out: Base token actually paid out
    """

    staked_in: StakedTokenAmount
    gross_out: TokenAmount
    fee: Percentage
    net_out: TokenAmount

    @property
    def fee_amount(self) -> TokenAmount:
        """Base token withheld by the pool."""
        return self.gross_out - self.net_out


@dataclass(frozen=True)
class WithdrawalQuote:
    """Result of pricing an LP burn.

    Attributes:
        lp_burned: LP tokens burned
        gross_out: Pro-rata share of the base reserve
        fee: Interpolated withdrawal fee fraction
        net_out: Base token paid out (gross_out when the fee is not applied)
        staked_out: Pro-rata share of the staked reserve
    """

    lp_burned: LpTokenAmount
    gross_out: TokenAmount
    fee: Percentage
    net_out: TokenAmount
    staked_out: StakedTokenAmount

    @property
    def fee_amount(self) -> TokenAmount:
        """Base token retained by the pool."""
        return self.gross_out - self.net_out
