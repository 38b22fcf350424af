"""Single-asset liquidity pool.

Holders of a staked token swap it into the base token at a fixed price, less
a fee that grows as the base reserve drains below its liquidity target.
Liquidity providers deposit base token for LP shares and redeem shares for a
pro-rata cut of both reserves.

Every transition computes its full result before touching any field, so a
rejected call leaves the pool exactly as it was.

Example:
    pool = Pool.initialize(price=1.5, liquidity_target=90, min_fee=0.1, max_fee=9)
    pool.add_liquidity(100)   # Decimal('100')
    pool.swap(6)              # ~Decimal('8.991')
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import TypeVar

import structlog

from lp_pool.amounts import (
    LpTokenAmount,
    Percentage,
    Price,
    Quantity,
    StakedTokenAmount,
    TokenAmount,
)
from lp_pool.config import DEFAULT_POOL_CONFIG, MintRule, PoolConfig
from lp_pool.errors import (
    InsufficientLiquidity,
    InsufficientStakedTokens,
    InvalidFee,
    InvalidTokenAmount,
)
from lp_pool.fees import SwapQuote, WithdrawalQuote, apply_fee, interpolated_fee
from lp_pool.math.fixed_point import DecimalLike, from_scaled, mul_down, to_decimal
from lp_pool.models import PoolSnapshot
from lp_pool.safe_int import S

logger = structlog.get_logger()

MAX_FEE_PERCENT = Decimal(100)

Q = TypeVar("Q", bound=Quantity)


@dataclass
class Pool:
    """Pool state: reserves, LP supply and immutable fee parameters.

    Create pools with Pool.initialize; the constructor performs no validation.

    Attributes:
        price: Base token per staked token (immutable)
        token_amount: Base-token reserve
        st_token_amount: Staked-token reserve
        lp_token_amount: Outstanding LP supply
        liquidity_target: Reserve at which the fee bottoms out (immutable)
        min_fee: Fee while the reserve stays above target (immutable)
        max_fee: Fee when the reserve is fully drained (immutable)
        config: Behavior flags, see PoolConfig
    """

    price: Price
    token_amount: TokenAmount
    st_token_amount: StakedTokenAmount
    lp_token_amount: LpTokenAmount
    liquidity_target: TokenAmount
    min_fee: Percentage
    max_fee: Percentage
    config: PoolConfig = field(default=DEFAULT_POOL_CONFIG, compare=False)

    @classmethod
    def initialize(
        cls,
        price: DecimalLike,
        liquidity_target: DecimalLike,
        min_fee: DecimalLike,
        max_fee: DecimalLike,
        config: PoolConfig | None = None,
    ) -> Pool:
        """Create a pool.

        Args:
            price: Base token paid per staked token
            liquidity_target: Base reserve at which the fee curve bottoms out
            min_fee: Minimum fee as a percentage (0.1 means 0.1%)
            max_fee: Maximum fee as a percentage
            config: Behavior flags. Uses DEFAULT_POOL_CONFIG if not provided.

        Returns:
            A pool seeded with liquidity_target base token and as many LP
            tokens, or an empty pool when config.seed_liquidity is False.

        Raises:
            InvalidFee: If fees are outside [0, 100] or out of order, or if
                liquidity_target or price is not positive
        """
        config = config or DEFAULT_POOL_CONFIG
        price_d = to_decimal(price)
        target_d = to_decimal(liquidity_target)
        min_fee_d = to_decimal(min_fee)
        max_fee_d = to_decimal(max_fee)

        if max_fee_d > MAX_FEE_PERCENT or min_fee_d < 0 or min_fee_d > max_fee_d:
            _reject(
                "initialize", "fee_out_of_range", min_fee=str(min_fee_d), max_fee=str(max_fee_d)
            )
            raise InvalidFee(
                f"Fees must satisfy 0 <= min_fee <= max_fee <= 100, got {min_fee_d}, {max_fee_d}"
            )
        if target_d <= 0:
            _reject("initialize", "non_positive_target", liquidity_target=str(target_d))
            raise InvalidFee(f"Liquidity target must be positive, got {target_d}")
        if price_d <= 0:
            _reject("initialize", "non_positive_price", price=str(price_d))
            raise InvalidFee(f"Price must be positive, got {price_d}")

        target = TokenAmount.from_decimal(target_d)
        scaled_price = Price.from_decimal(price_d)
        if not target or not scaled_price:
            _reject(
                "initialize",
                "below_precision",
                liquidity_target=str(target_d),
                price=str(price_d),
            )
            raise InvalidFee("Liquidity target and price must be representable as non-zero values")

        if config.seed_liquidity:
            token_amount = target
            lp_token_amount = LpTokenAmount(target.value)
        else:
            token_amount = TokenAmount.zero()
            lp_token_amount = LpTokenAmount.zero()

        pool = cls(
            price=scaled_price,
            token_amount=token_amount,
            st_token_amount=StakedTokenAmount.zero(),
            lp_token_amount=lp_token_amount,
            liquidity_target=target,
            min_fee=Percentage.from_percent(min_fee_d),
            max_fee=Percentage.from_percent(max_fee_d),
            config=config,
        )
        logger.debug(
            "pool_initialized",
            price=str(price_d),
            liquidity_target=str(target_d),
            min_fee=str(min_fee_d),
            max_fee=str(max_fee_d),
            seeded=config.seed_liquidity,
        )
        return pool

    # --- Read-only views ---

    def pool_value(self) -> TokenAmount:
        """Total pool value in base token: reserve + staked reserve at price."""
        return self.token_amount + self.price.convert(self.st_token_amount)

    def snapshot(self) -> PoolSnapshot:
        """Decimal view of the pool for display."""
        return PoolSnapshot(
            price=self.price.to_decimal(),
            token_amount=self.token_amount.to_decimal(),
            st_token_amount=self.st_token_amount.to_decimal(),
            lp_token_amount=self.lp_token_amount.to_decimal(),
            liquidity_target=self.liquidity_target.to_decimal(),
            min_fee=self.min_fee.to_percent(),
            max_fee=self.max_fee.to_percent(),
        )

    def quote_swap(self, staked_token_amount: DecimalLike) -> SwapQuote:
        """Price a swap without committing it.

        Raises:
            InvalidTokenAmount: If the amount is not positive
            InsufficientStakedTokens: If the pool cannot pay the gross output
        """
        staked = _positive_amount(StakedTokenAmount, staked_token_amount, "swap")
        return self._price_swap(staked)

    # --- Transitions ---

    def add_liquidity(self, token_amount: DecimalLike) -> Decimal:
        """Deposit base token and mint LP tokens.

        The full contribution enters the base reserve. Under MintRule.PARITY
        one LP token is minted per base token; under MintRule.PROPORTIONAL
        the mint is scaled by LP supply over pool value.

        Returns:
            LP tokens minted

        Raises:
            InvalidTokenAmount: If the amount is not positive, or mints nothing
        """
        contribution = _positive_amount(TokenAmount, token_amount, "add_liquidity")
        minted = self._mint_amount(contribution)
        if not minted:
            _reject("add_liquidity", "zero_mint", amount=str(contribution))
            raise InvalidTokenAmount(f"Contribution {contribution} mints no LP tokens")

        new_token_amount = self.token_amount + contribution
        new_lp_token_amount = self.lp_token_amount + minted

        self.token_amount = new_token_amount
        self.lp_token_amount = new_lp_token_amount

        logger.debug(
            "liquidity_added",
            contributed=str(contribution),
            minted=str(minted),
            token_amount=str(self.token_amount),
            lp_token_amount=str(self.lp_token_amount),
        )
        return minted.to_decimal()

    def remove_liquidity(self, lp_token_amount: DecimalLike) -> tuple[Decimal, Decimal]:
        """Burn LP tokens for a pro-rata share of both reserves.

        The base-token share pays the interpolated withdrawal fee, which
        stays in the reserve for the remaining LP holders. With
        config.apply_withdrawal_fee False the fee is computed but not taken.

        Returns:
            (base tokens paid out, staked tokens paid out)

        Raises:
            InvalidTokenAmount: If the amount is not positive
            InsufficientLiquidity: If the amount exceeds the LP supply
        """
        burned = _positive_amount(LpTokenAmount, lp_token_amount, "remove_liquidity")
        if burned > self.lp_token_amount:
            _reject(
                "remove_liquidity",
                "exceeds_supply",
                amount=str(burned),
                lp_token_amount=str(self.lp_token_amount),
            )
            raise InsufficientLiquidity(burned.value, self.lp_token_amount.value)

        quote = self._price_withdrawal(burned)

        new_lp_token_amount = self.lp_token_amount - burned
        new_token_amount = self.token_amount - quote.net_out
        new_st_token_amount = self.st_token_amount - quote.staked_out

        self.lp_token_amount = new_lp_token_amount
        self.token_amount = new_token_amount
        self.st_token_amount = new_st_token_amount

        logger.debug(
            "liquidity_removed",
            burned=str(burned),
            tokens_out=str(quote.net_out),
            staked_tokens_out=str(quote.staked_out),
            fee_percent=str(quote.fee.to_percent()),
            fee_applied=self.config.apply_withdrawal_fee,
        )
        return quote.net_out.to_decimal(), quote.staked_out.to_decimal()

    def swap(self, staked_token_amount: DecimalLike) -> Decimal:
        """Swap staked token into base token.

        Returns:
            Base tokens paid out after the fee

        Raises:
            InvalidTokenAmount: If the amount is not positive
            InsufficientStakedTokens: If the gross output exceeds the reserve
        """
        quote = self.quote_swap(staked_token_amount)

        new_st_token_amount = self.st_token_amount + quote.staked_in
        new_token_amount = self.token_amount - quote.net_out

        self.st_token_amount = new_st_token_amount
        self.token_amount = new_token_amount

        logger.debug(
            "swap_executed",
            staked_in=str(quote.staked_in),
            gross_out=str(quote.gross_out),
            net_out=str(quote.net_out),
            fee_percent=str(quote.fee.to_percent()),
            token_amount=str(self.token_amount),
        )
        return quote.net_out.to_decimal()

    # --- Pricing ---

    def _mint_amount(self, contribution: TokenAmount) -> LpTokenAmount:
        if self.config.mint_rule is MintRule.PARITY or not self.lp_token_amount:
            return LpTokenAmount(contribution.value)
        value = self.pool_value()
        if not value:
            return LpTokenAmount(contribution.value)
        return self.lp_token_amount.pro_rata(contribution, value)

    def _price_swap(self, staked: StakedTokenAmount) -> SwapQuote:
        # Compare before narrowing; gross may not fit uint64
        gross_value = S(mul_down(staked.value, self.price.value))
        remaining = S(self.token_amount.value).checked_sub(gross_value)
        if remaining is None:
            _reject(
                "swap",
                "reserve_exhausted",
                gross_out=str(from_scaled(gross_value.value)),
                token_amount=str(self.token_amount),
            )
            raise InsufficientStakedTokens(gross_value.value, self.token_amount.value)
        gross = TokenAmount(gross_value.value)
        reserve_after = TokenAmount(remaining.value)

        fee = interpolated_fee(self.min_fee, self.max_fee, reserve_after, self.liquidity_target)
        return SwapQuote(
            staked_in=staked,
            gross_out=gross,
            fee=fee,
            net_out=apply_fee(gross, fee),
        )

    def _price_withdrawal(self, burned: LpTokenAmount) -> WithdrawalQuote:
        gross = self.token_amount.pro_rata(burned, self.lp_token_amount)
        staked = self.st_token_amount.pro_rata(burned, self.lp_token_amount)
        fee = interpolated_fee(
            self.min_fee,
            self.max_fee,
            self.token_amount - gross,
            self.liquidity_target,
        )
        net = apply_fee(gross, fee) if self.config.apply_withdrawal_fee else gross
        return WithdrawalQuote(
            lp_burned=burned,
            gross_out=gross,
            fee=fee,
            net_out=net,
            staked_out=staked,
        )


def _positive_amount(kind: type[Q], amount: DecimalLike, operation: str) -> Q:
    """Parse a strictly positive amount of the given quantity kind.

    Raises:
        InvalidTokenAmount: If the amount is not positive or rounds to zero
    """
    amount_d = to_decimal(amount)
    if amount_d <= 0:
        _reject(operation, "non_positive_amount", amount=str(amount_d))
        raise InvalidTokenAmount(f"{operation} requires a positive amount, got {amount_d}")
    scaled = kind.from_decimal(amount_d)
    if not scaled:
        _reject(operation, "below_precision", amount=str(amount_d))
        raise InvalidTokenAmount(f"{operation} amount {amount_d} is below fixed-point precision")
    return scaled


def _reject(operation: str, reason: str, **context: str) -> None:
    logger.warning(f"{operation}_rejected", reason=reason, **context)
