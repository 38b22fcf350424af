"""Pool behavior configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum


class MintRule(str, Enum):
    """How add_liquidity prices newly minted LP tokens."""

    # One LP token per base token contributed
    PARITY = "parity"
    # LP tokens in proportion to the pool's value (base + staked * price)
    PROPORTIONAL = "proportional"


_TRUE_VALUES = ("true", "1", "yes")


@dataclass(frozen=True)
class PoolConfig:
    """Centralized configuration for pool behavior.

    Attributes:
        seed_liquidity: If True, initialize seeds the base reserve and LP
            supply with liquidity_target. If False, the pool starts empty.
        mint_rule: Pricing of LP tokens minted by add_liquidity.
        apply_withdrawal_fee: If True, remove_liquidity deducts the
            interpolated fee from the base-token payout. If False, the fee
            is only reported.
    """

    seed_liquidity: bool = True
    mint_rule: MintRule = MintRule.PARITY
    apply_withdrawal_fee: bool = True

    @classmethod
    def from_env(cls) -> PoolConfig:
        """Build a config from environment variables.

        - LP_POOL_SEED_LIQUIDITY: seed reserves on initialize (default: true)
        - LP_POOL_MINT_RULE: "parity" or "proportional" (default: parity)
        - LP_POOL_WITHDRAWAL_FEE: apply the withdrawal fee (default: true)

        Raises:
            ValueError: If LP_POOL_MINT_RULE is not a known rule
        """
        return cls(
            seed_liquidity=os.environ.get("LP_POOL_SEED_LIQUIDITY", "true").lower()
            in _TRUE_VALUES,
            mint_rule=MintRule(os.environ.get("LP_POOL_MINT_RULE", MintRule.PARITY.value).lower()),
            apply_withdrawal_fee=os.environ.get("LP_POOL_WITHDRAWAL_FEE", "true").lower()
            in _TRUE_VALUES,
        )


# Default configuration instance
DEFAULT_POOL_CONFIG = PoolConfig()

# Empty start, value-proportional minting, withdrawal fee reported only
VALUE_WEIGHTED_POOL_CONFIG = PoolConfig(
    seed_liquidity=False,
    mint_rule=MintRule.PROPORTIONAL,
    apply_withdrawal_fee=False,
)
