"""Pydantic models for the pool's decimal boundary.

The pool itself works in scaled integers; these models carry decimal values
in and out (scenario files, snapshots, CLI output). Range checks such as fee
ordering are left to Pool.initialize so the pool reports its own errors.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class PoolParams(BaseModel):
    """Parameters for Pool.initialize. Fees are percentages (0-100)."""

    model_config = ConfigDict(populate_by_name=True)

    price: Decimal
    liquidity_target: Decimal = Field(alias="liquidityTarget")
    min_fee: Decimal = Field(alias="minFee")
    max_fee: Decimal = Field(alias="maxFee")


class OperationKind(str, Enum):
    """Pool transitions that can be replayed."""

    ADD_LIQUIDITY = "add_liquidity"
    REMOVE_LIQUIDITY = "remove_liquidity"
    SWAP = "swap"


class AddLiquidity(BaseModel):
    """Deposit base token; amount is in base token."""

    op: Literal["add_liquidity"]
    amount: Decimal


class RemoveLiquidity(BaseModel):
    """Burn LP tokens; amount is in LP tokens."""

    op: Literal["remove_liquidity"]
    amount: Decimal


class Swap(BaseModel):
    """Swap staked token into base token; amount is in staked token."""

    op: Literal["swap"]
    amount: Decimal


Operation = Annotated[
    AddLiquidity | RemoveLiquidity | Swap,
    Field(discriminator="op"),
]


class Scenario(BaseModel):
    """A pool definition followed by operations to apply in order."""

    pool: PoolParams
    operations: list[Operation] = Field(default_factory=list)


class PoolSnapshot(BaseModel):
    """Decimal view of every pool field. Fees are percentages."""

    model_config = ConfigDict(frozen=True)

    price: Decimal
    token_amount: Decimal
    st_token_amount: Decimal
    lp_token_amount: Decimal
    liquidity_target: Decimal
    min_fee: Decimal
    max_fee: Decimal


class OperationResult(BaseModel):
    """Outcome of one replayed operation.

    Exactly one of ``output`` and ``error`` is set.
    """

    index: int
    op: OperationKind
    amount: Decimal
    output: list[Decimal] | None = None
    error: str | None = None
    error_detail: str | None = None

    @property
    def is_error(self) -> bool:
        return self.error is not None
