"""LP pool error classes.

These are the user-facing rejections a pool operation can return. Arithmetic
defects (underflow, overflow, division by zero) are SafeIntError subclasses
in lp_pool.safe_int and deliberately do not derive from LpPoolError.
"""


class LpPoolError(Exception):
    """Base error for pool operations."""

    pass


class InvalidFee(LpPoolError):
    """Initialization parameters violate fee ordering or positivity."""

    pass


class InvalidTokenAmount(LpPoolError):
    """A non-positive amount was supplied."""

    pass


class InsufficientLiquidity(LpPoolError):
    """Requested LP burn exceeds the outstanding LP supply.

    Attributes:
        requested: LP amount the caller asked to burn (scaled)
        available: Outstanding LP supply (scaled)
    """

    def __init__(self, requested: int, available: int):
        super().__init__(f"Requested burn of {requested} exceeds LP supply {available}")
        self.requested = requested
        self.available = available


class InsufficientStakedTokens(LpPoolError):
    """Swap output would exceed the pool's base-token reserve.

    Attributes:
        required: Base token the swap would pay out before fees (scaled)
        available: Base-token reserve (scaled)
    """

    def __init__(self, required: int, available: int):
        super().__init__(f"Swap requires {required} base token but reserve holds {available}")
        self.required = required
        self.available = available
