"""Numeric primitives for pool analytics.

- decimal_utils: fixed-precision Decimal arithmetic (safe division, scaling)
- sqrt_price: sqrtPriceX96 to token price conversion
"""

from pool_analytics.math.decimal_utils import (
    DECIMAL_CONTEXT,
    ONE,
    ZERO,
    decimal_pow,
    exponent_to_decimal,
    safe_div,
    to_decimal,
)
from pool_analytics.math.sqrt_price import Q96, Q192, sqrt_price_to_token_prices

__all__ = [
    "DECIMAL_CONTEXT",
    "ONE",
    "ZERO",
    "Q96",
    "Q192",
    "decimal_pow",
    "exponent_to_decimal",
    "safe_div",
    "to_decimal",
    "sqrt_price_to_token_prices",
]
