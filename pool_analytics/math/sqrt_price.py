"""Conversion from a pool's sqrtPriceX96 to human-readable token prices.

A V3 pool stores sqrt(token1 / token0) in Q64.96 fixed point, in the tokens'
smallest units. Squaring gives the raw ratio scaled by 2^192.
"""

from __future__ import annotations

import decimal
from decimal import Decimal

from .decimal_utils import DECIMAL_CONTEXT, ONE, decimal_pow, exponent_to_decimal, safe_div

Q96 = 2**96
Q192 = decimal_pow(2, 192)


def sqrt_price_to_token_prices(
    sqrt_price_x96: int,
    token0_decimals: int,
    token1_decimals: int,
) -> tuple[Decimal, Decimal]:
    """Convert sqrtPriceX96 into the pool's two token prices.

    Args:
        sqrt_price_x96: sqrt(token1/token0) * 2^96 in smallest units
        token0_decimals: Decimal count of token0
        token1_decimals: Decimal count of token1

    Returns:
        (price0, price1) where price1 is token1 per token0 and price0 is its
        reciprocal (token0 per token1). A zero sqrt price yields (0, 0).
    """
    with decimal.localcontext(DECIMAL_CONTEXT):
        num = Decimal(sqrt_price_x96 * sqrt_price_x96)
        price1a = safe_div(num, Q192)
        price1b = price1a * exponent_to_decimal(token0_decimals)
        price1 = safe_div(price1b, exponent_to_decimal(token1_decimals))
        price0 = safe_div(ONE, price1)
    return price0, price1


__all__ = ["Q96", "Q192", "sqrt_price_to_token_prices"]
