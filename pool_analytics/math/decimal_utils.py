"""High-precision Decimal utilities for token amounts and prices.

Every price and amount computation in the engine runs in DECIMAL_CONTEXT so
results are reproducible bit-for-bit regardless of the caller's ambient
decimal context:

- 78 significant digits, enough for uint256 values (up to ~10^77)
- ROUND_HALF_EVEN (banker's rounding) whenever a result must be rounded

Division never raises: safe_div returns zero for a zero divisor.
"""

from __future__ import annotations

import decimal
from decimal import ROUND_HALF_EVEN, Decimal

DECIMAL_CONTEXT = decimal.Context(prec=78, rounding=ROUND_HALF_EVEN)

ZERO = Decimal(0)
ONE = Decimal(1)


def safe_div(a: Decimal | int, b: Decimal | int) -> Decimal:
    """Divide a by b, returning zero when b is zero.

    Args:
        a: Dividend
        b: Divisor

    Returns:
        a / b, or Decimal(0) if b == 0
    """
    with decimal.localcontext(DECIMAL_CONTEXT):
        divisor = Decimal(b)
        if divisor == 0:
            return ZERO
        return Decimal(a) / divisor


def decimal_pow(base: Decimal | int, exponent: int) -> Decimal:
    """Raise base to a non-negative integer power by repeated multiplication.

    Used to build scale factors such as 2^192 and 10^18. Results are exact
    while they fit in the context precision.

    Raises:
        ValueError: If exponent is negative
    """
    if exponent < 0:
        raise ValueError(f"Exponent must be non-negative: {exponent}")
    with decimal.localcontext(DECIMAL_CONTEXT):
        result = ONE
        factor = Decimal(base)
        for _ in range(exponent):
            result = result * factor
        return result


def exponent_to_decimal(decimals: int) -> Decimal:
    """Return 10^decimals as a Decimal."""
    return decimal_pow(10, decimals)


def to_decimal(raw_amount: int, decimals: int) -> Decimal:
    """Convert a raw token amount to a decimal amount.

    Args:
        raw_amount: Amount in the token's smallest unit (may be negative)
        decimals: Token decimal count

    Returns:
        raw_amount * 10^-decimals (the raw amount unchanged if decimals is 0)
    """
    if decimals == 0:
        return Decimal(raw_amount)
    return safe_div(Decimal(raw_amount), exponent_to_decimal(decimals))


def decimal_gt(a: Decimal, b: Decimal) -> bool:
    """Compare a > b with high precision for exactness."""
    with decimal.localcontext(DECIMAL_CONTEXT):
        return (a - b) > 0


__all__ = [
    "DECIMAL_CONTEXT",
    "ZERO",
    "ONE",
    "safe_div",
    "decimal_pow",
    "exponent_to_decimal",
    "to_decimal",
    "decimal_gt",
]
