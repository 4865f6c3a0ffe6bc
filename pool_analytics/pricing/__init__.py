"""Reference-currency pricing of tokens."""

from pool_analytics.pricing.oracle import PriceOracle

__all__ = ["PriceOracle"]
