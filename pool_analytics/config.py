"""Pricing configuration for the analytics engine."""

from dataclasses import dataclass
from decimal import Decimal

from pool_analytics.constants import (
    BUNDLE_ID,
    FACTORY_ADDRESS,
    MINIMUM_ETH_LOCKED,
    STABLE_COINS,
    USDC_WETH_03_POOL,
    WETH,
)


@dataclass(frozen=True)
class PricingConfig:
    """Deploy-time configuration for pricing and entity lookup.

    These values are fixed for a deployment. Holding them in one object keeps
    handlers free of module globals and makes it easy to test against other
    addresses.

    Attributes:
        reference_token: Token whose derived ETH value is always 1
        anchor_pool: Pool whose token0Price is the reference currency's USD price
            (a stablecoin must be token0 and the reference token token1)
        stablecoins: Tokens valued as 1 / ethPriceUSD without pool traversal
        minimum_eth_locked: Pools must lock strictly more than this (in reference
            currency units) on the pricing side to be used as a price source
        factory_address: Id of the Factory singleton
        bundle_id: Id of the Bundle singleton
    """

    reference_token: str = WETH
    anchor_pool: str = USDC_WETH_03_POOL
    stablecoins: frozenset[str] = STABLE_COINS
    minimum_eth_locked: Decimal = MINIMUM_ETH_LOCKED
    factory_address: str = FACTORY_ADDRESS
    bundle_id: str = BUNDLE_ID


# Default configuration instance
DEFAULT_PRICING_CONFIG = PricingConfig()
