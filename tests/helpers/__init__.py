"""Test helpers module for shared test utilities.

- constants: Token and pool addresses
- factories: Entity and store factory functions
"""

from tests.helpers.constants import (
    ANCHOR_POOL,
    ANCHOR_SQRT_PRICE,
    ANCHOR_TICK,
    DAI,
    FACTORY_ADDRESS,
    MISSING_POOL,
    POOL_WX,
    POOL_XW,
    POOL_XW_2,
    POOL_XY,
    POOL_XZ,
    TOKEN_X,
    TOKEN_Y,
    TOKEN_Z,
    USDC_E,
    WETH,
    XW_SQRT_PRICE,
    XW_TICK,
)
from tests.helpers.factories import make_pool, make_store, make_token

__all__ = [
    # Constants
    "WETH",
    "USDC_E",
    "DAI",
    "FACTORY_ADDRESS",
    "ANCHOR_POOL",
    "TOKEN_X",
    "TOKEN_Y",
    "TOKEN_Z",
    "POOL_XW",
    "POOL_XW_2",
    "POOL_WX",
    "POOL_XY",
    "POOL_XZ",
    "MISSING_POOL",
    "ANCHOR_SQRT_PRICE",
    "ANCHOR_TICK",
    "XW_SQRT_PRICE",
    "XW_TICK",
    # Factories
    "make_token",
    "make_pool",
    "make_store",
]
