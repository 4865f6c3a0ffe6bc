"""Deployment constants for the Polygon Uniswap V3 pools.

Centralizes well-known addresses and pricing parameters. All addresses are
lowercase and validated at import time to catch typos early.
"""

from decimal import Decimal

from pool_analytics.models.types import is_valid_address


def _validate_address(name: str, address: str) -> str:
    """Validate and return a lowercase address.

    Args:
        name: Name of the contract or token (for error messages)
        address: The address to validate

    Returns:
        The address, lowercased

    Raises:
        ValueError: If the address is invalid
    """
    if not is_valid_address(address):
        raise ValueError(f"Invalid {name} address: {address} (must be 0x + 40 hex chars)")
    return address.lower()


FACTORY_ADDRESS = _validate_address("factory", "0x1F98431c8aD98523631AE4a59f267346ea31F984")

# The bundle is a singleton with a fixed id
BUNDLE_ID = "1"

# Tokens
WETH = _validate_address("WETH", "0x7ceb23fd6bc0add59e62ac25578270cff1b9f619")
USDC_E = _validate_address("USDC.e", "0x2791Bca1f2de4661ED88A30C99A7a9449Aa84174")
USDC = _validate_address("USDC", "0x3c499c542cEF5E3811e1192ce70d8cC03d5c3359")
DAI = _validate_address("DAI", "0x8f3Cf7ad23Cd3CaDbD9735AFf958023239c6A063")
USDT = _validate_address("USDT", "0xc2132D05D31c914a87C6611C10748AEb04B58e8F")

# USDC.e/WETH 0.3% pool; USDC.e is token0, so token0Price is USD per ETH
USDC_WETH_03_POOL = _validate_address("USDC/WETH pool", "0x0e44ceb592acfc5d3f09d996302eb4c499ff8c10")

# Priced directly from the bundle instead of through pools
STABLE_COINS = frozenset({USDC, USDC_E, DAI, USDT})

# Pools with less ETH-equivalent locked than this do not quote reliable prices
MINIMUM_ETH_LOCKED = Decimal("60")

__all__ = [
    "FACTORY_ADDRESS",
    "BUNDLE_ID",
    "WETH",
    "USDC_E",
    "USDC",
    "DAI",
    "USDT",
    "USDC_WETH_03_POOL",
    "STABLE_COINS",
    "MINIMUM_ETH_LOCKED",
]
