"""Token valuation in the reference currency (ETH-equivalent).

Token prices are discovered through the token's whitelist pools:

1. The reference token is worth exactly 1
2. Stablecoins are worth 1 / ethPriceUSD (pool-implied stablecoin rates are
   too noisy to be useful)
3. Otherwise, take the price from the whitelist pool with the most
   ETH-equivalent locked on the other side, ignoring pools below the minimum
   locked threshold

The selection is a greedy single pass over whitelist_pools in stored order.
Comparisons are strict, so the first pool reaching a given locked value wins.
It does not account for how liquidity is distributed across ticks.
"""

from __future__ import annotations

import decimal
from decimal import Decimal
from typing import TYPE_CHECKING

import structlog

from pool_analytics.config import DEFAULT_PRICING_CONFIG, PricingConfig
from pool_analytics.math.decimal_utils import DECIMAL_CONTEXT, ONE, ZERO, decimal_gt, safe_div
from pool_analytics.models.entities import Bundle, Pool, Token
from pool_analytics.models.types import normalize_address

if TYPE_CHECKING:
    from pool_analytics.store.base import EntityStore

logger = structlog.get_logger()


class PriceOracle:
    """Reads reference prices and derives token values from the entity store.

    The oracle holds no state of its own. It always reads the current store
    contents, so pools and tokens must be persisted before they can influence
    a valuation.
    """

    def __init__(
        self,
        store: EntityStore,
        config: PricingConfig = DEFAULT_PRICING_CONFIG,
    ) -> None:
        """Initialize the oracle.

        Args:
            store: Entity store to read pools and tokens from
            config: Reference token, anchor pool, stablecoins and threshold
        """
        self._store = store
        self._config = config
        self._reference_token = normalize_address(config.reference_token)
        self._stablecoins = frozenset(normalize_address(t) for t in config.stablecoins)

    def eth_price_in_usd(self) -> Decimal:
        """USD price of the reference currency, read from the anchor pool.

        Returns:
            The anchor pool's token0Price, or zero if the pool is not in the store
        """
        pool = self._store.get(Pool, self._config.anchor_pool)
        if pool is None:
            logger.warning("anchor_pool_not_found", pool=self._config.anchor_pool)
            return ZERO
        return pool.token0_price

    def eth_per_token(self, token: Token, bundle: Bundle) -> Decimal:
        """Value of one unit of token in the reference currency.

        Args:
            token: Token to value (its whitelist_pools define the candidates)
            bundle: Bundle holding the current ETH/USD price

        Returns:
            Derived ETH value, or zero if no candidate pool qualified
        """
        token_id = normalize_address(token.id)
        if token_id == self._reference_token:
            return ONE

        if token_id in self._stablecoins:
            return safe_div(ONE, bundle.eth_price_usd)

        largest_liquidity_eth = ZERO
        price_so_far = ZERO

        with decimal.localcontext(DECIMAL_CONTEXT):
            for pool_address in token.whitelist_pools:
                pool = self._store.get(Pool, pool_address)
                if pool is None:
                    logger.error(
                        "oracle_pool_not_found",
                        token=token_id,
                        pool=pool_address,
                    )
                    return price_so_far

                if pool.liquidity <= 0:
                    continue

                if pool.token0 == token_id:
                    # Whitelist token is token1
                    token1 = self._store.get(Token, pool.token1)
                    if token1 is None:
                        logger.error("oracle_token_not_found", token=pool.token1, pool=pool.id)
                        return price_so_far

                    eth_locked = pool.total_value_locked_token1 * token1.derived_eth
                    if self._accepts(eth_locked, largest_liquidity_eth):
                        largest_liquidity_eth = eth_locked
                        # token1 per our token * ETH per token1
                        price_so_far = pool.token1_price * token1.derived_eth

                if pool.token1 == token_id:
                    token0 = self._store.get(Token, pool.token0)
                    if token0 is None:
                        logger.error("oracle_token_not_found", token=pool.token0, pool=pool.id)
                        return price_so_far

                    eth_locked = pool.total_value_locked_token0 * token0.derived_eth
                    if self._accepts(eth_locked, largest_liquidity_eth):
                        largest_liquidity_eth = eth_locked
                        # token0 per our token * ETH per token0
                        price_so_far = pool.token0_price * token0.derived_eth

        return price_so_far

    def _accepts(self, eth_locked: Decimal, largest_liquidity_eth: Decimal) -> bool:
        return decimal_gt(eth_locked, largest_liquidity_eth) and decimal_gt(
            eth_locked, self._config.minimum_eth_locked
        )


__all__ = ["PriceOracle"]
