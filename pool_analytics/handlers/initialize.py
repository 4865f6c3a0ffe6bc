"""Initialize: a pool's first price is set."""

from __future__ import annotations

import decimal

from pool_analytics.handlers.base import HandlerContext, HandlerResult, load_pool_tokens
from pool_analytics.math.decimal_utils import DECIMAL_CONTEXT
from pool_analytics.math.sqrt_price import sqrt_price_to_token_prices
from pool_analytics.models.entities import Bundle
from pool_analytics.models.events import InitializeEvent
from pool_analytics.store.base import require


def handle_initialize(event: InitializeEvent, context: HandlerContext) -> HandlerResult:
    """Set the pool's price and tick, then refresh ETH pricing of its tokens.

    All required entities (pool, both tokens, bundle) are loaded before the
    pool is touched, so a missing entity leaves the store unchanged.
    """
    store = context.store
    pool, token0, token1 = load_pool_tokens(store, event.address)
    bundle = require(store, Bundle, context.config.bundle_id)

    with decimal.localcontext(DECIMAL_CONTEXT):
        pool.sqrt_price = event.sqrt_price_x96
        pool.tick = event.tick
        pool.token0_price, pool.token1_price = sqrt_price_to_token_prices(
            pool.sqrt_price, token0.decimals, token1.decimals
        )
        store.put(pool)

        # Update ETH price now that prices could have changed
        bundle.eth_price_usd = context.oracle.eth_price_in_usd()
        store.put(bundle)

        token0.derived_eth = context.oracle.eth_per_token(token0, bundle)
        token1.derived_eth = context.oracle.eth_per_token(token1, bundle)
        token0.pool_count += 1
        token1.pool_count += 1
        store.put(token0)
        store.put(token1)

    return HandlerResult(kind=event.kind, pool=event.address)


__all__ = ["handle_initialize"]
