"""Swap: a trade moves the pool's price and balances."""

from __future__ import annotations

import decimal

from pool_analytics.handlers.base import HandlerContext, HandlerResult, load_pool_tokens
from pool_analytics.math.decimal_utils import DECIMAL_CONTEXT, to_decimal
from pool_analytics.math.sqrt_price import sqrt_price_to_token_prices
from pool_analytics.models.entities import Bundle, Factory
from pool_analytics.models.events import SwapEvent
from pool_analytics.store.base import require


def handle_swap(event: SwapEvent, context: HandlerContext) -> HandlerResult:
    """Apply a swap and refresh pool prices, the ETH price and token values.

    The event's liquidity, tick and sqrt price are the pool state after the
    swap and replace the stored values. amount0/amount1 are signed deltas.

    Both tokens' derived ETH values are computed before either token is
    saved, so each is valued against the other's previously stored value.
    """
    store = context.store
    bundle = require(store, Bundle, context.config.bundle_id)
    factory = require(store, Factory, context.config.factory_address)
    pool, token0, token1 = load_pool_tokens(store, event.address)

    with decimal.localcontext(DECIMAL_CONTEXT):
        amount0 = to_decimal(event.amount0, token0.decimals)
        amount1 = to_decimal(event.amount1, token1.decimals)

        factory.tx_count += 1
        pool.tx_count += 1
        token0.tx_count += 1
        token1.tx_count += 1

        pool.liquidity = event.liquidity
        pool.tick = event.tick
        pool.sqrt_price = event.sqrt_price_x96
        pool.total_value_locked_token0 += amount0
        pool.total_value_locked_token1 += amount1

        pool.token0_price, pool.token1_price = sqrt_price_to_token_prices(
            pool.sqrt_price, token0.decimals, token1.decimals
        )
        store.put(pool)

        # The anchor pool may be this pool, so the ETH price is read after the put
        bundle.eth_price_usd = context.oracle.eth_price_in_usd()
        store.put(bundle)

        token0.derived_eth = context.oracle.eth_per_token(token0, bundle)
        token1.derived_eth = context.oracle.eth_per_token(token1, bundle)

    store.put(factory)
    store.put(token0)
    store.put(token1)

    return HandlerResult(kind=event.kind, pool=event.address)


__all__ = ["handle_swap"]
