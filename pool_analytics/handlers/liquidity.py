"""Mint and Burn: liquidity added to or removed from a position."""

from __future__ import annotations

import decimal

from pool_analytics.handlers.base import HandlerContext, HandlerResult, load_pool_tokens
from pool_analytics.math.decimal_utils import DECIMAL_CONTEXT, to_decimal
from pool_analytics.models.entities import Bundle, Factory
from pool_analytics.models.events import BurnEvent, MintEvent
from pool_analytics.store.base import require


def position_contains_tick(tick_lower: int, tick_upper: int, tick: int | None) -> bool:
    """Check whether a position's range [tick_lower, tick_upper) covers tick.

    An uninitialized pool (tick None) is never covered.
    """
    return tick is not None and tick_lower <= tick < tick_upper


def _apply_position_change(
    event: MintEvent | BurnEvent,
    context: HandlerContext,
    sign: int,
) -> HandlerResult:
    store = context.store
    require(store, Bundle, context.config.bundle_id)
    pool, token0, token1 = load_pool_tokens(store, event.address)
    factory = require(store, Factory, context.config.factory_address)

    with decimal.localcontext(DECIMAL_CONTEXT):
        amount0 = to_decimal(event.amount0, token0.decimals)
        amount1 = to_decimal(event.amount1, token1.decimals)

        factory.tx_count += 1
        token0.tx_count += 1
        token1.tx_count += 1
        pool.tx_count += 1

        # Pool liquidity tracks the liquidity active at the current tick, so it
        # only changes when the position covers the current tick
        if position_contains_tick(event.tick_lower, event.tick_upper, pool.tick):
            pool.liquidity += sign * event.amount

        pool.total_value_locked_token0 += sign * amount0
        pool.total_value_locked_token1 += sign * amount1

    store.put(token0)
    store.put(token1)
    store.put(pool)
    store.put(factory)

    return HandlerResult(kind=event.kind, pool=event.address)


def handle_mint(event: MintEvent, context: HandlerContext) -> HandlerResult:
    """Add the minted amounts to the pool's TVL and, if in range, its liquidity."""
    return _apply_position_change(event, context, sign=1)


def handle_burn(event: BurnEvent, context: HandlerContext) -> HandlerResult:
    """Remove the burned amounts from the pool's TVL and, if in range, its liquidity."""
    return _apply_position_change(event, context, sign=-1)


__all__ = ["handle_mint", "handle_burn", "position_contains_tick"]
