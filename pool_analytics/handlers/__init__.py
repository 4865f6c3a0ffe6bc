"""Per-event state transitions.

Each handler loads every entity it needs before writing anything; a missing
entity raises MissingEntityError and leaves the store untouched.
"""

from pool_analytics.handlers.base import EventHandler, HandlerContext, HandlerResult
from pool_analytics.handlers.initialize import handle_initialize
from pool_analytics.handlers.liquidity import handle_burn, handle_mint, position_contains_tick
from pool_analytics.handlers.swap import handle_swap

__all__ = [
    "EventHandler",
    "HandlerContext",
    "HandlerResult",
    "handle_initialize",
    "handle_mint",
    "handle_burn",
    "handle_swap",
    "position_contains_tick",
]
