"""Shared types for event handlers.

Every handler follows the same shape: a required-entities prelude that loads
everything the handler will touch (raising MissingEntityError before any
write), then the state transition, then the puts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, TypeVar

from pool_analytics.config import DEFAULT_PRICING_CONFIG, PricingConfig
from pool_analytics.models.entities import Pool, Token
from pool_analytics.pricing.oracle import PriceOracle
from pool_analytics.store.base import require

if TYPE_CHECKING:
    from pool_analytics.models.events import PoolEvent
    from pool_analytics.store.base import EntityStore

EventT = TypeVar("EventT", bound="PoolEvent", contravariant=True)


@dataclass
class HandlerContext:
    """Everything a handler needs besides the event.

    Attributes:
        store: Entity store to read from and write to
        config: Deploy-time pricing configuration
        oracle: Price oracle over the same store and config
    """

    store: EntityStore
    config: PricingConfig = DEFAULT_PRICING_CONFIG
    oracle: PriceOracle = field(init=False)

    def __post_init__(self) -> None:
        self.oracle = PriceOracle(self.store, self.config)


@dataclass
class HandlerResult:
    """Outcome of applying one event.

    Attributes:
        kind: Event kind ("initialize", "mint", "burn", "swap")
        pool: Address of the emitting pool
        applied: True if the handler ran to completion
        error: Reason the handler aborted (None when applied)
    """

    kind: str
    pool: str
    applied: bool = True
    error: str | None = None


class EventHandler(Protocol[EventT]):
    """Protocol for per-event-kind state transitions."""

    def __call__(self, event: EventT, context: HandlerContext) -> HandlerResult:
        """Apply the event to the store.

        Raises:
            MissingEntityError: If a required entity is absent (before any write)
        """
        ...


def load_pool_tokens(store: EntityStore, pool_address: str) -> tuple[Pool, Token, Token]:
    """Load a pool and both of its tokens, all required."""
    pool = require(store, Pool, pool_address)
    token0 = require(store, Token, pool.token0)
    token1 = require(store, Token, pool.token1)
    return pool, token0, token1


__all__ = [
    "HandlerContext",
    "HandlerResult",
    "EventHandler",
    "load_pool_tokens",
]
