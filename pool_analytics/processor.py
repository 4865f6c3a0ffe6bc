"""Event processor: applies an ordered event stream to the entity store.

The EventProcessor is the entry point for indexing. It dispatches each event
to the handler registered for its type and runs it to completion before the
next event. A handler that aborts on a missing entity is logged and the
stream continues; no handler outcome stops processing.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import structlog

from pool_analytics.config import DEFAULT_PRICING_CONFIG, PricingConfig
from pool_analytics.errors import MissingEntityError
from pool_analytics.handlers import (
    HandlerContext,
    HandlerResult,
    handle_burn,
    handle_initialize,
    handle_mint,
    handle_swap,
)
from pool_analytics.models.events import BurnEvent, InitializeEvent, MintEvent, SwapEvent

if TYPE_CHECKING:
    from pool_analytics.handlers import EventHandler
    from pool_analytics.models.events import PoolEvent
    from pool_analytics.source import EventSource
    from pool_analytics.store.base import EntityStore

logger = structlog.get_logger()


@dataclass
class ProcessingStats:
    """Counters for a processing run.

    Attributes:
        processed: Events handed to a handler
        applied: Events whose handler ran to completion
        aborted: Events whose handler aborted on a missing entity
        by_kind: Processed events per event kind
    """

    processed: int = 0
    applied: int = 0
    aborted: int = 0
    by_kind: Counter[str] = field(default_factory=Counter)

    def record(self, result: HandlerResult) -> None:
        """Count one handler result."""
        self.processed += 1
        self.by_kind[result.kind] += 1
        if result.applied:
            self.applied += 1
        else:
            self.aborted += 1


class EventProcessor:
    """Applies pool events to an entity store, one at a time.

    Handlers are looked up by event type. The default registry covers
    Initialize, Mint, Burn and Swap; additional handlers can be registered
    for new event types.
    """

    def __init__(
        self,
        store: EntityStore,
        config: PricingConfig = DEFAULT_PRICING_CONFIG,
    ) -> None:
        """Initialize the processor.

        Args:
            store: Entity store to apply events to
            config: Pricing configuration passed to every handler
        """
        self.context = HandlerContext(store=store, config=config)
        self._handlers: dict[type, EventHandler[Any]] = {}
        # Last (block_number, log_index) seen per pool
        self._positions: dict[str, tuple[int, int]] = {}

        self.register(InitializeEvent, handle_initialize)
        self.register(MintEvent, handle_mint)
        self.register(BurnEvent, handle_burn)
        self.register(SwapEvent, handle_swap)

    @property
    def store(self) -> EntityStore:
        """The entity store events are applied to."""
        return self.context.store

    def register(self, event_type: type, handler: EventHandler[Any]) -> None:
        """Register the handler for an event type (replacing any existing one)."""
        self._handlers[event_type] = handler

    def process(self, event: PoolEvent) -> HandlerResult:
        """Apply a single event.

        Returns:
            HandlerResult; applied=False if a required entity was missing

        Raises:
            TypeError: If no handler is registered for the event type
        """
        handler = self._handlers.get(type(event))
        if handler is None:
            raise TypeError(f"No handler registered for {type(event).__name__}")

        self._check_order(event)

        try:
            return handler(event, self.context)
        except MissingEntityError as err:
            kind = getattr(event, "kind", type(event).__name__)
            logger.error(
                "missing_entity",
                event_kind=kind,
                pool=event.address,
                entity_type=err.entity_type,
                entity_id=err.entity_id,
            )
            return HandlerResult(
                kind=kind,
                pool=event.address,
                applied=False,
                error=str(err),
            )

    def run(self, source: EventSource) -> ProcessingStats:
        """Apply every event from a source in delivery order."""
        stats = ProcessingStats()
        for event in source:
            stats.record(self.process(event))

        logger.info(
            "processing_complete",
            processed=stats.processed,
            applied=stats.applied,
            aborted=stats.aborted,
            by_kind=dict(stats.by_kind),
        )
        return stats

    def _check_order(self, event: PoolEvent) -> None:
        # Ordering is the source's responsibility; regressions are only reported
        position = event.position
        if position is None:
            return
        previous = self._positions.get(event.address)
        if previous is not None and position <= previous:
            logger.warning(
                "event_out_of_order",
                pool=event.address,
                previous_block=previous[0],
                previous_log_index=previous[1],
                block=position[0],
                log_index=position[1],
            )
        self._positions[event.address] = position


__all__ = ["EventProcessor", "ProcessingStats"]
