"""Tests for the event processor."""

from typing import Literal

import pytest
from structlog.testing import capture_logs

from pool_analytics.handlers import HandlerContext, HandlerResult
from pool_analytics.models.entities import Pool
from pool_analytics.models.events import InitializeEvent, MintEvent, PoolEvent
from tests.helpers import MISSING_POOL, POOL_XW, XW_SQRT_PRICE, XW_TICK


class NoteEvent(PoolEvent):
    """Event type with no default handler."""

    kind: Literal["note"] = "note"


def make_initialize(address=POOL_XW, **kwargs):
    return InitializeEvent(address=address, sqrt_price_x96=XW_SQRT_PRICE, tick=XW_TICK, **kwargs)


class TestProcess:
    """Tests for EventProcessor.process."""

    def test_dispatches_by_event_type(self, processor):
        """An Initialize event reaches the Initialize handler."""
        result = processor.process(make_initialize())

        assert result == HandlerResult(kind="initialize", pool=POOL_XW)
        assert processor.store.get(Pool, POOL_XW).tick == XW_TICK

    def test_missing_entity_is_logged_and_skipped(self, processor):
        """A missing pool aborts only that event, leaving the store unchanged."""
        before = processor.store.to_snapshot()

        with capture_logs() as logs:
            result = processor.process(make_initialize(MISSING_POOL))

        assert not result.applied
        assert result.error == f"Could not load Pool {MISSING_POOL}"
        assert processor.store.to_snapshot() == before
        assert logs == [
            {
                "event": "missing_entity",
                "log_level": "error",
                "event_kind": "initialize",
                "pool": MISSING_POOL,
                "entity_type": "Pool",
                "entity_id": MISSING_POOL,
            }
        ]

    def test_unregistered_event_type(self, processor):
        """Events without a handler are rejected."""
        with pytest.raises(TypeError, match="NoteEvent"):
            processor.process(NoteEvent(address=POOL_XW))

    def test_register_custom_handler(self, processor):
        """New event types can be handled by registering a handler."""
        seen = []

        def handle_note(event: NoteEvent, context: HandlerContext) -> HandlerResult:
            seen.append(event.address)
            return HandlerResult(kind=event.kind, pool=event.address)

        processor.register(NoteEvent, handle_note)
        result = processor.process(NoteEvent(address=POOL_XW))

        assert result.applied
        assert seen == [POOL_XW]

    def test_out_of_order_event_is_reported(self, processor):
        """A position regression is logged but the event is still applied."""
        processor.process(make_initialize(block_number=10, log_index=5))

        with capture_logs() as logs:
            result = processor.process(make_initialize(block_number=10, log_index=4))

        assert result.applied
        warnings = [log for log in logs if log["event"] == "event_out_of_order"]
        assert len(warnings) == 1
        assert warnings[0]["log_level"] == "warning"
        assert warnings[0]["previous_log_index"] == 5
        assert warnings[0]["log_index"] == 4

    def test_ordering_is_tracked_per_pool(self, processor):
        """Positions of different pools do not interfere."""
        mint = MintEvent(
            address=MISSING_POOL,
            amount0=0,
            amount1=0,
            amount=0,
            tick_lower=0,
            tick_upper=1,
            block_number=1,
            log_index=0,
        )
        processor.process(make_initialize(block_number=10, log_index=0))

        with capture_logs() as logs:
            processor.process(mint)

        assert all(log["event"] != "event_out_of_order" for log in logs)


class TestRun:
    """Tests for EventProcessor.run."""

    def test_counts_applied_and_aborted(self, processor):
        """Stats reflect every event in the stream."""
        events = [make_initialize(), make_initialize(MISSING_POOL)]

        with capture_logs() as logs:
            stats = processor.run(events)

        assert stats.processed == 2
        assert stats.applied == 1
        assert stats.aborted == 1
        assert stats.by_kind == {"initialize": 2}
        assert logs[-1]["event"] == "processing_complete"
        assert logs[-1]["aborted"] == 1

    def test_aborted_event_does_not_stop_stream(self, processor):
        """Events after an abort are still applied."""
        stats = processor.run([make_initialize(MISSING_POOL), make_initialize()])

        assert stats.applied == 1
        assert processor.store.get(Pool, POOL_XW).tick == XW_TICK

    def test_empty_source(self, processor):
        """An empty stream processes nothing."""
        stats = processor.run([])
        assert stats.processed == 0
        assert not stats.by_kind
