"""Event sources: ordered streams of pool events."""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TypeAlias

import structlog
from pydantic import ValidationError

from pool_analytics.errors import EventDecodeError
from pool_analytics.models.events import BurnEvent, InitializeEvent, MintEvent, SwapEvent, parse_event

logger = structlog.get_logger()

Event: TypeAlias = InitializeEvent | MintEvent | BurnEvent | SwapEvent

# Any iterable of events in canonical chain order is a valid source
EventSource: TypeAlias = Iterable[Event]


class JsonLinesEventSource:
    """Reads events from a JSON-lines file, one event object per line.

    Each object must carry a "kind" field ("initialize", "mint", "burn" or
    "swap"), the emitting pool "address" and the event fields. The file is
    UTF-8 encoded; blank lines are skipped. It is read lazily, in order.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def __iter__(self) -> Iterator[Event]:
        with open(self.path, "rb") as f:
            for line_number, raw in enumerate(f, start=1):
                try:
                    line = raw.decode("utf-8")
                except UnicodeDecodeError as err:
                    raise EventDecodeError(f"invalid UTF-8: {err.reason}", line_number) from err
                if not line.strip():
                    continue
                yield decode_event_line(line, line_number)


def decode_event_line(line: str, line_number: int | None = None) -> Event:
    """Decode one JSON-encoded event.

    Raises:
        EventDecodeError: If the line is not valid JSON or not a valid event
    """
    try:
        data = json.loads(line)
    except json.JSONDecodeError as err:
        raise EventDecodeError(f"invalid JSON: {err.msg}", line_number) from err

    if not isinstance(data, dict):
        raise EventDecodeError(f"expected an object, got {type(data).__name__}", line_number)

    try:
        return parse_event(data)
    except ValidationError as err:
        logger.debug("event_decode_failed", line_number=line_number, errors=err.error_count())
        raise EventDecodeError(f"invalid event: {err}", line_number) from err


__all__ = ["Event", "EventSource", "JsonLinesEventSource", "decode_event_line"]
