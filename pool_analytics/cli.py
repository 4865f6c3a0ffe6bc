"""Command-line interface for replaying pool events.

Usage:
    pool-analytics replay events.jsonl --snapshot initial.json --output final.json
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

import structlog

from pool_analytics.errors import EventDecodeError, PoolAnalyticsError
from pool_analytics.log_config import configure_logging
from pool_analytics.processor import EventProcessor
from pool_analytics.source import JsonLinesEventSource
from pool_analytics.store.memory import InMemoryEntityStore

logger = structlog.get_logger()


def load_store(snapshot: Path | None) -> InMemoryEntityStore:
    """Build an in-memory store, seeded from a snapshot file if given.

    Raises:
        OSError: If the snapshot cannot be read
        ValueError: If the snapshot is not valid JSON or not a valid snapshot
        PoolAnalyticsError: If the snapshot breaks a store invariant
            (e.g. one token listed twice with different decimals)
    """
    if snapshot is None:
        return InMemoryEntityStore()
    with open(snapshot) as f:
        data = json.load(f)
    return InMemoryEntityStore.from_snapshot(data)


def replay(args: argparse.Namespace) -> int:
    """Replay an event file against a snapshot and write the final state."""
    try:
        store = load_store(args.snapshot)
    except (OSError, ValueError, PoolAnalyticsError) as err:
        # ValidationError, JSONDecodeError and UnicodeDecodeError are ValueErrors
        logger.error("snapshot_load_failed", path=str(args.snapshot), error=str(err))
        return 1

    if not args.events.is_file():
        logger.error("events_file_not_found", path=str(args.events))
        return 1

    processor = EventProcessor(store)
    try:
        stats = processor.run(JsonLinesEventSource(args.events))
    except EventDecodeError as err:
        logger.error("event_decode_failed", path=str(args.events), error=str(err))
        return 1
    except OSError as err:
        logger.error("events_read_failed", path=str(args.events), error=str(err))
        return 1

    output = json.dumps(store.to_snapshot(), indent=2)
    if args.output is None:
        print(output)
    else:
        args.output.write_text(output + "\n")
        logger.info("snapshot_written", path=str(args.output))

    return 0 if stats.aborted == 0 or not args.strict else 2


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="pool-analytics",
        description="Derive pool and token analytics from pool events",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    replay_parser = subparsers.add_parser(
        "replay",
        help="Apply a JSON-lines event file to a store snapshot",
    )
    replay_parser.add_argument(
        "events",
        type=Path,
        help="JSON-lines file with one event per line, in chain order",
    )
    replay_parser.add_argument(
        "--snapshot",
        type=Path,
        default=None,
        help="Initial store snapshot (JSON). Defaults to an empty store",
    )
    replay_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Where to write the final snapshot (default: stdout)",
    )
    replay_parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 2 if any event was aborted on a missing entity",
    )
    replay_parser.set_defaults(func=replay)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
