"""structlog configuration for command-line and server entry points."""

import logging
import sys

import structlog


def configure_logging(verbose: bool = False) -> None:
    """Configure structlog console output on stderr.

    stdout is left free for command output (e.g. a replayed snapshot).

    Args:
        verbose: Log at DEBUG level instead of INFO
    """
    log_level = logging.DEBUG if verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )


__all__ = ["configure_logging"]
