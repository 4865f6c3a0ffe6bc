"""Error classes for the pool analytics engine.

Only MissingEntityError is part of normal operation: handlers raise it from
their required-entities prelude and the processor turns it into a logged,
non-applied result. The other errors signal bad input or a broken store
invariant and propagate to the caller.
"""


class PoolAnalyticsError(Exception):
    """Base error for pool analytics operations."""

    pass


class MissingEntityError(PoolAnalyticsError):
    """A required entity could not be loaded from the store."""

    def __init__(self, entity_type: str, entity_id: str) -> None:
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"Could not load {entity_type} {entity_id}")


class ImmutableFieldError(PoolAnalyticsError):
    """A put would change a field that is fixed once observed."""

    pass


class EventDecodeError(PoolAnalyticsError):
    """An event record could not be decoded."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


__all__ = [
    "PoolAnalyticsError",
    "MissingEntityError",
    "ImmutableFieldError",
    "EventDecodeError",
]
