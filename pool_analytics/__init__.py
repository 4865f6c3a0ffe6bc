"""Pool Analytics - derived prices, TVL and liquidity from V3 pool events."""

__version__ = "0.1.0"

from pool_analytics.config import DEFAULT_PRICING_CONFIG, PricingConfig  # noqa: E402
from pool_analytics.processor import EventProcessor, ProcessingStats  # noqa: E402
from pool_analytics.store import EntityStore, InMemoryEntityStore  # noqa: E402

__all__ = [
    "DEFAULT_PRICING_CONFIG",
    "EntityStore",
    "EventProcessor",
    "InMemoryEntityStore",
    "PricingConfig",
    "ProcessingStats",
    "__version__",
]
