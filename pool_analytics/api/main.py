"""FastAPI application serving the derived entities.

The API is read-only; the store is filled by replaying events (see
pool_analytics.cli) or seeded from a snapshot at startup.
"""

import json
import os

import structlog
import uvicorn
from fastapi import FastAPI

from pool_analytics import __version__
from pool_analytics.api.endpoints import get_config, get_store, router, set_default_store
from pool_analytics.config import PricingConfig
from pool_analytics.log_config import configure_logging
from pool_analytics.store.base import EntityStore
from pool_analytics.store.memory import InMemoryEntityStore

logger = structlog.get_logger()

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("POOL_ANALYTICS_HOST", "0.0.0.0")
PORT = int(os.environ.get("POOL_ANALYTICS_PORT", "8000"))
DEBUG = os.environ.get("POOL_ANALYTICS_DEBUG", "false").lower() in ("true", "1", "yes")
SNAPSHOT = os.environ.get("POOL_ANALYTICS_SNAPSHOT")


def create_app(
    store: EntityStore | None = None,
    config: PricingConfig | None = None,
) -> FastAPI:
    """Build the API application.

    Args:
        store: Store to serve. If None, the module-level default store
            (see set_default_store) is served.
        config: Pricing configuration the store was built with. If None,
            DEFAULT_PRICING_CONFIG is used.
    """
    application = FastAPI(
        title="Pool Analytics",
        description="Derived token prices, TVL and liquidity for V3 pools",
        version=__version__,
    )
    application.include_router(router)

    @application.get("/health")
    async def health() -> dict[str, object]:
        """Health check endpoint."""
        return {"status": "ok"}

    if store is not None:
        application.dependency_overrides[get_store] = lambda: store
    if config is not None:
        application.dependency_overrides[get_config] = lambda: config

    return application


app = create_app()


def load_snapshot(path: str) -> None:
    """Seed the served store from a snapshot file."""
    with open(path) as f:
        store = InMemoryEntityStore.from_snapshot(json.load(f))
    set_default_store(store)
    logger.info("snapshot_loaded", path=path, entities=len(store))


def run() -> None:
    """Run the API server.

    Configuration via environment variables:
    - POOL_ANALYTICS_HOST: Host to bind to (default: 0.0.0.0)
    - POOL_ANALYTICS_PORT: Port to bind to (default: 8000)
    - POOL_ANALYTICS_DEBUG: Enable debug logging (default: false)
    - POOL_ANALYTICS_SNAPSHOT: Snapshot file to serve (default: empty store)
    """
    configure_logging(DEBUG)
    if SNAPSHOT:
        load_snapshot(SNAPSHOT)
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    run()
