"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
import structlog

from pool_analytics.handlers import HandlerContext
from pool_analytics.processor import EventProcessor
from pool_analytics.store.memory import InMemoryEntityStore
from tests.helpers import (
    ANCHOR_POOL,
    POOL_XW,
    TOKEN_X,
    USDC_E,
    WETH,
    make_pool,
    make_store,
    make_token,
)


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo any structlog configuration made by a test (e.g. CLI runs)."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def network_store() -> InMemoryEntityStore:
    """A bootstrapped network with two uninitialized pools.

    - anchor pool: USDC.e (6 decimals) / WETH (18 decimals)
    - POOL_XW: TOKEN_X (18 decimals) / WETH
    """
    return make_store(
        make_token(USDC_E, decimals=6, whitelist_pools=[ANCHOR_POOL]),
        make_token(WETH, decimals=18, whitelist_pools=[ANCHOR_POOL, POOL_XW]),
        make_token(TOKEN_X, decimals=18, whitelist_pools=[POOL_XW]),
        make_pool(ANCHOR_POOL, USDC_E, WETH),
        make_pool(POOL_XW, TOKEN_X, WETH),
    )


@pytest.fixture
def processor(network_store: InMemoryEntityStore) -> EventProcessor:
    """A processor over the bootstrapped network."""
    return EventProcessor(network_store)


@pytest.fixture
def context(network_store: InMemoryEntityStore) -> HandlerContext:
    """A handler context over the bootstrapped network."""
    return HandlerContext(store=network_store)
