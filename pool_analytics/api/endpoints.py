"""Read-only API endpoints over the derived entities."""

from typing import Any

import structlog
from fastapi import APIRouter, Depends, HTTPException

from pool_analytics.config import DEFAULT_PRICING_CONFIG, PricingConfig
from pool_analytics.models.entities import Bundle, Entity, Factory, Pool, Token
from pool_analytics.store.base import EntityStore
from pool_analytics.store.memory import InMemoryEntityStore

logger = structlog.get_logger()

router = APIRouter()

_default_store: EntityStore = InMemoryEntityStore()


def set_default_store(store: EntityStore) -> None:
    """Replace the store served by get_store."""
    global _default_store
    _default_store = store


def get_store() -> EntityStore:
    """Dependency provider for the entity store.

    Override this in tests to inject a prepared store:
        app.dependency_overrides[get_store] = lambda: store

    Returns:
        The entity store to read from.
    """
    return _default_store


def get_config() -> PricingConfig:
    """Dependency provider for the pricing configuration.

    Supplies the singleton ids (bundle, factory) the store was built with.
    """
    return DEFAULT_PRICING_CONFIG


def _serialize(entity: Entity) -> dict[str, Any]:
    return entity.model_dump(mode="json", by_alias=True)


def _get_or_404(store: EntityStore, entity_type: type[Entity], entity_id: str) -> dict[str, Any]:
    entity = store.get(entity_type, entity_id)
    if entity is None:
        logger.debug("entity_not_found", entity_type=entity_type.__name__, entity_id=entity_id)
        raise HTTPException(status_code=404, detail=f"{entity_type.__name__} not found")
    return _serialize(entity)


@router.get("/bundle")
async def get_bundle(
    store: EntityStore = Depends(get_store),
    config: PricingConfig = Depends(get_config),
) -> dict[str, Any]:
    """Global reference-currency USD price."""
    return _get_or_404(store, Bundle, config.bundle_id)


@router.get("/factory")
async def get_factory(
    store: EntityStore = Depends(get_store),
    config: PricingConfig = Depends(get_config),
) -> dict[str, Any]:
    """Global transaction counter."""
    return _get_or_404(store, Factory, config.factory_address)


@router.get("/tokens/{address}")
async def get_token(address: str, store: EntityStore = Depends(get_store)) -> dict[str, Any]:
    """Token analytics by address (case-insensitive)."""
    return _get_or_404(store, Token, address)


@router.get("/pools/{address}")
async def get_pool(address: str, store: EntityStore = Depends(get_store)) -> dict[str, Any]:
    """Pool state by address (case-insensitive)."""
    return _get_or_404(store, Pool, address)
