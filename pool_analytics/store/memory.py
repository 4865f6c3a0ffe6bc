"""In-memory EntityStore with JSON snapshot support."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import structlog
from pydantic import BaseModel, Field

from pool_analytics.errors import ImmutableFieldError
from pool_analytics.models.entities import Bundle, Entity, Factory, Pool, Token
from pool_analytics.models.types import normalize_address
from pool_analytics.store.base import E

logger = structlog.get_logger()

# Fields that may not change once an entity has been stored
IMMUTABLE_FIELDS: dict[type[Entity], tuple[str, ...]] = {
    Token: ("decimals",),
    Pool: ("token0", "token1"),
}


class StoreSnapshot(BaseModel):
    """Serialized store contents, grouped by entity type."""

    bundles: list[Bundle] = Field(default_factory=list)
    factories: list[Factory] = Field(default_factory=list)
    tokens: list[Token] = Field(default_factory=list)
    pools: list[Pool] = Field(default_factory=list)


def _key(entity_type: type[Entity], entity_id: str) -> tuple[type[Entity], str]:
    # Token and pool ids are addresses; the singletons use fixed ids
    if entity_type in (Token, Pool):
        entity_id = normalize_address(entity_id)
    return (entity_type, entity_id)


class InMemoryEntityStore:
    """Dict-backed entity store.

    Entities are deep-copied on get and put so that a handler's unsaved
    mutations stay invisible to other readers, matching the load/save
    semantics of a persistent store.
    """

    def __init__(self, entities: list[Entity] | None = None) -> None:
        self._entities: dict[tuple[type[Entity], str], Entity] = {}
        if entities:
            for entity in entities:
                self.put(entity)

    def get(self, entity_type: type[E], entity_id: str) -> E | None:
        """Load a copy of an entity, or None if absent."""
        entity = self._entities.get(_key(entity_type, entity_id))
        if entity is None:
            return None
        return entity.model_copy(deep=True)  # type: ignore[return-value]

    def put(self, entity: Entity) -> None:
        """Store a copy of an entity.

        Raises:
            ImmutableFieldError: If the put would change a field that is fixed
                once stored (Token.decimals, Pool.token0/token1)
        """
        key = _key(type(entity), entity.id)
        existing = self._entities.get(key)
        if existing is not None:
            for field_name in IMMUTABLE_FIELDS.get(type(entity), ()):
                old = getattr(existing, field_name)
                new = getattr(entity, field_name)
                if old != new:
                    raise ImmutableFieldError(
                        f"{type(entity).__name__} {entity.id}: {field_name} "
                        f"cannot change from {old} to {new}"
                    )
        self._entities[key] = entity.model_copy(deep=True)

    def __len__(self) -> int:
        return len(self._entities)

    def iter_entities(self, entity_type: type[E]) -> Iterator[E]:
        """Iterate over copies of all entities of a type, ordered by id."""
        ids = sorted(eid for (etype, eid) in self._entities if etype is entity_type)
        for entity_id in ids:
            entity = self.get(entity_type, entity_id)
            if entity is not None:
                yield entity

    @classmethod
    def from_snapshot(cls, data: dict[str, Any]) -> InMemoryEntityStore:
        """Build a store from a snapshot mapping.

        Raises:
            pydantic.ValidationError: If the snapshot is malformed
        """
        snapshot = StoreSnapshot.model_validate(data)
        store = cls()
        for group in (snapshot.bundles, snapshot.factories, snapshot.tokens, snapshot.pools):
            for entity in group:
                store.put(entity)
        logger.debug(
            "store_loaded_from_snapshot",
            bundles=len(snapshot.bundles),
            factories=len(snapshot.factories),
            tokens=len(snapshot.tokens),
            pools=len(snapshot.pools),
        )
        return store

    def to_snapshot(self) -> dict[str, Any]:
        """Serialize the store using the output field names (JSON-compatible)."""
        snapshot = StoreSnapshot(
            bundles=list(self.iter_entities(Bundle)),
            factories=list(self.iter_entities(Factory)),
            tokens=list(self.iter_entities(Token)),
            pools=list(self.iter_entities(Pool)),
        )
        return snapshot.model_dump(mode="json", by_alias=True)


__all__ = ["InMemoryEntityStore", "StoreSnapshot", "IMMUTABLE_FIELDS"]
