"""Abstract entity store used by the handlers and the price oracle."""

from __future__ import annotations

from typing import Protocol, TypeVar

from pool_analytics.errors import MissingEntityError
from pool_analytics.models.entities import Entity

E = TypeVar("E", bound=Entity)


class EntityStore(Protocol):
    """Key-value store of entities.

    get returns None when no entity of that type has the given id. Returned
    entities are working copies: changes are visible to other readers only
    after put.
    """

    def get(self, entity_type: type[E], entity_id: str) -> E | None:
        """Load an entity by type and id."""
        ...

    def put(self, entity: Entity) -> None:
        """Insert or replace an entity."""
        ...


def require(store: EntityStore, entity_type: type[E], entity_id: str) -> E:
    """Load an entity that must exist.

    Raises:
        MissingEntityError: If the entity is not in the store
    """
    entity = store.get(entity_type, entity_id)
    if entity is None:
        raise MissingEntityError(entity_type.__name__, entity_id)
    return entity


__all__ = ["EntityStore", "require"]
