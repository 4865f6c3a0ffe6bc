"""Entity store abstraction and the in-memory implementation."""

from pool_analytics.store.base import EntityStore, require
from pool_analytics.store.memory import InMemoryEntityStore, StoreSnapshot

__all__ = ["EntityStore", "InMemoryEntityStore", "StoreSnapshot", "require"]
