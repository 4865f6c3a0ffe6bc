"""Pydantic models for events and derived-state entities."""

from pool_analytics.models.entities import Bundle, Entity, Factory, Pool, Token
from pool_analytics.models.events import (
    AnyEvent,
    BurnEvent,
    InitializeEvent,
    MintEvent,
    PoolEvent,
    SwapEvent,
    parse_event,
)
from pool_analytics.models.types import Address, normalize_address

__all__ = [
    # Types
    "Address",
    "normalize_address",
    # Entities
    "Entity",
    "Bundle",
    "Factory",
    "Token",
    "Pool",
    # Events
    "AnyEvent",
    "PoolEvent",
    "InitializeEvent",
    "MintEvent",
    "BurnEvent",
    "SwapEvent",
    "parse_event",
]
