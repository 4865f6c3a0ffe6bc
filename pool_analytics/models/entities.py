"""Derived-state entities maintained by the event handlers.

Attribute names are snake_case; the camelCase aliases are the field names of
the output contract read by downstream query layers (serialize with
``model_dump(by_alias=True)``).

Token and Pool entities are created by an external bootstrap. The engine only
loads and mutates them.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pool_analytics.models.types import normalize_address

ZERO = Decimal(0)


class Entity(BaseModel):
    """Base class for stored entities, identified by a string id."""

    model_config = ConfigDict(populate_by_name=True)

    id: str


class Bundle(Entity):
    """Singleton holding the reference currency's USD price."""

    eth_price_usd: Decimal = Field(default=ZERO, alias="ethPriceUSD")


class Factory(Entity):
    """Singleton holding the global transaction counter."""

    tx_count: int = Field(default=0, alias="txCount")


class Token(Entity):
    """An ERC20 token seen in at least one pool.

    whitelist_pools is append-only and its order is the order in which the
    price oracle visits candidate pools.
    """

    # Some exotic tokens use more than 18 decimals; 77 is the max for uint256
    decimals: int = Field(ge=0, le=77)
    symbol: str | None = None
    name: str | None = None
    pool_count: int = Field(default=0, alias="poolCount")
    tx_count: int = Field(default=0, alias="txCount")
    derived_eth: Decimal = Field(default=ZERO, alias="derivedETH")
    whitelist_pools: list[str] = Field(default_factory=list, alias="whitelistPools")

    @field_validator("id")
    @classmethod
    def _normalize_id(cls, value: str) -> str:
        return normalize_address(value)

    @field_validator("whitelist_pools")
    @classmethod
    def _normalize_pools(cls, value: list[str]) -> list[str]:
        return [normalize_address(pool) for pool in value]


class Pool(Entity):
    """A concentrated-liquidity pool.

    tick is None until the pool's Initialize event has been processed.
    """

    token0: str
    token1: str
    fee_tier: int | None = Field(default=None, alias="feeTier")
    sqrt_price: int = Field(default=0, ge=0, alias="sqrtPrice")
    tick: int | None = None
    liquidity: int = 0
    token0_price: Decimal = Field(default=ZERO, alias="token0Price")
    token1_price: Decimal = Field(default=ZERO, alias="token1Price")
    total_value_locked_token0: Decimal = Field(default=ZERO, alias="totalValueLockedToken0")
    total_value_locked_token1: Decimal = Field(default=ZERO, alias="totalValueLockedToken1")
    tx_count: int = Field(default=0, alias="txCount")

    @field_validator("id", "token0", "token1")
    @classmethod
    def _normalize_address(cls, value: str) -> str:
        return normalize_address(value)


__all__ = ["Entity", "Bundle", "Factory", "Token", "Pool"]
