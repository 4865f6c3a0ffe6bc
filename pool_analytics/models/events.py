"""Pydantic models for pool events.

Each event carries the address of the emitting pool, which is the store key
of the Pool entity it applies to. Field aliases follow the contract ABI
(sqrtPriceX96, tickLower, ...). Integer fields accept ints or decimal strings
and are range-checked against their Solidity types.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from pool_analytics.models.types import Address, Int24, Int256, Uint128, Uint160, Uint256


class PoolEvent(BaseModel):
    """Fields shared by all pool events.

    block_number and log_index locate the event in the chain. They are
    optional and only used to detect out-of-order delivery.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    address: Address = Field(description="Address of the emitting pool.")
    block_number: int | None = Field(default=None, ge=0, alias="blockNumber")
    log_index: int | None = Field(default=None, ge=0, alias="logIndex")

    @property
    def position(self) -> tuple[int, int] | None:
        """(block_number, log_index) if both are known."""
        if self.block_number is None or self.log_index is None:
            return None
        return (self.block_number, self.log_index)


class InitializeEvent(PoolEvent):
    """First price of a pool."""

    kind: Literal["initialize"] = "initialize"
    sqrt_price_x96: Uint160 = Field(alias="sqrtPriceX96")
    tick: Int24


class MintEvent(PoolEvent):
    """Liquidity added to a position."""

    kind: Literal["mint"] = "mint"
    amount0: Uint256
    amount1: Uint256
    amount: Uint128 = Field(description="Liquidity minted.")
    tick_lower: Int24 = Field(alias="tickLower")
    tick_upper: Int24 = Field(alias="tickUpper")


class BurnEvent(PoolEvent):
    """Liquidity removed from a position."""

    kind: Literal["burn"] = "burn"
    amount0: Uint256
    amount1: Uint256
    amount: Uint128 = Field(description="Liquidity burned.")
    tick_lower: Int24 = Field(alias="tickLower")
    tick_upper: Int24 = Field(alias="tickUpper")


class SwapEvent(PoolEvent):
    """A trade. amount0/amount1 are the pool's balance deltas (negative = outflow).

    sqrt_price_x96, liquidity and tick are the pool state after the swap.
    """

    kind: Literal["swap"] = "swap"
    amount0: Int256
    amount1: Int256
    sqrt_price_x96: Uint160 = Field(alias="sqrtPriceX96")
    liquidity: Uint128
    tick: Int24


AnyEvent = Annotated[
    InitializeEvent | MintEvent | BurnEvent | SwapEvent,
    Field(discriminator="kind"),
]

EVENT_ADAPTER: TypeAdapter[InitializeEvent | MintEvent | BurnEvent | SwapEvent] = TypeAdapter(
    AnyEvent
)


def parse_event(data: dict) -> InitializeEvent | MintEvent | BurnEvent | SwapEvent:
    """Parse a raw event mapping into the matching event model.

    Raises:
        pydantic.ValidationError: If the kind is unknown or a field is invalid
    """
    return EVENT_ADAPTER.validate_python(data)


__all__ = [
    "PoolEvent",
    "InitializeEvent",
    "MintEvent",
    "BurnEvent",
    "SwapEvent",
    "AnyEvent",
    "EVENT_ADAPTER",
    "parse_event",
]
