"""Shared type definitions for event and entity models.

Solidity integer widths are enforced at the model boundary so that handlers
can trust every integer they receive.
"""

from collections.abc import Callable
from typing import Annotated, Any

from pydantic import AfterValidator, BeforeValidator, Field

UINT128_MAX = 2**128 - 1
UINT160_MAX = 2**160 - 1
UINT256_MAX = 2**256 - 1
INT24_MIN, INT24_MAX = -(2**23), 2**23 - 1
INT256_MIN, INT256_MAX = -(2**255), 2**255 - 1


def parse_integer(value: Any) -> int:
    """Coerce an event integer field to int.

    Accepts ints and decimal integer strings (the usual JSON encoding for
    values wider than 53 bits).

    Raises:
        ValueError: If value is not an integer or an integer string
    """
    if isinstance(value, bool):
        raise ValueError("Boolean is not an integer")
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Integer must be string or int, got {type(value).__name__}")
    try:
        return int(value)
    except ValueError as err:
        raise ValueError(f"Integer must be a decimal integer string: '{value}'") from err


def _bounded(name: str, lower: int, upper: int) -> Callable[[int], int]:
    def check(value: int) -> int:
        if value < lower or value > upper:
            raise ValueError(f"{name} out of range: {value}")
        return value

    return check


# Integers as int or decimal string, range-checked against their Solidity width
Uint128 = Annotated[
    int, BeforeValidator(parse_integer), AfterValidator(_bounded("uint128", 0, UINT128_MAX))
]
Uint160 = Annotated[
    int, BeforeValidator(parse_integer), AfterValidator(_bounded("uint160", 0, UINT160_MAX))
]
Uint256 = Annotated[
    int, BeforeValidator(parse_integer), AfterValidator(_bounded("uint256", 0, UINT256_MAX))
]
Int24 = Annotated[
    int, BeforeValidator(parse_integer), AfterValidator(_bounded("int24", INT24_MIN, INT24_MAX))
]
Int256 = Annotated[
    int,
    BeforeValidator(parse_integer),
    AfterValidator(_bounded("int256", INT256_MIN, INT256_MAX)),
]


def normalize_address(address: str, *, validate: bool = False) -> str:
    """Normalize an Ethereum address to lowercase.

    Args:
        address: An Ethereum address (with or without 0x prefix)
        validate: If True, raises ValueError for invalid addresses.

    Returns:
        Lowercase address with 0x prefix

    Raises:
        ValueError: If validate=True and address is not a valid Ethereum address
    """
    addr = address.lower()
    if not addr.startswith("0x"):
        addr = "0x" + addr

    if validate and not is_valid_address(addr):
        raise ValueError(f"Invalid address: {address}")

    return addr


def is_valid_address(address: str) -> bool:
    """Check if a string is a valid Ethereum address.

    Args:
        address: String to validate

    Returns:
        True if valid Ethereum address format
    """
    if not isinstance(address, str):
        return False
    if not address.startswith("0x"):
        return False
    if len(address) != 42:
        return False
    try:
        int(address, 16)
        return True
    except ValueError:
        return False


def _normalize_validated(value: str) -> str:
    return normalize_address(value, validate=True)


# Ethereum address, stored lowercase
Address = Annotated[
    str,
    AfterValidator(_normalize_validated),
    Field(description="Lowercase 0x-prefixed address"),
]


__all__ = [
    "UINT128_MAX",
    "UINT160_MAX",
    "UINT256_MAX",
    "INT24_MIN",
    "INT24_MAX",
    "INT256_MIN",
    "INT256_MAX",
    "Uint128",
    "Uint160",
    "Uint256",
    "Int24",
    "Int256",
    "Address",
    "parse_integer",
    "normalize_address",
    "is_valid_address",
]
