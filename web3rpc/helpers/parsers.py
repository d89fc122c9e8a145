"""Conversions between hex-encoded quantities and native integers.

Ethereum nodes transmit numbers as ``0x``-prefixed hexadecimal strings without
leading zeros ("quantities"). The helpers here are the only place that
translation happens, in both directions.
"""

import re

from web3rpc.helpers.constants import (
    HEX_PREFIX,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
)
from web3rpc.helpers.errors import MalformedQuantity, NumericOverflow


QUANTITY_PATTERN = re.compile(r"(-?)0x([0-9a-fA-F]+)")


def _encode(value: int) -> str:
    if value < 0:
        return f"-{HEX_PREFIX}{-value:x}"
    return f"{HEX_PREFIX}{value:x}"


def _decode(quantity: str) -> int:
    if not isinstance(quantity, str):
        msg = f"Quantity must be a string, got {type(quantity).__name__}"
        raise MalformedQuantity(msg)

    match = QUANTITY_PATTERN.fullmatch(quantity)
    if match is None:
        msg = f"Invalid quantity {quantity!r}: expected {HEX_PREFIX}-prefixed hex"
        raise MalformedQuantity(msg)

    sign, digits = match.groups()
    value = int(digits, 16)
    return -value if sign else value


def _check_range(value: int, low: int, high: int, width: str) -> int:
    if not low <= value <= high:
        msg = f"Value {value} does not fit in a signed {width} integer"
        raise NumericOverflow(msg)
    return value


def int_to_hex(value: int) -> str:
    """Encode a signed 32-bit integer as a quantity.

    Args:
        value: Integer within the signed 32-bit range

    Returns:
        str: Quantity string without leading zeros

    Raises:
        NumericOverflow: If value is outside the signed 32-bit range

    Example:
        >>> int_to_hex(1)
        '0x1'
        >>> int_to_hex(0)
        '0x0'
    """
    return _encode(_check_range(value, INT32_MIN, INT32_MAX, "32-bit"))


def long_to_hex(value: int) -> str:
    """Encode a signed 64-bit integer as a quantity.

    Args:
        value: Integer within the signed 64-bit range

    Returns:
        str: Quantity string without leading zeros

    Raises:
        NumericOverflow: If value is outside the signed 64-bit range

    Example:
        >>> long_to_hex(1559297)
        '0x17cb01'
    """
    return _encode(_check_range(value, INT64_MIN, INT64_MAX, "64-bit"))


def bigint_to_hex(value: int) -> str:
    """Encode an arbitrary-precision integer as a quantity.

    Example:
        >>> bigint_to_hex(10**18)
        '0xde0b6b3a7640000'
    """
    return _encode(value)


def hex_to_int(quantity: str) -> int:
    """Decode a quantity into a signed 32-bit integer.

    Args:
        quantity: ``0x``-prefixed hex string

    Returns:
        int: Decoded value

    Raises:
        MalformedQuantity: If the prefix is missing or the digits are invalid
        NumericOverflow: If the value is outside the signed 32-bit range

    Example:
        >>> hex_to_int("0x1307")
        4871
    """
    return _check_range(_decode(quantity), INT32_MIN, INT32_MAX, "32-bit")


def hex_to_long(quantity: str) -> int:
    """Decode a quantity into a 64-bit integer.

    Python integers widen as needed, so values past 64 bits are returned
    unchanged rather than wrapped.

    Raises:
        MalformedQuantity: If the prefix is missing or the digits are invalid

    Example:
        >>> hex_to_long("0x18AA03")
        1616387
    """
    return _decode(quantity)


def hex_to_bigint(quantity: str) -> int:
    """Decode a quantity into an arbitrary-precision integer.

    Raises:
        MalformedQuantity: If the prefix is missing or the digits are invalid

    Example:
        >>> hex_to_bigint("0xDE0B6B3A7640000")
        1000000000000000000
    """
    return _decode(quantity)


__all__ = [
    "bigint_to_hex",
    "hex_to_bigint",
    "hex_to_int",
    "hex_to_long",
    "int_to_hex",
    "long_to_hex",
]
