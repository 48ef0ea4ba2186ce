"""Shared property-key helpers.

This module centralizes key coercion and key ordering so enumeration and
construction agree on one deterministic key contract.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from decimal import Decimal
from typing import Final, Literal

from .models import UNDEFINED

EnumerationOrder = Literal["host", "insertion"]

SUPPORTED_ENUMERATION_ORDERS: Final[tuple[str, ...]] = ("host", "insertion")

_DOMAIN_MAX_ARRAY_INDEX: Final[int] = 2**32 - 2


def domain_is_integer_like_key(key: str) -> bool:
    """Check whether one string key is a canonical array index.

    Args:
        key: Candidate property key.

    Returns:
        bool: True for `"0"` or a digit string without a leading zero whose
        value does not exceed `2**32 - 2`.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if not key or not key.isascii() or not key.isdigit():
        return False
    if len(key) > 1 and key[0] == "0":
        return False
    return int(key) <= _DOMAIN_MAX_ARRAY_INDEX


def domain_order_keys(keys: Iterable[str], enumeration_order: EnumerationOrder = "host") -> list[str]:
    """Order string keys using one enumeration-order policy.

    `host` places integer-like keys first in ascending numeric order, then
    the remaining keys in insertion order. `insertion` keeps input order.

    Args:
        keys: String keys in insertion order.
        enumeration_order: Ordering policy name.

    Returns:
        list[str]: Ordered keys.

    Raises:
        ValueError: Raised when the ordering policy is unsupported.
    """

    if enumeration_order == "insertion":
        return list(keys)
    if enumeration_order != "host":
        raise ValueError(
            f"enumeration_order must be one of {', '.join(SUPPORTED_ENUMERATION_ORDERS)}; got {enumeration_order!r}"
        )

    index_keys: list[str] = []
    named_keys: list[str] = []
    for key in keys:
        if domain_is_integer_like_key(key):
            index_keys.append(key)
        else:
            named_keys.append(key)
    index_keys.sort(key=int)
    return index_keys + named_keys


def domain_coerce_property_key(value: object) -> str:
    """Coerce one mapped key value into a string property key.

    Lists and tuples are joined with `","` after coercing each item.
    `None` and `UNDEFINED` items and cyclic references render as empty strings.

    Args:
        value: Key returned by a mapping function.

    Returns:
        str: Property key following host stringification rules.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return _domain_stringify(value, active_sequence_ids=set())


def _domain_stringify(value: object, active_sequence_ids: set[int]) -> str:
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _domain_format_float_key(value)
    if isinstance(value, (list, tuple)):
        return _domain_join_sequence_key(value, active_sequence_ids)
    return str(value)


def _domain_join_sequence_key(value: list | tuple, active_sequence_ids: set[int]) -> str:
    """Join one sequence key the way host array stringification does.

    Args:
        value: List or tuple key candidate.
        active_sequence_ids: Identities of sequences currently being joined.

    Returns:
        str: Comma-joined item strings.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if id(value) in active_sequence_ids:
        return ""
    active_sequence_ids.add(id(value))
    try:
        return ",".join(
            "" if item is None or item is UNDEFINED else _domain_stringify(item, active_sequence_ids)
            for item in value
        )
    finally:
        active_sequence_ids.discard(id(value))


def _domain_format_float_key(value: float) -> str:
    """Format one float the way host number-to-string conversion does.

    Plain decimal notation is used when the decimal exponent of the leading
    digit lies in [-6, 20]; otherwise exponent notation with an explicit
    sign and no zero padding (`1e-7`, `1.5e+21`).

    Args:
        value: Float key candidate.

    Returns:
        str: Canonical string form.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    # -0.0 stringifies as "0"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))

    sign, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = "".join(str(digit) for digit in digit_tuple).rstrip("0")
    exponent += len(digit_tuple) - len(digits)
    digit_count = len(digits)
    point_position = exponent + digit_count
    prefix = "-" if sign else ""

    if digit_count <= point_position <= 21:
        return prefix + digits + "0" * (point_position - digit_count)
    if 0 < point_position <= 21:
        return prefix + digits[:point_position] + "." + digits[point_position:]
    if -6 < point_position <= 0:
        return prefix + "0." + "0" * (-point_position) + digits

    scientific_exponent = point_position - 1
    mantissa = digits[0] if digit_count == 1 else digits[0] + "." + digits[1:]
    exponent_sign = "+" if scientific_exponent >= 0 else "-"
    return f"{prefix}{mantissa}e{exponent_sign}{abs(scientific_exponent)}"
