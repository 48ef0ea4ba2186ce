"""Own enumerable string-keyed entry enumeration for source records.

Every source shape is reduced to an ordered list of visible own entries
before any mapping function runs:

- `HostRecord`: own enumerable string-keyed properties; symbol keys,
  non-enumerable properties and prototype members are invisible.
- `Mapping`: string keys only; other key types play the role of symbols.
- `str` and other sequences: one entry per item keyed by its index.
- Objects with an instance `__dict__`: public instance attributes; names
  starting with `_` are non-enumerable and class attributes are inherited.
- Remaining scalars (numbers, booleans, sets, ...): no entries.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from entrymapper.domain import UNDEFINED, Entry, EnumerationOrder, HostRecord, domain_order_keys

from .errors import InputTypeError

logger = logging.getLogger(__name__)


def mapping_require_record_coercible(source: object) -> None:
    """Reject nullish sources before any other work happens.

    Args:
        source: Candidate source value.

    Returns:
        None: This function does not return a value.

    Raises:
        InputTypeError: Raised when `source` is None or UNDEFINED.
    """

    if source is None or source is UNDEFINED:
        raise InputTypeError(f"cannot convert {source!r} to a record")


def mapping_coerce_source(source: object) -> list[tuple[str, object]]:
    """Coerce one source value into its own enumerable string-keyed entries.

    Args:
        source: Record or record-coercible value.

    Returns:
        list[tuple[str, object]]: Visible own entries in insertion order.

    Raises:
        InputTypeError: Raised when `source` is None or UNDEFINED.
    """

    mapping_require_record_coercible(source)

    if isinstance(source, HostRecord):
        return source.record_own_enumerable_string_entries()
    if isinstance(source, Mapping):
        return [(key, source[key]) for key in source if isinstance(key, str)]
    if isinstance(source, (str, Sequence)):
        return [(str(index), item) for index, item in enumerate(source)]

    instance_attributes = getattr(source, "__dict__", None)
    if isinstance(instance_attributes, dict):
        return [
            (name, value)
            for name, value in instance_attributes.items()
            if isinstance(name, str) and not name.startswith("_")
        ]
    return []


def mapping_enumerate_own_entries(
    source: object,
    enumeration_order: EnumerationOrder = "host",
) -> list[Entry]:
    """Enumerate one source's visible own entries in policy order.

    Args:
        source: Record or record-coercible value.
        enumeration_order: `host` (integer-like keys ascending first) or
            `insertion`.

    Returns:
        list[Entry]: Ordered entries snapshot.

    Raises:
        InputTypeError: Raised when `source` is nullish.
        ValueError: Raised when the ordering policy is unsupported.
    """

    own_entries = mapping_coerce_source(source)
    values_by_key = dict(own_entries)
    ordered_keys = domain_order_keys([key for key, _ in own_entries], enumeration_order)
    entries = [Entry(key, values_by_key[key]) for key in ordered_keys]
    logger.debug(
        "enumerated %d own entries from %s (order=%s)",
        len(entries),
        type(source).__name__,
        enumeration_order,
    )
    return entries
