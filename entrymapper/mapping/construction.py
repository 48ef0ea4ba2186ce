"""From-entries record construction with explicit entry-shape checks."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from entrymapper.domain import Entry, domain_coerce_property_key

from .errors import ShapeError

_TEXT_TYPES = (str, bytes, bytearray)


def mapping_validate_entry_shape(value: object, position: int) -> Entry:
    """Validate one mapped value and normalize it into an entry.

    Args:
        value: Value returned by a mapping function.
        position: Zero-based enumeration index used in error messages.

    Returns:
        Entry: Entry with a coerced string key and the original value.

    Raises:
        ShapeError: Raised when the value is not an indexable non-text
            sequence with at least two items.
    """

    if isinstance(value, _TEXT_TYPES) or not isinstance(value, Sequence):
        raise ShapeError(
            f"entry at position {position} must be a [key, value] sequence; got {type(value).__name__}",
            position=position,
        )
    if len(value) < 2:
        raise ShapeError(
            f"entry at position {position} must have at least 2 items; got {len(value)}",
            position=position,
        )
    return Entry(domain_coerce_property_key(value[0]), value[1])


def mapping_from_entries(entries: Iterable[object]) -> dict[str, object]:
    """Build one new record from an ordered sequence of entry-shaped values.

    A later entry with a duplicate key overwrites the value of the earlier
    one while keeping the position of its first occurrence.

    Args:
        entries: Entry-shaped values in order.

    Returns:
        dict[str, object]: Newly allocated record.

    Raises:
        ShapeError: Raised when one value is not entry-shaped.
    """

    record: dict[str, object] = {}
    for position, value in enumerate(entries):
        key, entry_value = mapping_validate_entry_shape(value, position)
        record[key] = entry_value
    return record
