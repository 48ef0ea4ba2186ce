"""Typed interfaces for entry-mapping transformations."""

from typing import Protocol

from entrymapper.domain import Entry


class MappingFunction(Protocol):
    """Callable contract applied once per visited source entry."""

    def __call__(self, entry: Entry, /) -> object:
        """Map one source entry to an entry-shaped value.

        Args:
            entry: Visited source entry.

        Returns:
            object: Sequence whose first two items are the new key and value.

        Raises:
            Exception: Any error raised here aborts the whole transform.
        """


class EntryMapperPort(Protocol):
    """Port definition for mapping one record's entries into a new record."""

    def mapping_enumeration_order(self) -> str:
        """Return the enumeration-order policy used for source records.

        Returns:
            str: Enumeration-order policy name.

        Raises:
            RuntimeError: Raised when policy metadata cannot be resolved.
        """

    def mapping_map_entries(self, source: object, map_fn: MappingFunction) -> dict[str, object]:
        """Map every own enumerable string-keyed entry of a source record.

        Args:
            source: Record or record-coercible value.
            map_fn: Entry mapping function.

        Returns:
            dict[str, object]: Newly allocated result record.

        Raises:
            InputTypeError: Raised when `source` is nullish.
            CallableTypeError: Raised when `map_fn` is not callable.
            ShapeError: Raised when `map_fn` returns a non-entry value.
        """
