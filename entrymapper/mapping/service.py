"""Entry mapping service for one-level record transformations."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from entrymapper.domain import SUPPORTED_ENUMERATION_ORDERS, EnumerationOrder

from .construction import mapping_from_entries
from .enumeration import mapping_enumerate_own_entries, mapping_require_record_coercible
from .errors import CallableTypeError
from .interfaces import MappingFunction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntryMapperConfig:
    """Configuration for entry mapping behavior.

    Attributes:
        enumeration_order: Source enumeration-order policy. `host` visits
            integer-like keys first in ascending order, then the remaining
            keys in insertion order; `insertion` visits keys in insertion order.
    """

    enumeration_order: EnumerationOrder = "host"

    def mapping_validate(self) -> None:
        """Validate mapping configuration values.

        Returns:
            None: This method does not return a value.

        Raises:
            ValueError: Raised when the enumeration-order policy is unsupported.
        """

        if self.enumeration_order not in SUPPORTED_ENUMERATION_ORDERS:
            raise ValueError(
                "config.enumeration_order must be one of "
                f"{', '.join(SUPPORTED_ENUMERATION_ORDERS)}; got {self.enumeration_order!r}"
            )


class EntryMapper:
    """Concrete entry mapper producing a fresh record per call.

    The mapper holds only immutable configuration, so one instance may be
    shared and called reentrantly, including from inside a mapping function.
    """

    def __init__(self, config: EntryMapperConfig | None = None):
        """Initialize entry mapper.

        Args:
            config: Optional mapping configuration values.

        Returns:
            None: Initializer does not return values.

        Raises:
            ValueError: Raised when config values are invalid.
        """

        resolved_config = config or EntryMapperConfig()
        resolved_config.mapping_validate()

        self._config = resolved_config

    def mapping_enumeration_order(self) -> str:
        """Return the configured enumeration-order policy.

        Returns:
            str: Enumeration-order policy name.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        return self._config.enumeration_order

    def mapping_map_entries(self, source: object, map_fn: MappingFunction) -> dict[str, object]:
        """Map every own enumerable string-keyed entry of a source record.

        `map_fn` runs once per visited entry, synchronously and in
        enumeration order. Each returned value is shape-checked as soon as it
        is produced. Collisions between mapped keys keep the first key
        position and the last value. The source is never mutated.

        Args:
            source: Record or record-coercible value.
            map_fn: Entry mapping function.

        Returns:
            dict[str, object]: Newly allocated, fully mutable result record.

        Raises:
            InputTypeError: Raised when `source` is nullish.
            CallableTypeError: Raised when `map_fn` is not callable.
            ShapeError: Raised when `map_fn` returns a non-entry value.
        """

        mapping_require_record_coercible(source)
        if not callable(map_fn):
            raise CallableTypeError(f"map_fn must be callable; got {type(map_fn).__name__}")

        entries = mapping_enumerate_own_entries(source, self._config.enumeration_order)
        if not entries:
            return {}

        result = mapping_from_entries(map_fn(entry) for entry in entries)
        logger.debug("mapped %d entries into %d result keys", len(entries), len(result))
        return result


def mapping_map_entries(
    source: object,
    map_fn: MappingFunction,
    config: EntryMapperConfig | None = None,
) -> dict[str, object]:
    """Map every own enumerable string-keyed entry of a source record.

    Args:
        source: Record or record-coercible value.
        map_fn: Entry mapping function.
        config: Optional mapping configuration values.

    Returns:
        dict[str, object]: Newly allocated result record.

    Raises:
        InputTypeError: Raised when `source` is nullish.
        CallableTypeError: Raised when `map_fn` is not callable.
        ShapeError: Raised when `map_fn` returns a non-entry value.
        ValueError: Raised when config values are invalid.
    """

    return EntryMapper(config=config).mapping_map_entries(source, map_fn)
