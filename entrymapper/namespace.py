"""Record namespace exposing entry primitives as static members.

`RecordNamespace` groups the enumeration, construction and mapping
primitives the way a host object namespace does. `map_entries` is a plain
class attribute: callers may reassign or delete it, and it never appears in
own-entry enumeration of namespace instances.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from entrymapper.domain import Entry
from entrymapper.mapping import mapping_enumerate_own_entries, mapping_from_entries, mapping_map_entries
from entrymapper.mapping.interfaces import MappingFunction

logger = logging.getLogger(__name__)

MAP_ENTRIES_MEMBER_NAME = "map_entries"


class RecordNamespace:
    """Static namespace for record entry primitives."""

    @staticmethod
    def entries(source: object) -> list[Entry]:
        """Return own enumerable string-keyed entries in host order."""

        return mapping_enumerate_own_entries(source)

    @staticmethod
    def from_entries(entries: Iterable[object]) -> dict[str, object]:
        """Build a new record from entry-shaped values, last key wins."""

        return mapping_from_entries(entries)

    @staticmethod
    def map_entries(source: object, map_fn: MappingFunction) -> dict[str, object]:
        """Map every own enumerable string-keyed entry into a new record."""

        return mapping_map_entries(source, map_fn)


def namespace_install_map_entries(
    namespace: type,
    function: Callable[[object, MappingFunction], dict[str, object]] | None = None,
    override: bool = False,
) -> bool:
    """Install a `map_entries` static member on one class namespace when it is missing.

    Only classes are accepted. A member stored in a module or instance
    dictionary would become an own enumerable entry of that namespace.

    Args:
        namespace: Class receiving the member.
        function: Implementation to install; defaults to `mapping_map_entries`.
        override: Replace an existing member instead of keeping it.

    Returns:
        bool: True when the member was installed, False when an existing one was kept.

    Raises:
        TypeError: Raised when `namespace` is not a class or `function` is not callable.
    """

    if not isinstance(namespace, type):
        raise TypeError(f"namespace must be a class; got {type(namespace).__name__}")

    resolved_function = function or mapping_map_entries
    if not callable(resolved_function):
        raise TypeError(f"function must be callable; got {type(resolved_function).__name__}")

    if hasattr(namespace, MAP_ENTRIES_MEMBER_NAME) and not override:
        logger.debug("keeping existing %s on %r", MAP_ENTRIES_MEMBER_NAME, namespace)
        return False

    setattr(namespace, MAP_ENTRIES_MEMBER_NAME, staticmethod(resolved_function))
    logger.debug("installed %s on %r", MAP_ENTRIES_MEMBER_NAME, namespace)
    return True
