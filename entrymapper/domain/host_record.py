"""Host record model with property descriptors and a prototype link.

Plain mappings carry no attribute metadata. `HostRecord` is the richer source
shape used when callers need non-enumerable members, read-only members,
inherited members, or symbol keys on the input side of a transform.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .keys import domain_order_keys
from .models import UNDEFINED, PropertyDescriptor, Symbol

PropertyKey = str | Symbol


class RecordPropertyError(TypeError):
    """Raised when a write or delete violates one property's descriptor flags."""


class HostRecord:
    """Record with descriptor-flagged own properties and an optional prototype.

    Attributes:
        prototype: Record consulted for inherited members, or None.
    """

    def __init__(
        self,
        entries: Iterable[tuple[PropertyKey, object]] | None = None,
        prototype: HostRecord | None = None,
    ):
        """Initialize one record with plain enumerable writable entries.

        Args:
            entries: Optional initial key/value pairs in insertion order.
            prototype: Optional prototype record.

        Returns:
            None: Initializer does not return values.

        Raises:
            TypeError: Raised when one key is neither a string nor a Symbol.
        """

        self.prototype = prototype
        self._properties: dict[PropertyKey, PropertyDescriptor] = {}
        self._frozen = False
        for key, value in entries or ():
            self.record_define_property(key, value)

    def record_define_property(
        self,
        key: PropertyKey,
        value: object,
        *,
        enumerable: bool = True,
        writable: bool = True,
        configurable: bool = True,
    ) -> None:
        """Define or redefine one own property.

        Args:
            key: String or Symbol property key.
            value: Property value.
            enumerable: Whether generic enumeration sees the property.
            writable: Whether the value may be reassigned.
            configurable: Whether the property may be deleted or redefined.

        Returns:
            None: This method does not return a value.

        Raises:
            TypeError: Raised when the key type is unsupported.
            RecordPropertyError: Raised when redefining a non-configurable
                property or extending a frozen record.
        """

        self._record_validate_key(key)
        existing = self._properties.get(key)
        if existing is not None and not existing.configurable:
            raise RecordPropertyError(f"cannot redefine non-configurable property {key!r}")
        if existing is None and self._frozen:
            raise RecordPropertyError(f"cannot add property {key!r}; record is frozen")
        self._properties[key] = PropertyDescriptor(
            value=value,
            enumerable=enumerable,
            writable=writable,
            configurable=configurable,
        )

    def record_own_descriptor(self, key: PropertyKey) -> PropertyDescriptor | None:
        """Return the descriptor of one own property, if present."""

        return self._properties.get(key)

    def record_own_property_keys(self) -> list[PropertyKey]:
        """Return own keys in host order: integer-like, other strings, symbols.

        Returns:
            list[PropertyKey]: Own keys including non-enumerable ones.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        string_keys = [key for key in self._properties if isinstance(key, str)]
        symbol_keys = [key for key in self._properties if isinstance(key, Symbol)]
        return [*domain_order_keys(string_keys, "host"), *symbol_keys]

    def record_own_enumerable_string_entries(self) -> list[tuple[str, object]]:
        """Return own enumerable string-keyed entries in insertion order.

        Returns:
            list[tuple[str, object]]: Visible own entries; symbol-keyed and
            non-enumerable properties are excluded.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        return [
            (key, descriptor.value)
            for key, descriptor in self._properties.items()
            if isinstance(key, str) and descriptor.enumerable
        ]

    def record_get(self, key: PropertyKey) -> object:
        """Read one property, walking the prototype chain.

        Args:
            key: Property key.

        Returns:
            object: Property value, or UNDEFINED when no record in the chain has it.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        record: HostRecord | None = self
        while record is not None:
            descriptor = record._properties.get(key)
            if descriptor is not None:
                return descriptor.value
            record = record.prototype
        return UNDEFINED

    def record_has(self, key: PropertyKey) -> bool:
        """Check whether the key is an own or inherited property."""

        record: HostRecord | None = self
        while record is not None:
            if key in record._properties:
                return True
            record = record.prototype
        return False

    def record_delete(self, key: PropertyKey) -> None:
        """Delete one own property.

        Args:
            key: Property key.

        Returns:
            None: This method does not return a value.

        Raises:
            RecordPropertyError: Raised when the property is non-configurable.
        """

        descriptor = self._properties.get(key)
        if descriptor is None:
            return
        if not descriptor.configurable:
            raise RecordPropertyError(f"cannot delete non-configurable property {key!r}")
        del self._properties[key]

    def record_freeze(self) -> HostRecord:
        """Make every own property read-only and non-configurable, and block additions.

        Returns:
            HostRecord: This record, for chaining.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        self._properties = {
            key: PropertyDescriptor(
                value=descriptor.value,
                enumerable=descriptor.enumerable,
                writable=False,
                configurable=False,
            )
            for key, descriptor in self._properties.items()
        }
        self._frozen = True
        return self

    def record_is_frozen(self) -> bool:
        """Report whether `record_freeze` has been applied.

        Returns:
            bool: True when the record is frozen.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        return self._frozen

    def __getitem__(self, key: PropertyKey) -> object:
        """Read one own or inherited property.

        Args:
            key: Property key.

        Returns:
            object: Property value.

        Raises:
            KeyError: Raised when no record in the prototype chain has the key.
        """

        value = self.record_get(key)
        if value is UNDEFINED and not self.record_has(key):
            raise KeyError(key)
        return value

    def __setitem__(self, key: PropertyKey, value: object) -> None:
        """Assign one own property, defining it when missing.

        Args:
            key: Property key.
            value: New property value.

        Returns:
            None: This method does not return a value.

        Raises:
            RecordPropertyError: Raised when the property is read-only or the
                record is frozen.
        """

        descriptor = self._properties.get(key)
        if descriptor is None:
            self.record_define_property(key, value)
            return
        if not descriptor.writable:
            raise RecordPropertyError(f"cannot assign to read-only property {key!r}")
        self._properties[key] = PropertyDescriptor(
            value=value,
            enumerable=descriptor.enumerable,
            writable=descriptor.writable,
            configurable=descriptor.configurable,
        )

    def __contains__(self, key: object) -> bool:
        """Check own and inherited properties; non-key values are never contained."""

        return isinstance(key, (str, Symbol)) and self.record_has(key)

    def __iter__(self) -> Iterator[PropertyKey]:
        """Iterate own keys, hidden ones included, in host order."""

        return iter(self.record_own_property_keys())

    def __len__(self) -> int:
        """Return the number of own properties, hidden ones included."""

        return len(self._properties)

    def __repr__(self) -> str:
        rendered = ", ".join(f"{key!r}: {self._properties[key].value!r}" for key in self.record_own_property_keys())
        return f"HostRecord({{{rendered}}})"

    @staticmethod
    def _record_validate_key(key: object) -> None:
        if not isinstance(key, (str, Symbol)):
            raise TypeError(f"property key must be str or Symbol; got {type(key).__name__}")
