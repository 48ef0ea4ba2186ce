"""Typed domain models shared across entry-mapping layers.

This module provides the small value contracts used when enumerating source
records and constructing result records.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


class Entry(NamedTuple):
    """One key/value member of a record.

    Attributes:
        key: String property key.
        value: Member value, passed through without copying.
    """

    key: str
    value: object


class _Undefined:
    """Sentinel type for the host "absent value" primitive."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()


@dataclass(frozen=True, eq=False)
class Symbol:
    """Unique non-string property key.

    Two symbols are never equal unless they are the same object, even when
    they share a description.

    Attributes:
        description: Optional human-readable label.
    """

    description: str | None = None

    def __repr__(self) -> str:
        return f"Symbol({self.description or ''})"


@dataclass(frozen=True)
class PropertyDescriptor:
    """Attribute flags attached to one own property of a host record.

    Attributes:
        value: Stored property value.
        enumerable: Whether generic enumeration sees the property.
        writable: Whether the value may be reassigned.
        configurable: Whether the property may be deleted or redefined.
    """

    value: object
    enumerable: bool = True
    writable: bool = True
    configurable: bool = True
