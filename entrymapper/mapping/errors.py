"""Project-native typed exceptions for entry-mapping failures."""

from __future__ import annotations

from typing import Final

INPUT_NOT_OBJECT_CODE: Final[str] = "INPUT_NOT_OBJECT"
MAP_FN_NOT_CALLABLE_CODE: Final[str] = "MAP_FN_NOT_CALLABLE"
ENTRY_SHAPE_INVALID_CODE: Final[str] = "ENTRY_SHAPE_INVALID"


class EntryMapperError(Exception):
    """Base exception for entry-mapping contract failures.

    Attributes:
        error_code: Stable machine-readable failure code.
    """

    def __init__(self, message: str, error_code: str | None = None):
        super().__init__(message)
        self.error_code = error_code


class InputTypeError(EntryMapperError, TypeError):
    """Source value cannot be treated as a record (nullish input)."""

    def __init__(self, message: str):
        super().__init__(message=message, error_code=INPUT_NOT_OBJECT_CODE)


class CallableTypeError(EntryMapperError, TypeError):
    """Mapping function argument is not callable."""

    def __init__(self, message: str):
        super().__init__(message=message, error_code=MAP_FN_NOT_CALLABLE_CODE)


class ShapeError(EntryMapperError, TypeError):
    """Mapping function returned a value that is not a 2-element entry.

    Attributes:
        position: Zero-based enumeration index of the offending entry.
    """

    def __init__(self, message: str, position: int | None = None):
        super().__init__(message=message, error_code=ENTRY_SHAPE_INVALID_CODE)
        self.position = position
