"""One-level record entry mapping primitives."""

from .domain import UNDEFINED, Entry, HostRecord, RecordPropertyError, Symbol
from .mapping import (
	CallableTypeError,
	EntryMapper,
	EntryMapperConfig,
	EntryMapperError,
	InputTypeError,
	ShapeError,
	mapping_map_entries,
)
from .namespace import RecordNamespace, namespace_install_map_entries

map_entries = mapping_map_entries

__all__ = [
	"CallableTypeError",
	"Entry",
	"EntryMapper",
	"EntryMapperConfig",
	"EntryMapperError",
	"HostRecord",
	"InputTypeError",
	"RecordNamespace",
	"RecordPropertyError",
	"ShapeError",
	"Symbol",
	"UNDEFINED",
	"map_entries",
	"mapping_map_entries",
	"namespace_install_map_entries",
]
