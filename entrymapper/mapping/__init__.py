"""Mapping layer package for one-level record entry transformations."""

from .construction import mapping_from_entries, mapping_validate_entry_shape
from .enumeration import mapping_coerce_source, mapping_enumerate_own_entries, mapping_require_record_coercible
from .errors import (
	ENTRY_SHAPE_INVALID_CODE,
	INPUT_NOT_OBJECT_CODE,
	MAP_FN_NOT_CALLABLE_CODE,
	CallableTypeError,
	EntryMapperError,
	InputTypeError,
	ShapeError,
)
from .interfaces import EntryMapperPort, MappingFunction
from .service import EntryMapper, EntryMapperConfig, mapping_map_entries

__all__ = [
	"CallableTypeError",
	"ENTRY_SHAPE_INVALID_CODE",
	"EntryMapper",
	"EntryMapperConfig",
	"EntryMapperError",
	"EntryMapperPort",
	"INPUT_NOT_OBJECT_CODE",
	"InputTypeError",
	"MAP_FN_NOT_CALLABLE_CODE",
	"MappingFunction",
	"ShapeError",
	"mapping_coerce_source",
	"mapping_enumerate_own_entries",
	"mapping_from_entries",
	"mapping_map_entries",
	"mapping_require_record_coercible",
	"mapping_validate_entry_shape",
]
