"""Domain models used across entry-mapping layer boundaries."""

from .host_record import HostRecord, PropertyKey, RecordPropertyError
from .keys import (
	SUPPORTED_ENUMERATION_ORDERS,
	EnumerationOrder,
	domain_coerce_property_key,
	domain_is_integer_like_key,
	domain_order_keys,
)
from .models import UNDEFINED, Entry, PropertyDescriptor, Symbol

__all__ = [
	"Entry",
	"EnumerationOrder",
	"HostRecord",
	"PropertyDescriptor",
	"PropertyKey",
	"RecordPropertyError",
	"SUPPORTED_ENUMERATION_ORDERS",
	"Symbol",
	"UNDEFINED",
	"domain_coerce_property_key",
	"domain_is_integer_like_key",
	"domain_order_keys",
]
