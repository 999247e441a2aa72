"""Hash repository domain objects, descriptors and protocols."""

from .time_unit import TimeUnit
from .descriptor import FieldRole, FieldSpec, FieldValue, TimeToLiveAccessor, RecordDescriptor
from .metadata import RecordMetadata
from .keys import KEY_SEPARATOR, build_storage_key, build_index_key, format_index_value
from .markers import hash_record, identifier, indexed, stored, time_to_live, describe_dataclass
from .protocols import HashStore

__all__ = [
    "TimeUnit",
    "FieldRole",
    "FieldSpec",
    "FieldValue",
    "TimeToLiveAccessor",
    "RecordDescriptor",
    "RecordMetadata",
    "KEY_SEPARATOR",
    "build_storage_key",
    "build_index_key",
    "format_index_value",
    "hash_record",
    "identifier",
    "indexed",
    "stored",
    "time_to_live",
    "describe_dataclass",
    "HashStore",
]
