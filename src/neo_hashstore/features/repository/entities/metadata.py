"""Resolved record type metadata."""

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from .descriptor import FieldSpec, RecordDescriptor, TimeToLiveAccessor
from .keys import build_index_key, build_storage_key


@dataclass(frozen=True)
class RecordMetadata:
    """Immutable view of a record type's descriptor.

    Built once per type by the metadata registry and shared by every
    repository operation afterwards.
    """

    record_type: type
    namespace: str
    identifier: FieldSpec
    indexed: Tuple[FieldSpec, ...]
    fields: Tuple[FieldSpec, ...]
    default_ttl: Optional[int] = None
    ttl_accessor: Optional[TimeToLiveAccessor] = None

    @classmethod
    def from_descriptor(cls, record_type: type, descriptor: RecordDescriptor) -> "RecordMetadata":
        default_ttl = descriptor.time_to_live
        if default_ttl is not None and default_ttl <= 0:
            default_ttl = None

        return cls(
            record_type=record_type,
            namespace=descriptor.namespace,
            identifier=descriptor.identifier,
            indexed=descriptor.indexed,
            fields=descriptor.fields,
            default_ttl=default_ttl,
            ttl_accessor=descriptor.ttl_accessor,
        )

    def storage_key(self, identifier: str) -> str:
        return build_storage_key(self.namespace, identifier)

    def index_key(self, spec: FieldSpec, value: Any) -> str:
        return build_index_key(self.namespace, spec.stored_name, value)

    def find_indexed(self, field_name: str) -> Optional[FieldSpec]:
        """Look up an indexed field by attribute name or stored name."""
        for spec in self.indexed:
            if field_name in (spec.name, spec.stored_name):
                return spec
        return None
