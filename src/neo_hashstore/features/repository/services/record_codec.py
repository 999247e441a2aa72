"""Record codec: record instances to and from flat hash mappings.

Each described field becomes one hash field holding its JSON-encoded value.
Decoding JSON-decodes the known fields and validates them into the record
type with pydantic, so stored strings are converted back to dates, numbers,
enums and so on.
"""

import json
import logging
from typing import Any, Dict, Mapping

from pydantic import TypeAdapter, ValidationError
from pydantic_core import to_json

from ....core.exceptions import DecodeError
from ..entities.metadata import RecordMetadata

logger = logging.getLogger(__name__)


class RecordCodec:
    """Converts records to hash mappings and back."""

    def __init__(self):
        self._adapters: Dict[type, TypeAdapter] = {}

    def encode(self, record: Any, metadata: RecordMetadata) -> Dict[str, str]:
        """Encode every readable described field of ``record``.

        Unreadable fields are omitted (the accessor failure is logged).
        """
        mapping: Dict[str, str] = {}
        for spec in metadata.fields:
            field_value = spec.read(record)
            if not field_value.present:
                continue
            mapping[spec.stored_name] = self.encode_value(field_value.value)
        return mapping

    def decode(self, mapping: Mapping[str, str], metadata: RecordMetadata) -> Any:
        """Rebuild a record of ``metadata.record_type`` from a hash mapping.

        Entries that are not described fields are ignored.

        Raises:
            DecodeError: When the values cannot be converted to the record type
        """
        record_type = metadata.record_type
        values = {}
        for spec in metadata.fields:
            if spec.stored_name in mapping:
                values[spec.name] = self.decode_value(mapping[spec.stored_name])

        try:
            return self._adapter_for(record_type).validate_python(values)
        except ValidationError as e:
            raise DecodeError(
                record_type,
                original_error=e,
                details={"errors": e.errors(include_url=False)},
            ) from e
        except Exception as e:
            # Types pydantic cannot build a schema for land here
            raise DecodeError(record_type, original_error=e) from e

    @staticmethod
    def encode_value(value: Any) -> str:
        return to_json(value).decode("utf-8")

    @staticmethod
    def decode_value(raw: str) -> Any:
        try:
            return json.loads(raw)
        except (TypeError, ValueError):
            # Values written by other clients may be bare strings
            return raw

    def _adapter_for(self, record_type: type) -> TypeAdapter:
        adapter = self._adapters.get(record_type)
        if adapter is None:
            adapter = TypeAdapter(record_type)
            self._adapters[record_type] = adapter
        return adapter
