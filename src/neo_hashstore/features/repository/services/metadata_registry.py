"""Type-keyed registry of record metadata.

Metadata is resolved the first time a type is seen and cached for the
process lifetime. Resolution happens under a lock; cached reads do not lock.
"""

import logging
import threading
from typing import Dict, Optional

from ..entities.descriptor import RecordDescriptor
from ..entities.markers import DESCRIPTOR_ATTRIBUTE
from ..entities.metadata import RecordMetadata

logger = logging.getLogger(__name__)


class MetadataRegistry:
    """Resolves and caches ``RecordMetadata`` per record type.

    A type without a descriptor resolves to None ("not configured"); that
    outcome is cached too, so the warning is logged once per type.
    """

    def __init__(self):
        self._descriptors: Dict[type, RecordDescriptor] = {}
        self._metadata: Dict[type, Optional[RecordMetadata]] = {}
        self._lock = threading.Lock()

    def register(self, record_type: type, descriptor: RecordDescriptor) -> None:
        """Register an explicit descriptor for ``record_type``.

        Registering after the type has been resolved replaces the cached
        metadata.
        """
        with self._lock:
            self._descriptors[record_type] = descriptor
            self._metadata.pop(record_type, None)

    def resolve(self, record_type: type) -> Optional[RecordMetadata]:
        """Get metadata for ``record_type``, None when it is not configured."""
        try:
            return self._metadata[record_type]
        except KeyError:
            pass

        with self._lock:
            # Another caller may have resolved it while we waited
            if record_type in self._metadata:
                return self._metadata[record_type]

            descriptor = self._find_descriptor(record_type)
            if descriptor is None:
                logger.warning(f"No hash descriptor for {record_type.__qualname__}")
                metadata = None
            else:
                metadata = RecordMetadata.from_descriptor(record_type, descriptor)
                logger.debug(
                    f"Resolved hash metadata for {record_type.__qualname__}: "
                    f"namespace={metadata.namespace}, "
                    f"indexed={[spec.stored_name for spec in metadata.indexed]}, "
                    f"default_ttl={metadata.default_ttl}"
                )

            self._metadata[record_type] = metadata
            return metadata

    def is_configured(self, record_type: type) -> bool:
        return self.resolve(record_type) is not None

    def _find_descriptor(self, record_type: type) -> Optional[RecordDescriptor]:
        if record_type in self._descriptors:
            return self._descriptors[record_type]
        # Only the type's own decorator counts, not an inherited one
        return vars(record_type).get(DESCRIPTOR_ATTRIBUTE)


default_registry = MetadataRegistry()
