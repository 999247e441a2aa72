"""Generic async repository storing records as hashes.

Limitations:
1) A record type needs a descriptor (``@hash_record`` or an explicit
   ``RecordDescriptor``); without one every operation is a no-op.
2) Index sets are maintained best effort. Nothing removes an identifier from
   its index sets when the record hash expires on its own, and a save with a
   changed indexed value leaves the identifier in the old value's set.
3) Steps of a save or delete are not atomic and are never rolled back. Each
   step is idempotent, so repeating a failed or cancelled call converges on
   the intended state.
"""

import logging
from enum import Enum
from typing import Any, Generic, Optional, Set, TypeVar, get_args, get_origin
from uuid import uuid4

from ..entities.metadata import RecordMetadata
from ..entities.protocols import HashStore
from ..services.index_maintainer import IndexMaintainer
from ..services.metadata_registry import MetadataRegistry, default_registry
from ..services.record_codec import RecordCodec
from ..services.ttl_resolver import TTLResolver

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SaveStage(str, Enum):
    """Stages of a save, in order. TTL_APPLIED covers clearing a stale expiration."""
    UNSAVED = "unsaved"
    IDENTIFIER_ASSIGNED = "identifier_assigned"
    HASH_WRITTEN = "hash_written"
    TTL_APPLIED = "ttl_applied"
    INDEXES_UPDATED = "indexes_updated"
    COMPLETE = "complete"


class HashRepository(Generic[T]):
    """Async save / find / delete of one record type over a ``HashStore``.

    Subclass with the record type as the generic argument to bind it::

        class ExampleRepository(HashRepository[ExampleRecord]):
            pass

        repository = ExampleRepository(store)
    """

    record_type: Optional[type] = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        for base in getattr(cls, "__orig_bases__", ()):
            if get_origin(base) is HashRepository:
                args = get_args(base)
                if args and isinstance(args[0], type):
                    cls.record_type = args[0]

    def __init__(
        self,
        store: HashStore,
        record_type: Optional[type] = None,
        registry: Optional[MetadataRegistry] = None,
        codec: Optional[RecordCodec] = None,
        ttl_resolver: Optional[TTLResolver] = None,
    ):
        """Initialize the repository.

        Args:
            store: Key-value store client
            record_type: Record type, optional for bound subclasses
            registry: Metadata registry, the shared default when omitted
            codec: Record codec
            ttl_resolver: Time-to-live resolver
        """
        if store is None:
            raise ValueError("Store is required")
        record_type = record_type or self.record_type
        if record_type is None:
            raise ValueError("Record type is required")

        self.record_type = record_type
        self._store = store
        self._registry = registry or default_registry
        self._codec = codec or RecordCodec()
        self._ttl_resolver = ttl_resolver or TTLResolver()
        self._index_maintainer = IndexMaintainer(store)

    @property
    def metadata(self) -> Optional[RecordMetadata]:
        """Metadata of the record type, None when it is not configured."""
        return self._registry.resolve(self.record_type)

    async def save(self, record: T) -> Optional[T]:
        """Store ``record``, assigning an identifier when it has none.

        Returns:
            The saved record, or None when the type is not configured
        """
        metadata = self.metadata
        if metadata is None:
            return None

        identifier = self._ensure_identifier(record, metadata)
        self._log_stage(metadata, identifier, SaveStage.IDENTIFIER_ASSIGNED)

        key = metadata.storage_key(identifier)
        mapping = self._codec.encode(record, metadata)
        # stored even when the record rejected the generated identifier
        mapping[metadata.identifier.stored_name] = self._codec.encode_value(identifier)
        await self._store.hash_put_all(key, mapping)
        self._log_stage(metadata, identifier, SaveStage.HASH_WRITTEN)

        ttl = self._ttl_resolver.resolve(record, metadata)
        if ttl is not None:
            await self._store.expire(key, ttl)
        else:
            # drop an expiration left by an earlier save
            await self._store.persist(key)
        self._log_stage(metadata, identifier, SaveStage.TTL_APPLIED)

        await self._index_maintainer.add_entries(record, identifier, metadata)
        self._log_stage(metadata, identifier, SaveStage.INDEXES_UPDATED)

        self._log_stage(metadata, identifier, SaveStage.COMPLETE)
        return record

    async def find_by_id(self, identifier: str) -> Optional[T]:
        """Load the record stored under ``identifier``.

        Returns:
            The record, or None when it does not exist or the type is not configured

        Raises:
            DecodeError: When the stored hash cannot be converted to the record type
        """
        metadata = self.metadata
        if metadata is None:
            return None

        mapping = await self._store.hash_get_all(metadata.storage_key(identifier))
        if not mapping:
            return None
        return self._codec.decode(mapping, metadata)

    async def exists_by_id(self, identifier: str) -> bool:
        """Check whether a hash is stored under ``identifier``."""
        metadata = self.metadata
        if metadata is None:
            return False

        mapping = await self._store.hash_get_all(metadata.storage_key(identifier))
        return bool(mapping)

    async def delete_by_id(self, identifier: str) -> None:
        """Delete the record stored under ``identifier`` and its index entries.

        Index entries are located from the currently stored values; a record
        that no longer exists, or cannot be decoded, leaves its index entries
        untouched while its hash is still deleted.
        """
        metadata = self.metadata
        if metadata is None:
            return

        await self._index_maintainer.remove_entries(metadata, identifier, self.find_by_id)
        await self._store.delete(metadata.storage_key(identifier))
        logger.debug(f"Deleted {metadata.storage_key(identifier)}")

    async def find_ids_by(self, field_name: str, value: Any) -> Set[str]:
        """Identifiers indexed under ``field_name == value``.

        May include identifiers whose record has expired since it was saved.
        """
        metadata = self.metadata
        if metadata is None:
            return set()

        spec = metadata.find_indexed(field_name)
        if spec is None:
            logger.warning(f"Field '{field_name}' is not indexed in namespace '{metadata.namespace}'")
            return set()
        return await self._store.set_members(metadata.index_key(spec, value))

    def _ensure_identifier(self, record: T, metadata: RecordMetadata) -> str:
        current = metadata.identifier.read(record)
        if current.is_set and str(current.value) != "":
            return str(current.value)

        generated = str(uuid4())
        metadata.identifier.write(record, generated)
        return generated

    @staticmethod
    def _log_stage(metadata: RecordMetadata, identifier: str, stage: SaveStage) -> None:
        logger.debug(f"Save {metadata.namespace}:{identifier} -> {stage.value}")
