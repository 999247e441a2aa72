"""Hash repository feature for neo-hashstore.

Feature-First layout:
- entities/: descriptors, metadata, key builders and the store protocol
- services/: metadata registry, record codec, TTL resolver, index maintainer
- repositories/: the generic async hash repository
- adapters/: Redis and in-memory store implementations
"""

from .entities import (
    TimeUnit,
    FieldRole,
    FieldSpec,
    FieldValue,
    TimeToLiveAccessor,
    RecordDescriptor,
    RecordMetadata,
    HashStore,
    hash_record,
    identifier,
    indexed,
    stored,
    time_to_live,
)
from .services import MetadataRegistry, default_registry, RecordCodec, TTLResolver, IndexMaintainer
from .repositories import HashRepository, SaveStage
from .adapters import RedisHashStore, MemoryHashStore

__all__ = [
    # Descriptors and metadata
    "TimeUnit",
    "FieldRole",
    "FieldSpec",
    "FieldValue",
    "TimeToLiveAccessor",
    "RecordDescriptor",
    "RecordMetadata",
    "hash_record",
    "identifier",
    "indexed",
    "stored",
    "time_to_live",

    # Protocols
    "HashStore",

    # Services
    "MetadataRegistry",
    "default_registry",
    "RecordCodec",
    "TTLResolver",
    "IndexMaintainer",

    # Repository
    "HashRepository",
    "SaveStage",

    # Adapters
    "RedisHashStore",
    "MemoryHashStore",
]
