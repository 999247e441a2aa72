"""Neo-HashStore - async object-to-hash repository over Redis.

Persists typed records as Redis hashes, keeps secondary indexes as sets and
applies per-record expiration.
"""

from .__version__ import __version__

from .config import HashStoreSettings, get_settings, LoggingConfig, setup_logging

from .core.exceptions import (
    HashStoreError,
    ConfigurationError,
    PropertyAccessError,
    DecodeError,
    StoreProviderError,
    StoreConnectionError,
    create_error_response,
)

from .features.repository import (
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
    MetadataRegistry,
    default_registry,
    RecordCodec,
    TTLResolver,
    IndexMaintainer,
    HashRepository,
    SaveStage,
    RedisHashStore,
    MemoryHashStore,
)

__all__ = [
    "__version__",

    # Configuration
    "HashStoreSettings",
    "get_settings",
    "LoggingConfig",
    "setup_logging",

    # Exceptions
    "HashStoreError",
    "ConfigurationError",
    "PropertyAccessError",
    "DecodeError",
    "StoreProviderError",
    "StoreConnectionError",
    "create_error_response",

    # Descriptors
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

    # Store
    "HashStore",
    "RedisHashStore",
    "MemoryHashStore",

    # Services
    "MetadataRegistry",
    "default_registry",
    "RecordCodec",
    "TTLResolver",
    "IndexMaintainer",

    # Repository
    "HashRepository",
    "SaveStage",
]
