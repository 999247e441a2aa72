"""Hash repository services."""

from .metadata_registry import MetadataRegistry, default_registry
from .record_codec import RecordCodec
from .ttl_resolver import TTLResolver
from .index_maintainer import IndexMaintainer

__all__ = [
    "MetadataRegistry",
    "default_registry",
    "RecordCodec",
    "TTLResolver",
    "IndexMaintainer",
]
