"""Store adapters - Redis and in-memory implementations."""

from .redis_adapter import RedisHashStore
from .memory_adapter import MemoryHashStore

__all__ = [
    "RedisHashStore",
    "MemoryHashStore",
]
