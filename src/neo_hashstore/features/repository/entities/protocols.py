"""Store protocol for the hash repository.

The repository needs only point operations on hashes, sets and keys. Any
client offering them can back a repository; see ``adapters`` for the Redis
and in-memory implementations.
"""

from abc import abstractmethod
from datetime import timedelta
from typing import Dict, Mapping, Protocol, Set, runtime_checkable


@runtime_checkable
class HashStore(Protocol):
    """Key-value store operations used by the hash repository."""

    @abstractmethod
    async def hash_get_all(self, key: str) -> Dict[str, str]:
        """Return every field of the hash at ``key``, empty when missing."""
        ...

    @abstractmethod
    async def hash_put_all(self, key: str, mapping: Mapping[str, str]) -> None:
        """Write every given field of the hash at ``key``."""
        ...

    @abstractmethod
    async def expire(self, key: str, ttl: timedelta) -> bool:
        """Expire ``key`` after ``ttl``; False when the key does not exist."""
        ...

    @abstractmethod
    async def persist(self, key: str) -> bool:
        """Remove the expiration of ``key``; False when it had none or is missing."""
        ...

    @abstractmethod
    async def set_add(self, key: str, member: str) -> int:
        """Add ``member`` to the set at ``key``."""
        ...

    @abstractmethod
    async def set_remove(self, key: str, member: str) -> int:
        """Remove ``member`` from the set at ``key``."""
        ...

    @abstractmethod
    async def set_members(self, key: str) -> Set[str]:
        """Return the members of the set at ``key``."""
        ...

    @abstractmethod
    async def delete(self, key: str) -> int:
        """Delete ``key``; returns the number of keys removed."""
        ...
