"""In-memory store adapter for the hash repository.

Mirrors the Redis semantics the repository relies on: hashes and sets live
under plain keys, expiration is passive (an expired key disappears the next
time it is touched), EXPIRE on a missing key is a no-op and HSET keeps an
existing expiration.
"""

import logging
import time
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Callable, Dict, Mapping, Optional, Set, Union

logger = logging.getLogger(__name__)


@dataclass
class MemoryStoreEntry:
    """Value stored under one key, with its optional expiration."""
    value: Union[Dict[str, str], Set[str]]
    expires_at: Optional[float] = None

    def is_expired(self, now: float) -> bool:
        return self.expires_at is not None and now >= self.expires_at


@dataclass
class MemoryHashStore:
    """``HashStore`` keeping hashes and sets in process memory.

    ``clock`` returns the current time in seconds; inject a fake clock to
    make expiration deterministic.
    """

    clock: Callable[[], float] = time.monotonic
    _entries: Dict[str, MemoryStoreEntry] = field(default_factory=dict, init=False, repr=False)

    async def hash_get_all(self, key: str) -> Dict[str, str]:
        entry = self._get(key)
        if entry is None:
            return {}
        return dict(self._expect(key, entry, dict))

    async def hash_put_all(self, key: str, mapping: Mapping[str, str]) -> None:
        entry = self._get(key)
        if entry is None:
            self._entries[key] = MemoryStoreEntry(value=dict(mapping))
            return
        self._expect(key, entry, dict).update(mapping)

    async def expire(self, key: str, ttl: timedelta) -> bool:
        entry = self._get(key)
        if entry is None:
            return False
        entry.expires_at = self.clock() + ttl.total_seconds()
        return True

    async def persist(self, key: str) -> bool:
        entry = self._get(key)
        if entry is None or entry.expires_at is None:
            return False
        entry.expires_at = None
        return True

    async def set_add(self, key: str, member: str) -> int:
        entry = self._get(key)
        if entry is None:
            entry = self._entries[key] = MemoryStoreEntry(value=set())
        members = self._expect(key, entry, set)
        if member in members:
            return 0
        members.add(member)
        return 1

    async def set_remove(self, key: str, member: str) -> int:
        entry = self._get(key)
        if entry is None:
            return 0
        members = self._expect(key, entry, set)
        if member not in members:
            return 0
        members.discard(member)
        if not members:
            # Redis drops empty sets
            del self._entries[key]
        return 1

    async def set_members(self, key: str) -> Set[str]:
        entry = self._get(key)
        if entry is None:
            return set()
        return set(self._expect(key, entry, set))

    async def delete(self, key: str) -> int:
        entry = self._get(key)
        if entry is None:
            return 0
        del self._entries[key]
        return 1

    def time_to_live(self, key: str) -> Optional[timedelta]:
        """Remaining lifetime of ``key``, None when missing or persistent."""
        entry = self._get(key)
        if entry is None or entry.expires_at is None:
            return None
        return timedelta(seconds=entry.expires_at - self.clock())

    def keys(self) -> Set[str]:
        """Keys that are currently alive."""
        return {key for key in list(self._entries) if self._get(key) is not None}

    def _get(self, key: str) -> Optional[MemoryStoreEntry]:
        entry = self._entries.get(key)
        if entry is not None and entry.is_expired(self.clock()):
            logger.debug(f"Key {key} expired")
            del self._entries[key]
            return None
        return entry

    @staticmethod
    def _expect(key: str, entry: MemoryStoreEntry, kind: type):
        if not isinstance(entry.value, kind):
            raise TypeError(f"WRONGTYPE Operation against key {key} holding the wrong kind of value")
        return entry.value
