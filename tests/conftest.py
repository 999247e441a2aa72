"""Pytest configuration and fixtures for neo-hashstore tests."""

import pytest
from unittest.mock import AsyncMock

from neo_hashstore import MemoryHashStore, MetadataRegistry


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    """Fake clock driving store expiration."""
    return FakeClock()


@pytest.fixture
def memory_store(clock):
    """In-memory store with deterministic expiration."""
    return MemoryHashStore(clock=clock)


@pytest.fixture
def registry():
    """Fresh metadata registry, isolated from the shared default."""
    return MetadataRegistry()


@pytest.fixture
def mock_store():
    """Mock HashStore for call-level assertions."""
    store = AsyncMock()
    store.hash_get_all = AsyncMock(return_value={})
    store.hash_put_all = AsyncMock(return_value=None)
    store.expire = AsyncMock(return_value=True)
    store.persist = AsyncMock(return_value=False)
    store.set_add = AsyncMock(return_value=1)
    store.set_remove = AsyncMock(return_value=1)
    store.set_members = AsyncMock(return_value=set())
    store.delete = AsyncMock(return_value=1)
    return store


@pytest.fixture
def mock_redis_client():
    """Mock redis.asyncio client."""
    client = AsyncMock()
    client.hgetall = AsyncMock(return_value={})
    client.hset = AsyncMock(return_value=1)
    client.expire = AsyncMock(return_value=True)
    client.pexpire = AsyncMock(return_value=True)
    client.persist = AsyncMock(return_value=True)
    client.sadd = AsyncMock(return_value=1)
    client.srem = AsyncMock(return_value=1)
    client.smembers = AsyncMock(return_value=set())
    client.delete = AsyncMock(return_value=1)
    client.ping = AsyncMock(return_value=True)
    client.aclose = AsyncMock()
    return client
