"""Redis store adapter for the hash repository."""

import logging
import math
from datetime import timedelta
from typing import Any, Dict, Mapping, Optional, Set

from redis.asyncio import ConnectionPool, Redis
from redis.exceptions import RedisError

from ....config.settings import HashStoreSettings, get_settings
from ....core.exceptions import StoreConnectionError

logger = logging.getLogger(__name__)


def _text(value: Any) -> str:
    return value.decode("utf-8") if isinstance(value, bytes) else value


class RedisHashStore:
    """``HashStore`` backed by ``redis.asyncio``.

    Either wraps a ready client or builds a pooled one from settings on
    ``connect()``. Command errors are not wrapped: ``RedisError`` reaches
    the caller as raised by redis-py.
    """

    def __init__(
        self,
        redis_client: Optional[Redis] = None,
        settings: Optional[HashStoreSettings] = None,
    ):
        self._redis = redis_client
        self._pool: Optional[ConnectionPool] = None
        self._owns_client = redis_client is None
        self.settings = settings

    @classmethod
    def from_settings(cls, settings: Optional[HashStoreSettings] = None) -> "RedisHashStore":
        """Create a store that connects lazily using ``settings``."""
        return cls(settings=settings or get_settings())

    @property
    def is_connected(self) -> bool:
        return self._redis is not None

    async def connect(self) -> Redis:
        """Create the connection pool and verify it with PING.

        Raises:
            StoreConnectionError: When Redis cannot be reached
        """
        if self._redis is not None:
            return self._redis

        settings = self.settings or get_settings()
        try:
            logger.info("Creating Redis connection pool...")
            self._pool = ConnectionPool.from_url(settings.redis_url, **settings.to_connection_kwargs())
            self._redis = Redis(connection_pool=self._pool)
            await self._redis.ping()
            logger.info("Redis connection established successfully")
        except (RedisError, OSError) as e:
            await self._cleanup_failed_connection()
            raise StoreConnectionError(
                f"Failed to connect to Redis: {e}",
                details={"redis_url": settings.redis_url},
            ) from e

        return self._redis

    async def disconnect(self) -> None:
        """Close a client created by ``connect()``; injected clients stay open."""
        if self._redis is not None and self._owns_client:
            await self._redis.aclose()
            if self._pool is not None:
                await self._pool.disconnect()
            self._redis = None
            self._pool = None
            logger.info("Redis connection closed")

    async def health_check(self) -> bool:
        """Check Redis health."""
        try:
            client = await self._client()
            await client.ping()
            return True
        except (RedisError, StoreConnectionError, OSError) as e:
            logger.error(f"Redis health check failed: {e}")
            return False

    async def hash_get_all(self, key: str) -> Dict[str, str]:
        client = await self._client()
        result = await client.hgetall(key)
        return {_text(field): _text(value) for field, value in result.items()}

    async def hash_put_all(self, key: str, mapping: Mapping[str, str]) -> None:
        client = await self._client()
        await client.hset(key, mapping=dict(mapping))

    async def expire(self, key: str, ttl: timedelta) -> bool:
        """Expire ``key`` after ``ttl``.

        Whole seconds use EXPIRE; anything finer uses PEXPIRE, rounded up so
        a positive duration never becomes an immediate delete.
        """
        client = await self._client()
        if ttl.microseconds == 0:
            return bool(await client.expire(key, int(ttl.total_seconds())))

        milliseconds = max(1, math.ceil(ttl / timedelta(milliseconds=1)))
        return bool(await client.pexpire(key, milliseconds))

    async def persist(self, key: str) -> bool:
        client = await self._client()
        return bool(await client.persist(key))

    async def set_add(self, key: str, member: str) -> int:
        client = await self._client()
        return await client.sadd(key, member)

    async def set_remove(self, key: str, member: str) -> int:
        client = await self._client()
        return await client.srem(key, member)

    async def set_members(self, key: str) -> Set[str]:
        client = await self._client()
        return {_text(member) for member in await client.smembers(key)}

    async def delete(self, key: str) -> int:
        client = await self._client()
        return await client.delete(key)

    async def _client(self) -> Redis:
        if self._redis is None:
            return await self.connect()
        return self._redis

    async def _cleanup_failed_connection(self) -> None:
        """Release a half-built client and pool after a failed connect."""
        client, pool = self._redis, self._pool
        self._redis = None
        self._pool = None
        try:
            if client is not None:
                await client.aclose()
            if pool is not None:
                await pool.disconnect()
        except (RedisError, OSError) as e:
            logger.debug(f"Ignoring error while cleaning up failed Redis connection: {e}")
