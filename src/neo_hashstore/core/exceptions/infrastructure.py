"""Infrastructure exceptions for the key-value store.

Store provider errors are not wrapped: ``redis.exceptions.RedisError`` and its
subclasses reach the caller unmodified. ``StoreProviderError`` names that
family for callers that want to catch it.
"""

from redis.exceptions import RedisError as StoreProviderError

from .base import HashStoreError


class StoreConnectionError(HashStoreError):
    """Raised when a store connection cannot be established."""
    pass


__all__ = [
    "StoreProviderError",
    "StoreConnectionError",
]
