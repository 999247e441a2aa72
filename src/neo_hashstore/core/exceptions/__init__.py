"""Exception hierarchy for neo-hashstore."""

from .base import HashStoreError, create_error_response
from .domain import ConfigurationError, PropertyAccessError, DecodeError
from .infrastructure import StoreProviderError, StoreConnectionError

__all__ = [
    "HashStoreError",
    "create_error_response",
    "ConfigurationError",
    "PropertyAccessError",
    "DecodeError",
    "StoreProviderError",
    "StoreConnectionError",
]
