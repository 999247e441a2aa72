"""Storage and index key construction.

Storage key: ``namespace:identifier`` addresses the record hash.
Index key: ``namespace:field:value`` addresses the set of identifiers whose
record holds ``value`` in ``field``.
"""

from datetime import date, datetime, time
from enum import Enum
from typing import Any

KEY_SEPARATOR = ":"


def build_storage_key(namespace: str, identifier: str) -> str:
    """Build the hash key of a record."""
    return f"{namespace}{KEY_SEPARATOR}{identifier}"


def build_index_key(namespace: str, field_name: str, value: Any) -> str:
    """Build the set key indexing ``field_name == value``."""
    return KEY_SEPARATOR.join((namespace, field_name, format_index_value(value)))


def format_index_value(value: Any) -> str:
    """String form of an indexed value as it appears in an index key."""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, str):
        return value
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return str(value)
