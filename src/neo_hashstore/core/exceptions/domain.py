"""Domain exceptions for record mapping.

Raised while describing, reading or rebuilding records.
"""

from typing import Any, Dict, Optional

from .base import HashStoreError


class ConfigurationError(HashStoreError):
    """Raised when a record descriptor is malformed.

    A type with no descriptor at all is not an error: repositories treat it
    as not configured and every operation becomes a no-op.
    """
    pass


class PropertyAccessError(HashStoreError):
    """Raised when a record field cannot be read or written."""

    def __init__(
        self,
        record_type: type,
        field_name: str,
        operation: str,
        original_error: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            f"Cannot {operation} field '{field_name}' of {record_type.__name__}",
            details={
                "record_type": record_type.__name__,
                "field": field_name,
                "operation": operation,
                **(details or {}),
            },
        )
        self.record_type = record_type
        self.field_name = field_name
        self.operation = operation
        self.original_error = original_error


class DecodeError(HashStoreError):
    """Raised when a stored hash cannot be converted to its record type."""

    def __init__(
        self,
        record_type: type,
        original_error: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        message = f"Cannot decode stored hash into {record_type.__name__}"
        if original_error is not None:
            message = f"{message}: {original_error}"
        super().__init__(
            message,
            details={"record_type": record_type.__name__, **(details or {})},
        )
        self.record_type = record_type
        self.original_error = original_error
