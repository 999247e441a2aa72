"""Record descriptors.

A descriptor is the explicit, per-type description of how a record maps to a
hash: its namespace, an ordered registry of fields (each with a role and a
getter/setter pair), a default time-to-live and an optional instance-level
time-to-live accessor. Descriptors are validated once, when built.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional, Tuple

from ....core.exceptions import ConfigurationError, PropertyAccessError
from .time_unit import TimeUnit

logger = logging.getLogger(__name__)


class FieldRole(str, Enum):
    """Role of a field in the hash mapping."""
    IDENTIFIER = "identifier"
    INDEXED = "indexed"
    PLAIN = "plain"


@dataclass(frozen=True)
class FieldValue:
    """Result of reading a field: either present with a value, or absent."""

    present: bool
    value: Any = None

    @classmethod
    def of(cls, value: Any) -> "FieldValue":
        return cls(True, value)

    @classmethod
    def absent(cls) -> "FieldValue":
        return cls(False)

    @property
    def is_set(self) -> bool:
        """Present and not None."""
        return self.present and self.value is not None


@dataclass(frozen=True)
class FieldSpec:
    """One entry of a record's field registry.

    ``name`` is the attribute name on the record, ``alias`` the field name
    used in the hash and in index keys when it differs. Without an explicit
    getter/setter the attribute is read and written directly.
    """

    name: str
    role: FieldRole = FieldRole.PLAIN
    alias: Optional[str] = None
    getter: Optional[Callable[[Any], Any]] = field(default=None, compare=False)
    setter: Optional[Callable[[Any, Any], None]] = field(default=None, compare=False)

    def __post_init__(self):
        if not self.name:
            raise ConfigurationError("Field name cannot be empty")

    @property
    def stored_name(self) -> str:
        """Name of the field inside the hash."""
        return self.alias or self.name

    @property
    def is_identifier(self) -> bool:
        return self.role is FieldRole.IDENTIFIER

    @property
    def is_indexed(self) -> bool:
        return self.role is FieldRole.INDEXED

    def read(self, record: Any) -> FieldValue:
        """Read the field from ``record``.

        A failing accessor is logged and reported as absent.
        """
        try:
            if self.getter is not None:
                return FieldValue.of(self.getter(record))
            return FieldValue.of(getattr(record, self.name))
        except Exception as e:
            error = PropertyAccessError(type(record), self.name, "read", original_error=e)
            logger.warning(f"{error.message}: {e}", exc_info=True)
            return FieldValue.absent()

    def write(self, record: Any, value: Any) -> bool:
        """Write ``value`` to the field of ``record``.

        Returns:
            False when the accessor failed (logged), True otherwise
        """
        try:
            if self.setter is not None:
                self.setter(record, value)
            else:
                setattr(record, self.name, value)
            return True
        except Exception as e:
            error = PropertyAccessError(type(record), self.name, "write", original_error=e)
            logger.warning(f"{error.message}: {e}", exc_info=True)
            return False


@dataclass(frozen=True)
class TimeToLiveAccessor:
    """Zero-argument record method returning a time-to-live amount in ``unit``."""

    method_name: str
    unit: TimeUnit = TimeUnit.SECONDS

    def invoke(self, record: Any) -> Any:
        return getattr(record, self.method_name)()


@dataclass(frozen=True)
class RecordDescriptor:
    """Describes how one record type is stored.

    Args:
        namespace: Key prefix for the type's hashes and index sets
        fields: Ordered field registry; exactly one IDENTIFIER field
        time_to_live: Default expiration in seconds, None or <= 0 for none
        ttl_accessor: Optional instance-level expiration accessor
    """

    namespace: str
    fields: Tuple[FieldSpec, ...]
    time_to_live: Optional[int] = None
    ttl_accessor: Optional[TimeToLiveAccessor] = None

    def __post_init__(self):
        if not self.namespace:
            raise ConfigurationError("Namespace cannot be empty")

        object.__setattr__(self, "fields", tuple(self.fields))

        identifiers = [spec for spec in self.fields if spec.is_identifier]
        if len(identifiers) != 1:
            raise ConfigurationError(
                f"Namespace '{self.namespace}' must declare exactly one identifier field, "
                f"found {len(identifiers)}",
                details={"namespace": self.namespace, "identifiers": [s.name for s in identifiers]},
            )

        for attribute in ("name", "stored_name"):
            seen = set()
            for spec in self.fields:
                value = getattr(spec, attribute)
                if value in seen:
                    raise ConfigurationError(
                        f"Duplicate field {attribute} '{value}' in namespace '{self.namespace}'",
                        details={"namespace": self.namespace, attribute: value},
                    )
                seen.add(value)

    @property
    def identifier(self) -> FieldSpec:
        return next(spec for spec in self.fields if spec.is_identifier)

    @property
    def indexed(self) -> Tuple[FieldSpec, ...]:
        return tuple(spec for spec in self.fields if spec.is_indexed)
