"""Declarative descriptors for dataclass records.

Usage::

    @hash_record("example", time_to_live=10)
    @dataclass
    class ExampleRecord:
        id: Optional[str] = identifier()
        test_field1: Optional[str] = indexed(alias="testField1")
        test_date: Optional[datetime] = stored(alias="testDate")

        @time_to_live(unit=TimeUnit.MINUTES)
        def expiration(self) -> int:
            return 5

The decorator builds the ``RecordDescriptor`` once, when the class is
defined, from the dataclass field metadata.
"""

import dataclasses
from typing import Any, Callable, Optional

from ....core.exceptions import ConfigurationError
from .descriptor import FieldRole, FieldSpec, RecordDescriptor, TimeToLiveAccessor
from .time_unit import TimeUnit

ROLE_METADATA_KEY = "neo_hashstore.role"
ALIAS_METADATA_KEY = "neo_hashstore.alias"
TTL_UNIT_ATTRIBUTE = "__hash_ttl_unit__"
DESCRIPTOR_ATTRIBUTE = "__hash_descriptor__"


def _field(role: FieldRole, alias: Optional[str], default: Any, kwargs: dict) -> Any:
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[ROLE_METADATA_KEY] = role
    if alias:
        metadata[ALIAS_METADATA_KEY] = alias
    if "default_factory" not in kwargs:
        kwargs["default"] = default
    return dataclasses.field(metadata=metadata, **kwargs)


def identifier(alias: Optional[str] = None, **kwargs) -> Any:
    """Mark a dataclass field as the record identifier (defaults to None)."""
    return _field(FieldRole.IDENTIFIER, alias, None, kwargs)


def indexed(alias: Optional[str] = None, default: Any = None, **kwargs) -> Any:
    """Mark a dataclass field as indexed."""
    return _field(FieldRole.INDEXED, alias, default, kwargs)


def stored(alias: Optional[str] = None, default: Any = None, **kwargs) -> Any:
    """Declare a plain stored field, usually to give it an alias."""
    return _field(FieldRole.PLAIN, alias, default, kwargs)


def time_to_live(unit: TimeUnit = TimeUnit.SECONDS) -> Callable:
    """Mark a zero-argument method as the instance-level time-to-live accessor."""

    def decorator(method: Callable) -> Callable:
        setattr(method, TTL_UNIT_ATTRIBUTE, TimeUnit(unit))
        return method

    return decorator


def _find_ttl_accessor(cls: type) -> Optional[TimeToLiveAccessor]:
    accessors = {}
    for klass in reversed(cls.__mro__):
        for name, member in vars(klass).items():
            unit = getattr(member, TTL_UNIT_ATTRIBUTE, None)
            if unit is not None and callable(member):
                accessors[name] = TimeToLiveAccessor(name, unit)

    if len(accessors) > 1:
        raise ConfigurationError(
            f"{cls.__name__} declares more than one time-to-live accessor: {sorted(accessors)}"
        )
    return next(iter(accessors.values()), None)


def describe_dataclass(
    cls: type,
    namespace: str,
    time_to_live: Optional[int] = None,
) -> RecordDescriptor:
    """Build a descriptor from a dataclass' field metadata."""
    if not dataclasses.is_dataclass(cls):
        raise ConfigurationError(
            f"{cls.__name__} is not a dataclass; apply @hash_record above @dataclass "
            "or register a RecordDescriptor explicitly"
        )

    specs = []
    for dc_field in dataclasses.fields(cls):
        specs.append(FieldSpec(
            name=dc_field.name,
            role=dc_field.metadata.get(ROLE_METADATA_KEY, FieldRole.PLAIN),
            alias=dc_field.metadata.get(ALIAS_METADATA_KEY),
        ))

    return RecordDescriptor(
        namespace=namespace,
        fields=tuple(specs),
        time_to_live=time_to_live,
        ttl_accessor=_find_ttl_accessor(cls),
    )


def hash_record(namespace: str, time_to_live: Optional[int] = None) -> Callable[[type], type]:
    """Class decorator attaching a hash descriptor to a dataclass.

    Args:
        namespace: Key prefix for the type's hashes and index sets
        time_to_live: Default expiration in seconds
    """

    def decorator(cls: type) -> type:
        setattr(cls, DESCRIPTOR_ATTRIBUTE, describe_dataclass(cls, namespace, time_to_live))
        return cls

    return decorator
