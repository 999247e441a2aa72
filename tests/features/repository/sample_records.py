"""Record types shared by the hash repository tests."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from neo_hashstore import TimeUnit, hash_record, identifier, indexed, stored, time_to_live

EXAMPLE_KEYSPACE = "example"

# expiration in seconds
EXAMPLE_EXPIRATION_TTL = 10


@hash_record(EXAMPLE_KEYSPACE, time_to_live=EXAMPLE_EXPIRATION_TTL)
@dataclass
class ExampleRecord:
    id: Optional[str] = identifier()
    test_field1: Optional[str] = indexed(alias="testField1")
    test_field2: Optional[str] = indexed(alias="testField2")
    test_date: Optional[datetime] = stored(alias="testDate")


class SessionStatus(str, Enum):
    ACTIVE = "active"
    REVOKED = "revoked"


@hash_record("session", time_to_live=3600)
@dataclass
class SessionRecord:
    id: Optional[str] = identifier()
    user_id: Optional[str] = indexed()
    status: SessionStatus = indexed(default=SessionStatus.ACTIVE)
    ttl_minutes: Optional[int] = 5

    @time_to_live(unit=TimeUnit.MINUTES)
    def expiration(self) -> Optional[int]:
        return self.ttl_minutes


@hash_record("counter")
@dataclass
class CounterRecord:
    id: Optional[str] = identifier()
    count: int = 0
    ratio: float = 0.0
    enabled: bool = False


@dataclass
class UndescribedRecord:
    id: Optional[str] = None
    name: Optional[str] = None
