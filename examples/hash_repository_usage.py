"""Example usage of the hash repository against a local Redis.

Run with a Redis server on ``NEO_HASHSTORE_REDIS_URL`` (default
``redis://localhost:6379/0``).
"""

import asyncio
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from neo_hashstore import (
    HashRepository,
    RedisHashStore,
    TimeUnit,
    get_settings,
    hash_record,
    identifier,
    indexed,
    setup_logging,
    stored,
    time_to_live,
)


@hash_record("example", time_to_live=10)
@dataclass
class ExampleRecord:
    id: Optional[str] = identifier()
    test_field1: Optional[str] = indexed(alias="testField1")
    test_field2: Optional[str] = indexed(alias="testField2")
    test_date: Optional[datetime] = stored(alias="testDate")


@hash_record("session", time_to_live=3600)
@dataclass
class SessionRecord:
    id: Optional[str] = identifier()
    user_id: Optional[str] = indexed()
    remember_me: bool = False

    @time_to_live(unit=TimeUnit.DAYS)
    def expiration(self) -> Optional[int]:
        # None falls back to the one hour default
        return 30 if self.remember_me else None


class ExampleRepository(HashRepository[ExampleRecord]):
    pass


class SessionRepository(HashRepository[SessionRecord]):
    pass


async def main() -> None:
    settings = get_settings()
    setup_logging(settings)

    store = RedisHashStore.from_settings(settings)
    await store.connect()
    try:
        examples = ExampleRepository(store)
        record = await examples.save(ExampleRecord(test_field1="a", test_field2="b", test_date=datetime.now()))
        print(f"Saved example {record.id}, expires in 10 seconds")

        found = await examples.find_by_id(record.id)
        print(f"Loaded {found}")
        print(f"Ids with testField1=a: {await examples.find_ids_by('test_field1', 'a')}")

        sessions = SessionRepository(store)
        session = await sessions.save(SessionRecord(user_id="user-1", remember_me=True))
        print(f"Saved session {session.id} for 30 days")

        await sessions.delete_by_id(session.id)
        await examples.delete_by_id(record.id)
    finally:
        await store.disconnect()


if __name__ == "__main__":
    asyncio.run(main())
