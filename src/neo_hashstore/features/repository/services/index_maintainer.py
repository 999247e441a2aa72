"""Secondary index maintenance.

Every indexed field value maps to a set holding the identifiers of the
records that carry it. Entries are added on save and removed on delete using
the values stored at delete time. Maintenance is best effort: an identifier
stays in its sets when the record hash expires on its own, and a save with a
changed value does not remove the identifier from the old value's set.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, List, Optional, Tuple

from ....core.exceptions import DecodeError
from ..entities.metadata import RecordMetadata
from ..entities.protocols import HashStore

logger = logging.getLogger(__name__)

RecordLoader = Callable[[str], Awaitable[Optional[Any]]]


class IndexMaintainer:
    """Adds and removes identifiers in index sets."""

    def __init__(self, store: HashStore):
        self._store = store

    def index_keys(self, record: Any, metadata: RecordMetadata) -> List[str]:
        """Index keys for the current indexed values of ``record``.

        Fields that are unreadable or None are skipped.
        """
        keys = []
        for spec in metadata.indexed:
            field_value = spec.read(record)
            if field_value.is_set:
                keys.append(metadata.index_key(spec, field_value.value))
        return keys

    async def add_entries(self, record: Any, identifier: str, metadata: RecordMetadata) -> None:
        """Add ``identifier`` to the index set of every indexed value of ``record``."""
        keys = self.index_keys(record, metadata)
        if not keys:
            return

        await asyncio.gather(*(self._store.set_add(key, identifier) for key in keys))
        logger.debug(f"Indexed {metadata.namespace}:{identifier} under {keys}")

    async def remove_entries(
        self,
        metadata: RecordMetadata,
        identifier: str,
        loader: RecordLoader,
    ) -> Tuple[str, ...]:
        """Remove ``identifier`` from the index sets of its stored values.

        ``loader`` fetches the currently stored record. When it is gone, or
        can no longer be decoded, the previous values are unknown and nothing
        is removed.

        Returns:
            Index keys the identifier was removed from
        """
        try:
            record = await loader(identifier)
        except DecodeError as e:
            logger.warning(
                f"Cannot decode stored record {metadata.namespace}:{identifier}, "
                f"skipping index cleanup: {e.message}"
            )
            return ()

        if record is None:
            logger.debug(
                f"No stored record {metadata.namespace}:{identifier}, skipping index cleanup"
            )
            return ()

        keys = self.index_keys(record, metadata)
        if keys:
            await asyncio.gather(*(self._store.set_remove(key, identifier) for key in keys))
            logger.debug(f"Removed {metadata.namespace}:{identifier} from {keys}")
        return tuple(keys)
