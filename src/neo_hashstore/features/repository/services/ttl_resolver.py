"""Time-to-live resolution for saved records.

Precedence:
1. the record's instance-level accessor, converted with its time unit;
2. the type's default time-to-live, in seconds;
3. no expiration.
"""

import logging
from datetime import timedelta
from typing import Any, Optional

from ..entities.metadata import RecordMetadata

logger = logging.getLogger(__name__)


class TTLResolver:
    """Computes the expiration to apply after a record is written."""

    def resolve(self, record: Any, metadata: RecordMetadata) -> Optional[timedelta]:
        """Effective expiration for ``record``, None for no expiration."""
        accessor = metadata.ttl_accessor
        if accessor is not None:
            try:
                amount = accessor.invoke(record)
            except Exception as e:
                logger.debug(
                    f"Time-to-live accessor {accessor.method_name} of "
                    f"{metadata.record_type.__qualname__} failed, using type default: {e}"
                )
            else:
                if isinstance(amount, int) and not isinstance(amount, bool):
                    logger.debug(f"TTL from method {accessor.method_name} will be used")
                    if amount <= 0:
                        return None
                    return accessor.unit.to_timedelta(amount)
                logger.debug(
                    f"Time-to-live accessor {accessor.method_name} returned {amount!r}, "
                    "using type default"
                )

        if metadata.default_ttl is not None:
            logger.debug(
                f"Type level time-to-live will be used. Class: {metadata.record_type.__qualname__}"
            )
            return timedelta(seconds=metadata.default_ttl)

        return None
