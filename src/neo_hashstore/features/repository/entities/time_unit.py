"""Time units for instance-level time-to-live accessors."""

from datetime import timedelta
from enum import Enum


class TimeUnit(str, Enum):
    """Unit of the amount returned by a time-to-live accessor."""
    NANOSECONDS = "nanoseconds"
    MICROSECONDS = "microseconds"
    MILLISECONDS = "milliseconds"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"

    def to_timedelta(self, amount: int) -> timedelta:
        """Convert an amount of this unit to a timedelta.

        timedelta resolves microseconds, so nanosecond amounts are carried
        as fractional microseconds and rounded by timedelta itself. A
        positive amount never rounds down to zero.
        """
        if self is TimeUnit.NANOSECONDS:
            duration = timedelta(microseconds=amount / 1000)
            if amount > 0 and not duration:
                return timedelta(microseconds=1)
            return duration
        if self is TimeUnit.MICROSECONDS:
            # amount * 1000 nanoseconds
            return timedelta(microseconds=amount)
        if self is TimeUnit.MILLISECONDS:
            return timedelta(milliseconds=amount)
        if self is TimeUnit.SECONDS:
            return timedelta(seconds=amount)
        if self is TimeUnit.MINUTES:
            return timedelta(minutes=amount)
        if self is TimeUnit.HOURS:
            return timedelta(hours=amount)
        return timedelta(days=amount)
