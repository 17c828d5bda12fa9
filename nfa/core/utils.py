"""
Core Utilities.

Shared utility functions used across the package.
All modules should import utilities from this module.
"""

from datetime import datetime, timedelta, timezone

TIMESTAMP_RESOLUTION = timedelta(microseconds=1)


def utc_now() -> datetime:
    """
    Return current UTC time as timezone-naive datetime.

    All datetime values in the application should be timezone-naive
    and assumed to be UTC. This ensures consistent behavior across
    the codebase and simplifies storage.

    Returns:
        Current UTC time with tzinfo stripped
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def utc_now_after(previous: datetime) -> datetime:
    """
    Return the current UTC time, strictly later than ``previous``.

    The wall clock can repeat a value within its resolution or step
    backwards. In both cases the result is bumped to one microsecond
    after ``previous``.

    Args:
        previous: Timestamp the result must be later than

    Returns:
        Timezone-naive UTC datetime greater than ``previous``
    """
    now = utc_now()
    if now <= previous:
        return previous + TIMESTAMP_RESOLUTION
    return now
