"""
Timezone utilities for the interval index.

The index itself works on opaque integer timestamps. These helpers turn
datetimes into milliseconds since the epoch (and back) so callers can pass
datetimes wherever a timestamp is accepted.
"""

from datetime import datetime, timedelta
import time as _time
from typing import Union
import pytz


# Default timezone - can be overridden by config
_local_timezone_name: str = "UTC"

_EPOCH = datetime(1970, 1, 1, tzinfo=pytz.UTC)

TimeValue = Union[int, datetime]


def set_timezone(timezone_name: str):
    """Set the timezone used to interpret naive datetimes."""
    global _local_timezone_name
    _local_timezone_name = timezone_name


def get_local_timezone():
    """
    Get the local timezone as a pytz timezone object.

    Returns:
        pytz timezone object for the configured local timezone.
    """
    try:
        return pytz.timezone(_local_timezone_name)
    except pytz.UnknownTimeZoneError:
        # Fallback: try system timezone name
        try:
            return pytz.timezone(_time.tzname[0])
        except pytz.UnknownTimeZoneError:
            # Last resort: calculate offset and use fixed offset timezone
            is_dst = _time.localtime().tm_isdst
            if is_dst:
                offset_seconds = -_time.altzone
            else:
                offset_seconds = -_time.timezone
            return pytz.FixedOffset(offset_seconds // 60)


def to_utc_datetime(dt: datetime) -> datetime:
    """
    Convert a datetime to UTC.

    Args:
        dt: A datetime object. Naive datetimes are taken to be in the
            configured local timezone.

    Returns:
        A timezone-aware datetime in UTC.
    """
    if dt.tzinfo is None:
        local_tz = get_local_timezone()
        local_dt = local_tz.localize(dt)
        return local_dt.astimezone(pytz.UTC)
    else:
        return dt.astimezone(pytz.UTC)


def to_local_datetime(dt: datetime) -> datetime:
    """Convert an aware datetime to the local timezone; naive input is returned unchanged."""
    if dt.tzinfo is not None:
        return dt.astimezone(get_local_timezone())
    return dt


def to_timestamp(value: TimeValue) -> int:
    """
    Convert a time value to milliseconds since the epoch.

    Integers pass through untouched, datetimes are converted via UTC.
    """
    if isinstance(value, datetime):
        delta = to_utc_datetime(value) - _EPOCH
        return (delta.days * 86400 + delta.seconds) * 1000 + delta.microseconds // 1000
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected int timestamp or datetime, got {type(value).__name__}")
    return value


def from_timestamp(millis: int) -> datetime:
    """Convert milliseconds since the epoch to a timezone-aware UTC datetime."""
    return _EPOCH + timedelta(milliseconds=millis)
