"""
utils/time_utils.py

Purpose: Time helpers

- Timezone-aware "now" for record timestamps
- ISO-8601 formatting for API responses
"""

from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """
    Returns the current time as a timezone-aware UTC datetime.
    """
    return datetime.now(timezone.utc)


def utc_date(year: int, month: int, day: int) -> datetime:
    """
    Returns midnight UTC on the given date.
    """
    return datetime(year, month, day, tzinfo=timezone.utc)


def format_timestamp(dt: Optional[datetime] = None) -> str:
    """
    Formats a datetime as ISO-8601. Defaults to the current UTC time.
    """
    if dt is None:
        dt = utc_now()
    return dt.isoformat()
