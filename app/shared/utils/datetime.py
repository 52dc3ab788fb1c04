"""Datetime helpers.

Stored timestamps are timezone-aware UTC. Conversion to an app's local
timezone happens only when a spreadsheet row is rendered.
"""

import logging
from datetime import UTC, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Return dt as aware UTC; naive values are taken to be UTC already."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def to_timezone(dt: datetime, tz_name: str) -> datetime:
    """
    Convert a datetime to an IANA timezone (e.g. 'America/New_York').

    Unknown timezone names fall back to UTC with a warning so a bad
    app setting never blocks the spreadsheet row.

    Args:
        dt: Aware or naive (assumed UTC) datetime
        tz_name: IANA timezone name

    Returns:
        Aware datetime in the requested timezone
    """
    try:
        zone = ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r; using UTC", tz_name)
        zone = ZoneInfo("UTC")
    return ensure_utc(dt).astimezone(zone)


def format_local_date(dt: datetime) -> str:
    """Return the US locale short date, e.g. '03/07/2024'."""
    return dt.strftime("%m/%d/%Y")


def format_local_time(dt: datetime) -> str:
    """Return 12-hour time with zone abbreviation, e.g. '9:05 PM EST'."""
    hour = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    return f"{hour}:{dt.minute:02d} {meridiem} {dt.tzname() or ''}".rstrip()
