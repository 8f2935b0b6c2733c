"""Centralised timestamp handling.

Internal representation: UTC-aware ``datetime``. Session timing works in
New York wall-clock time, so conversion to ``America/New_York`` lives here
as well.
"""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

NEW_YORK = ZoneInfo("America/New_York")


def ensure_utc(dt: datetime) -> datetime:
    """Attach UTC to a naive datetime; aware datetimes are returned unchanged."""
    return dt if dt.tzinfo is not None else dt.replace(tzinfo=timezone.utc)


def now_utc() -> datetime:
    """Current UTC time."""
    return datetime.now(timezone.utc)


def to_new_york(dt: datetime) -> datetime:
    """Convert *dt* to New York wall-clock time (naive input is taken as UTC)."""
    return ensure_utc(dt).astimezone(NEW_YORK)


def minutes_since_midnight(dt: datetime) -> int:
    """Minutes elapsed since local midnight of *dt*, ignoring seconds."""
    return dt.hour * 60 + dt.minute
