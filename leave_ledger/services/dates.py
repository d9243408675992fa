"""Day-granularity calendar arithmetic.

Every date that reaches the pay-period or balance code is first reduced to a
plain ``datetime.date`` by :func:`to_day`. Timezone-aware instants are converted
into an explicit zone before the calendar day is taken, so the result never
depends on the process-wide local time zone.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from leave_ledger.config import get_settings

TimezoneLike = ZoneInfo | str | None


def resolve_timezone(tz: TimezoneLike = None) -> ZoneInfo:
    """Return a ZoneInfo for ``tz``, falling back to the configured default zone."""
    if isinstance(tz, ZoneInfo):
        return tz
    return ZoneInfo(tz or get_settings().default_timezone)


def to_day(value: date | datetime, tz: TimezoneLike = None) -> date:
    """Normalize a date or datetime to its calendar day.

    Aware datetimes are converted into ``tz`` first; naive datetimes are taken
    at face value (their wall-clock day).
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone(resolve_timezone(tz)).date()
        return value.date()
    return value


def make_day(year: int, month: int, day: int) -> date:
    return date(year, month, day)


def add_days(day: date, days: int) -> date:
    """Shift a day by a whole number of days (negative moves backward)."""
    return to_day(day) + timedelta(days=days)


def days_between(start: date, end: date) -> int:
    """Signed number of whole days from ``start`` to ``end``."""
    return (to_day(end) - to_day(start)).days


def compare_days(a: date, b: date) -> int:
    """Compare two dates by day only: -1, 0 or 1."""
    a_day, b_day = to_day(a), to_day(b)
    if a_day < b_day:
        return -1
    if a_day > b_day:
        return 1
    return 0


def is_same_day(a: date | datetime, b: date | datetime, tz: TimezoneLike = None) -> bool:
    return to_day(a, tz) == to_day(b, tz)
