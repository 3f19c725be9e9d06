"""Date and time helpers shared by the calendar types.

Times are :class:`datetime.datetime` values.  A missing ("zero") time is
represented by ``None``.  Naive datetimes are taken as local wall time.
"""

from __future__ import annotations

from calendar import monthrange
from datetime import datetime, timedelta, timezone, tzinfo
from enum import IntEnum

# Time zone used by functions that build times from bare dates.  ``None``
# produces naive datetimes, i.e. local wall time.
DEFAULT_LOC: tzinfo | None = None


class Weekday(IntEnum):
    """Day of the week, numbered from Sunday."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


def _weekday_of(t: datetime) -> Weekday:
    return Weekday(t.isoweekday() % 7)


def _normalized(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    microsecond: int = 0,
    tz: tzinfo | None = None,
) -> datetime:
    """Build a datetime, letting month and day overflow into neighbours."""
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    first = datetime(year, month, 1, hour, minute, second, microsecond, tzinfo=tz)
    return first + timedelta(days=day - 1)


def is_weekend(t: datetime) -> bool:
    """Report whether ``t`` falls on a Saturday or Sunday."""
    return _weekday_of(t) in (Weekday.SATURDAY, Weekday.SUNDAY)


def weekday_n_from(t: datetime, day: Weekday, n: int) -> datetime | None:
    """Return the nth occurrence of ``day`` counting from ``t``.

    Positive ``n`` counts forwards, negative backwards; ``t`` itself counts
    as an occurrence.  ``n == 0`` gives ``None``.  The time of day is kept.
    """
    if n == 0:
        return None
    if n < 0:
        n += 1

    wd = _weekday_of(t)
    if day < wd:
        delta = (7 - (wd - day)) + (n - 1) * 7
    elif day > wd:
        delta = (day - wd) + (n - 1) * 7
    else:
        if n <= 0:
            n += 1
        delta = (n - 1) * 7
    return t + timedelta(days=delta)


def weekday_n(year: int, month: int, day: Weekday, n: int) -> datetime | None:
    """Return the nth occurrence of ``day`` in the given month, at noon.

    Negative ``n`` counts back from the end of the month; counting runs on
    into neighbouring months if needed.  ``n == 0`` gives ``None``.
    """
    if n > 0:
        return weekday_n_from(_normalized(year, month, 1, 12, tz=DEFAULT_LOC), day, n)
    if n == 0:
        return None
    return weekday_n_from(_normalized(year, month + 1, 0, 12, tz=DEFAULT_LOC), day, n)


def is_weekday_n(t: datetime, day: Weekday, n: int) -> bool:
    """Report whether ``t`` is the nth occurrence of ``day`` in its month."""
    if n == 0 or _weekday_of(t) != day:
        return False
    if n > 0:
        return (t.day - 1) // 7 == n - 1
    want = weekday_n(t.year, t.month, day, n)
    return (want.year, want.month, want.day) == (t.year, t.month, t.day)


def day_start(t: datetime) -> datetime:
    """Return the start of the day containing ``t``."""
    return t.replace(hour=0, minute=0, second=0, microsecond=0)


def day_end(t: datetime) -> datetime:
    """Return the last representable instant of the day containing ``t``."""
    return t.replace(hour=23, minute=59, second=59, microsecond=999999)


def month_start(t: datetime) -> datetime:
    """Return the first day of the month of ``t``, keeping the time of day."""
    return t.replace(day=1)


def month_end(t: datetime) -> datetime:
    """Return the last day of the month of ``t``, keeping the time of day."""
    return t.replace(day=monthrange(t.year, t.month)[1])


def replace_location(t: datetime, loc: tzinfo | None) -> datetime:
    """Return ``t`` with its zone replaced, leaving the wall time unchanged."""
    return t.replace(tzinfo=loc)


def julian_day_number(t: datetime) -> int:
    """Return the Julian Day Number of ``t``; Julian days start at 12:00 UTC."""
    utc = t.astimezone(timezone.utc)
    a = (14 - utc.month) // 12
    y = utc.year + 4800 - a
    m = utc.month + 12 * a - 3
    jdn = utc.day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045
    if utc.hour < 12:
        jdn -= 1
    return jdn


def julian_date(t: datetime) -> float:
    """Return the Julian Date of ``t``, with the time as a fraction."""
    utc = t.astimezone(timezone.utc)
    jdn = julian_day_number(t)
    if utc.hour < 12:
        jdn += 1
    return jdn + (utc.hour - 12.0) / 24.0 + utc.minute / 1440.0 + utc.second / 86400.0


def modified_julian_day_number(t: datetime) -> int:
    """Return the modified Julian Day Number; these days start at 00:00 UTC."""
    return int(modified_julian_date(t))


def modified_julian_date(t: datetime) -> float:
    """Return the modified Julian Date of ``t``."""
    return julian_date(t) - 2400000.5


def max_time(*times: datetime) -> datetime | None:
    """Return the latest of the given times, or ``None`` if there are none."""
    return max(times, default=None)


def min_time(*times: datetime) -> datetime | None:
    """Return the earliest of the given times, or ``None`` if there are none."""
    return min(times, default=None)