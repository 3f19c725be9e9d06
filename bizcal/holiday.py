"""Holiday definitions and the standard ways of computing their dates."""

from __future__ import annotations

from dataclasses import MISSING, dataclass, fields, replace
from datetime import datetime, timedelta
from enum import Enum
from typing import Callable, Optional

from bizcal import timeutil
from bizcal.timeutil import Weekday, day_start, weekday_n, weekday_n_from


class Observance(Enum):
    """Kind of observance a holiday represents."""

    UNKNOWN = 0
    PUBLIC = 1
    BANK = 2
    OTHER = 3


@dataclass(frozen=True)
class AltDay:
    """Moves an observance by ``offset`` days when the holiday falls on ``day``."""

    day: Weekday
    offset: int


HolidayFunc = Callable[["Holiday", int], Optional[datetime]]


@dataclass(eq=False)
class Holiday:
    """A yearly holiday whose date is worked out by ``func``."""

    name: str = ""
    description: str = ""
    observance: Observance = Observance.UNKNOWN
    month: int = 0
    day: int = 0
    weekday: Optional[Weekday] = None
    offset: int = 0
    julian: bool = False
    observed: tuple[AltDay, ...] = ()
    start_year: int = 0
    end_year: int = 0
    func: Optional[HolidayFunc] = None

    def __post_init__(self) -> None:
        self.observed = tuple(self.observed)

    def calc(self, year: int) -> tuple[datetime | None, datetime | None]:
        """Return the actual and observed dates for ``year``.

        Both are ``None`` when the holiday does not occur that year.
        """
        if self.func is None:
            return None, None
        if self.start_year and year < self.start_year:
            return None, None
        if self.end_year and year > self.end_year:
            return None, None

        actual = self.func(self, year)
        if actual is None:
            return None, None

        weekday = Weekday(actual.isoweekday() % 7)
        observed = next(
            (actual + timedelta(days=alt.offset) for alt in self.observed if alt.day == weekday),
            actual,
        )
        return actual, observed

    def clone(self, overrides: Holiday | None = None) -> Holiday:
        """Return a copy, taking every non-default field of ``overrides``."""
        if overrides is None:
            return replace(self)
        changes = {}
        for f in fields(self):
            default = f.default if f.default is not MISSING else f.default_factory()
            value = getattr(overrides, f.name)
            if value != default:
                changes[f.name] = value
        return replace(self, **changes)


def _gregorian_easter(year: int) -> tuple[int, int]:
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month, day = divmod(h + l - 7 * m + 114, 31)
    return month, day + 1


def _julian_easter(year: int) -> datetime:
    """Julian-calendar Easter expressed as a Gregorian date."""
    a = year % 4
    b = year % 7
    c = year % 19
    d = (19 * c + 15) % 30
    e = (2 * a + 4 * b - d + 34) % 7
    month, day = divmod(d + e + 114, 31)
    shift = year // 100 - year // 400 - 2
    return datetime(year, month, day + 1, tzinfo=timeutil.DEFAULT_LOC) + timedelta(days=shift)


def calc_day_of_month(holiday: Holiday, year: int) -> datetime:
    """Date on a fixed month and day."""
    return datetime(year, holiday.month, holiday.day, tzinfo=timeutil.DEFAULT_LOC)


def calc_easter_offset(holiday: Holiday, year: int) -> datetime:
    """Date ``holiday.offset`` days from Easter (Orthodox when ``julian``)."""
    if holiday.julian:
        easter = _julian_easter(year)
    else:
        month, day = _gregorian_easter(year)
        easter = datetime(year, month, day, tzinfo=timeutil.DEFAULT_LOC)
    return easter + timedelta(days=holiday.offset)


def _require_weekday(holiday: Holiday) -> Weekday:
    if holiday.weekday is None:
        raise ValueError(f"holiday {holiday.name!r} has no weekday")
    return holiday.weekday


def calc_weekday_offset(holiday: Holiday, year: int) -> datetime | None:
    """Date of the ``holiday.offset``-th weekday in the month (negative from the end)."""
    found = weekday_n(year, holiday.month, _require_weekday(holiday), holiday.offset)
    return None if found is None else day_start(found)


def calc_weekday_from(holiday: Holiday, year: int) -> datetime | None:
    """Date of the ``holiday.offset``-th weekday counted from the month and day."""
    start = datetime(year, holiday.month, holiday.day, tzinfo=timeutil.DEFAULT_LOC)
    found = weekday_n_from(start, _require_weekday(holiday), holiday.offset)
    return None if found is None else day_start(found)