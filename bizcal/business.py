"""Business calendars: working days, working hours and counts over ranges."""

from __future__ import annotations

from calendar import monthrange
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from bizcal.calendar import Calendar
from bizcal.timeutil import Weekday, day_start, min_time

WorkdayFunc = Callable[[datetime], bool]
WorkdayTimeFunc = Callable[[datetime], datetime]

_ONE_DAY = timedelta(days=1)


def _default_workdays() -> set[Weekday]:
    return {
        Weekday.MONDAY,
        Weekday.TUESDAY,
        Weekday.WEDNESDAY,
        Weekday.THURSDAY,
        Weekday.FRIDAY,
    }


def _weekday_of(t: datetime) -> Weekday:
    return Weekday(t.isoweekday() % 7)


@dataclass
class BusinessCalendar(Calendar):
    """A calendar of working days and hours, Monday to Friday 9:00-17:00 by default.

    ``workday_func``, ``workday_start_func`` and ``workday_end_func`` override
    the fixed working days and hours when they vary through the year.
    """

    workdays: set[Weekday] = field(default_factory=_default_workdays)
    start_of_day: timedelta = timedelta(hours=9)
    end_of_day: timedelta = timedelta(hours=17)
    workday_func: Optional[WorkdayFunc] = None
    workday_start_func: Optional[WorkdayTimeFunc] = None
    workday_end_func: Optional[WorkdayTimeFunc] = None

    def set_workday(self, day: Weekday, workday: bool) -> None:
        """Mark ``day`` as a standard working day or not."""
        if workday:
            self.workdays.add(Weekday(day))
        else:
            self.workdays.discard(Weekday(day))

    def set_work_hours(self, start: timedelta, end: timedelta) -> None:
        """Set the times of day at which work starts and ends."""
        self.start_of_day = start
        self.end_of_day = end

    def is_workday(self, date: datetime) -> bool:
        """Report whether ``date`` is a working day that is not an observed holiday."""
        if self.workday_func is None:
            workday = _weekday_of(date) in self.workdays
        else:
            workday = self.workday_func(date)
        if not workday:
            return False
        return not self.is_holiday(date).observed

    @staticmethod
    def _clock(
        date: datetime, func: Optional[WorkdayTimeFunc], span: timedelta
    ) -> tuple[int, int, int]:
        if func is None:
            total = int(span.total_seconds())
            return total // 3600 % 24, total // 60 % 60, total % 60
        t = func(date)
        return t.hour, t.minute, t.second

    def is_work_time(self, date: datetime) -> bool:
        """Report whether ``date`` falls within working hours of a working day."""
        if not self.is_workday(date):
            return False
        sh, sm, ss = self._clock(date, self.workday_start_func, self.start_of_day)
        eh, em, es = self._clock(date, self.workday_end_func, self.end_of_day)
        h, m, s = date.hour, date.minute, date.second
        return (
            (h == sh and m == sm and s >= ss)
            or (h == sh and m > sm)
            or (sh < h < eh)
            or (h == eh and m < em)
            or (h == eh and m == em and s <= es)
        )

    def workdays_remain(self, date: datetime) -> int:
        """Count the working days left in the month after ``date``."""
        month = date.month
        count = 0
        current = date + _ONE_DAY
        while current.month == month:
            if self.is_workday(current):
                count += 1
            current += _ONE_DAY
        return count

    def workdays_in_month(self, year: int, month: int) -> int:
        """Count the working days in the given month."""
        first = datetime(year, month, 1, 12, tzinfo=timezone.utc)
        remaining = self.workdays_remain(first)
        return remaining + 1 if self.is_workday(first) else remaining

    def _count_days(
        self, start: datetime, end: datetime, matches: Callable[[datetime], bool]
    ) -> int:
        factor = 1
        if end < start:
            factor = -1
            start, end = end, start
        last = day_start(end)
        current = day_start(start)
        count = 0
        while current <= last:
            if matches(current):
                count += 1
            current += _ONE_DAY
        return factor * count

    def holidays_in_range(self, start: datetime, end: datetime) -> int:
        """Count observed holidays between the dates, inclusive; negative if reversed."""
        return self._count_days(start, end, lambda d: self.is_holiday(d).observed)

    def workdays_in_range(self, start: datetime, end: datetime) -> int:
        """Count working days between the dates, inclusive; negative if reversed."""
        return self._count_days(start, end, self.is_workday)

    def workday_n(self, year: int, month: int, n: int) -> int:
        """Return the day of the month of the nth working day, or 0 if there is none.

        Positive ``n`` counts from the start of the month, negative from its end.
        """
        if n == 0:
            return 0
        if n > 0:
            date = datetime(year, month, 1, 12, tzinfo=timezone.utc)
            step = _ONE_DAY
        else:
            last = monthrange(year, month)[1]
            date = datetime(year, month, last, 12, tzinfo=timezone.utc)
            step = -_ONE_DAY
            n = -n

        found = 0
        while date.month == month:
            if self.is_workday(date):
                found += 1
                if found == n:
                    return date.day
            date += step
        return 0

    def workdays_from(self, start: datetime, offset: int) -> datetime:
        """Return the date ``offset`` working days away from ``start``."""
        if offset == 0:
            return start
        step = _ONE_DAY if offset > 0 else -_ONE_DAY
        remaining = abs(offset)
        date = start
        while remaining > 0:
            date += step
            if self.is_workday(date):
                remaining -= 1
        return date

    def work_hours(self, date: datetime) -> timedelta:
        """Return the length of the working day of ``date``; zero on non-working days."""
        if not self.is_workday(date):
            return timedelta(0)
        sh, sm, _ = self._clock(date, self.workday_start_func, self.start_of_day)
        eh, em, _ = self._clock(date, self.workday_end_func, self.end_of_day)
        return timedelta(hours=eh, minutes=em) - timedelta(hours=sh, minutes=sm)

    def workday_start(self, date: datetime) -> datetime | None:
        """Return when work starts on ``date``, or ``None`` on non-working days."""
        if not self.is_workday(date):
            return None
        if self.workday_start_func is None:
            return day_start(date) + self.start_of_day
        return self.workday_start_func(date)

    def workday_end(self, date: datetime) -> datetime | None:
        """Return when work ends on ``date``, or ``None`` on non-working days."""
        if not self.is_workday(date):
            return None
        if self.workday_end_func is None:
            return day_start(date) + self.end_of_day
        return self.workday_end_func(date)

    def next_workday_start(self, date: datetime) -> datetime:
        """Return the start of the next working day at or after ``date``."""
        t = date
        start = self.workday_start(date)
        if start is None or date > start:
            t += _ONE_DAY
        while not self.is_workday(t):
            t += _ONE_DAY
        return self.workday_start(t)

    def next_workday_end(self, date: datetime) -> datetime:
        """Return the end of the current or next working day from ``date``."""
        t = date
        end = self.workday_end(date)
        if end is None or date > end:
            t += _ONE_DAY
        while not self.is_workday(t):
            t += _ONE_DAY
        return self.workday_end(t)

    def work_hours_in_range(self, start: datetime, end: datetime) -> timedelta:
        """Return the working time between two moments, in either order."""
        if end < start:
            start, end = end, start

        if self.is_work_time(start):
            current = start
        else:
            day_begin = self.workday_start(start)
            if day_begin is None:
                current = self.next_workday_start(start)
            elif start > self.workday_end(start):
                current = self.next_workday_start(start)
            else:
                current = day_begin

        total = timedelta(0)
        while current < end:
            last = min_time(self.workday_end(current), end)
            total += last - current
            current = self.next_workday_start(last)
        return total

    def add_work_hours(self, date: datetime, worked: timedelta) -> datetime:
        """Return the moment at which ``worked`` working time from ``date`` is done.

        A non-positive ``worked`` returns ``date`` unchanged.
        """
        if worked <= timedelta(0):
            return date

        start = date
        if not self.is_workday(start):
            start = self.next_workday_start(start)
        elif not self.is_work_time(start):
            day_begin = self.workday_start(start)
            day_finish = self.workday_end(start)
            if start < day_begin:
                start = day_begin
            elif start > day_finish:
                start = self.next_workday_start(start)

        result = start
        while worked > timedelta(0):
            day_finish = self.workday_end(start)
            result = min_time(start + worked, day_finish)
            worked -= self.work_hours_in_range(start, result)
            start = self.next_workday_start(day_finish)
        return result