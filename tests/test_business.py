from datetime import datetime, timedelta, timezone

import pytest

from bizcal.business import BusinessCalendar
from bizcal.holiday import AltDay, Holiday, Observance, calc_day_of_month
from bizcal.timeutil import Weekday

UTC = timezone.utc


def d(y, m, day):
    return datetime(y, m, day, tzinfo=UTC)


def dt(y, m, day, h, minute):
    return datetime(y, m, day, h, minute, tzinfo=UTC)


def dts(y, m, day, h, minute, sec):
    return datetime(y, m, day, h, minute, sec, tzinfo=UTC)


def july4():
    return Holiday(
        observance=Observance.PUBLIC,
        month=7,
        day=4,
        observed=(AltDay(Weekday.SATURDAY, -1), AltDay(Weekday.SUNDAY, 1)),
        func=calc_day_of_month,
    )


def holiday_calendar():
    c = BusinessCalendar()
    c.add_holiday(july4())
    return c


def varying_calendar(start_second=0, end_second=0):
    c = BusinessCalendar()
    c.workday_start_func = lambda date: datetime(
        date.year, date.month, date.day, date.day % 12, 30, start_second, tzinfo=UTC
    )
    c.workday_end_func = lambda date: datetime(
        date.year, date.month, date.day, date.day % 12 + 6, 45, end_second, tzinfo=UTC
    )
    return c


def test_new_business_calendar_defaults():
    b = BusinessCalendar()
    assert b.workdays == {
        Weekday.MONDAY,
        Weekday.TUESDAY,
        Weekday.WEDNESDAY,
        Weekday.THURSDAY,
        Weekday.FRIDAY,
    }
    assert b.start_of_day == timedelta(hours=9)
    assert b.end_of_day == timedelta(hours=17)


def test_set_workday():
    b = BusinessCalendar()
    b.set_workday(Weekday.SATURDAY, True)
    b.set_workday(Weekday.WEDNESDAY, False)
    assert Weekday.SATURDAY in b.workdays
    assert Weekday.WEDNESDAY not in b.workdays
    assert b.is_workday(d(2020, 4, 4)) is True
    assert b.is_workday(d(2020, 4, 1)) is False


def test_set_work_hours():
    b = BusinessCalendar()
    b.set_work_hours(timedelta(hours=8, minutes=30), timedelta(hours=18, minutes=15))
    assert b.start_of_day == timedelta(hours=8, minutes=30)
    assert b.end_of_day == timedelta(hours=18, minutes=15)
    assert b.work_hours(d(2020, 4, 1)) == timedelta(hours=9, minutes=45)


def _workday_cal2():
    c = BusinessCalendar()
    c.workday_func = lambda date: 1 <= date.day <= 15
    c.add_holiday(july4())
    return c


@pytest.mark.parametrize(
    "which,date,want",
    [
        (1, d(2020, 4, 1), True),
        (1, d(2020, 4, 3), True),
        (1, d(2020, 4, 4), False),
        (1, d(2020, 4, 5), False),
        (1, d(2020, 4, 6), True),
        (2, d(2020, 4, 1), True),
        (2, d(2020, 4, 3), True),
        (2, d(2020, 4, 4), True),
        (2, d(2020, 4, 16), False),
        (2, d(2020, 4, 30), False),
        (2, d(2015, 7, 3), False),
        (2, d(2015, 7, 4), True),
        (2, d(2016, 7, 3), True),
        (2, d(2016, 7, 4), False),
    ],
)
def test_is_workday(which, date, want):
    c = BusinessCalendar() if which == 1 else _workday_cal2()
    assert c.is_workday(date) is want


@pytest.mark.parametrize(
    "which,date,want",
    [
        (1, dt(2020, 4, 1, 12, 0), True),
        (1, dt(2020, 4, 1, 0, 0), False),
        (1, dt(2020, 4, 1, 18, 0), False),
        (1, dt(2020, 4, 5, 12, 0), False),
        (2, dt(2020, 4, 1, 3, 0), True),
        (2, dt(2020, 4, 1, 0, 0), False),
        (2, dt(2020, 4, 1, 7, 0), True),
        (2, dt(2020, 4, 1, 7, 50), False),
    ],
)
def test_is_work_time(which, date, want):
    c = BusinessCalendar() if which == 1 else varying_calendar()
    assert c.is_work_time(date) is want


@pytest.mark.parametrize(
    "date,want",
    [
        (dts(2020, 4, 1, 1, 30, 29), False),
        (dts(2020, 4, 1, 1, 30, 30), True),
        (dts(2020, 4, 1, 1, 30, 31), True),
        (dts(2020, 4, 1, 5, 30, 31), True),
        (dts(2020, 4, 1, 7, 45, 29), True),
        (dts(2020, 4, 1, 7, 45, 30), True),
        (dts(2020, 4, 1, 7, 45, 31), False),
    ],
)
def test_is_work_time_seconds(date, want):
    c = varying_calendar(start_second=30, end_second=30)
    assert c.is_work_time(date) is want


@pytest.mark.parametrize(
    "date,want",
    [
        (d(2020, 4, 1), 21),
        (d(2020, 4, 3), 19),
        (d(2020, 4, 4), 19),
        (d(2020, 4, 5), 19),
        (d(2020, 4, 6), 18),
        (d(2015, 7, 1), 21),
        (d(2015, 7, 2), 20),
        (d(2015, 7, 3), 20),
        (d(2015, 7, 4), 20),
        (d(2015, 7, 5), 20),
        (d(2015, 7, 6), 19),
    ],
)
def test_workdays_remain(date, want):
    assert holiday_calendar().workdays_remain(date) == want


@pytest.mark.parametrize(
    "year,month,want",
    [
        (2020, 4, 22),
        (2020, 5, 21),
        (2020, 6, 22),
        (2020, 7, 22),
        (2020, 11, 21),
    ],
)
def test_workdays_in_month(year, month, want):
    assert holiday_calendar().workdays_in_month(year, month) == want


@pytest.mark.parametrize(
    "start,end,want",
    [
        (d(2015, 4, 1), d(2015, 4, 10), 8),
        (d(2015, 4, 1), d(2015, 4, 30), 22),
        (d(2015, 4, 1), d(2015, 5, 16), 33),
        (d(2015, 4, 1), d(2015, 4, 1), 1),
        (d(2015, 4, 4), d(2015, 4, 5), 0),
        (d(2015, 7, 1), d(2015, 7, 6), 3),
    ],
)
def test_workdays_in_range(start, end, want):
    c = holiday_calendar()
    assert c.workdays_in_range(start, end) == want
    if start != end:
        assert c.workdays_in_range(end, start) == -want


@pytest.mark.parametrize(
    "start,end,want",
    [
        (d(2015, 4, 4), d(2015, 4, 5), 0),
        (d(2015, 7, 1), d(2015, 7, 6), 1),
    ],
)
def test_holidays_in_range(start, end, want):
    c = holiday_calendar()
    assert c.holidays_in_range(start, end) == want
    assert c.holidays_in_range(end, start) == -want


@pytest.mark.parametrize(
    "year,month,n,want",
    [
        (2016, 1, 14, 20),
        (2016, 1, -5, 25),
        (2016, 1, -14, 12),
        (2016, 2, 21, 29),
        (2016, 2, 22, 0),
        (2016, 2, -1, 29),
        (2016, 2, 0, 0),
        (2016, 7, 4, 7),
    ],
)
def test_workday_n(year, month, n, want):
    assert holiday_calendar().workday_n(year, month, n) == want


@pytest.mark.parametrize(
    "start,offset,want",
    [
        (d(2016, 1, 5), 0, d(2016, 1, 5)),
        (d(2016, 1, 5), 1, d(2016, 1, 6)),
        (d(2016, 1, 5), -1, d(2016, 1, 4)),
        (d(2016, 1, 15), 1, d(2016, 1, 18)),
        (d(2016, 1, 15), -12, d(2015, 12, 30)),
        (d(2016, 7, 1), 1, d(2016, 7, 5)),
        (d(2016, 7, 4), 1, d(2016, 7, 5)),
        (d(2016, 7, 4), -1, d(2016, 7, 1)),
        (d(2016, 1, 1), 366, d(2017, 5, 30)),
        (d(2016, 1, 1), -366, d(2014, 8, 6)),
    ],
)
def test_workdays_from(start, offset, want):
    assert holiday_calendar().workdays_from(start, offset) == want


@pytest.mark.parametrize(
    "which,date,want",
    [
        (1, d(2020, 4, 1), timedelta(hours=8)),
        (1, d(2020, 4, 5), timedelta(0)),
        (2, d(2020, 4, 1), timedelta(hours=6, minutes=15)),
        (2, d(2020, 4, 6), timedelta(hours=6, minutes=15)),
    ],
)
def test_work_hours(which, date, want):
    c = BusinessCalendar() if which == 1 else varying_calendar()
    assert c.work_hours(date) == want


@pytest.mark.parametrize(
    "which,date,want",
    [
        (1, d(2020, 4, 1), dt(2020, 4, 1, 9, 0)),
        (1, d(2020, 4, 5), None),
        (2, d(2020, 4, 1), dt(2020, 4, 1, 1, 30)),
        (2, d(2020, 4, 6), dt(2020, 4, 6, 6, 30)),
    ],
)
def test_workday_start(which, date, want):
    c = BusinessCalendar() if which == 1 else varying_calendar()
    assert c.workday_start(date) == want


@pytest.mark.parametrize(
    "which,date,want",
    [
        (1, d(2020, 4, 1), dt(2020, 4, 1, 17, 0)),
        (1, d(2020, 4, 5), None),
        (2, d(2020, 4, 1), dt(2020, 4, 1, 7, 45)),
        (2, d(2020, 4, 6), dt(2020, 4, 6, 12, 45)),
    ],
)
def test_workday_end(which, date, want):
    c = BusinessCalendar() if which == 1 else varying_calendar()
    assert c.workday_end(date) == want


@pytest.mark.parametrize(
    "which,date,want",
    [
        (1, dt(2020, 4, 1, 6, 0), dt(2020, 4, 1, 9, 0)),
        (1, dt(2020, 4, 1, 20, 0), dt(2020, 4, 2, 9, 0)),
        (1, dt(2020, 4, 4, 12, 0), dt(2020, 4, 6, 9, 0)),
        (1, dt(2020, 4, 5, 12, 0), dt(2020, 4, 6, 9, 0)),
        (2, dt(2020, 4, 1, 3, 0), dt(2020, 4, 2, 2, 30)),
        (2, dt(2020, 4, 6, 8, 0), dt(2020, 4, 7, 7, 30)),
    ],
)
def test_next_workday_start(which, date, want):
    c = BusinessCalendar() if which == 1 else varying_calendar()
    assert c.next_workday_start(date) == want


@pytest.mark.parametrize(
    "which,date,want",
    [
        (1, dt(2020, 4, 1, 6, 0), dt(2020, 4, 1, 17, 0)),
        (1, dt(2020, 4, 1, 20, 0), dt(2020, 4, 2, 17, 0)),
        (1, dt(2020, 4, 4, 12, 0), dt(2020, 4, 6, 17, 0)),
        (1, dt(2020, 4, 5, 12, 0), dt(2020, 4, 6, 17, 0)),
        (2, dt(2020, 4, 1, 3, 0), dt(2020, 4, 1, 7, 45)),
        (2, dt(2020, 4, 6, 8, 0), dt(2020, 4, 6, 12, 45)),
        (2, dt(2020, 4, 6, 22, 0), dt(2020, 4, 7, 13, 45)),
    ],
)
def test_next_workday_end(which, date, want):
    c = BusinessCalendar() if which == 1 else varying_calendar()
    assert c.next_workday_end(date) == want


@pytest.mark.parametrize(
    "which,start,end,want",
    [
        (1, dt(2020, 4, 1, 6, 0), dt(2020, 4, 1, 23, 0), timedelta(hours=8)),
        (1, dt(2020, 4, 1, 18, 0), dt(2020, 4, 2, 12, 0), timedelta(hours=3)),
        (1, dt(2020, 4, 1, 14, 0), dt(2020, 4, 1, 18, 0), timedelta(hours=3)),
        (1, dt(2020, 4, 1, 9, 15), dt(2020, 4, 2, 12, 0), timedelta(hours=10, minutes=45)),
        (1, dt(2020, 4, 4, 9, 0), dt(2020, 4, 6, 8, 0), timedelta(0)),
        (2, dt(2020, 4, 1, 1, 0), dt(2020, 4, 2, 5, 0), timedelta(hours=8, minutes=45)),
        (2, dt(2020, 4, 13, 0, 0), dt(2020, 4, 18, 0, 0), timedelta(hours=30, minutes=75)),
    ],
)
def test_work_hours_in_range(which, start, end, want):
    c = BusinessCalendar() if which == 1 else varying_calendar()
    assert c.work_hours_in_range(start, end) == want
    assert c.work_hours_in_range(end, start) == want


@pytest.mark.parametrize(
    "which,start,worked,want",
    [
        (1, dt(2020, 4, 1, 6, 0), timedelta(hours=8), dt(2020, 4, 1, 17, 0)),
        (1, dt(2020, 4, 1, 18, 0), timedelta(hours=3), dt(2020, 4, 2, 12, 0)),
        (1, dt(2020, 4, 1, 12, 0), timedelta(hours=3, minutes=20), dt(2020, 4, 1, 15, 20)),
        (1, dt(2020, 4, 1, 9, 15), timedelta(hours=10, minutes=45), dt(2020, 4, 2, 12, 0)),
        (1, dt(2020, 4, 4, 9, 0), timedelta(0), dt(2020, 4, 4, 9, 0)),
        (1, dt(2020, 4, 4, 9, 0), timedelta(hours=24), dt(2020, 4, 8, 17, 0)),
        (2, dt(2020, 4, 1, 1, 0), timedelta(hours=8, minutes=45), dt(2020, 4, 2, 5, 0)),
        (2, dt(2020, 4, 13, 0, 0), timedelta(hours=30, minutes=75), dt(2020, 4, 17, 11, 45)),
    ],
)
def test_add_work_hours(which, start, worked, want):
    c = BusinessCalendar() if which == 1 else varying_calendar()
    assert c.add_work_hours(start, worked) == want


def test_add_work_hours_negative_returns_date():
    c = BusinessCalendar()
    start = dt(2020, 4, 1, 10, 0)
    assert c.add_work_hours(start, timedelta(hours=-2)) == start