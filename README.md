# bizcal

Holiday calendars and business-day arithmetic for Python.

bizcal answers everyday scheduling questions:

- Is this date a holiday, or the day a holiday is observed on?
- Is this date a workday, and is this moment within working hours?
- How many workdays are left in the month, or lie between two dates?
- Which date is ten workdays from now?
- When will eight hours of work starting now be finished?

It has no dependencies beyond the standard library and works with plain
`datetime` objects. A missing date is represented by `None`.

## Installation

```
pip install bizcal
```

## Modules

| Module | Contents |
| --- | --- |
| `bizcal.timeutil` | Date helpers: `Weekday`, `is_weekend`, `weekday_n`, `weekday_n_from`, `is_weekday_n`, `day_start`, `day_end`, `month_start`, `month_end`, `replace_location`, `julian_day_number`, `julian_date`, `modified_julian_day_number`, `modified_julian_date`, `max_time`, `min_time`, and the `DEFAULT_LOC` time zone used when building dates |
| `bizcal.holiday` | `Holiday` definitions with `Observance` types and `AltDay` weekend substitution rules, plus the calculation functions `calc_day_of_month`, `calc_easter_offset`, `calc_weekday_offset` and `calc_weekday_from` |
| `bizcal.calendar` | `Calendar`, a named list of holidays for a set of locations, and `HolidayMatch`, the answer to `Calendar.is_holiday` |
| `bizcal.business` | `BusinessCalendar`, a calendar with working days and working hours |
| `bizcal.regions` | Ready-made holiday definitions: `aa` (common holidays shared by many countries), `ar` (Argentina), `at` (Austria), `au` (Australia), `be` (Belgium), `bg` (Bulgaria), `br` (Brazil) |

## Date helpers

```python
from datetime import datetime, timezone

from bizcal.timeutil import Weekday, is_weekend, weekday_n, julian_day_number

is_weekend(datetime(2014, 6, 1, 12, tzinfo=timezone.utc))   # True, a Sunday

# The last Monday of June 2014
weekday_n(2014, 6, Weekday.MONDAY, -1)                       # 30 June 2014, noon

julian_day_number(datetime(1970, 1, 1, tzinfo=timezone.utc)) # 2440587
```

Positive `n` counts forward from the start of the month, negative `n`
counts back from its end, and `n == 0` gives `None`. Dates built from a
bare year and month use `timeutil.DEFAULT_LOC`, which is `None` (naive,
local wall time) unless you set it.

## Holidays

A `Holiday` computes its actual and observed date for a year with
`Holiday.calc(year)`, which returns a pair of datetimes, or `(None, None)`
when the holiday does not fall in that year (outside `start_year` /
`end_year`). The calculation is chosen by the holiday's `func`: a fixed
day of the month, an offset from Easter (Orthodox Easter when `julian` is
set), the nth weekday of a month, or the nth weekday counted from a given
date. Observance rules (`AltDay`) move a holiday that lands on a given
weekday by a number of days, for example Saturday to Friday and Sunday to
Monday.

`Holiday.clone(overrides)` derives a new holiday from an existing one,
taking every field of `overrides` that differs from its default. The
national definitions in `bizcal.regions` build on the common ones in
`bizcal.regions.aa` this way:

```python
from bizcal.regions import au

au.NEW_YEAR.calc(2022)    # (1 January 2022, observed Monday 3 January 2022)
```

Each region module exposes its holidays as upper-case constants and a
`HOLIDAYS` tuple of the standard national list; `au` has one tuple per
state or territory (`HOLIDAYS_ACT`, `HOLIDAYS_NSW`, `HOLIDAYS_NT`,
`HOLIDAYS_QLD`, `HOLIDAYS_SA`, `HOLIDAYS_TAS`, `HOLIDAYS_VIC`,
`HOLIDAYS_WA`).

## Calendars

`Calendar.is_holiday(date)` returns a `HolidayMatch` with the fields
`actual`, `observed` and `holiday`. Observed days that spill into the
neighbouring year, such as a Saturday 1 January observed on Friday
31 December, are found too. When `locations` is set, the calendar only
applies to dates whose `tzinfo` is one of them; otherwise every date
matches nothing.

A calendar with `cacheable=True` remembers the answer of `is_holiday` per
day, dropping `cache_evict_size` entries once `cache_max_size` is reached.
Leave caching off if you change holiday definitions while the calendar is
in use.

## Business calendars

```python
from datetime import datetime, timedelta, timezone

from bizcal.business import BusinessCalendar
from bizcal.regions import be

cal = BusinessCalendar()          # Monday to Friday, 09:00 to 17:00
cal.add_holiday(*be.HOLIDAYS)

start = datetime(2020, 4, 1, 6, 0, tzinfo=timezone.utc)
cal.is_workday(start)                            # True
cal.is_work_time(start)                          # False, before 09:00
cal.add_work_hours(start, timedelta(hours=8))    # 2020-04-01 17:00
cal.work_hours_in_range(
    datetime(2020, 4, 1, 18, 0, tzinfo=timezone.utc),
    datetime(2020, 4, 2, 12, 0, tzinfo=timezone.utc),
)                                                # 3 hours
cal.workdays_from(start, 5)                      # five workdays later
cal.workday_n(2020, 4, -1)                       # day of the last workday
```

Working days and hours are changed with `set_workday` and
`set_work_hours`. For schedules that vary through the year, set
`workday_func`, `workday_start_func` and `workday_end_func`, which decide
per date whether it is a workday and when work starts and ends. A date
whose holiday is observed on it is not a workday.

Other methods: `workdays_remain`, `workdays_in_month`,
`workdays_in_range`, `holidays_in_range`, `work_hours`, `workday_start`,
`workday_end`, `next_workday_start` and `next_workday_end`. Range counts
are inclusive and negative when the end comes before the start.

## What it does not do

bizcal is a library only: it has no command-line tool, stores nothing,
and loads no holiday data from files or services. Ready-made holidays
exist only for the regions listed above; for anywhere else, define
`Holiday` objects yourself.

## Tests

The test suite uses pytest, which the `test` extra installs.