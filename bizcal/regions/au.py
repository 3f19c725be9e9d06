"""Holiday definitions for Australia."""

from __future__ import annotations

from datetime import datetime, timedelta

from bizcal import timeutil
from bizcal.holiday import (
    AltDay,
    Holiday,
    Observance,
    calc_day_of_month,
    calc_easter_offset,
    calc_weekday_from,
    calc_weekday_offset,
)
from bizcal.regions import aa
from bizcal.timeutil import Weekday, day_start, weekday_n

# Saturdays and Sundays both move to the following Monday.
_WEEKEND_ALT = (
    AltDay(Weekday.SATURDAY, 2),
    AltDay(Weekday.SUNDAY, 1),
)

# 26 December moves past a weekend and past a Monday taken by Christmas.
_BOXING_ALT = (
    AltDay(Weekday.SATURDAY, 2),
    AltDay(Weekday.SUNDAY, 2),
    AltDay(Weekday.MONDAY, 1),
)

# Grand Final dates that did not follow the usual schedule.
_AFL_FINAL_FRIDAYS = {
    2015: (10, 2),
    2016: (9, 30),
    2020: (10, 23),
}


def calc_friday_before_afl_final(holiday: Holiday, year: int) -> datetime:
    """Friday before the AFL Grand Final, normally the last Saturday of September."""
    if year in _AFL_FINAL_FRIDAYS:
        month, day = _AFL_FINAL_FRIDAYS[year]
        return datetime(year, month, day, tzinfo=timeutil.DEFAULT_LOC)
    final_day = day_start(weekday_n(year, 9, Weekday.SATURDAY, -1))
    return final_day - timedelta(days=1)


NEW_YEAR = aa.NEW_YEAR.clone(
    Holiday(name="New Year's Day", observance=Observance.PUBLIC, observed=_WEEKEND_ALT)
)

AUSTRALIA_DAY = Holiday(
    name="Australia Day",
    observance=Observance.PUBLIC,
    month=1,
    day=26,
    observed=_WEEKEND_ALT,
    func=calc_day_of_month,
)

GOOD_FRIDAY = aa.GOOD_FRIDAY.clone(
    Holiday(name="Good Friday", observance=Observance.PUBLIC)
)

EASTER_SATURDAY = Holiday(name="Easter Saturday", offset=-1, func=calc_easter_offset)

EASTER_SUNDAY = Holiday(name="Easter Sunday", offset=0, func=calc_easter_offset)

EASTER_MONDAY = aa.EASTER_MONDAY.clone(
    Holiday(name="Easter Monday", observance=Observance.PUBLIC)
)


def _nth_monday(name: str, month: int, n: int) -> Holiday:
    return Holiday(
        name=name,
        observance=Observance.PUBLIC,
        month=month,
        weekday=Weekday.MONDAY,
        offset=n,
        func=calc_weekday_offset,
    )


LABOUR_DAY_WA = _nth_monday("Labour Day", 3, 1)
"""Labour Day in WA on the first Monday of March."""

LABOUR_DAY_VIC = _nth_monday("Labour Day", 3, 2)
"""Labour Day in VIC on the second Monday of March."""

LABOUR_DAY_TAS = _nth_monday("Eight Hours Day", 3, 2)
"""Eight Hours Day in TAS on the second Monday of March."""

CANBERRA_DAY = _nth_monday("Canberra Day", 3, 2)
"""Canberra Day in ACT on the second Monday of March."""

MARCH_PUBLIC_HOLIDAY = _nth_monday("March Public Holiday", 3, 2)
"""March Public Holiday in SA on the second Monday of March."""

ANZAC_DAY = Holiday(
    name="ANZAC Day",
    observance=Observance.PUBLIC,
    month=4,
    day=25,
    func=calc_day_of_month,
)

ANZAC_DAY_ACT_WA = ANZAC_DAY.clone(Holiday(observed=_WEEKEND_ALT))
"""ANZAC Day in ACT and WA, observed on Monday when on a weekend."""

ANZAC_DAY_NT_QLD_SA = ANZAC_DAY.clone(Holiday(observed=(AltDay(Weekday.SUNDAY, 1),)))
"""ANZAC Day in NT, QLD and SA, observed on Monday when on a Sunday."""

LABOUR_DAY_NT_QLD = _nth_monday("Labour Day / May Day", 5, 1)
"""May Day in NT and QLD on the first Monday of May."""

RECONCILIATION_DAY = Holiday(
    name="Reconciliation Day",
    observance=Observance.PUBLIC,
    month=5,
    day=27,
    weekday=Weekday.MONDAY,
    offset=1,
    func=calc_weekday_from,
    start_year=2018,
)
"""Reconciliation Day in ACT on the first Monday on or after 27 May."""

WESTERN_AUSTRALIA_DAY = _nth_monday("Western Australia Day", 6, 1)

QUEENS_BIRTHDAY = _nth_monday("Queen's Birthday", 6, 2)

PICNIC_DAY = _nth_monday("Picnic Day", 8, 1)

QUEENS_BIRTHDAY_WA = _nth_monday("Queen's Birthday", 9, -1)
"""Queen's Birthday in WA on the last Monday of September."""

FRIDAY_BEFORE_AFL_FINAL = Holiday(
    name="Friday before the AFL Grand Final",
    observance=Observance.PUBLIC,
    func=calc_friday_before_afl_final,
    start_year=2015,
)

QUEENS_BIRTHDAY_QLD = _nth_monday("Queen's Birthday", 10, 1)

LABOUR_DAY_ACT_NSW_SA = _nth_monday("Labour Day", 10, 1)

MELBOURNE_CUP = Holiday(
    name="Melbourne Cup",
    observance=Observance.PUBLIC,
    month=11,
    weekday=Weekday.TUESDAY,
    offset=1,
    func=calc_weekday_offset,
)
"""Melbourne Cup day on the first Tuesday of November."""

CHRISTMAS_DAY = aa.CHRISTMAS_DAY.clone(
    Holiday(name="Christmas Day", observance=Observance.BANK, observed=_WEEKEND_ALT)
)

BOXING_DAY = aa.CHRISTMAS_DAY2.clone(
    Holiday(name="Boxing Day", observance=Observance.BANK, observed=_BOXING_ALT)
)

PROCLAMATION_DAY = aa.CHRISTMAS_DAY2.clone(
    Holiday(name="Proclamation Day", observance=Observance.BANK, observed=_BOXING_ALT)
)

MOURNING_DAY_2022 = Holiday(
    name="National Day of Mourning for Her Majesty the Queen",
    observance=Observance.PUBLIC,
    month=9,
    day=22,
    start_year=2022,
    end_year=2022,
    func=calc_day_of_month,
)

HOLIDAYS_ACT = (
    NEW_YEAR,
    AUSTRALIA_DAY,
    CANBERRA_DAY,
    GOOD_FRIDAY,
    EASTER_SATURDAY,
    EASTER_SUNDAY,
    EASTER_MONDAY,
    ANZAC_DAY_ACT_WA,
    RECONCILIATION_DAY,
    QUEENS_BIRTHDAY,
    MOURNING_DAY_2022,
    LABOUR_DAY_ACT_NSW_SA,
    CHRISTMAS_DAY,
    BOXING_DAY,
)
"""Standard holidays in the Australian Capital Territory."""

HOLIDAYS_NSW = (
    NEW_YEAR,
    AUSTRALIA_DAY,
    GOOD_FRIDAY,
    EASTER_SATURDAY,
    EASTER_SUNDAY,
    EASTER_MONDAY,
    ANZAC_DAY,
    QUEENS_BIRTHDAY,
    MOURNING_DAY_2022,
    LABOUR_DAY_ACT_NSW_SA,
    CHRISTMAS_DAY,
    BOXING_DAY,
)
"""Standard holidays in New South Wales."""

HOLIDAYS_NT = (
    NEW_YEAR,
    AUSTRALIA_DAY,
    GOOD_FRIDAY,
    EASTER_SATURDAY,
    EASTER_MONDAY,
    ANZAC_DAY_NT_QLD_SA,
    LABOUR_DAY_NT_QLD,
    QUEENS_BIRTHDAY,
    PICNIC_DAY,
    MOURNING_DAY_2022,
    CHRISTMAS_DAY,
    BOXING_DAY,
)
"""Standard holidays in the Northern Territory."""

HOLIDAYS_QLD = (
    NEW_YEAR,
    AUSTRALIA_DAY,
    GOOD_FRIDAY,
    EASTER_SATURDAY,
    EASTER_SUNDAY,
    EASTER_MONDAY,
    ANZAC_DAY_NT_QLD_SA,
    LABOUR_DAY_NT_QLD,
    MOURNING_DAY_2022,
    QUEENS_BIRTHDAY_QLD,
    CHRISTMAS_DAY,
    BOXING_DAY,
)
"""Standard holidays in Queensland."""

HOLIDAYS_SA = (
    NEW_YEAR,
    AUSTRALIA_DAY,
    MARCH_PUBLIC_HOLIDAY,
    GOOD_FRIDAY,
    EASTER_SATURDAY,
    EASTER_MONDAY,
    ANZAC_DAY_NT_QLD_SA,
    QUEENS_BIRTHDAY,
    MOURNING_DAY_2022,
    LABOUR_DAY_ACT_NSW_SA,
    CHRISTMAS_DAY,
    PROCLAMATION_DAY,
)
"""Standard holidays in South Australia."""

HOLIDAYS_TAS = (
    NEW_YEAR,
    AUSTRALIA_DAY,
    LABOUR_DAY_TAS,
    GOOD_FRIDAY,
    EASTER_MONDAY,
    ANZAC_DAY,
    QUEENS_BIRTHDAY,
    MOURNING_DAY_2022,
    CHRISTMAS_DAY,
    BOXING_DAY,
)
"""Standard holidays in Tasmania."""

HOLIDAYS_VIC = (
    NEW_YEAR,
    AUSTRALIA_DAY,
    LABOUR_DAY_VIC,
    GOOD_FRIDAY,
    EASTER_SATURDAY,
    EASTER_SUNDAY,
    EASTER_MONDAY,
    ANZAC_DAY,
    QUEENS_BIRTHDAY,
    MOURNING_DAY_2022,
    FRIDAY_BEFORE_AFL_FINAL,
    MELBOURNE_CUP,
    CHRISTMAS_DAY,
    BOXING_DAY,
)
"""Standard holidays in Victoria."""

HOLIDAYS_WA = (
    NEW_YEAR,
    AUSTRALIA_DAY,
    LABOUR_DAY_WA,
    GOOD_FRIDAY,
    EASTER_MONDAY,
    ANZAC_DAY_ACT_WA,
    WESTERN_AUSTRALIA_DAY,
    QUEENS_BIRTHDAY_WA,
    MOURNING_DAY_2022,
    CHRISTMAS_DAY,
    BOXING_DAY,
)
"""Standard holidays in Western Australia."""