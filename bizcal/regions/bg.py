"""Holiday definitions for Bulgaria."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta

from bizcal.holiday import (
    AltDay,
    Holiday,
    Observance,
    calc_day_of_month,
    calc_easter_offset,
)
from bizcal.regions import aa
from bizcal.timeutil import Weekday

# Saturdays and Sundays both move to the following Monday.
_WEEKEND_ALT = (
    AltDay(Weekday.SATURDAY, 2),
    AltDay(Weekday.SUNDAY, 1),
)

NEW_YEAR = aa.NEW_YEAR.clone(
    Holiday(name="Нова година", observance=Observance.PUBLIC, observed=_WEEKEND_ALT)
)
"""New Year's Day on 1 January."""

LIBERATION_DAY = Holiday(
    name="Ден на Освобождението на България от османско иго - национален празник",
    observance=Observance.PUBLIC,
    month=3,
    day=3,
    func=calc_day_of_month,
    observed=_WEEKEND_ALT,
)
"""Liberation Day on 3 March."""

ORTHODOX_GOOD_FRIDAY = Holiday(
    name="Велики петък",
    observance=Observance.PUBLIC,
    offset=-2,
    julian=True,
    func=calc_easter_offset,
)
"""Orthodox Good Friday, two days before Orthodox Easter."""

ORTHODOX_EASTER_MONDAY = Holiday(
    name="Великден",
    observance=Observance.PUBLIC,
    offset=1,
    julian=True,
    func=calc_easter_offset,
)
"""Orthodox Easter Monday, the day after Orthodox Easter."""


def _calc_labour_day(holiday: Holiday, year: int) -> datetime:
    """1 May, moved to Easter Tuesday when Orthodox Easter takes that weekend."""
    good_friday = calc_easter_offset(ORTHODOX_GOOD_FRIDAY, year)
    labour_day = calc_day_of_month(holiday, year)
    days_diff = (labour_day - good_friday) / timedelta(days=1)
    if days_diff <= 2:
        return calc_easter_offset(replace(holiday, offset=2, julian=True), year)
    return labour_day


LABOUR_DAY = Holiday(
    name="Ден на труда и на международната работническа солидарност",
    observance=Observance.PUBLIC,
    month=5,
    day=1,
    func=_calc_labour_day,
    observed=_WEEKEND_ALT,
)
"""Labour Day on 1 May."""

ST_GEORGES_DAY = Holiday(
    name="Гергьовден, Ден на храбростта и Българската армия",
    observance=Observance.PUBLIC,
    month=5,
    day=6,
    func=calc_day_of_month,
    observed=_WEEKEND_ALT,
)
"""St. George's Day on 6 May."""

ST_CYRIL_AND_METHODIUS_DAY = Holiday(
    name=(
        "Ден на светите братя Кирил и Методий, на българската азбука, "
        "просвета и култура и на славянската книжовност"
    ),
    observance=Observance.PUBLIC,
    month=5,
    day=24,
    func=calc_day_of_month,
    observed=_WEEKEND_ALT,
)
"""St. Cyril and St. Methodius Day on 24 May."""

UNIFICATION_DAY = Holiday(
    name="Ден на Съединението",
    observance=Observance.PUBLIC,
    month=9,
    day=6,
    func=calc_day_of_month,
    observed=_WEEKEND_ALT,
)
"""Unification Day on 6 September."""

INDEPENDENCE_DAY = Holiday(
    name="Ден на Независимостта на България",
    observance=Observance.PUBLIC,
    month=9,
    day=22,
    func=calc_day_of_month,
    observed=_WEEKEND_ALT,
)
"""Independence Day on 22 September."""

CHRISTMAS_EVE = Holiday(
    name="Бъдни вечер",
    observance=Observance.PUBLIC,
    month=12,
    day=24,
    func=calc_day_of_month,
    observed=_WEEKEND_ALT,
)
"""Christmas Eve on 24 December."""

CHRISTMAS_DAY = aa.CHRISTMAS_DAY.clone(
    Holiday(
        name="Коледа",
        observance=Observance.PUBLIC,
        observed=(
            AltDay(Weekday.SATURDAY, 2),
            AltDay(Weekday.SUNDAY, 2),
        ),
    )
)
"""Christmas Day on 25 December."""

CHRISTMAS_DAY2 = aa.CHRISTMAS_DAY2.clone(
    Holiday(
        name="Коледа 2",
        observance=Observance.PUBLIC,
        observed=(
            AltDay(Weekday.SATURDAY, 2),
            AltDay(Weekday.SUNDAY, 2),
            AltDay(Weekday.MONDAY, 2),
            AltDay(Weekday.TUESDAY, 1),
        ),
    )
)
"""Second day of Christmas on 26 December."""

HOLIDAYS = (
    NEW_YEAR,
    LIBERATION_DAY,
    ORTHODOX_GOOD_FRIDAY,
    ORTHODOX_EASTER_MONDAY,
    LABOUR_DAY,
    ST_GEORGES_DAY,
    ST_CYRIL_AND_METHODIUS_DAY,
    UNIFICATION_DAY,
    INDEPENDENCE_DAY,
    CHRISTMAS_EVE,
    CHRISTMAS_DAY,
    CHRISTMAS_DAY2,
)
"""The standard national holidays."""