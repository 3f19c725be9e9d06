"""Common holiday definitions shared by many regional calendars."""

from __future__ import annotations

from bizcal.holiday import Holiday, calc_day_of_month, calc_easter_offset

NEW_YEAR = Holiday(name="New Year's Day", month=1, day=1, func=calc_day_of_month)
"""New Year's Day on 1 January."""

EPIPHANY = Holiday(name="Epiphany", month=1, day=6, func=calc_day_of_month)
"""Epiphany on 6 January."""

MAUNDY_THURSDAY = Holiday(name="Maundy Thursday", offset=-3, func=calc_easter_offset)
"""Maundy Thursday, three days before Easter."""

GOOD_FRIDAY = Holiday(name="Good Friday", offset=-2, func=calc_easter_offset)
"""Good Friday, two days before Easter."""

EASTER = Holiday(name="Easter", offset=0, func=calc_easter_offset)
"""Easter Sunday."""

EASTER_MONDAY = Holiday(name="Easter Monday", offset=1, func=calc_easter_offset)
"""Easter Monday, the day after Easter."""

WORKERS_DAY = Holiday(
    name="International Workers' Day", month=5, day=1, func=calc_day_of_month
)
"""International Workers' Day on 1 May."""

ASCENSION_DAY = Holiday(name="Ascension Day", offset=39, func=calc_easter_offset)
"""Ascension Day, 39 days after Easter."""

PENTECOST = Holiday(name="Pentecost", offset=49, func=calc_easter_offset)
"""Pentecost Sunday, 49 days after Easter."""

PENTECOST_MONDAY = Holiday(name="Pentecost Monday", offset=50, func=calc_easter_offset)
"""Pentecost Monday, 50 days after Easter."""

CORPUS_CHRISTI = Holiday(name="Corpus Christi", offset=60, func=calc_easter_offset)
"""Corpus Christi, 60 days after Easter."""

ASSUMPTION_OF_MARY = Holiday(
    name="Assumption of Mary", month=8, day=15, func=calc_day_of_month
)
"""Assumption of Mary on 15 August."""

ALL_SAINTS_DAY = Holiday(name="All Saints' Day", month=11, day=1, func=calc_day_of_month)
"""All Saints' Day on 1 November."""

ARMISTICE_DAY = Holiday(name="Armistice Day", month=11, day=11, func=calc_day_of_month)
"""Armistice Day on 11 November."""

IMMACULATE_CONCEPTION = Holiday(
    name="Immaculate Conception", month=12, day=8, func=calc_day_of_month
)
"""Immaculate Conception on 8 December."""

CHRISTMAS_DAY = Holiday(name="Christmas Day", month=12, day=25, func=calc_day_of_month)
"""Christmas Day on 25 December."""

CHRISTMAS_DAY2 = Holiday(
    name="2nd Day of Christmas", month=12, day=26, func=calc_day_of_month
)
"""The day after Christmas (Boxing Day / St. Stephen's Day) on 26 December."""