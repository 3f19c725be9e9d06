"""Holiday definitions for Austria."""

from __future__ import annotations

from bizcal.holiday import Holiday, Observance, calc_day_of_month
from bizcal.regions import aa


def _public(base: Holiday, name: str) -> Holiday:
    return base.clone(Holiday(name=name, observance=Observance.PUBLIC))


NEUJAHR = _public(aa.NEW_YEAR, "Neujahrstag")
HEILIGE_DREI_KOENIGE = _public(aa.EPIPHANY, "Heilige Drei Könige")
OSTERMONTAG = _public(aa.EASTER_MONDAY, "Ostermontag")
TAG_DER_ARBEIT = _public(aa.WORKERS_DAY, "Tag der Arbeit")
CHRISTI_HIMMELFAHRT = _public(aa.ASCENSION_DAY, "Christi Himmelfahrt")
PFINGSTMONTAG = _public(aa.PENTECOST_MONDAY, "Pfingstmontag")
FRONLEICHNAM = _public(aa.CORPUS_CHRISTI, "Fronleichnam")
MARIA_HIMMELFAHRT = _public(aa.ASSUMPTION_OF_MARY, "Mariä Himmelfahrt")

NATIONALFEIERTAG = Holiday(
    name="Nationalfeiertag",
    observance=Observance.PUBLIC,
    month=10,
    day=26,
    func=calc_day_of_month,
)
"""National Day on 26 October."""

ALLERHEILIGEN = _public(aa.ALL_SAINTS_DAY, "Allerheiligen")
MARIA_EMPFAENGNIS = _public(aa.IMMACULATE_CONCEPTION, "Mariä Empfängnis")
CHRISTTAG = _public(aa.CHRISTMAS_DAY, "Christtag")
STEFANITAG = _public(aa.CHRISTMAS_DAY2, "Stefanitag")

HOLIDAYS = (
    NEUJAHR,
    HEILIGE_DREI_KOENIGE,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    CHRISTI_HIMMELFAHRT,
    PFINGSTMONTAG,
    FRONLEICHNAM,
    MARIA_HIMMELFAHRT,
    NATIONALFEIERTAG,
    ALLERHEILIGEN,
    MARIA_EMPFAENGNIS,
    CHRISTTAG,
    STEFANITAG,
)
"""The standard national holidays."""