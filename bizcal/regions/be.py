"""Holiday definitions for Belgium."""

from __future__ import annotations

from bizcal.holiday import Holiday, Observance, calc_day_of_month
from bizcal.regions import aa


def _public(base: Holiday, name: str) -> Holiday:
    return base.clone(Holiday(name=name, observance=Observance.PUBLIC))


NIEUWJAAR = _public(aa.NEW_YEAR, "Nieuwjaarsdag")
PAASMAANDAG = _public(aa.EASTER_MONDAY, "Paasmaandag")
DAG_VAN_DE_ARBEID = _public(aa.WORKERS_DAY, "Dag van de Arbeid")
ONZE_LIEVE_HEER_HEMELVAART = _public(aa.ASCENSION_DAY, "Onze Lieve Heer Hemelvaart")
PINKSTERMAANDAG = _public(aa.PENTECOST_MONDAY, "Pinkstermaandag")

NATIONALE_FEESTDAG = Holiday(
    name="Nationale Feestdag",
    observance=Observance.PUBLIC,
    month=7,
    day=21,
    func=calc_day_of_month,
)
"""Belgian National Day on 21 July."""

ONZE_LIEVE_VROUW_HEMELVAART = _public(aa.ASSUMPTION_OF_MARY, "Onze Lieve Vrouw Hemelvaart")
ALLERHEILIGEN = _public(aa.ALL_SAINTS_DAY, "Allerheiligen")
WAPENSTILSTAND = _public(aa.ARMISTICE_DAY, "Wapenstilstand")
KERSTMIS = _public(aa.CHRISTMAS_DAY, "Kerstmis")

HOLIDAYS = (
    NIEUWJAAR,
    PAASMAANDAG,
    DAG_VAN_DE_ARBEID,
    ONZE_LIEVE_HEER_HEMELVAART,
    PINKSTERMAANDAG,
    NATIONALE_FEESTDAG,
    ONZE_LIEVE_VROUW_HEMELVAART,
    ALLERHEILIGEN,
    WAPENSTILSTAND,
    KERSTMIS,
)
"""The standard national holidays."""