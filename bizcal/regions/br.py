"""Holiday definitions for Brazil."""

from __future__ import annotations

from bizcal.holiday import Holiday, Observance, calc_day_of_month, calc_easter_offset
from bizcal.regions import aa


def _public(base: Holiday, name: str) -> Holiday:
    return base.clone(Holiday(name=name, observance=Observance.PUBLIC))


ANO_NOVO = _public(aa.NEW_YEAR, "Ano Novo")
"""New Year's Day on 1 January."""

TIRADENTES = Holiday(name="Tiradentes", month=4, day=21, func=calc_day_of_month)
"""Tiradentes' Day on 21 April."""

TRABALHADOR = _public(aa.WORKERS_DAY, "Dia do Trabalhador")
"""Labour Day on 1 May."""

INDEPENDENCIA = Holiday(
    name="Independência do Brasil", month=9, day=7, func=calc_day_of_month
)
"""Independence Day on 7 September."""

NOSSA_SENHORA_APARECIDA = Holiday(
    name="Nossa Senhora Aparecida", month=10, day=12, func=calc_day_of_month
)
"""Our Lady of Aparecida on 12 October."""

FINADOS = Holiday(name="Finados", month=11, day=2, func=calc_day_of_month)
"""Day of the Dead on 2 November."""

REPUBLICA = Holiday(
    name="Proclamação da República", month=11, day=15, func=calc_day_of_month
)
"""Proclamation of the Republic on 15 November."""

CORPUS_CHRISTI = _public(aa.CORPUS_CHRISTI, "Corpus Christi")
"""Corpus Christi, 60 days after Easter."""

SEXTA_FEIRA_SANTA = _public(aa.GOOD_FRIDAY, "Sexta-feira Santa")
"""Good Friday, two days before Easter."""

CARNAVAL = Holiday(
    name="Carnaval",
    observance=Observance.PUBLIC,
    offset=-47,
    func=calc_easter_offset,
)
"""Carnival, 47 days before Easter."""

NATAL = _public(aa.CHRISTMAS_DAY, "Natal")
"""Christmas Day on 25 December."""

HOLIDAYS = (
    ANO_NOVO,
    TIRADENTES,
    TRABALHADOR,
    INDEPENDENCIA,
    NOSSA_SENHORA_APARECIDA,
    FINADOS,
    REPUBLICA,
    CORPUS_CHRISTI,
    SEXTA_FEIRA_SANTA,
    CARNAVAL,
    NATAL,
)
"""The standard national holidays."""