from datetime import datetime

import pytest

from bizcal import timeutil
from bizcal.calendar import Calendar
from bizcal.holiday import Holiday, Observance
from bizcal.regions import br


def _d(year, md):
    return datetime(year, md[0], md[1], tzinfo=timeutil.DEFAULT_LOC)


def _fixed(holiday, md):
    return [(holiday, year, md, md) for year in range(2015, 2023)]


CASES = (
    _fixed(br.ANO_NOVO, (1, 1))
    + _fixed(br.TIRADENTES, (4, 21))
    + _fixed(br.TRABALHADOR, (5, 1))
    + _fixed(br.INDEPENDENCIA, (9, 7))
    + _fixed(br.NOSSA_SENHORA_APARECIDA, (10, 12))
    + _fixed(br.FINADOS, (11, 2))
    + _fixed(br.REPUBLICA, (11, 15))
    + [
        (br.CORPUS_CHRISTI, 2015, (6, 4), (6, 4)),
        (br.CORPUS_CHRISTI, 2016, (5, 26), (5, 26)),
        (br.CORPUS_CHRISTI, 2017, (6, 15), (6, 15)),
        (br.CORPUS_CHRISTI, 2018, (5, 31), (5, 31)),
        (br.CORPUS_CHRISTI, 2019, (6, 20), (6, 20)),
        (br.CORPUS_CHRISTI, 2020, (6, 11), (6, 11)),
        (br.CORPUS_CHRISTI, 2021, (6, 3), (6, 3)),
        (br.CORPUS_CHRISTI, 2022, (6, 16), (6, 16)),
        (br.SEXTA_FEIRA_SANTA, 2015, (4, 3), (4, 3)),
        (br.SEXTA_FEIRA_SANTA, 2016, (3, 25), (3, 25)),
        (br.SEXTA_FEIRA_SANTA, 2017, (4, 14), (4, 14)),
        (br.SEXTA_FEIRA_SANTA, 2018, (3, 30), (3, 30)),
        (br.SEXTA_FEIRA_SANTA, 2019, (4, 19), (4, 19)),
        (br.SEXTA_FEIRA_SANTA, 2020, (4, 10), (4, 10)),
        (br.SEXTA_FEIRA_SANTA, 2021, (4, 2), (4, 2)),
        (br.SEXTA_FEIRA_SANTA, 2022, (4, 15), (4, 15)),
        (br.CARNAVAL, 2015, (2, 17), (2, 17)),
        (br.CARNAVAL, 2016, (2, 9), (2, 9)),
        (br.CARNAVAL, 2017, (2, 28), (2, 28)),
        (br.CARNAVAL, 2018, (2, 13), (2, 13)),
        (br.CARNAVAL, 2019, (3, 5), (3, 5)),
        (br.CARNAVAL, 2020, (2, 25), (2, 25)),
        (br.CARNAVAL, 2021, (2, 16), (2, 16)),
        (br.CARNAVAL, 2022, (3, 1), (3, 1)),
        (br.CARNAVAL, 2023, (2, 21), (2, 21)),
    ]
    + _fixed(br.NATAL, (12, 25))
)


@pytest.mark.parametrize("holiday, year, want_act, want_obs", CASES)
def test_holidays(holiday, year, want_act, want_obs):
    actual, observed = Holiday.calc(holiday, year)
    assert actual == _d(year, want_act)
    assert observed == _d(year, want_obs)


def test_names_and_observances():
    assert br.ANO_NOVO.name == "Ano Novo"
    assert br.ANO_NOVO.observance is Observance.PUBLIC
    assert br.TIRADENTES.observance is Observance.UNKNOWN
    assert br.NATAL.month == 12 and br.NATAL.day == 25
    assert Holiday.calc(br.NATAL, 2020) == (_d(2020, (12, 25)), _d(2020, (12, 25)))


def test_holiday_list():
    assert len(br.HOLIDAYS) == 11
    assert br.HOLIDAYS[0] is br.ANO_NOVO
    assert br.HOLIDAYS[-1] is br.NATAL
    cal = Calendar(holidays=list(br.HOLIDAYS))
    assert cal.is_holiday(datetime(2020, 12, 25, 9, tzinfo=timeutil.DEFAULT_LOC)) == (
        True,
        True,
        br.NATAL,
    )


def test_calendar_lookup():
    cal = Calendar(holidays=list(br.HOLIDAYS))
    match = cal.is_holiday(datetime(2022, 3, 1, 9, tzinfo=timeutil.DEFAULT_LOC))
    assert match == (True, True, br.CARNAVAL)
    assert cal.is_holiday(datetime(2022, 3, 2, 9, tzinfo=timeutil.DEFAULT_LOC)) == (
        False,
        False,
        None,
    )