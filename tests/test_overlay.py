# tests/test_overlay.py

from datetime import date, timedelta

import pytest

from lunarcal.engines.overlay import festival, solar_term, solar_term_day, special_label
from lunarcal.engines.tables import FESTIVALS, SOLAR_TERMS


def test_festival_table():
    assert len(FESTIVALS) == 11
    assert festival(1, 1) == "春节"
    assert festival(8, 15) == "中秋"
    assert festival(12, 30) == "除夕"
    assert festival(3, 3) is None

def test_leap_month_has_no_festival():
    assert festival(-2, 2) is None
    assert festival(-5, 5) is None

def test_festival_table_is_read_only():
    with pytest.raises(TypeError):
        FESTIVALS[(4, 4)] = "x"

def test_solar_term_table_layout():
    assert len(SOLAR_TERMS) == 24
    assert SOLAR_TERMS[0].name == "小寒"
    assert SOLAR_TERMS[5].name == "春分"
    assert SOLAR_TERMS[23].name == "冬至"

@pytest.mark.parametrize(
    "year, idx, day",
    [
        (2024, 6, 4),    # Qingming, 2024-04-04
        (2024, 23, 21),  # winter solstice, 2024-12-21
        (2024, 0, 5),    # Xiaohan, 2024-01-05
        (1999, 5, 21),   # spring equinox, pre-2000 correction applies
        (1999, 0, 6),
        (2000, 2, 3),    # Y = 0
    ],
)
def test_solar_term_day(year, idx, day):
    assert solar_term_day(year, SOLAR_TERMS[idx]) == day

def test_solar_term_lookup():
    assert solar_term(date(2024, 4, 4)) == "清明"
    assert solar_term(date(2024, 12, 21)) == "冬至"
    assert solar_term(date(2024, 4, 5)) is None

def test_two_terms_per_month():
    d = date(2024, 1, 1)
    hits = {}
    while d.year == 2024:
        name = solar_term(d)
        if name is not None:
            hits.setdefault(d.month, []).append(name)
        d += timedelta(days=1)
    assert sorted(hits) == list(range(1, 13))
    assert all(len(v) == 2 for v in hits.values())
    assert [n for m in sorted(hits) for n in hits[m]] == [t.name for t in SOLAR_TERMS]

def test_festival_shadows_solar_term():
    d = date(2024, 4, 4)
    assert solar_term(d) == "清明"
    # same Gregorian day, lunar components forced onto Dragon Boat
    assert special_label(5, 5, d) == "端午"

def test_solar_term_when_no_festival():
    assert special_label(2, 26, date(2024, 4, 4)) == "清明"
    assert special_label(2, 27, date(2024, 4, 5)) is None
