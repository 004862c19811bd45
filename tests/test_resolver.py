# tests/test_resolver.py

import pytest

from lunarcal.engines.day_names import day_label
from lunarcal.engines.resolver import month_label, resolve, zodiac_name
from lunarcal.engines.tables import LEAP_MONTH_LABEL, MONTH_NAMES, ZODIAC


def test_cyclic_year_one_is_rat():
    assert zodiac_name(1) == "鼠"
    assert zodiac_name(12) == "猪"
    assert zodiac_name(13) == "鼠"

def test_known_snake_year():
    # 2025 (Yi-Si) is year 42 of the cycle
    assert zodiac_name(42) == "蛇"

def test_zodiac_period_is_twelve():
    for cy in range(1, 121):
        assert zodiac_name(cy) == zodiac_name(cy + 12)
    assert {zodiac_name(cy) for cy in range(1, 13)} == set(ZODIAC)

@pytest.mark.parametrize("month", range(1, 13))
def test_regular_month_labels(month):
    assert month_label(month) == MONTH_NAMES[month - 1]

@pytest.mark.parametrize("month", [-12, -2, 0, 13, 99])
def test_out_of_table_month_is_leap(month):
    assert month_label(month) == LEAP_MONTH_LABEL

def test_resolve_pairs_zodiac_and_month():
    assert resolve(42, 11) == ("蛇", "冬月")
    assert resolve(40, -2) == ("兔", "闰月")


@pytest.mark.parametrize(
    "day, expected",
    [
        (2, "初二"),
        (9, "初九"),
        (10, "初十"),
        (11, "十一"),
        (15, "十五"),
        (19, "十九"),
        (20, "二十"),
        (21, "廿一"),
        (29, "廿九"),
        (30, "三十"),
    ],
)
def test_day_label_boundaries(day, expected):
    assert day_label(day, "正月") == expected

def test_first_day_is_month_name():
    assert day_label(1, "腊月") == "腊月"
    assert day_label(1, LEAP_MONTH_LABEL) == LEAP_MONTH_LABEL

def test_day_labels_never_empty():
    labels = [day_label(d, "正月") for d in range(1, 31)]
    assert all(labels)
    # days 2..30 are all distinct
    assert len(set(labels[1:])) == 29

@pytest.mark.parametrize("day", [0, -1, 31])
def test_day_out_of_range_is_caller_error(day):
    with pytest.raises(ValueError):
        day_label(day, "正月")
