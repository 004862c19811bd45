from __future__ import annotations

from .tables import (
    DAY_PREFIX_INITIAL,
    DAY_PREFIX_TEN,
    DAY_PREFIX_TWENTY,
    DAY_TEN,
    DAY_THIRTY,
    DAY_TWENTY,
    NUMERALS,
)


def day_label(day: int, month_name: str) -> str:
    """
    Traditional name of a lunar day-of-month.

    Day 1 carries the month's name; 10, 20 and 30 have fixed names; every
    other day is a decade prefix followed by a numeral.
    """
    if not 1 <= day <= 30:
        raise ValueError(f"lunar day must be in 1..30, got {day}")

    if day == 1:
        return month_name
    if day == 10:
        return DAY_TEN
    if day == 20:
        return DAY_TWENTY
    if day == 30:
        return DAY_THIRTY
    if day < 11:
        return DAY_PREFIX_INITIAL + NUMERALS[day]
    if day < 20:
        return DAY_PREFIX_TEN + NUMERALS[day - 10]
    return DAY_PREFIX_TWENTY + NUMERALS[day - 20]
