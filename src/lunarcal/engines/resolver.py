from __future__ import annotations

from typing import Tuple

from .tables import LEAP_MONTH_LABEL, MONTH_NAMES, ZODIAC


def zodiac_name(cyclic_year: int) -> str:
    # Cyclic year 1 is the Rat; the -1 offset is pinned.
    return ZODIAC[(cyclic_year - 1) % 12]


def month_label(month: int) -> str:
    """Month name for 1..12; any other value is a leap month."""
    if 1 <= month <= 12:
        return MONTH_NAMES[month - 1]
    return LEAP_MONTH_LABEL


def resolve(cyclic_year: int, month: int) -> Tuple[str, str]:
    return zodiac_name(cyclic_year), month_label(month)
