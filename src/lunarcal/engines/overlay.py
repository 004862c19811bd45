"""
lunarcal.engines.overlay
------------------------
Festival and solar-term labels. A day carries at most one label and a
festival always shadows a solar term falling on the same day.
"""

from __future__ import annotations

import math
from datetime import date
from typing import Optional

from .tables import FESTIVALS, SOLAR_TERM_D, SOLAR_TERMS, SolarTerm


def festival(month: int, day: int) -> Optional[str]:
    """Fixed festival for a lunisolar (month, day); leap months never match."""
    return FESTIVALS.get((month, day))


def solar_term_day(year: int, term: SolarTerm) -> int:
    """
    Approximate Gregorian day-of-month of a term in the given year.

    Closed form: floor(Y*D + C) - floor(Y/4) with Y = year mod 100, plus one
    for years before 2000. Good to about a day; not an ephemeris.
    """
    y = year % 100
    day = math.floor(y * SOLAR_TERM_D + term.c) - math.floor(y / 4)
    if year < 2000:
        day += 1
    return day


def solar_term(d: date) -> Optional[str]:
    i = (d.month - 1) * 2
    for idx in (i, i + 1):
        term = SOLAR_TERMS[idx]
        if d.day == solar_term_day(d.year, term):
            return term.name
    return None


def special_label(month: int, day: int, d: date) -> Optional[str]:
    fest = festival(month, day)
    if fest is not None:
        return fest
    return solar_term(d)
