"""
lunarcal.engines.converter
--------------------------
Gregorian date -> LunarDetail. Pure: every call converts afresh.
"""

from __future__ import annotations

import logging
from datetime import date

from ..core.backend import CalendarBackend
from ..core.errors import ConversionError
from ..core.types import EMPTY_DETAIL, LunarDetail, LunisolarComponents
from .day_names import day_label
from .overlay import special_label
from .resolver import resolve

logger = logging.getLogger(__name__)


def detail_from_components(c: LunisolarComponents, d: date) -> LunarDetail:
    zodiac, month_name = resolve(c.cyclic_year, c.month)
    return LunarDetail(
        day_label=day_label(c.day, month_name),
        month_label=month_name,
        zodiac=zodiac,
        special=special_label(c.month, c.day, d),
    )


def convert(d: date, backend: CalendarBackend) -> LunarDetail:
    """Convert d, degrading to EMPTY_DETAIL if the backend cannot."""
    try:
        c = backend.components(d)
    except ConversionError as e:
        logger.debug("no lunisolar components for %s: %s", d, e)
        return EMPTY_DETAIL
    return detail_from_components(c, d)
