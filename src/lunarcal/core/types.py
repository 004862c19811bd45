from __future__ import annotations
import calendar as pycal
from dataclasses import dataclass
from datetime import date
from typing import Optional

@dataclass(frozen=True)
class LunisolarComponents:
    cyclic_year: int  # 1..60, 1 = Wood Rat
    month: int        # 1..12; negative for a leap month
    day: int          # 1..30

    @property
    def is_leap_month(self) -> bool:
        return not (1 <= self.month <= 12)

    @property
    def base_month(self) -> int:
        return abs(self.month)

@dataclass(frozen=True)
class LunarDetail:
    day_label: str
    month_label: str
    zodiac: str
    special: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.day_label

EMPTY_DETAIL = LunarDetail(day_label="", month_label="", zodiac="", special=None)

@dataclass(frozen=True)
class CalendarCell:
    date: date
    day_number: int
    in_displayed_month: bool
    lunar: LunarDetail

@dataclass(frozen=True)
class GridSpec:
    """Layout of a month grid: total cell count and first day of the week."""
    cells: int = 42
    week_start: int = pycal.SUNDAY  # calendar module constant, MONDAY == 0

    def __post_init__(self):
        # six leading days + a 31-day month
        if self.cells % 7 != 0 or self.cells < 37:
            raise ValueError("cells must be a multiple of 7 and hold at least 37 days")
        if not 0 <= self.week_start <= 6:
            raise ValueError("week_start must be a calendar weekday constant (0..6)")
