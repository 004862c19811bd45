"""
lunarcal.view
-------------
Current-view state for a month calendar: displayed month, selected day and
the grid for the displayed month. All calendar math stays in the engines;
this only decides which anchor to hand them and swaps the grid wholesale.
"""

from __future__ import annotations

import calendar as pycal
from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Tuple

from . import api
from .core.time import add_months, with_year
from .core.types import CalendarCell, GridSpec, LunarDetail


@dataclass(frozen=True)
class ViewPolicy:
    year_min: int = 1900
    year_max: int = 2100
    grid: GridSpec = field(default_factory=GridSpec)
    backend: str = api.DEFAULT_BACKEND

    def __post_init__(self):
        if self.year_min > self.year_max:
            raise ValueError("year_min must not exceed year_max")

    def clamp_year(self, year: int) -> int:
        return max(self.year_min, min(self.year_max, year))


class CalendarView:
    def __init__(self, today: Optional[date] = None, policy: ViewPolicy = ViewPolicy()):
        self.policy = policy
        now = today or date.today()
        self.current = now
        self.selected = now
        self.grid: Tuple[CalendarCell, ...] = ()
        self._regenerate()

    def _regenerate(self) -> None:
        self.grid = api.generate_month_grid(
            self.current, spec=self.policy.grid, backend=self.policy.backend
        )

    def _same_month(self, d: date) -> bool:
        return (d.year, d.month) == (self.current.year, self.current.month)

    @property
    def display_month(self) -> str:
        return pycal.month_name[self.current.month]

    @property
    def display_year(self) -> str:
        return f"{self.current.year:04d}"

    @property
    def selected_detail(self) -> LunarDetail:
        return api.convert(self.selected, backend=self.policy.backend)

    def change_month(self, by: int) -> bool:
        """Move the displayed month; refused (False) outside the year bounds."""
        target = add_months(self.current, by)
        if not self.policy.year_min <= target.year <= self.policy.year_max:
            return False
        self.current = target
        self._regenerate()
        return True

    def select_date(self, d: date) -> None:
        self.selected = d
        if not self._same_month(d):
            self.current = d
            self._regenerate()

    def jump_to_today(self, today: Optional[date] = None) -> None:
        now = today or date.today()
        self.selected = now
        self.current = now
        self._regenerate()

    def set_year(self, year: int) -> None:
        self.current = with_year(self.current, self.policy.clamp_year(year))
        self._regenerate()
