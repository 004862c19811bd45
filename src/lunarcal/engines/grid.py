"""
lunarcal.engines.grid
---------------------
Fixed-size month grid: trailing days of the previous month, the whole
displayed month, then leading days of the next month up to spec.cells.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Callable, List, Tuple

from ..core.errors import GridRangeError
from ..core.time import days_in_month, first_of_month, weekday_offset
from ..core.types import CalendarCell, GridSpec, LunarDetail

Converter = Callable[[date], LunarDetail]


def _cell(d: date, in_month: bool, convert: Converter) -> CalendarCell:
    return CalendarCell(date=d, day_number=d.day, in_displayed_month=in_month, lunar=convert(d))


def month_grid(anchor: date, convert: Converter, spec: GridSpec = GridSpec()) -> Tuple[CalendarCell, ...]:
    """
    Cells for the month containing anchor.

    Raises GridRangeError when the padding would run past date.min or
    date.max (January of year 1, December of year 9999).
    """
    first = first_of_month(anchor)
    n_days = days_in_month(first.year, first.month)
    prefix = weekday_offset(first, spec.week_start)

    start = first.toordinal() - prefix
    if start < date.min.toordinal() or start + spec.cells - 1 > date.max.toordinal():
        raise GridRangeError(
            f"grid for {first.year:04d}-{first.month:02d} needs days outside {date.min}..{date.max}"
        )

    cells: List[CalendarCell] = []

    # previous month, oldest first
    for i in range(prefix, 0, -1):
        cells.append(_cell(first - timedelta(days=i), False, convert))

    for i in range(n_days):
        cells.append(_cell(first + timedelta(days=i), True, convert))

    remaining = spec.cells - len(cells)
    next_first = first + timedelta(days=n_days)
    for i in range(max(remaining, 0)):
        cells.append(_cell(next_first + timedelta(days=i), False, convert))

    return tuple(cells)


def weeks(grid: Tuple[CalendarCell, ...]) -> List[Tuple[CalendarCell, ...]]:
    """Split a grid into rows of seven."""
    return [grid[i : i + 7] for i in range(0, len(grid), 7)]


def split_counts(grid: Tuple[CalendarCell, ...]) -> Tuple[int, int, int]:
    """(prefix, displayed, suffix) cell counts of a grid."""
    inside = [i for i, c in enumerate(grid) if c.in_displayed_month]
    if not inside:
        return len(grid), 0, 0
    return inside[0], len(inside), len(grid) - inside[-1] - 1
