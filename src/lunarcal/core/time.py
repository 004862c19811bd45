from __future__ import annotations
import calendar as pycal
from datetime import date


def days_in_month(year: int, month: int) -> int:
    return pycal.monthrange(year, month)[1]

def first_of_month(d: date) -> date:
    return d.replace(day=1)

def weekday_offset(d: date, week_start: int = pycal.SUNDAY) -> int:
    """Column of d in a week row starting on week_start (0 = first column)."""
    return (d.weekday() - week_start) % 7

def add_months(d: date, n: int) -> date:
    """Shift d by n months, clamping the day to the target month length."""
    k = d.year * 12 + (d.month - 1) + n
    y, m = divmod(k, 12)
    m += 1
    return date(y, m, min(d.day, days_in_month(y, m)))

def with_year(d: date, year: int) -> date:
    """Same month/day in another year (Feb 29 -> Feb 28 in common years)."""
    return date(year, d.month, min(d.day, days_in_month(year, d.month)))
