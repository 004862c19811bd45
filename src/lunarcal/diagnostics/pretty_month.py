from __future__ import annotations

import argparse
import calendar as pycal
from datetime import date
from typing import List, Tuple

import lunarcal
from lunarcal.core.errors import GridRangeError
from lunarcal.core.types import CalendarCell


def dow_header(week_start: int) -> str:
    names = [pycal.day_abbr[(week_start + i) % 7][:2] for i in range(7)]
    return "     ".join(names)


def cell(c: CalendarCell, w: int = 6) -> Tuple[str, str]:
    top = f"{c.day_number:2d}" if c.in_displayed_month else f"({c.day_number})"
    # CJK labels are two columns wide
    bot = (c.lunar.special or c.lunar.day_label)[: w // 2]
    return (top[:w].ljust(w), bot + " " * (w - 2 * len(bot)))


def render(title: str, grid: Tuple[CalendarCell, ...], week_start: int) -> List[str]:
    header = dow_header(week_start)
    lines = [title, header, "-" * len(header)]
    for wk in lunarcal.weeks(grid):
        cs = [cell(c) for c in wk]
        lines.append(" ".join(c[0] for c in cs))
        lines.append(" ".join(c[1] for c in cs))
    return lines


def gregorian_month_calendar(gy: int, gm: int, *, monday: bool = False, backend: str = "lunar_python") -> List[str]:
    week_start = pycal.MONDAY if monday else pycal.SUNDAY
    anchor = date(gy, gm, 1)
    grid = lunarcal.generate_month_grid(anchor, spec=lunarcal.GridSpec(week_start=week_start), backend=backend)
    mid = lunarcal.convert(date(gy, gm, 15), backend=backend)
    title = f"{pycal.month_name[gm]} {gy}   {mid.zodiac}年 {mid.month_label}"
    return render(title, grid, week_start)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Gregorian month grid with lunar day labels (festivals and solar terms preferred)."
    )
    p.add_argument("year", type=int, nargs="?", help="Gregorian year (default: this month)")
    p.add_argument("month", type=int, nargs="?", help="Gregorian month 1..12")
    p.add_argument("--monday", action="store_true", help="Start weeks on Monday instead of Sunday.")
    p.add_argument("--backend", default="lunar_python", choices=lunarcal.list_backends())
    args = p.parse_args(argv)

    if args.year is None or args.month is None:
        today = date.today()
        gy, gm = today.year, today.month
    else:
        gy, gm = args.year, args.month
    if not 1 <= gm <= 12:
        p.error("month must be in 1..12")

    try:
        lines = gregorian_month_calendar(gy, gm, monday=args.monday, backend=args.backend)
    except GridRangeError as e:
        p.error(str(e))
    for line in lines:
        print(line)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
