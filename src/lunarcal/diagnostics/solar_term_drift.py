#!/usr/bin/env python3
"""
Closed-form solar-term days vs. the lunar_python term table.

For each Gregorian year and each of the 24 terms, compare the day the
overlay formula predicts with the day lunar_python places the term on.
"""
from __future__ import annotations

import argparse
import csv
from datetime import date, timedelta
from typing import List, Optional, Tuple

from lunarcal.core.time import days_in_month
from lunarcal.engines.lunar_backend import _need_lunar_python
from lunarcal.engines.overlay import solar_term_day
from lunarcal.engines.tables import SOLAR_TERMS


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "lunarcal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "lunarcal[diagnostics]"') from e


def predicted_date(year: int, idx: int) -> date:
    month = idx // 2 + 1
    day = solar_term_day(year, SOLAR_TERMS[idx])
    # the formula can run past the month end; let timedelta carry it
    return date(year, month, 1) + timedelta(days=day - 1)


def reference_date(lp, year: int, idx: int, window: int = 4) -> Optional[date]:
    """Day lunar_python assigns to the term, searched around its usual month."""
    month = idx // 2 + 1
    name = SOLAR_TERMS[idx].name
    lo = date(year, month, 1) - timedelta(days=window)
    hi = date(year, month, days_in_month(year, month)) + timedelta(days=window)
    d = lo
    while d <= hi:
        if lp.Solar.fromYmd(d.year, d.month, d.day).getLunar().getJieQi() == name:
            return d
        d += timedelta(days=1)
    return None


def build_offsets(start_year: int, end_year: int) -> List[Tuple[int, int, str, Optional[int]]]:
    lp = _need_lunar_python()
    rows = []
    for Y in range(start_year, end_year + 1):
        for idx, term in enumerate(SOLAR_TERMS):
            ref = reference_date(lp, Y, idx)
            off = None if ref is None else (predicted_date(Y, idx) - ref).days
            rows.append((Y, idx, term.name, off))
    return rows


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Offsets of the closed-form solar-term days against lunar_python.")
    p.add_argument("--start-year", type=int, default=1900)
    p.add_argument("--end-year", type=int, default=2100)
    p.add_argument("--out-csv", default=None, help="Write per-term rows to this CSV file")
    p.add_argument("--out-png", default=None, help="Write an offset histogram (needs matplotlib)")
    args = p.parse_args(argv)

    if args.start_year > args.end_year:
        p.error("--start-year must not exceed --end-year")

    np = _need_numpy()
    rows = build_offsets(args.start_year, args.end_year)

    print(f"years {args.start_year}..{args.end_year}")
    print(f"{'idx':>3}  {'term':<4}  {'N':>4}  {'exact':>6}  {'mean':>6}  {'min':>4}  {'max':>4}  {'miss':>4}")
    all_offsets = []
    for idx, term in enumerate(SOLAR_TERMS):
        offs = [r[3] for r in rows if r[1] == idx and r[3] is not None]
        miss = sum(1 for r in rows if r[1] == idx and r[3] is None)
        if not offs:
            print(f"{idx:3d}  {term.name}  {0:4d}  {'-':>6}  {'-':>6}  {'-':>4}  {'-':>4}  {miss:4d}")
            continue
        arr = np.array(offs, dtype=int)
        all_offsets.extend(offs)
        exact = float(np.mean(arr == 0))
        print(
            f"{idx:3d}  {term.name}  {len(arr):4d}  {exact:6.1%}  {float(arr.mean()):+6.2f}"
            f"  {int(arr.min()):+4d}  {int(arr.max()):+4d}  {miss:4d}"
        )

    if all_offsets:
        arr = np.array(all_offsets, dtype=int)
        print()
        print(f"N={len(arr)}  exact={float(np.mean(arr == 0)):.1%}  within1={float(np.mean(np.abs(arr) <= 1)):.1%}")

    if args.out_csv:
        with open(args.out_csv, "w", newline="") as f:
            w = csv.writer(f)
            w.writerow(["year", "idx", "term", "offset_days"])
            w.writerows(rows)
        print(f"Wrote {args.out_csv}")

    if args.out_png and all_offsets:
        plt = _need_matplotlib()
        arr = np.array(all_offsets, dtype=int)
        bins = np.arange(arr.min() - 0.5, arr.max() + 1.5, 1.0)
        plt.figure(figsize=(8, 5))
        plt.hist(arr, bins=bins, alpha=0.7, edgecolor="black")
        plt.xlabel("Predicted - reference [days]")
        plt.ylabel("Count")
        plt.title(f"Solar-term formula offsets {args.start_year}-{args.end_year}")
        plt.grid(True, alpha=0.3)
        plt.tight_layout()
        plt.savefig(args.out_png)
        print(f"Wrote {args.out_png}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
