from __future__ import annotations

import argparse
from datetime import date
import sys
import re
import importlib


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    try:
        y, m, d = map(int, s.split("-"))
        return date(y, m, d)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid date '{s}' (expected YYYY-MM-DD)") from e


def _run_tool(modpath: str, argv: list[str]) -> int:
    """Run a diagnostics module's main(argv); tools are imported only when asked for."""
    tool = importlib.import_module(modpath)
    return int(tool.main(argv) or 0)


def format_detail(d: date, info) -> str:
    if info.is_empty:
        return f"{d.isoformat()}  (no lunar date)"
    line = f"{d.isoformat()}  {info.zodiac}年 {info.month_label} {info.day_label}"
    if info.special:
        line += f"  [{info.special}]"
    return line


def cmd_day(argv: list[str]) -> int:
    import lunarcal

    p = argparse.ArgumentParser(prog="lunarcal day", description="Gregorian -> lunar day label")
    p.add_argument("date", type=_parse_ymd, help="YYYY-MM-DD")
    p.add_argument("--backend", default="lunar_python", choices=lunarcal.list_backends())
    p.add_argument("--raw", action="store_true", help="also print the raw lunisolar components")
    args = p.parse_args(argv)

    info = lunarcal.convert(args.date, backend=args.backend)
    print(format_detail(args.date, info))
    if args.raw and not info.is_empty:
        print(lunarcal.lunisolar_components(args.date, backend=args.backend))
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `lunarcal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="lunarcal", description="Lunisolar calendar toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> lunar day label")
    sub.add_parser("month", help="Print a Gregorian month grid with lunar labels")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["solar-terms"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "month":
        return _run_tool("lunarcal.diagnostics.pretty_month", rest)

    if args.cmd == "diag":
        tool_map = {
            "solar-terms": "lunarcal.diagnostics.solar_term_drift",
        }
        return _run_tool(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
