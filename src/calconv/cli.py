from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys
from datetime import date


_DATE_RE = re.compile(r"^-?\d{1,4}-\d{2}-\d{2}$")

log = logging.getLogger(__name__)


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _parse_day(s: str) -> int:
    """YYYY-MM-DD (Gregorian) or a plain integer absolute date."""
    from calconv.core.time import to_rd

    if _DATE_RE.match(s):
        if s.startswith("-"):
            raise SystemExit(f"Negative years are not accepted as YYYY-MM-DD, use an absolute date: {s}")
        try:
            return to_rd(_parse_ymd(s))
        except ValueError as e:
            raise SystemExit(f"Invalid date {s}: {e}")
    try:
        return int(s)
    except ValueError:
        raise SystemExit(f"Expected YYYY-MM-DD or an absolute date, got {s!r}")


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_day(argv: list[str]) -> int:
    import calconv
    from calconv.core.time import weekday_name

    p = argparse.ArgumentParser(prog="calconv day", description="Show one day in every calendar")
    p.add_argument("date", help="YYYY-MM-DD (Gregorian) or an absolute date")
    p.add_argument("--raw", action="store_true", help="print components instead of formatted dates")
    args = p.parse_args(argv)

    rd = _parse_day(args.date)
    print(f"absolute date {rd} ({weekday_name(rd)})")
    for name, d in calconv.day_info(rd).items():
        if d is None:
            shown = "(before epoch)"
        else:
            shown = str(list(d.components)) if args.raw else d.format()
        print(f"  {name:<15} {shown}")
    return 0


def cmd_convert(argv: list[str]) -> int:
    import calconv

    p = argparse.ArgumentParser(prog="calconv convert", description="Convert a date between calendars")
    p.add_argument("calendar", help="source calendar tag (see `calconv calendars`)")
    p.add_argument("components", nargs="+", type=int, help="date components, e.g. year month day")
    p.add_argument("--to", dest="target", default="gregorian", help="target calendar tag")
    args = p.parse_args(argv)

    try:
        src = calconv.Date.of(args.calendar, *args.components)
        log.debug("converting %s to %s", src, args.target)
        out = src.convert_to(args.target)
    except (calconv.CalconvError, ValueError) as e:
        raise SystemExit(e.args[0])
    if out is None:
        print(f"{src.format()} ({args.calendar}) has no {args.target} date")
        return 1
    print(f"{src.format()} ({args.calendar}) = {out.format()} ({args.target})  {list(out.components)}")
    return 0


def cmd_holiday(argv: list[str]) -> int:
    import calconv

    p = argparse.ArgumentParser(prog="calconv holiday", description="Holiday dates in a Gregorian year")
    p.add_argument("name", help="holiday name (see `calconv holidays`)")
    p.add_argument("year", type=int, help="Gregorian year")
    p.add_argument("--calendar", default="gregorian", help="calendar to display the dates in")
    args = p.parse_args(argv)

    try:
        rds = calconv.holiday(args.name, args.year)
    except calconv.UnknownHolidayError as e:
        raise SystemExit(e.args[0])
    if not rds:
        print(f"{args.name}: none in {args.year}")
        return 0
    for rd in rds:
        d = calconv.from_absolute(args.calendar, rd)
        shown = "(before epoch)" if d is None else d.format()
        print(f"{args.name} {args.year}: {shown}  (absolute date {rd})")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shortcut: `calconv YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="calconv", description="Calendar conversion toolkit CLI.")
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Show one day in every calendar")
    sub.add_parser("convert", help="Convert a date between calendars")
    sub.add_parser("holiday", help="Holiday dates in a Gregorian year")
    sub.add_parser("calendars", help="List calendar tags")
    sub.add_parser("holidays", help="List holiday names")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "holiday-table", "holiday-scatter"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "convert":
        return cmd_convert(rest)

    if args.cmd == "holiday":
        return cmd_holiday(rest)

    if args.cmd == "calendars":
        import calconv
        for name in calconv.list_calendars():
            info = calconv.calendar_info(name)
            print(f"{name:<15} {', '.join(info['fields'])}")
        return 0

    if args.cmd == "holidays":
        import calconv
        for name in calconv.list_holidays():
            print(name)
        return 0

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "calconv.diagnostics.round_trip",
            "holiday-table": "calconv.diagnostics.holiday_table",
            "holiday-scatter": "calconv.diagnostics.holiday_scatter",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
