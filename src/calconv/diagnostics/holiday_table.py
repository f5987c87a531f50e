from __future__ import annotations

import argparse
from datetime import date
from typing import List, Optional

import calconv
from calconv.core.time import from_rd


DEFAULT_HOLIDAYS: List[str] = [
    "easter",
    "passover",
    "yom_kippur",
    "mulad_al_nabi",
    "eastern_orthodox_christmas",
]


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def parse_holidays(arg: str) -> List[str]:
    """
    Parse holiday list from CLI.
    Example:
      --holidays "easter,passover,yom_kippur"
    """
    return [x.strip() for x in arg.split(",") if x.strip()]


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a table of holiday dates for a range of Gregorian years."
    )
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument(
        "--holidays",
        type=str,
        default="",
        help='Comma list like "easter,passover" (default: movable feasts from each tradition).',
    )
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in table columns (default: mmdd).",
    )
    p.add_argument(
        "--list-month",
        type=int,
        default=4,
        help="After the table, list all occurrences that fall in this Gregorian month (default: 4=April).",
    )
    args = p.parse_args(argv)

    names = parse_holidays(args.holidays) if args.holidays else DEFAULT_HOLIDAYS

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y0 < 1:
        raise SystemExit("--from-year must be >= 1")
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    # table header
    headers = ["Year"] + names
    colw = [5] + [max(11, len(h)) for h in headers[1:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    hits: list[tuple[date, int, str]] = []  # (date, year, holiday)

    for Y in range(Y0, Y1 + 1):
        row = [str(Y).ljust(colw[0])]
        for name, w in zip(names, colw[1:]):
            days = [from_rd(rd) for rd in calconv.holiday(name, Y)]
            cell = "/".join(fmt(d) for d in days) if days else "-"
            row.append(cell.ljust(w))
            hits.extend((d, Y, name) for d in days if d.month == args.list_month)
        print("  ".join(row))

    print(f"\nHoliday occurrences in month={args.list_month:02d}:")
    if not hits:
        print("(none)")
        return 0

    hits.sort()
    for d, Y, name in hits:
        print(f"{d.isoformat()}  {name}  (Y={Y})")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
