from __future__ import annotations

import argparse
import logging
import random
from datetime import date
from typing import List, Optional

import calconv
from calconv.core.time import to_rd

log = logging.getLogger(__name__)


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def parse_calendars(s: str) -> List[str]:
    # "hebrew,islamic,french" -> ["hebrew", ...]
    return [x.strip() for x in s.split(",") if x.strip()]


def default_calendars() -> List[str]:
    """Every registered calendar that maps back to an absolute date."""
    return [name for name in calconv.list_calendars() if not calconv.calendar_info(name)["cyclical"]]


def roundtrip_test(
    calendar: str,
    N: int,
    start: int,
    end: int,
    seed: int,
    *,
    max_failures: int,
) -> int:
    """
    Absolute date -> calendar -> absolute date over N random days in [start, end].
    Days before the calendar's epoch are skipped.
    """
    rng = random.Random(seed)
    failures = 0
    skipped = 0

    for _ in range(N):
        rd = rng.randint(start, end)
        d = calconv.from_absolute(calendar, rd)
        if d is None:
            skipped += 1
            continue

        back = d.to_absolute()
        if back != rd:
            failures += 1
            print("\nFAIL")
            print("calendar:", calendar)
            print("rd:", rd)
            print("date:", d)
            print("back:", back)
            if failures >= max_failures:
                return failures

    if skipped:
        log.info("%s: skipped %d days outside the calendar's domain", calendar, skipped)
    return failures


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: absolute date -> calendar -> absolute date.")
    p.add_argument("--calendars", type=str, default="",
                   help="Comma-separated calendar list (default: every non-cyclical calendar).")
    p.add_argument("--N", type=int, default=2000, help="Trials per calendar.")
    p.add_argument("--start", type=str, default="1600-01-01", help="Start date YYYY-MM-DD (Gregorian).")
    p.add_argument("--end", type=str, default="2400-12-31", help="End date YYYY-MM-DD (Gregorian).")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per calendar.")
    args = p.parse_args(argv)

    calendars = parse_calendars(args.calendars) if args.calendars else default_calendars()
    start = to_rd(parse_date(args.start))
    end = to_rd(parse_date(args.end))

    if end < start:
        raise SystemExit("--end must be >= --start")

    total_fail = 0
    for cal in calendars:
        print(f"Testing {cal} ...")
        total_fail += roundtrip_test(cal, N=args.N, start=start, end=end, seed=args.seed,
                                     max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
