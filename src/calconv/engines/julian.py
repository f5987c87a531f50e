"""
calconv.engines.julian
----------------------
Proleptic Julian calendar. At absolute date 1 the Julian date is January 3, 1.
"""

from __future__ import annotations

from ..core.arith import count_while, floor_div, modulus, summa
from ..core.types import Julian
from .gregorian import DAYS_IN_MONTH
from .names import GREGORIAN_MONTH_NAMES

JULIAN_EPOCH_OFFSET = -2


def julian_leap_year(year: int) -> bool:
    return modulus(year, 4) == 0


def last_day_of_julian_month(month: int, year: int) -> int:
    if month == 2 and julian_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month - 1]


def absolute_from_julian(d: Julian) -> int:
    year = d.year
    prior_months = summa(lambda m: last_day_of_julian_month(m, year), 1, lambda m: m < d.month)
    return d.day + prior_months + 365 * (year - 1) + floor_div(year - 1, 4) + JULIAN_EPOCH_OFFSET


def julian_from_absolute(rd: int) -> Julian:
    # approx must not exceed the true year; 366 overshoots before the epoch.
    days = rd - JULIAN_EPOCH_OFFSET
    approx = floor_div(days, 366) if days >= 0 else floor_div(days, 365) - 1
    year = approx + count_while(approx, lambda y: rd >= absolute_from_julian(Julian(y + 1, 1, 1)))
    month = 1 + count_while(
        1,
        lambda m: rd > absolute_from_julian(Julian(year, m, last_day_of_julian_month(m, year))),
    )
    day = rd - (absolute_from_julian(Julian(year, month, 1)) - 1)
    return Julian(year, month, day)


def format_julian(d: Julian) -> str:
    return f"{d.day} {GREGORIAN_MONTH_NAMES[d.month - 1]} {d.year}"
