"""
calconv.engines.gregorian
-------------------------
Proleptic Gregorian calendar. Absolute date 1 is Monday, January 1, 1 (Gregorian).
"""

from __future__ import annotations

from typing import Tuple

from ..core.arith import count_while, floor_div, modulus, summa
from ..core.types import Gregorian
from .names import GREGORIAN_MONTH_NAMES

DAYS_IN_MONTH: Tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def gregorian_leap_year(year: int) -> bool:
    return modulus(year, 4) == 0 and modulus(year, 400) not in (100, 200, 300)


def last_day_of_gregorian_month(month: int, year: int) -> int:
    if month == 2 and gregorian_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month - 1]


def absolute_from_gregorian(d: Gregorian) -> int:
    year = d.year
    prior_months = summa(lambda m: last_day_of_gregorian_month(m, year), 1, lambda m: m < d.month)
    return (
        d.day
        + prior_months
        + 365 * (year - 1)
        + floor_div(year - 1, 4)
        - floor_div(year - 1, 100)
        + floor_div(year - 1, 400)
    )


def gregorian_year_from_absolute(rd: int) -> int:
    """Year containing rd, by peeling off 400-, 100-, 4- and 1-year cycles."""
    d0 = rd - 1
    n400 = floor_div(d0, 146097)
    d1 = modulus(d0, 146097)
    n100 = floor_div(d1, 36524)
    d2 = modulus(d1, 36524)
    n4 = floor_div(d2, 1461)
    d3 = modulus(d2, 1461)
    n1 = floor_div(d3, 365)
    year = 400 * n400 + 100 * n100 + 4 * n4 + n1
    # Day 366 of a leap year (n100 or n1 == 4) still belongs to that year.
    return year if (n100 == 4 or n1 == 4) else year + 1


def gregorian_from_absolute(rd: int) -> Gregorian:
    year = gregorian_year_from_absolute(rd)
    month = 1 + count_while(
        1,
        lambda m: rd > absolute_from_gregorian(Gregorian(year, m, last_day_of_gregorian_month(m, year))),
    )
    day = rd - (absolute_from_gregorian(Gregorian(year, month, 1)) - 1)
    return Gregorian(year, month, day)


def day_of_week_from_absolute(rd: int) -> int:
    """0 = Sunday ... 6 = Saturday."""
    return modulus(rd, 7)


def format_gregorian(d: Gregorian) -> str:
    return f"{d.day} {GREGORIAN_MONTH_NAMES[d.month - 1]} {d.year}"
