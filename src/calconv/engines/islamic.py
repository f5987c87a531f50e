"""
calconv.engines.islamic
-----------------------
Arithmetic Islamic calendar: 30-year cycle of 11 leap years, alternating
30/29-day months, Dhu al-Hijjah gains a day in leap years.
"""

from __future__ import annotations

from typing import Optional

from ..core.arith import count_while, floor_div, modulus
from ..core.types import Islamic
from .names import ISLAMIC_MONTH_NAMES

# Absolute date of the day before 1 Muharram 1 AH (July 16, 622 Julian).
ISLAMIC_EPOCH = 227014


def islamic_leap_year(year: int) -> bool:
    return modulus(14 + 11 * year, 30) < 11


def last_day_of_islamic_month(month: int, year: int) -> int:
    if modulus(month, 2) == 1 or (month == 12 and islamic_leap_year(year)):
        return 30
    return 29


def absolute_from_islamic(d: Islamic) -> int:
    return (
        d.day
        + 29 * (d.month - 1)
        + floor_div(d.month, 2)
        + (d.year - 1) * 354
        + floor_div(3 + 11 * d.year, 30)
        + ISLAMIC_EPOCH
    )


def islamic_from_absolute(rd: int) -> Optional[Islamic]:
    """Islamic date of rd, or None for dates before the Islamic epoch."""
    if rd <= ISLAMIC_EPOCH:
        return None
    approx = floor_div(rd - ISLAMIC_EPOCH, 355)
    year = approx + count_while(approx, lambda y: rd >= absolute_from_islamic(Islamic(y + 1, 1, 1)))
    month = 1 + count_while(
        1,
        lambda m: rd > absolute_from_islamic(Islamic(year, m, last_day_of_islamic_month(m, year))),
    )
    day = rd - (absolute_from_islamic(Islamic(year, month, 1)) - 1)
    return Islamic(year, month, day)


def format_islamic(d: Islamic) -> str:
    return f"{d.day} {ISLAMIC_MONTH_NAMES[d.month - 1]} {d.year}"
