"""
calconv.engines.french
----------------------
French Revolutionary calendar (arithmetic form): twelve months of 30 days
followed by five or six sansculottides, treated as a 13th month.
"""

from __future__ import annotations

from typing import Optional

from ..core.arith import count_while, floor_div, modulus
from ..core.types import French
from .names import FRENCH_MONTH_NAMES, SANSCULOTTIDES

# Absolute date of the day before 1 Vendémiaire, an I (September 22, 1792).
FRENCH_EPOCH = 654414

# Leap years fixed by decree before the arithmetic rule took over.
FRENCH_HISTORICAL_LEAP_YEARS = (3, 7, 11, 15, 20)


def french_leap_year(year: int) -> bool:
    return year in FRENCH_HISTORICAL_LEAP_YEARS or (
        year > 20
        and modulus(year, 4) == 0
        and modulus(year, 400) not in (100, 200, 300)
        and modulus(year, 4000) != 0
    )


def french_last_day_of_month(month: int, year: int) -> int:
    if month < 13:
        return 30
    return 6 if french_leap_year(year) else 5


def absolute_from_french(d: French) -> int:
    year = d.year
    if year < 20:
        leap_days = floor_div(year, 4)
    else:
        leap_days = (
            floor_div(year - 1, 4)
            - floor_div(year - 1, 100)
            + floor_div(year - 1, 400)
            - floor_div(year - 1, 4000)
        )
    return FRENCH_EPOCH + 365 * (year - 1) + leap_days + 30 * (d.month - 1) + d.day


def french_from_absolute(rd: int) -> Optional[French]:
    """French date of rd, or None for dates before 1 Vendémiaire an I."""
    if rd <= FRENCH_EPOCH:
        return None
    approx = floor_div(rd - FRENCH_EPOCH, 366)
    year = approx + count_while(approx, lambda y: rd >= absolute_from_french(French(y + 1, 1, 1)))
    month = 1 + count_while(
        1,
        lambda m: rd > absolute_from_french(French(year, m, french_last_day_of_month(m, year))),
    )
    day = rd - (absolute_from_french(French(year, month, 1)) - 1)
    return French(year, month, day)


def format_french(d: French) -> str:
    if d.month == 13:
        return f"{SANSCULOTTIDES[d.day - 1]} {d.year}"
    return f"{d.day} {FRENCH_MONTH_NAMES[d.month - 1]} {d.year}"
