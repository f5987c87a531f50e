"""
calconv.engines.hebrew
----------------------
Arithmetic Hebrew calendar.

Months are numbered from Nisan (1); the year begins with Tishri (7). Leap
years follow the 19-year Metonic cycle and add Adar II (13). New year is
fixed by the mean conjunction ("molad") of Tishri, counted in days, hours and
parts (1080 parts to the hour), and then postponed by the dehiyyot.
"""

from __future__ import annotations

from ..core.arith import count_while, floor_div, modulus, summa
from ..core.types import Hebrew
from .names import HEBREW_LEAP_ADAR, HEBREW_MONTH_NAMES

# Absolute date of the Sunday before the Hebrew epoch (elapsed day 0).
HEBREW_EPOCH_OFFSET = -1373429

NISAN = 1
TISHRI = 7
HESHVAN = 8
KISLEV = 9
TEVETH = 10
SHEVAT = 11
ADAR = 12
ADAR_II = 13

PARTS_PER_HOUR = 1080


def hebrew_leap_year(year: int) -> bool:
    return modulus(7 * year + 1, 19) < 7


def last_month_of_hebrew_year(year: int) -> int:
    return ADAR_II if hebrew_leap_year(year) else ADAR


def hebrew_calendar_elapsed_days(year: int) -> int:
    """
    Days from the Sunday before the epoch to Rosh Hashanah of year.
    """
    months_elapsed = (
        235 * floor_div(year - 1, 19)
        + 12 * modulus(year - 1, 19)
        + floor_div(7 * modulus(year - 1, 19) + 1, 19)
    )
    # Molad of Tishri: 793 parts per month past the 29d 12h of a mean month,
    # counted from the molad of the epoch (day 1, 5h 204p).
    parts_elapsed = 204 + 793 * modulus(months_elapsed, PARTS_PER_HOUR)
    hours_elapsed = (
        5
        + 12 * months_elapsed
        + 793 * floor_div(months_elapsed, PARTS_PER_HOUR)
        + floor_div(parts_elapsed, PARTS_PER_HOUR)
    )
    day = 1 + 29 * months_elapsed + floor_div(hours_elapsed, 24)
    parts = PARTS_PER_HOUR * modulus(hours_elapsed, 24) + modulus(parts_elapsed, PARTS_PER_HOUR)

    if (
        parts >= 18 * PARTS_PER_HOUR  # molad at or after noon (day starts 6pm)
        or (modulus(day, 7) == 2 and parts >= 9924 and not hebrew_leap_year(year))
        or (modulus(day, 7) == 1 and parts >= 16789 and hebrew_leap_year(year - 1))
    ):
        day += 1

    # Rosh Hashanah never falls on Sunday, Wednesday or Friday.
    if modulus(day, 7) in (0, 3, 5):
        day += 1
    return day


def days_in_hebrew_year(year: int) -> int:
    return hebrew_calendar_elapsed_days(year + 1) - hebrew_calendar_elapsed_days(year)


def long_heshvan(year: int) -> bool:
    return modulus(days_in_hebrew_year(year), 10) == 5


def short_kislev(year: int) -> bool:
    return modulus(days_in_hebrew_year(year), 10) == 3


def last_day_of_hebrew_month(month: int, year: int) -> int:
    if (
        month in (2, 4, 6, TEVETH, ADAR_II)
        or (month == ADAR and not hebrew_leap_year(year))
        or (month == HESHVAN and not long_heshvan(year))
        or (month == KISLEV and short_kislev(year))
    ):
        return 29
    return 30


def absolute_from_hebrew(d: Hebrew) -> int:
    year = d.year

    def month_length(m: int) -> int:
        return last_day_of_hebrew_month(m, year)

    if d.month < TISHRI:
        # Tishri .. end of year, then Nisan .. the month before d.month
        last = last_month_of_hebrew_year(year)
        prior = summa(month_length, TISHRI, lambda m: m <= last) + summa(month_length, NISAN, lambda m: m < d.month)
    else:
        prior = summa(month_length, TISHRI, lambda m: m < d.month)
    return d.day + prior + hebrew_calendar_elapsed_days(year) + HEBREW_EPOCH_OFFSET


def hebrew_from_absolute(rd: int) -> Hebrew:
    days = rd - HEBREW_EPOCH_OFFSET
    # The search only moves forward: approx must not exceed the true year.
    approx = floor_div(days, 366) if days >= 0 else floor_div(days, 365) - 1
    year = approx + count_while(approx, lambda y: rd >= absolute_from_hebrew(Hebrew(y + 1, TISHRI, 1)))
    start = TISHRI if rd < absolute_from_hebrew(Hebrew(year, NISAN, 1)) else NISAN
    month = start + count_while(
        start,
        lambda m: rd > absolute_from_hebrew(Hebrew(year, m, last_day_of_hebrew_month(m, year))),
    )
    day = rd - (absolute_from_hebrew(Hebrew(year, month, 1)) - 1)
    return Hebrew(year, month, day)


def hebrew_month_name(month: int, year: int) -> str:
    if month == ADAR and hebrew_leap_year(year):
        return HEBREW_LEAP_ADAR
    return HEBREW_MONTH_NAMES[month - 1]


def format_hebrew(d: Hebrew) -> str:
    return f"{d.day} {hebrew_month_name(d.month, d.year)} {d.year}"
