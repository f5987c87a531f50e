"""
Jewish holidays and anniversaries.

Gregorian year g overlaps Hebrew years g + 3760 (from Tishri to Elul,
spring) and g + 3761 (from Tishri, autumn).
"""

from __future__ import annotations

from ..core.arith import modulus
from ..core.types import Hebrew
from ..engines.hebrew import (
    HESHVAN,
    KISLEV,
    NISAN,
    SHEVAT,
    TEVETH,
    TISHRI,
    ADAR,
    ADAR_II,
    absolute_from_hebrew,
    hebrew_leap_year,
    last_month_of_hebrew_year,
    long_heshvan,
    short_kislev,
)
from .registry import register_holiday

AV = 5
HEBREW_YEAR_OFFSET = 3760


def yom_kippur(g_year: int) -> int:
    return absolute_from_hebrew(Hebrew(g_year + HEBREW_YEAR_OFFSET + 1, TISHRI, 10))


def passover(g_year: int) -> int:
    return absolute_from_hebrew(Hebrew(g_year + HEBREW_YEAR_OFFSET, NISAN, 15))


def purim(g_year: int) -> int:
    """14 Adar, or 14 Adar II in a leap year."""
    h_year = g_year + HEBREW_YEAR_OFFSET
    return absolute_from_hebrew(Hebrew(h_year, last_month_of_hebrew_year(h_year), 14))


def ta_anit_esther(g_year: int) -> int:
    """Fast of Esther: the day before Purim, moved back to Thursday if Purim is a Sunday."""
    purim_date = purim(g_year)
    if modulus(purim_date, 7) == 0:
        return purim_date - 3
    return purim_date - 1


def tisha_b_av(g_year: int) -> int:
    """9 Av, postponed to Sunday when it falls on the Sabbath."""
    ninth_of_av = absolute_from_hebrew(Hebrew(g_year + HEBREW_YEAR_OFFSET, AV, 9))
    if modulus(ninth_of_av, 7) == 6:
        return ninth_of_av + 1
    return ninth_of_av


def hebrew_birthday(birthdate: Hebrew, h_year: int) -> int:
    """Anniversary of a Hebrew birth date in Hebrew year h_year."""
    if birthdate.month == last_month_of_hebrew_year(birthdate.year):
        # Born in Adar (or Adar II): celebrate in the last month of h_year.
        return absolute_from_hebrew(Hebrew(h_year, last_month_of_hebrew_year(h_year), birthdate.day))
    return absolute_from_hebrew(Hebrew(h_year, birthdate.month, birthdate.day))


def yahrzeit(death_date: Hebrew, h_year: int) -> int:
    """Anniversary of a Hebrew death date in Hebrew year h_year."""
    year, month, day = death_date.year, death_date.month, death_date.day
    if month == HESHVAN and day == 30 and not long_heshvan(year + 1):
        # Heshvan 30 with a short Heshvan the next year: the last day of Heshvan.
        return absolute_from_hebrew(Hebrew(h_year, KISLEV, 1)) - 1
    if month == KISLEV and day == 30 and short_kislev(year + 1):
        return absolute_from_hebrew(Hebrew(h_year, TEVETH, 1)) - 1
    if month == ADAR_II:
        return absolute_from_hebrew(Hebrew(h_year, last_month_of_hebrew_year(h_year), day))
    if month == ADAR and day == 30 and not hebrew_leap_year(h_year):
        # 30 Adar I has no counterpart in a common year: use 30 Shevat.
        return absolute_from_hebrew(Hebrew(h_year, SHEVAT, 30))
    return absolute_from_hebrew(Hebrew(h_year, month, day))


register_holiday("yom_kippur", yom_kippur)
register_holiday("passover", passover)
register_holiday("purim", purim)
register_holiday("ta_anit_esther", ta_anit_esther)
register_holiday("tisha_b_av", tisha_b_av)
