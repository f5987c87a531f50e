"""
calconv.engines.hindu
---------------------
Old Hindu (Arya Siddhanta) mean solar and lunisolar calendars.

Both work in real-valued days since the Kali Yuga epoch and use mean motions
only: the sun and moon move uniformly along the sidereal zodiac. Days begin
at sunrise, taken as 6am (a quarter day).

Solar: year = elapsed sidereal years, month = zodiac sign of the sun,
day = day within the solar month.

Lunar: a month runs from new moon to new moon and is named after the sign the
sun enters during it (amanta scheme); if the sun enters no sign the month is
a leap (adhika) month and shares the name of the following month. The day is
the tithi (lunar phase in 12 degree steps) current at sunrise.
"""

from __future__ import annotations

import math
from typing import Optional

from ..core.arith import amod, count_while, modulus
from ..core.types import OldHinduLunar, OldHinduSolar
from .names import HINDU_LUNAR_MONTH_NAMES, HINDU_SOLAR_MONTH_NAMES

SOLAR_SIDEREAL_YEAR = 365.0 + (279457.0 / 1080000.0)
SOLAR_MONTH = SOLAR_SIDEREAL_YEAR / 12.0
LUNAR_SIDEREAL_MONTH = 27.0 + (4644439.0 / 14438334.0)
LUNAR_SYNODIC_MONTH = 29.0 + (7087771.0 / 13358334.0)

# Absolute date of the Kali Yuga epoch is -HINDU_EPOCH_OFFSET
# (February 18, 3102 BCE Julian).
HINDU_EPOCH_OFFSET = 1132959
SUNRISE = 1.0 / 4.0


# ---------------------------------------------------------
# Mean positions
# ---------------------------------------------------------

def solar_longitude(days: float) -> float:
    """Sidereal longitude of the mean sun (degrees) after days since epoch."""
    return modulus(days / SOLAR_SIDEREAL_YEAR, 1.0) * 360.0


def zodiac(days: float) -> int:
    """Zodiac sign (1..12) of the mean sun."""
    return int(math.floor(solar_longitude(days) / 30.0) + 1.0)


def lunar_longitude(days: float) -> float:
    """Sidereal longitude of the mean moon (degrees)."""
    return modulus(days / LUNAR_SIDEREAL_MONTH, 1.0) * 360.0


def lunar_phase(days: float) -> int:
    """Tithi (1..30): elongation of the moon from the sun in 12 degree steps."""
    return int(1.0 + math.floor(modulus(lunar_longitude(days) - solar_longitude(days), 360.0) / 12.0))


def new_moon(days: float) -> float:
    """Moment of the most recent mean new moon."""
    return days - modulus(days, LUNAR_SYNODIC_MONTH)


# ---------------------------------------------------------
# Solar calendar
# ---------------------------------------------------------

def old_hindu_solar_from_absolute(rd: int) -> OldHinduSolar:
    h_date = rd + float(HINDU_EPOCH_OFFSET) + SUNRISE
    year = math.floor(h_date / SOLAR_SIDEREAL_YEAR)
    month = zodiac(h_date)
    day = int(math.floor(modulus(h_date, SOLAR_MONTH)) + 1.0)
    return OldHinduSolar(year, month, day)


def absolute_from_old_hindu_solar(d: OldHinduSolar) -> int:
    return math.floor(
        d.year * SOLAR_SIDEREAL_YEAR
        + (d.month - 1) * SOLAR_MONTH
        + d.day
        - SUNRISE
        - float(HINDU_EPOCH_OFFSET)
    )


# ---------------------------------------------------------
# Lunar calendar
# ---------------------------------------------------------

def old_hindu_lunar_from_absolute(rd: int) -> OldHinduLunar:
    sunrise = (rd + HINDU_EPOCH_OFFSET) + SUNRISE
    last_new_moon = new_moon(sunrise)
    next_new_moon = last_new_moon + LUNAR_SYNODIC_MONTH
    day = lunar_phase(sunrise)
    month = amod(zodiac(last_new_moon) + 1, 12)
    leap_month = zodiac(last_new_moon) == zodiac(next_new_moon)
    # The year is that of the month following a leap month.
    next_month = next_new_moon + (LUNAR_SYNODIC_MONTH if leap_month else 0.0)
    year = math.floor(next_month / SOLAR_SIDEREAL_YEAR)
    return OldHinduLunar(year, month, leap_month, day)


def old_hindu_lunar_precedes(d1: OldHinduLunar, d2: OldHinduLunar) -> bool:
    """Strict order on lunar dates: year, month, leap before regular, day."""
    if d1.year != d2.year:
        return d1.year < d2.year
    if d1.month != d2.month:
        return d1.month < d2.month
    if d1.leap_month != d2.leap_month:
        return d1.leap_month
    return d1.day < d2.day


def absolute_from_old_hindu_lunar(d: OldHinduLunar) -> Optional[int]:
    """
    Absolute date of a lunar date, or None if no day carries that label
    (e.g. a leap flag on a month that is not leap, or a skipped tithi).
    """
    approx = (
        math.floor(d.year * SOLAR_SIDEREAL_YEAR)
        + math.floor((d.month - 2) * LUNAR_SYNODIC_MONTH)
        - HINDU_EPOCH_OFFSET
    )
    candidate = approx + count_while(approx, lambda i: old_hindu_lunar_precedes(old_hindu_lunar_from_absolute(i), d))
    if old_hindu_lunar_from_absolute(candidate) == d:
        return candidate
    return None


def format_old_hindu_solar(d: OldHinduSolar) -> str:
    return f"{d.day} {HINDU_SOLAR_MONTH_NAMES[d.month - 1]} {d.year}"


def format_old_hindu_lunar(d: OldHinduLunar) -> str:
    leap = "Adhika " if d.leap_month else ""
    return f"{d.day} {leap}{HINDU_LUNAR_MONTH_NAMES[d.month - 1]} {d.year}"
