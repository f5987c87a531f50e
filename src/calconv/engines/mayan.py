"""
calconv.engines.mayan
---------------------
Mayan long count, haab and tzolkin.

The long count is a mixed-radix day count (144000/7200/360/20/1). The haab
(365 days) and tzolkin (260 days) are cycles without a year: they can be
computed from an absolute date, but only located again relative to a known
date (the *_on_or_before helpers).

All functions take the correlation between long count 0.0.0.0.0 and absolute
date 0 as a keyword, since the correct value is historically disputed.
"""

from __future__ import annotations

from typing import Optional

from ..core.arith import amod, floor_div, modulus
from ..core.types import MayanHaab, MayanLongCount, MayanTzolkin
from .names import MAYAN_HAAB_MONTH_NAMES, MAYAN_TZOLKIN_NAMES

# Days from long count 0.0.0.0.0 to absolute date 0.
# Goodman-Martinez-Thompson, as given by Reingold & Dershowitz (2018).
MAYAN_CORRELATION = 1137142
# Alternatives from Reingold, Dershowitz & Clamen (1993).
GMT_CORRELATION_1993 = 1137140
SPINDEN_CORRELATION = 1232041

HAAB_CYCLE = 365
TZOLKIN_CYCLE = 260
CALENDAR_ROUND = 18980  # lcm(365, 260)

MAYAN_HAAB_AT_EPOCH = MayanHaab(day=8, month=18)
MAYAN_TZOLKIN_AT_EPOCH = MayanTzolkin(number=4, name=20)


def absolute_from_mayan_long_count(d: MayanLongCount, *, correlation: int = MAYAN_CORRELATION) -> int:
    return d.baktun * 144000 + d.katun * 7200 + d.tun * 360 + d.uinal * 20 + d.kin - correlation


def mayan_long_count_from_absolute(rd: int, *, correlation: int = MAYAN_CORRELATION) -> MayanLongCount:
    long_count = rd + correlation
    baktun, day_of_baktun = floor_div(long_count, 144000), modulus(long_count, 144000)
    katun, day_of_katun = floor_div(day_of_baktun, 7200), modulus(day_of_baktun, 7200)
    tun, day_of_tun = floor_div(day_of_katun, 360), modulus(day_of_katun, 360)
    uinal, kin = floor_div(day_of_tun, 20), modulus(day_of_tun, 20)
    return MayanLongCount(baktun, katun, tun, uinal, kin)


# ---------------------------------------------------------
# Haab
# ---------------------------------------------------------

def mayan_haab_from_absolute(rd: int, *, correlation: int = MAYAN_CORRELATION) -> MayanHaab:
    long_count = rd + correlation
    day_of_haab = modulus(
        long_count + MAYAN_HAAB_AT_EPOCH.day + 20 * (MAYAN_HAAB_AT_EPOCH.month - 1),
        HAAB_CYCLE,
    )
    return MayanHaab(day=modulus(day_of_haab, 20), month=floor_div(day_of_haab, 20) + 1)


def mayan_haab_difference(d1: MayanHaab, d2: MayanHaab) -> int:
    """Days from haab date d1 forward to the next haab date d2 (0..364)."""
    return modulus(20 * (d2.month - d1.month) + (d2.day - d1.day), HAAB_CYCLE)


def mayan_haab_on_or_before(d: MayanHaab, rd: int, *, correlation: int = MAYAN_CORRELATION) -> int:
    """Latest absolute date on or before rd whose haab date is d."""
    offset = mayan_haab_difference(mayan_haab_from_absolute(0, correlation=correlation), d)
    return rd - modulus(rd - offset, HAAB_CYCLE)


# ---------------------------------------------------------
# Tzolkin
# ---------------------------------------------------------

def mayan_tzolkin_from_absolute(rd: int, *, correlation: int = MAYAN_CORRELATION) -> MayanTzolkin:
    long_count = rd + correlation
    return MayanTzolkin(
        number=amod(long_count + MAYAN_TZOLKIN_AT_EPOCH.number, 13),
        name=amod(long_count + MAYAN_TZOLKIN_AT_EPOCH.name, 20),
    )


def mayan_tzolkin_difference(d1: MayanTzolkin, d2: MayanTzolkin) -> int:
    """Days from tzolkin date d1 forward to the next tzolkin date d2 (0..259)."""
    number_difference = d2.number - d1.number
    name_difference = d2.name - d1.name
    return modulus(
        number_difference + 13 * modulus(3 * (number_difference - name_difference), 20),
        TZOLKIN_CYCLE,
    )


def mayan_tzolkin_on_or_before(d: MayanTzolkin, rd: int, *, correlation: int = MAYAN_CORRELATION) -> int:
    """Latest absolute date on or before rd whose tzolkin date is d."""
    offset = mayan_tzolkin_difference(mayan_tzolkin_from_absolute(0, correlation=correlation), d)
    return rd - modulus(rd - offset, TZOLKIN_CYCLE)


# ---------------------------------------------------------
# Calendar round
# ---------------------------------------------------------

def mayan_haab_tzolkin_on_or_before(
    dh: MayanHaab,
    dt: MayanTzolkin,
    rd: int,
    *,
    correlation: int = MAYAN_CORRELATION,
) -> Optional[int]:
    """
    Latest absolute date on or before rd with haab date dh and tzolkin date dt,
    or None if no day of the calendar round carries that pair.
    """
    haab_difference = mayan_haab_difference(mayan_haab_from_absolute(0, correlation=correlation), dh)
    tzolkin_difference = mayan_tzolkin_difference(mayan_tzolkin_from_absolute(0, correlation=correlation), dt)
    difference = tzolkin_difference - haab_difference
    # 365 and 260 share the factor 5: the two offsets must agree mod 5.
    if modulus(difference, 5) != 0:
        return None
    return rd - modulus(rd - (haab_difference + HAAB_CYCLE * difference), CALENDAR_ROUND)


def format_mayan_long_count(d: MayanLongCount) -> str:
    return f"{d.baktun}.{d.katun}.{d.tun}.{d.uinal}.{d.kin}"


def format_mayan_haab(d: MayanHaab) -> str:
    return f"{d.day} {MAYAN_HAAB_MONTH_NAMES[d.month - 1]}"


def format_mayan_tzolkin(d: MayanTzolkin) -> str:
    return f"{d.number} {MAYAN_TZOLKIN_NAMES[d.name - 1]}"
