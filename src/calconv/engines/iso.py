"""
calconv.engines.iso
-------------------
ISO week calendar, an overlay on the Gregorian calendar. Week 1 is the week
(Monday..Sunday) containing January 4; day 1 is Monday, day 7 is Sunday.
"""

from __future__ import annotations

from ..core.arith import modulus
from ..core.types import Gregorian, Iso
from .gregorian import absolute_from_gregorian, gregorian_from_absolute

SUNDAY = 0
MONDAY = 1


def kday_on_or_before(rd: int, k: int) -> int:
    """Absolute date of weekday k (0 = Sunday) in the seven days ending on rd."""
    return rd - modulus(rd - k, 7)


def absolute_from_iso(d: Iso) -> int:
    week1 = kday_on_or_before(absolute_from_gregorian(Gregorian(d.year, 1, 4)), MONDAY)
    return week1 + 7 * (d.week - 1) + (d.day - 1)


def iso_from_absolute(rd: int) -> Iso:
    approx = gregorian_from_absolute(rd - 3).year
    year = approx + 1 if rd >= absolute_from_iso(Iso(approx + 1, 1, 1)) else approx
    week = (rd - absolute_from_iso(Iso(year, 1, 1))) // 7 + 1
    day = modulus(rd, 7) or 7
    return Iso(year, week, day)


def format_iso(d: Iso) -> str:
    return f"{d.year}-W{d.week:02d}-{d.day}"
