from __future__ import annotations
from datetime import date

from ..engines.names import WEEKDAY_NAMES


def to_rd(d: date) -> int:
    """Absolute date (R.D.) of a datetime.date; R.D. 1 is January 1, 1 (Gregorian)."""
    return d.toordinal()

def from_rd(rd: int) -> date:
    """datetime.date of an absolute date (years 1..9999 only)."""
    return date.fromordinal(rd)

def weekday_name(rd: int) -> str:
    return WEEKDAY_NAMES[rd % 7]
