"""
Islamic holidays. The Islamic year is about 11 days shorter than the
Gregorian one, so a given Islamic date can occur twice in a Gregorian year.
"""

from __future__ import annotations

from typing import List

from ..core.types import Gregorian, Islamic
from ..engines.gregorian import absolute_from_gregorian
from ..engines.islamic import ISLAMIC_EPOCH, absolute_from_islamic, islamic_from_absolute
from .registry import register_holiday


def islamic_date_in_gregorian_year(month: int, day: int, g_year: int) -> List[int]:
    """Absolute dates of Islamic (month, day) within Gregorian year g_year."""
    jan1 = absolute_from_gregorian(Gregorian(g_year, 1, 1))
    dec31 = absolute_from_gregorian(Gregorian(g_year, 12, 31))
    start = islamic_from_absolute(jan1)
    if start is None:
        if dec31 <= ISLAMIC_EPOCH:
            return []
        y = 0
    else:
        y = start.year
    candidates = (absolute_from_islamic(Islamic(y + i, month, day)) for i in range(3))
    return [c for c in candidates if jan1 <= c <= dec31 and c > ISLAMIC_EPOCH]


def mulad_al_nabi(g_year: int) -> List[int]:
    """Birthday of the Prophet, 12 Rabi I."""
    return islamic_date_in_gregorian_year(3, 12, g_year)


register_holiday("mulad_al_nabi", mulad_al_nabi)
