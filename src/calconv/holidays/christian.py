"""
Christian holidays, fixed and moveable.
"""

from __future__ import annotations

from typing import List

from ..core.arith import floor_div, modulus
from ..core.types import Gregorian, Julian
from ..engines.gregorian import absolute_from_gregorian
from ..engines.iso import SUNDAY, kday_on_or_before
from ..engines.julian import absolute_from_julian, julian_from_absolute
from .registry import register_holiday


def christmas(year: int) -> int:
    return absolute_from_gregorian(Gregorian(year, 12, 25))


def advent(year: int) -> int:
    """Sunday closest to November 30."""
    return kday_on_or_before(absolute_from_gregorian(Gregorian(year, 12, 3)), SUNDAY)


def epiphany(year: int) -> int:
    return christmas(year) + 12


def eastern_orthodox_christmas(year: int) -> List[int]:
    """
    Julian December 25 falling in a Gregorian year. The Julian year drifts
    against the Gregorian one, so there may be none, one, or two.
    """
    jan1 = absolute_from_gregorian(Gregorian(year, 1, 1))
    dec31 = absolute_from_gregorian(Gregorian(year, 12, 31))
    y = julian_from_absolute(jan1).year
    candidates = (absolute_from_julian(Julian(y, 12, 25)), absolute_from_julian(Julian(y + 1, 12, 25)))
    return [c for c in candidates if jan1 <= c <= dec31]


def nicaean_rule_easter(year: int) -> int:
    """Easter in a Julian year (Orthodox computus, no century correction)."""
    shifted_epact = modulus(14 + 11 * modulus(year, 19), 30)
    paschal_moon = absolute_from_julian(Julian(year, 4, 19)) - shifted_epact
    return kday_on_or_before(paschal_moon + 7, SUNDAY)


def easter(year: int) -> int:
    """Easter in a Gregorian year (Gregorian computus)."""
    century = floor_div(year, 100) + 1
    shifted_epact = modulus(
        14
        + 11 * modulus(year, 19)
        - floor_div(3 * century, 4)      # solar equation
        + floor_div(5 + 8 * century, 25)  # lunar equation
        + 30 * century,
        30,
    )
    if shifted_epact == 0 or (shifted_epact == 1 and 10 < modulus(year, 19)):
        adjusted_epact = shifted_epact + 1
    else:
        adjusted_epact = shifted_epact
    paschal_moon = absolute_from_gregorian(Gregorian(year, 4, 19)) - adjusted_epact
    return kday_on_or_before(paschal_moon + 7, SUNDAY)


def pentecost(year: int) -> int:
    return easter(year) + 49


register_holiday("christmas", christmas)
register_holiday("advent", advent)
register_holiday("epiphany", epiphany)
register_holiday("eastern_orthodox_christmas", eastern_orthodox_christmas)
register_holiday("nicaean_rule_easter", nicaean_rule_easter)
register_holiday("easter", easter)
register_holiday("pentecost", pentecost)
