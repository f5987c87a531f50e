"""
US civil holidays.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..core.types import Gregorian
from ..engines.gregorian import absolute_from_gregorian, last_day_of_gregorian_month
from ..engines.iso import SUNDAY, MONDAY, kday_on_or_before
from .registry import register_holiday


def nth_kday(n: int, k: int, month: int, year: int) -> int:
    """
    Absolute date of the n-th weekday k (0 = Sunday) of a Gregorian month.
    n > 0 counts from the start of the month, n < 0 from its end (-1 = last).
    """
    if n > 0:
        return kday_on_or_before(absolute_from_gregorian(Gregorian(year, month, 7)), k) + 7 * (n - 1)
    last = absolute_from_gregorian(Gregorian(year, month, last_day_of_gregorian_month(month, year)))
    return kday_on_or_before(last, k) + 7 * (n + 1)


@dataclass(frozen=True)
class DaylightSavingsRule:
    """Start and end of daylight saving time as (n, weekday, month) triples for nth_kday."""
    start_n: int
    start_k: int
    start_month: int
    end_n: int
    end_k: int
    end_month: int

    def __post_init__(self) -> None:
        if 0 in (self.start_n, self.end_n):
            raise ValueError("n must be non-zero")
        if not (0 <= self.start_k <= 6 and 0 <= self.end_k <= 6):
            raise ValueError("weekday must be in 0..6")
        if not (1 <= self.start_month <= 12 and 1 <= self.end_month <= 12):
            raise ValueError("month must be in 1..12")


# First Sunday in April to last Sunday in October (1987-2006).
US_RULE_1987 = DaylightSavingsRule(1, SUNDAY, 4, -1, SUNDAY, 10)
# Second Sunday in March to first Sunday in November (since 2007).
US_RULE_2007 = DaylightSavingsRule(2, SUNDAY, 3, 1, SUNDAY, 11)


def independence_day(year: int) -> int:
    return absolute_from_gregorian(Gregorian(year, 7, 4))


def labor_day(year: int) -> int:
    """First Monday in September."""
    return nth_kday(1, MONDAY, 9, year)


def memorial_day(year: int) -> int:
    """Last Monday in May."""
    return nth_kday(-1, MONDAY, 5, year)


def daylight_savings_start(year: int, rule: DaylightSavingsRule = US_RULE_1987) -> int:
    return nth_kday(rule.start_n, rule.start_k, rule.start_month, year)


def daylight_savings_end(year: int, rule: DaylightSavingsRule = US_RULE_1987) -> int:
    return nth_kday(rule.end_n, rule.end_k, rule.end_month, year)


register_holiday("independence_day", independence_day)
register_holiday("labor_day", labor_day)
register_holiday("memorial_day", memorial_day)
register_holiday("daylight_savings_start", daylight_savings_start)
register_holiday("daylight_savings_end", daylight_savings_end)
