"""
calconv.core.arith
------------------
Integer and real arithmetic shared by every calendar engine.

All epoch-relative day counts need floored (not truncated) division and a
remainder that stays non-negative for negative dates.
"""

from __future__ import annotations

from itertools import count, takewhile
from typing import Callable, TypeVar

Num = TypeVar("Num", int, float)


def modulus(a: Num, b: Num) -> Num:
    """Remainder of a/b in [0, b) for positive b, whatever the sign of a."""
    return a % b


def floor_div(a: int, b: int) -> int:
    """Floored quotient: floor_div(-1, 4) == -1."""
    return a // b


def amod(a: int, b: int) -> int:
    """Adjusted remainder in [1, b]; used where a cycle counts from 1."""
    return modulus(a - 1, b) + 1


def summa(f: Callable[[int], Num], k: int, p: Callable[[int], bool]) -> Num:
    """
    Sum f(k) + f(k+1) + ... for as long as p holds.

    p(i) is checked before f(i) is included, and the sum stops at the first i
    for which p(i) is false, so p must be true on a prefix of [k, k+1, ...].
    """
    return sum(f(i) for i in takewhile(p, count(k)))


def count_while(k: int, p: Callable[[int], bool]) -> int:
    """
    Number of consecutive integers k, k+1, ... satisfying p.

    This is the search form of summa: starting from an approximation k of
    a year (or month), k + count_while(k, p) is the last value for which the
    "not yet past the target" predicate p holds.
    """
    return summa(lambda _: 1, k, p)
