# tests/test_arith.py

import pytest

from calconv.core.arith import amod, count_while, floor_div, modulus, summa


@pytest.mark.parametrize("a, b, expected", [
    (10, 7, 3),
    (-1, 7, 6),
    (-7, 7, 0),
    (-8, 7, 6),
    (0, 30, 0),
])
def test_modulus_is_non_negative(a, b, expected):
    assert modulus(a, b) == expected


def test_modulus_of_reals():
    assert modulus(-7.5, 5.0) == pytest.approx(2.5)
    assert 0.0 <= modulus(-1e-9, 360.0) < 360.0


@pytest.mark.parametrize("a, b, expected", [
    (7, 2, 3),
    (-1, 4, -1),
    (-4, 4, -1),
    (-5, 4, -2),
    (0, 366, 0),
])
def test_floor_div_rounds_down(a, b, expected):
    assert floor_div(a, b) == expected


def test_amod_range():
    assert amod(12, 12) == 12
    assert amod(0, 12) == 12
    assert amod(13, 12) == 1
    assert amod(-1, 13) == 12
    assert all(1 <= amod(i, 20) <= 20 for i in range(-100, 100))


def test_summa_accumulates_while_predicate_holds():
    assert summa(lambda i: i, 1, lambda i: i <= 4) == 10
    # predicate false immediately: empty sum
    assert summa(lambda i: i, 5, lambda i: False) == 0


def test_summa_stops_at_first_false():
    # p is true again at 5, but the sum has already stopped at 3
    assert summa(lambda i: 1, 0, lambda i: i != 3) == 3


def test_count_while_is_a_search():
    assert count_while(3, lambda i: i < 10) == 7
    # the last value still satisfying p is k + count - 1
    k = 100
    n = count_while(k, lambda y: y * y <= 20000)
    assert (k + n - 1) ** 2 <= 20000 < (k + n) ** 2
