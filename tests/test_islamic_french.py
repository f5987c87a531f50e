# tests/test_islamic_french.py

import pytest

from calconv.core.types import French, Islamic
from calconv.engines.french import (
    FRENCH_EPOCH,
    absolute_from_french,
    format_french,
    french_from_absolute,
    french_last_day_of_month,
    french_leap_year,
)
from calconv.engines.islamic import (
    ISLAMIC_EPOCH,
    absolute_from_islamic,
    format_islamic,
    islamic_from_absolute,
    islamic_leap_year,
    last_day_of_islamic_month,
)


# ---------------------------------------------------------
# Islamic
# ---------------------------------------------------------

def test_islamic_epoch():
    # 1 Muharram 1 AH is Friday, July 16, 622 (Julian) = July 19, 622 (Gregorian)
    assert absolute_from_islamic(Islamic(1, 1, 1)) == 227015
    assert islamic_from_absolute(227015) == Islamic(1, 1, 1)


def test_islamic_before_epoch_is_none():
    assert islamic_from_absolute(ISLAMIC_EPOCH) is None
    assert islamic_from_absolute(0) is None
    assert islamic_from_absolute(-500000) is None


def test_islamic_sample():
    assert islamic_from_absolute(710347) == Islamic(1364, 12, 6)
    assert absolute_from_islamic(Islamic(1364, 12, 6)) == 710347


def test_islamic_leap_cycle():
    # 11 leap years in every 30-year cycle
    assert sum(islamic_leap_year(y) for y in range(1, 31)) == 11
    assert [y for y in range(1, 31) if islamic_leap_year(y)] == [2, 5, 7, 10, 13, 16, 18, 21, 24, 26, 29]


def test_islamic_month_lengths():
    assert last_day_of_islamic_month(1, 1445) == 30
    assert last_day_of_islamic_month(2, 1445) == 29
    assert last_day_of_islamic_month(12, 2) == 30
    assert last_day_of_islamic_month(12, 1) == 29
    # a year has 354 or 355 days
    for y in range(1, 61):
        length = absolute_from_islamic(Islamic(y + 1, 1, 1)) - absolute_from_islamic(Islamic(y, 1, 1))
        assert length == (355 if islamic_leap_year(y) else 354)


def test_islamic_dense_round_trip():
    for rd in range(ISLAMIC_EPOCH + 1, ISLAMIC_EPOCH + 4000):
        assert absolute_from_islamic(islamic_from_absolute(rd)) == rd


def test_format_islamic():
    assert format_islamic(Islamic(1364, 12, 6)) == "6 Dhu al-Hijjah 1364"


# ---------------------------------------------------------
# French Revolutionary
# ---------------------------------------------------------

def test_french_epoch():
    # 1 Vendémiaire an I is September 22, 1792
    assert absolute_from_french(French(1, 1, 1)) == 654415
    assert french_from_absolute(654415) == French(1, 1, 1)


def test_french_before_epoch_is_none():
    assert french_from_absolute(FRENCH_EPOCH) is None
    assert french_from_absolute(1) is None


def test_french_sample():
    assert french_from_absolute(710347) == French(154, 2, 21)
    assert absolute_from_french(French(154, 2, 21)) == 710347


def test_french_leap_years():
    assert [y for y in range(1, 21) if french_leap_year(y)] == [3, 7, 11, 15, 20]
    assert french_leap_year(24)
    assert not french_leap_year(23)
    assert not french_leap_year(100)
    assert french_leap_year(400)
    assert not french_leap_year(4000)


def test_sansculottides():
    assert french_last_day_of_month(1, 3) == 30
    assert french_last_day_of_month(13, 3) == 6
    assert french_last_day_of_month(13, 4) == 5
    # the sixth sansculottide of a leap year is followed by the new year
    rd = absolute_from_french(French(3, 13, 6))
    assert french_from_absolute(rd) == French(3, 13, 6)
    assert french_from_absolute(rd + 1) == French(4, 1, 1)


def test_french_year_lengths():
    for y in range(1, 200):
        length = absolute_from_french(French(y + 1, 1, 1)) - absolute_from_french(French(y, 1, 1))
        assert length == (366 if french_leap_year(y) else 365)


def test_format_french():
    assert format_french(French(154, 2, 21)) == "21 Brumaire 154"
    assert format_french(French(3, 13, 6)) == "Jour de la révolution 3"
