# tests/test_gregorian_julian_iso.py

import random
from datetime import date

import pytest

from calconv.core.types import Gregorian, Iso, Julian
from calconv.engines.gregorian import (
    absolute_from_gregorian,
    day_of_week_from_absolute,
    format_gregorian,
    gregorian_from_absolute,
    gregorian_leap_year,
    last_day_of_gregorian_month,
)
from calconv.engines.iso import MONDAY, SUNDAY, absolute_from_iso, format_iso, iso_from_absolute, kday_on_or_before
from calconv.engines.julian import absolute_from_julian, julian_from_absolute, julian_leap_year


# R.D. 710347 is Monday, November 12, 1945 (Gregorian).
SAMPLE_RD = 710347


@pytest.mark.parametrize("g, rd", [
    (Gregorian(1, 1, 1), 1),
    (Gregorian(0, 12, 31), 0),
    (Gregorian(-1, 1, 1), -730),
    (Gregorian(1945, 11, 12), SAMPLE_RD),
    (Gregorian(2000, 2, 29), 730179),
    (Gregorian(1900, 3, 1), 693655),
])
def test_gregorian_fixed_points(g, rd):
    assert absolute_from_gregorian(g) == rd
    assert gregorian_from_absolute(rd) == g


def test_gregorian_leap_years():
    assert gregorian_leap_year(2000)
    assert gregorian_leap_year(2024)
    assert gregorian_leap_year(0)
    assert gregorian_leap_year(-4)
    assert not gregorian_leap_year(1900)
    assert not gregorian_leap_year(2023)
    assert not gregorian_leap_year(-100)


def test_last_day_of_gregorian_month():
    assert last_day_of_gregorian_month(2, 2000) == 29
    assert last_day_of_gregorian_month(2, 1900) == 28
    assert last_day_of_gregorian_month(4, 2023) == 30
    assert last_day_of_gregorian_month(12, 2023) == 31


def test_gregorian_last_day_of_leap_year():
    # day 366 of a leap year ends a 4- or 400-year cycle
    for year in (1996, 2000, 2400, 4):
        rd = absolute_from_gregorian(Gregorian(year, 12, 31))
        assert gregorian_from_absolute(rd) == Gregorian(year, 12, 31)
        assert gregorian_from_absolute(rd + 1) == Gregorian(year + 1, 1, 1)


def test_gregorian_matches_datetime():
    random.seed(42)
    for _ in range(5000):
        rd = random.randint(1, date.max.toordinal())
        d = date.fromordinal(rd)
        assert gregorian_from_absolute(rd) == Gregorian(d.year, d.month, d.day)
        assert day_of_week_from_absolute(rd) == d.isoweekday() % 7


def test_day_of_week():
    assert day_of_week_from_absolute(SAMPLE_RD) == MONDAY
    assert day_of_week_from_absolute(0) == SUNDAY


def test_format_gregorian():
    assert format_gregorian(Gregorian(1945, 11, 12)) == "12 November 1945"


# ---------------------------------------------------------
# Julian
# ---------------------------------------------------------

@pytest.mark.parametrize("j, rd", [
    (Julian(1, 1, 3), 1),
    (Julian(1945, 10, 30), SAMPLE_RD),
    (Julian(1582, 10, 5), 577736),  # Gregorian reform: October 15, 1582
    (Julian(-1002, 12, 14), -366000),
])
def test_julian_fixed_points(j, rd):
    assert julian_from_absolute(rd) == j
    assert absolute_from_julian(j) == rd


def test_julian_leap_years():
    assert julian_leap_year(1900)
    assert julian_leap_year(-4)
    assert not julian_leap_year(1901)


def test_julian_round_trip_far_before_epoch():
    for rd in range(-800000, -795000):
        assert absolute_from_julian(julian_from_absolute(rd)) == rd


# ---------------------------------------------------------
# ISO
# ---------------------------------------------------------

def test_kday_on_or_before():
    assert kday_on_or_before(SAMPLE_RD, SUNDAY) == SAMPLE_RD - 1
    assert kday_on_or_before(SAMPLE_RD, MONDAY) == SAMPLE_RD
    for rd in range(-20, 20):
        for k in range(7):
            got = kday_on_or_before(rd, k)
            assert rd - 6 <= got <= rd
            assert day_of_week_from_absolute(got) == k


@pytest.mark.parametrize("iso, rd", [
    (Iso(1945, 46, 1), SAMPLE_RD),
    (Iso(2009, 1, 1), 733405),   # Monday, December 29, 2008
    (Iso(2009, 53, 7), 733775),  # Sunday, January 3, 2010
    (Iso(2010, 1, 1), 733776),
])
def test_iso_fixed_points(iso, rd):
    assert iso_from_absolute(rd) == iso
    assert absolute_from_iso(iso) == rd


def test_iso_matches_datetime():
    random.seed(7)
    for _ in range(5000):
        rd = random.randint(1000, date.max.toordinal() - 1000)
        y, w, d = date.fromordinal(rd).isocalendar()
        assert iso_from_absolute(rd) == Iso(y, w, d)


def test_format_iso():
    assert format_iso(Iso(2009, 1, 1)) == "2009-W01-1"
