# tests/test_cli.py

import pytest

from calconv.cli import main


def test_day_command(capsys):
    assert main(["day", "1945-11-12"]) == 0
    out = capsys.readouterr().out
    assert "absolute date 710347 (Monday)" in out
    assert "7 Kislev 5706" in out
    assert "12.16.11.16.9" in out


def test_date_shortcut(capsys):
    assert main(["1945-11-12", "--raw"]) == 0
    out = capsys.readouterr().out
    assert "[5046, 8, 0, 8]" in out


def test_day_before_epochs(capsys):
    assert main(["day", "1"]) == 0
    out = capsys.readouterr().out
    assert "(before epoch)" in out


def test_convert_command(capsys):
    assert main(["convert", "hebrew", "5706", "9", "7", "--to", "islamic"]) == 0
    out = capsys.readouterr().out
    assert "6 Dhu al-Hijjah 1364" in out
    assert "[1364, 12, 6]" in out


def test_convert_before_epoch(capsys):
    assert main(["convert", "gregorian", "1", "1", "1", "--to", "french"]) == 1
    assert "has no french date" in capsys.readouterr().out


def test_convert_cyclical_source():
    with pytest.raises(SystemExit):
        main(["convert", "mayanHaab", "7", "11"])


def test_convert_unknown_calendar():
    with pytest.raises(SystemExit):
        main(["convert", "klingon", "1", "1", "1"])


def test_holiday_command(capsys):
    assert main(["holiday", "easter", "2000"]) == 0
    assert "23 April 2000" in capsys.readouterr().out
    assert main(["holiday", "passover", "2024", "--calendar", "hebrew"]) == 0
    assert "15 Nisan 5784" in capsys.readouterr().out


def test_unknown_holiday():
    with pytest.raises(SystemExit):
        main(["holiday", "no_such_day", "2024"])


def test_list_commands(capsys):
    assert main(["calendars"]) == 0
    out = capsys.readouterr().out
    assert "oldHinduLunar" in out and "leap_month" in out
    assert main(["holidays"]) == 0
    assert "yom_kippur" in capsys.readouterr().out


def test_diag_round_trip(capsys):
    assert main(["diag", "round-trip", "--calendars", "gregorian,hebrew", "--N", "50"]) == 0
    assert "All round-trip tests passed." in capsys.readouterr().out
