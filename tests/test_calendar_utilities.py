"""Unit tests for the Gregorian date arithmetic helpers."""

import datetime

import numpy as np

from CalendarUtilities import (
    GregorianDate,
    add_days,
    as_gregorian_date,
    days_between,
    from_datetime64,
    isLeap,
    is_valid_gregorian,
    month_len,
    to_datetime64,
    weekday,
)


def test_isLeap():
    """Century years are leap years only when divisible by 400."""
    assert isLeap(2024)
    assert isLeap(2000)
    assert not isLeap(1900)
    assert not isLeap(2023)
    # astronomical year 0 (1 BCE) is a leap year on the proleptic calendar
    assert isLeap(0)
    assert isLeap(-4)


def test_month_len():
    assert month_len(2, False) == 28
    assert month_len(2, True) == 29
    assert month_len(4, True) == 30
    assert month_len(12, False) == 31


def test_is_valid_gregorian():
    assert is_valid_gregorian(2024, 2, 29)
    assert not is_valid_gregorian(2023, 2, 29)
    assert not is_valid_gregorian(2023, 13, 1)
    assert not is_valid_gregorian(2023, 4, 31)
    assert not is_valid_gregorian(2023, 4, 0)
    assert not is_valid_gregorian(2023, 4, 1.5)


def test_datetime64_conversion_matches_numpy():
    """Dates built from components agree with numpy's own parsing."""
    assert to_datetime64((2005, 4, 6)) == np.datetime64('2005-04-06')
    assert from_datetime64(np.datetime64('1776-07-04')) == GregorianDate(1776, 7, 4)


def test_negative_years():
    """Years before 1 CE survive the trip through datetime64."""
    date = GregorianDate(-3760, 9, 7)
    assert from_datetime64(to_datetime64(date)) == date
    assert add_days(GregorianDate(1, 1, 1), -1) == GregorianDate(0, 12, 31)


def test_add_days_returns_new_value():
    start = GregorianDate(2004, 9, 16)
    later = add_days(start, 202)

    assert later == GregorianDate(2005, 4, 6)
    assert start == GregorianDate(2004, 9, 16)
    assert add_days(later, -202) == start


def test_days_between():
    assert days_between((2004, 9, 16), (2005, 10, 4)) == 383
    assert days_between((2005, 10, 4), (2004, 9, 16)) == -383
    assert days_between((1900, 1, 1), (1970, 1, 1)) == 25567


def test_weekday():
    """Sunday is 0 and Saturday is 6."""
    assert weekday((1970, 1, 1)) == 4
    assert weekday((2005, 4, 6)) == 3
    assert weekday((2016, 10, 3)) == 1
    assert weekday((1900, 1, 1)) == 1


def test_as_gregorian_date():
    expected = GregorianDate(2005, 4, 6)

    assert as_gregorian_date(expected) is expected
    assert as_gregorian_date((2005, 4, 6)) == expected
    assert as_gregorian_date(datetime.date(2005, 4, 6)) == expected
    assert as_gregorian_date(datetime.datetime(2005, 4, 6, 23, 59)) == expected
    assert as_gregorian_date(np.datetime64('2005-04-06')) == expected


def test_str():
    assert str(GregorianDate(2005, 4, 6)) == "2005-04-06"
    assert str(GregorianDate(-3760, 9, 7)) == "-3760-09-07"
