"""Unit tests for leap years, Rosh Hashanah and month lengths."""

import pytest

from CalendarUtilities import GregorianDate, weekday
from HebrewYear import (
    COMPLETE,
    DEFICIENT,
    EPOCH_BIAS,
    EPOCH_REFERENCE_DATE,
    REGULAR,
    classify_year,
    day_number_to_gregorian,
    gregorian_to_day_number,
    is_leap_year,
    len_hebrew_month,
    length_of_year,
    month_lengths,
    months_in_year,
    next_month,
    tishrei1,
    tishrei1_day_number,
    year_of_cycle,
    year_type,
)


def test_is_leap_year():
    assert is_leap_year(5765)        # 5765 % 19 == 8
    assert not is_leap_year(5766)    # 5766 % 19 == 9
    assert is_leap_year(5776)        # 19th year of the cycle


def test_leap_density():
    """Any 19 consecutive years hold exactly 7 leap years."""
    for start in (1, 17, 5760, 9000):
        years = range(start, start + 19)
        leaps = [year for year in years if is_leap_year(year)]
        assert len(leaps) == 7
        assert all(year % 19 in {3, 6, 8, 11, 14, 17, 0} for year in leaps)


def test_year_of_cycle():
    assert year_of_cycle(5776) == 19
    assert year_of_cycle(5777) == 1
    assert year_of_cycle(5765) == 8


@pytest.mark.parametrize("year, expected", [
    (1, GregorianDate(-3760, 9, 7)),
    (5745, GregorianDate(1984, 9, 27)),   # pushed off two days from a Tuesday molad
    (5765, GregorianDate(2004, 9, 16)),   # molad zaken, then off Wednesday
    (5766, GregorianDate(2005, 10, 4)),   # pushed off a day after a leap year
    (5776, GregorianDate(2015, 9, 14)),
    (5777, GregorianDate(2016, 10, 3)),
    (5785, GregorianDate(2024, 10, 3)),
])
def test_tishrei1(year, expected):
    assert tishrei1(year) == expected


def test_tishrei1_day_numbers():
    assert tishrei1_day_number(1) == 2
    assert tishrei1_day_number(5745) == 2097975
    assert tishrei1_day_number(5766) == 2105652


def test_epoch_anchor():
    assert gregorian_to_day_number(EPOCH_REFERENCE_DATE) == EPOCH_BIAS
    assert day_number_to_gregorian(EPOCH_BIAS) == EPOCH_REFERENCE_DATE
    assert day_number_to_gregorian(2105269) == GregorianDate(2004, 9, 16)


def test_anchor_monotonic_and_never_adu():
    """Rosh Hashanah moves forward every year and never falls on Sunday, Wednesday or Friday."""
    for year in range(5600, 5900):
        assert tishrei1_day_number(year) < tishrei1_day_number(year + 1)
        assert weekday(tishrei1(year)) not in (0, 3, 5)


def test_year_length_bounds():
    for year in list(range(1, 100)) + list(range(5700, 5900)):
        if is_leap_year(year):
            assert length_of_year(year) in (383, 384, 385)
        else:
            assert length_of_year(year) in (353, 354, 355)


@pytest.mark.parametrize("year, length, kind", [
    (5765, 383, DEFICIENT),
    (5766, 354, REGULAR),
    (5776, 385, COMPLETE),
    (5777, 353, DEFICIENT),
    (5778, 354, REGULAR),
])
def test_length_of_year(year, length, kind):
    assert length_of_year(year) == length
    assert year_type(year) == kind


def test_classify_year():
    assert classify_year(353) == classify_year(383) == DEFICIENT
    assert classify_year(354) == classify_year(384) == REGULAR
    assert classify_year(355) == classify_year(385) == COMPLETE


def test_len_hebrew_month_fixed_months():
    for month in (1, 5, 8, 10, 12):
        assert len_hebrew_month(month, False, 354) == 30
    for month in (4, 7, 9, 11, 13):
        assert len_hebrew_month(month, True, 384) == 29


def test_len_hebrew_month_cheshvan_and_kislev():
    assert len_hebrew_month(2, False, 355) == 30
    assert len_hebrew_month(2, True, 384) == 29
    assert len_hebrew_month(3, True, 383) == 29
    assert len_hebrew_month(3, False, 354) == 30


def test_adar_i_exists_only_in_leap_years():
    assert len_hebrew_month(6, True, 384) == 30
    assert len_hebrew_month(6, False, 354) == 0
    assert len_hebrew_month(14, True, 384) == 0
    assert len_hebrew_month(0, True, 384) == 0


def test_month_lengths_sum_to_year_length():
    for year in range(5700, 5800):
        assert sum(month_lengths(year)) == length_of_year(year)


def test_month_lengths_table():
    # 5765: deficient leap year
    assert month_lengths(5765) == (30, 29, 29, 29, 30, 30, 29, 30, 29, 30, 29, 30, 29)
    # 5777: deficient common year, no Adar I
    assert month_lengths(5777)[5] == 0


def test_next_month():
    assert next_month(5, False) == 7
    assert next_month(5, True) == 6
    assert next_month(6, True) == 7
    assert next_month(12, False) == 13


def test_months_in_year():
    assert months_in_year(5765) == list(range(1, 14))
    assert months_in_year(5766) == [1, 2, 3, 4, 5, 7, 8, 9, 10, 11, 12, 13]
