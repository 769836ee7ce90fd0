
## Conversion between Hebrew and Gregorian dates

import logging
import math
from collections import namedtuple

from CalendarErrors import CalendarError, InvalidDayError, InvalidMonthError, InvalidYearError
from CalendarUtilities import as_gregorian_date, is_valid_gregorian, month_len, isLeap
from DateFormatting import format_gregorian_date, format_hebrew_date, month_from_gedcom_abbrev, weekday_name
from HebrewYear import ADAR, ADAR_I, ELUL, day_number_to_gregorian, gregorian_to_day_number, is_leap_year, \
    len_hebrew_month, length_of_year, next_month, tishrei1, tishrei1_day_number
from MoladCalculation import CHALAKIM_PER_HOUR, HOURS_PER_DAY, LUNAR_MONTH, MONTHS_PER_CYCLE, molad_of_month

logger = logging.getLogger(__name__)

HebrewDate = namedtuple('HebrewDate', ['year', 'month', 'day'])

# supported Hebrew years; Gregorian dates are accepted from Rosh Hashanah of the first
# up to the day before Rosh Hashanah of the year after the last
MIN_HEBREW_YEAR = 1
MAX_HEBREW_YEAR = 9999
MIN_GREGORIAN_YEAR = tishrei1(MIN_HEBREW_YEAR).year
MAX_GREGORIAN_YEAR = tishrei1(MAX_HEBREW_YEAR + 1).year

# which day to pick when a Hebrew date is given without its day, or without its month and day
EARLIEST = "earliest"
MIDPOINT = "midpoint"
LATEST = "latest"

# mean length of a month and of a year, in days
ONE_MOLAD = LUNAR_MONTH.days + (LUNAR_MONTH.hours / HOURS_PER_DAY) + \
            (LUNAR_MONTH.chalakim / (CHALAKIM_PER_HOUR * HOURS_PER_DAY))
AVG_YEAR_LEN = ONE_MOLAD * (MONTHS_PER_CYCLE / 19)


def _is_whole(value):
    try:
        return value == int(value)
    except (TypeError, ValueError, OverflowError):
        return False


# Checks a Hebrew date, raising the matching CalendarError; returns it as a HebrewDate
def validate_hebrew_date(year, month, day):

    # Check for invalid year entries (too early / too late / fractional)
    if not _is_whole(year) or year < MIN_HEBREW_YEAR or year > MAX_HEBREW_YEAR:
        raise InvalidYearError("Invalid year entered: %r (supported years are %d to %d)"
                               % (year, MIN_HEBREW_YEAR, MAX_HEBREW_YEAR))

    year = int(year)
    leap = is_leap_year(year)

    # Check for invalid month entries (negative / too high / fractional / Adar I of a common year)
    if not _is_whole(month) or month < 1 or month > 13 or (month == ADAR_I and not leap):
        raise InvalidMonthError("Invalid month entered: %r (year %d has %s)"
                                % (month, year, "13 months" if leap else "12 months, numbered without 6"))

    month = int(month)
    days_in_month = len_hebrew_month(month, leap, length_of_year(year))

    # Check for invalid day entries (negative / too high / fractional)
    if not _is_whole(day) or day < 1 or day > days_in_month:
        raise InvalidDayError("Invalid day entered: %r (month %d of %d has %d days)"
                              % (day, month, year, days_in_month))

    return HebrewDate(year, month, int(day))


# Checks a Gregorian date (any form accepted by as_gregorian_date); returns it as a GregorianDate
def validate_gregorian_date(date):
    year, month, day = as_gregorian_date(date)

    # years outside the supported Hebrew years are rejected before any date arithmetic
    if not _is_whole(year) or year < MIN_GREGORIAN_YEAR or year > MAX_GREGORIAN_YEAR:
        raise InvalidYearError("Invalid year entered: %r (supported years are %d to %d)"
                               % (year, MIN_GREGORIAN_YEAR, MAX_GREGORIAN_YEAR))

    if not _is_whole(month) or month < 1 or month > 12:
        raise InvalidMonthError("Invalid month entered: %r" % (month,))

    if not _is_whole(day) or not is_valid_gregorian(year, month, day):
        raise InvalidDayError("Invalid day entered: %r (month %d of %d has %d days)"
                              % (day, month, year, month_len(int(month), isLeap(year))))

    return as_gregorian_date((int(year), int(month), int(day)))


# Returns the day number of the given Hebrew date, without any checking
def _hebrew_day_number(year, month, day):
    leap = is_leap_year(year)
    year_len = length_of_year(year)

    # begin at new-year (alef Tishrei)
    days = tishrei1_day_number(year)

    # complete months before the month in question
    for month_cur in range(1, month):
        days += len_hebrew_month(month_cur, leap, year_len)

    # complete days in the month (not including the day itself)
    return days + day - 1


# Returns the Gregorian date of a Hebrew date (month 1 is Tishrei; 6 is Adar I, 7 is Adar / Adar II)
def hebrew_to_greg(year, month, day):
    year, month, day = validate_hebrew_date(year, month, day)
    return day_number_to_gregorian(_hebrew_day_number(year, month, day))


# Returns the Hebrew date of a Gregorian date given as a GregorianDate, a (year, month, day) tuple,
# a datetime.date or a numpy datetime64
def greg_to_hebrew(date):
    date = validate_gregorian_date(date)
    days = gregorian_to_day_number(date)

    if days < tishrei1_day_number(MIN_HEBREW_YEAR) or days >= tishrei1_day_number(MAX_HEBREW_YEAR + 1):
        raise InvalidYearError("Invalid year entered: %s falls outside Hebrew years %d to %d"
                               % (date, MIN_HEBREW_YEAR, MAX_HEBREW_YEAR))

    # estimate the year from the mean year length, then find the Rosh Hashanah on or before the date
    year = math.floor(days / AVG_YEAR_LEN) + 1
    estimate = year
    new_year = tishrei1_day_number(year)

    if new_year == days:
        return HebrewDate(year, 1, 1)

    if new_year < days:
        while tishrei1_day_number(year + 1) <= days:
            year += 1
    else:
        year -= 1
        while tishrei1_day_number(year) > days:
            year -= 1

    logger.debug("%s: estimated Hebrew year %d, settled on %d", date, estimate, year)

    leap = is_leap_year(year)
    year_len = length_of_year(year)

    # days remaining after alef Tishrei
    remaining = days - tishrei1_day_number(year)

    # walk through the months of the year until the remaining days fall within one
    month = 1
    days_in_month = len_hebrew_month(month, leap, year_len)

    while remaining >= days_in_month:
        remaining -= days_in_month
        month = next_month(month, leap)
        days_in_month = len_hebrew_month(month, leap, year_len)

    return HebrewDate(year, month, remaining + 1)


# Returns the Hebrew date of the given Gregorian date as "month/day/year"
def greg_to_hebrew_string(date):
    year, month, day = greg_to_hebrew(date)
    return "%d/%d/%d" % (month, day, year)


# Returns the day of a month of the given length chosen by the preference (EARLIEST, MIDPOINT or LATEST)
def _imprecise_day(days_in_month, preference):
    if preference == EARLIEST:
        return 1
    if preference == MIDPOINT:
        return days_in_month // 2
    if preference == LATEST:
        return days_in_month

    raise ValueError("Unexpected imprecise date preference: %r" % (preference,))


# Returns the Gregorian date of a Hebrew month given without a day: its first, middle or last day.
# The month may be a number or a GEDCOM abbreviation such as 'TMZ'
def hebrew_month_to_greg(year, month, preference=EARLIEST):
    if isinstance(month, str):
        month = month_from_gedcom_abbrev(month)

    year, month, day = validate_hebrew_date(year, month, 1)
    days_in_month = len_hebrew_month(month, is_leap_year(year), length_of_year(year))

    return hebrew_to_greg(year, month, _imprecise_day(days_in_month, preference))


# Returns the Gregorian date of a Hebrew year given without month or day: Rosh Hashanah,
# the middle of Adar (Adar II in a leap year) or the last day of Elul
def hebrew_year_to_greg(year, preference=EARLIEST):
    if preference == EARLIEST:
        return hebrew_month_to_greg(year, 1, EARLIEST)
    if preference == LATEST:
        return hebrew_month_to_greg(year, ELUL, LATEST)

    return hebrew_month_to_greg(year, ADAR, preference)


# Returns the molad of the given Hebrew month as (day of week, hours, chalakim), Saturday = 0
def month_molad(year, month):
    year, month, day = validate_hebrew_date(year, month, 1)
    return molad_of_month(year, month, is_leap_year(year))


# Asks the user for a hebrew or gregorian date and returns it converted to the other calendar
def convert():

    # get calendar type from user
    date_type = (input("Is this a Hebrew or Gregorian date? (Enter 'h' or 'g') ")).strip().lower()

    if date_type != 'g' and date_type != 'h':
        return "Error! Invalid input."

    # get year, month and day from user
    try:
        year = int(input("Enter year number: "))
        month = int(input("Enter month number: "))
        day = int(input("Enter day number: "))
    except ValueError:
        return "Error! Enter whole numbers only."

    try:
        if date_type == 'h':
            return format_gregorian_date(hebrew_to_greg(year, month, day))

        hebrew_date = greg_to_hebrew((year, month, day))
        return weekday_name((year, month, day)) + ", " + format_hebrew_date(hebrew_date)

    except CalendarError as e:
        return "Error! " + str(e)


def main():
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    print(convert())


if __name__ == "__main__":
    main()
