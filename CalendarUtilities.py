

## Calendar Utility Functions
## Gregorian date arithmetic on top of numpy's datetime64 (proleptic, astronomical year numbering)

import datetime
from collections import namedtuple

import numpy as np

# datetime64 counts from 1970-01-01, which was a Thursday
UNIX_EPOCH_WEEKDAY = 4

ONE_DAY = np.timedelta64(1, 'D')


class GregorianDate(namedtuple('GregorianDate', ['year', 'month', 'day'])):
    __slots__ = ()

    def __str__(self):
        return "%d-%02d-%02d" % self


# Returns length of given gregorian month
def month_len(month, leap):
    month_lengths = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]

    if month == 2 and leap:
        return 29

    return month_lengths[month - 1]


# Returns True if the given year is a Gregorian leap year and False otherwise
def isLeap(year):
    return year % 4 == 0 and \
           (year % 100 != 0 or (year % 100 == 0 and year % 400 == 0))


# Returns True if (year, month, day) names a real day on the Gregorian calendar
def is_valid_gregorian(year, month, day):
    if month != int(month) or day != int(day):
        return False

    if month < 1 or month > 12:
        return False

    return 1 <= day <= month_len(int(month), isLeap(year))


# Returns the numpy day value for the given date
def to_datetime64(date):
    year, month, day = date

    # build up from the year so negative years never go through string parsing
    first_of_month = np.datetime64(int(year) - 1970, 'Y').astype('datetime64[M]') + np.timedelta64(int(month) - 1, 'M')

    return first_of_month.astype('datetime64[D]') + np.timedelta64(int(day) - 1, 'D')


# Returns the GregorianDate for a numpy day value
def from_datetime64(value):
    value = np.datetime64(value, 'D')

    first_of_month = value.astype('datetime64[M]')

    year = value.astype('datetime64[Y]').astype(np.int64) + 1970
    month = first_of_month.astype(np.int64) % 12 + 1
    day = (value - first_of_month.astype('datetime64[D]')) // ONE_DAY + 1

    return GregorianDate(int(year), int(month), int(day))


# Accepts a GregorianDate, a (year, month, day) tuple, a datetime.date or a numpy datetime64
def as_gregorian_date(value):
    if isinstance(value, GregorianDate):
        return value

    if isinstance(value, datetime.datetime):
        value = value.date()

    if isinstance(value, datetime.date):
        return GregorianDate(value.year, value.month, value.day)

    if isinstance(value, np.datetime64):
        return from_datetime64(value)

    year, month, day = value
    return GregorianDate(year, month, day)


# Returns a new date that lies the given number of days after (or before, if negative) the given date
def add_days(date, days):
    return from_datetime64(to_datetime64(date) + np.timedelta64(int(days), 'D'))


# Returns the number of whole days from start to end (negative if end precedes start)
def days_between(start, end):
    return int((to_datetime64(end) - to_datetime64(start)) // ONE_DAY)


# Returns the day of the week of the given date (Sunday = 0 ... Saturday = 6)
def weekday(date):
    days = (to_datetime64(date) - np.datetime64(0, 'D')) // ONE_DAY
    return int((days + UNIX_EPOCH_WEEKDAY) % 7)
