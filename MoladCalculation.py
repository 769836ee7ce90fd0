
## Molad arithmetic: time tuples of the form (days, hours, chalakim)

from collections import namedtuple

MoladOffset = namedtuple('MoladOffset', ['days', 'hours', 'chalakim'])

CHALAKIM_PER_HOUR = 1080
HOURS_PER_DAY = 24

# molad tohu (BaHaRaD): day 2 (Monday), 5 hours, 204 chalakim after the epoch
MOLAD_TOHU = MoladOffset(2, 5, 204)

# mean interval between one molad and the next: 29d 12h 793p
LUNAR_MONTH = MoladOffset(29, 12, 793)

# 19-year cycle: (12 * 12) + (7 * 13) months
MONTHS_PER_CYCLE = 235

# positions in the 19-year cycle at which another leap month has been completed
LEAP_MONTHS_PASSED = (3, 6, 8, 11, 14, 17)


# Returns the number of complete lunar months between molad tohu and the start of the given year
def months_since_molad_tohu(year):

    # the months of the year itself haven't happened yet
    y = year - 1

    # complete 19-year cycles
    months = (y // 19) * MONTHS_PER_CYCLE

    # complete years in excess of complete cycles, 12 months each...
    remaining_years = y % 19
    months += 12 * remaining_years

    # ...plus one for every leap month already passed within the partial cycle
    months += sum(1 for position in LEAP_MONTHS_PASSED if remaining_years >= position)

    return months


# Multiplies time tuple of form (days, hours, chalakim) by an integer; returns new time tuple
# (days reduced to the day of the week unless acc_days)
def time_multiplication(time_tuple, factor, acc_days=True):

    # unpack time tuple
    days, hours, chalakim = time_tuple

    # total number of chalakim when time tuple is multiplied by given factor
    chalakim = factor * ((days * HOURS_PER_DAY * CHALAKIM_PER_HOUR) + (hours * CHALAKIM_PER_HOUR) + chalakim)

    # carry chalakim in excess of 1079
    hours = chalakim // CHALAKIM_PER_HOUR
    chalakim %= CHALAKIM_PER_HOUR

    # carry hours in excess of 23
    days = hours // HOURS_PER_DAY
    hours %= HOURS_PER_DAY

    # disregard days of complete weeks
    if not acc_days: days %= 7

    return MoladOffset(days, hours, chalakim)


# Adds two time tuples; returns new time tuple (days reduced to the day of the week unless acc_days)
def time_addition(tuple1, tuple2, acc_days=True):

    # unpack time tuples
    d1, h1, p1 = tuple1
    d2, h2, p2 = tuple2

    chalakim = p1 + p2
    hours = h1 + h2
    days = d1 + d2

    hours += chalakim // CHALAKIM_PER_HOUR
    chalakim %= CHALAKIM_PER_HOUR

    days += hours // HOURS_PER_DAY
    hours %= HOURS_PER_DAY

    if not acc_days: days %= 7

    return MoladOffset(days, hours, chalakim)


# Returns the molad of Tishrei of the given year as days (since the epoch), hours and chalakim
def molad_determination(year, acc_days=True):
    return molad_after_months(months_since_molad_tohu(year), acc_days)


# Returns the molad that falls the given number of months after molad tohu
def molad_after_months(months, acc_days=True):

    # how far the molad has advanced since molad tohu
    molad_advancement = time_multiplication(LUNAR_MONTH, months, acc_days)

    return time_addition(MOLAD_TOHU, molad_advancement, acc_days)


# Given Hebrew month and year, returns the month's molad as (day of week, hours, chalakim), Saturday = 0
# (in a non-leap year there is no month 6, so Adar counts as the 6th month of the year)
def molad_of_month(year, month, leap):

    months = months_since_molad_tohu(year) + month - 1

    if not leap and month > 6:
        months -= 1

    return molad_after_months(months, acc_days=False)
