
## Hebrew year rules: leap years, Rosh Hashanah (Alef Tishrei), year length and month lengths

from CalendarUtilities import GregorianDate, add_days, days_between
from MoladCalculation import CHALAKIM_PER_HOUR, molad_determination

# years of the 19-year cycle that are leap years (the 19th year of the cycle leaves remainder 0)
LEAP_YEARS = {3, 6, 8, 11, 14, 17, 0}

# 1 January 1900 is day 2067025 counted from the epoch; counting from a modern reference date
# keeps negative years out of the date arithmetic
EPOCH_REFERENCE_DATE = GregorianDate(1900, 1, 1)
EPOCH_BIAS = 2067025

# day of the week of a day number is days % 7, with Saturday = 0
SUNDAY, MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY = 1, 2, 3, 4, 5, 6, 0

# year types: chaserah (deficient), k'sidrah (regular), meleiah (complete)
DEFICIENT = 'd'
REGULAR = 'r'
COMPLETE = 'c'

MONTHS_IN_LEAP_YEAR = 13
ADAR_I = 6
ADAR = 7
ELUL = 13


# Returns True if the given Hebrew year is a leap year
def is_leap_year(year):
    return year % 19 in LEAP_YEARS


# Returns which year (1-19) of the 19-year cycle the given year is
def year_of_cycle(year):
    return year % 19 or 19


# Returns the day number (days since the epoch) of Rosh Hashanah of the given year
def tishrei1_day_number(year):

    days, hours, chalakim = molad_determination(year)
    day_of_week = days % 7

    # time of day of the molad, in chalakim
    molad_time = hours * CHALAKIM_PER_HOUR + chalakim

    # GaTaRaD: a common year whose molad falls on Tuesday at or after 9h 204p would be 356 days long;
    # pushing off one day would land on Wednesday, so push off two
    if not is_leap_year(year) and day_of_week == TUESDAY and molad_time >= 9 * CHALAKIM_PER_HOUR + 204:
        return days + 2

    # BeTUTeKaPoT: after a leap year, a Monday molad at or after 15h 589p would leave the previous year 382 days long
    if is_leap_year(year - 1) and day_of_week == MONDAY and molad_time >= 15 * CHALAKIM_PER_HOUR + 589:
        return days + 1

    # molad zaken: molad at or after the 18th hour
    if hours >= 18:
        days += 1
        day_of_week = (day_of_week + 1) % 7

    # lo ADU rosh: never Sunday, Wednesday or Friday
    if day_of_week in (SUNDAY, WEDNESDAY, FRIDAY):
        days += 1

    return days


# Converts a day number (days since the epoch) to a Gregorian date
def day_number_to_gregorian(days):
    return add_days(EPOCH_REFERENCE_DATE, days - EPOCH_BIAS)


# Converts a Gregorian date to a day number (days since the epoch)
def gregorian_to_day_number(date):
    return days_between(EPOCH_REFERENCE_DATE, date) + EPOCH_BIAS


# Returns the Gregorian date of Rosh Hashanah of the given year
def tishrei1(year):
    return day_number_to_gregorian(tishrei1_day_number(year))


# Returns number of days in hebrew year
def length_of_year(year):
    return tishrei1_day_number(year + 1) - tishrei1_day_number(year)


# Returns 'd', 'r' or 'c' for a year of the given length
def classify_year(year_len):

    # 353 / 383
    if year_len % 10 == 3:
        return DEFICIENT

    # 355 / 385
    if year_len % 10 == 5:
        return COMPLETE

    return REGULAR


# Returns whether the given year is deficient ('d'), regular ('r') or complete ('c')
def year_type(year):
    return classify_year(length_of_year(year))


# Returns length of given hebrew month (0 if the month doesn't exist that year)
def len_hebrew_month(month, leap, year_len):

    if month in (1, 5, 8, 10, 12):
        return 30

    if month in (4, 7, 9, 11, 13):
        return 29

    # Adar I only exists in leap years
    if month == ADAR_I:
        return 30 if leap else 0

    # cheshvan has 30 days in a complete year
    if month == 2:
        return 30 if classify_year(year_len) == COMPLETE else 29

    # kislev has 29 days in a deficient year
    if month == 3:
        return 29 if classify_year(year_len) == DEFICIENT else 30

    return 0


# Returns a tuple of the lengths of months 1 through 13 of the given year
def month_lengths(year):
    leap = is_leap_year(year)
    year_len = length_of_year(year)

    return tuple(len_hebrew_month(month, leap, year_len) for month in range(1, MONTHS_IN_LEAP_YEAR + 1))


# Returns the month that follows the given one (Adar I is skipped in a common year)
def next_month(month, leap):
    if month == ADAR_I - 1 and not leap:
        return ADAR_I + 1

    return month + 1


# Returns the months of the given year in order
def months_in_year(year):
    leap = is_leap_year(year)
    return [month for month in range(1, MONTHS_IN_LEAP_YEAR + 1) if leap or month != ADAR_I]
