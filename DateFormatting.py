
## Month and weekday names for displaying converted dates

from CalendarErrors import InvalidMonthError
from CalendarUtilities import as_gregorian_date, weekday
from HebrewYear import is_leap_year

# global array storing days of the week
DAYS = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]

MONTHS = ["January", "February", "March", "April", "May", "June", "July", "August", "September",
          "October", "November", "December"]

# index of list is month number-1 (month 7 is plain "Adar" in a common year)
HEBREW_MONTHS = ["Tishrei", "Cheshvan", "Kislev", "Teves", "Shevat", "Adar I", "Adar II", "Nisan", "Iyar",
                 "Sivan", "Tammuz", "Av", "Elul"]

# GEDCOM month abbreviations for Hebrew dates (ADR is Adar I, ADS is Adar Sheni)
GEDCOM_MONTHS = ["TSH", "CSH", "KSL", "TVT", "SHV", "ADR", "ADS", "NSN", "IYR", "SVN", "TMZ", "AAV", "ELL"]


# Returns the name of the given month in the given Hebrew year
def hebrew_month_name(month, year):
    if month < 1 or month > len(HEBREW_MONTHS):
        raise InvalidMonthError("invalid Hebrew month %r" % (month,))

    if month == 7 and not is_leap_year(year):
        return "Adar"

    return HEBREW_MONTHS[month - 1]


# Returns the Hebrew month number for a GEDCOM abbreviation such as 'TMZ'
def month_from_gedcom_abbrev(abbrev):
    try:
        return GEDCOM_MONTHS.index(abbrev.strip().upper()) + 1
    except ValueError:
        raise InvalidMonthError("unknown Hebrew month abbreviation %r" % (abbrev,)) from None


# Returns the name of the day of the week of the given Gregorian date
def weekday_name(date):
    return DAYS[weekday(as_gregorian_date(date))]


# e.g. "26 Adar II, 5765"
def format_hebrew_date(date):
    year, month, day = date
    return str(day) + " " + hebrew_month_name(month, year) + ", " + str(year)


# e.g. "Wednesday, 6 April, 2005"
def format_gregorian_date(date):
    date = as_gregorian_date(date)
    return weekday_name(date) + ", " + str(date.day) + " " + MONTHS[date.month - 1] + ", " + str(date.year)
