
## Errors raised for dates that cannot be converted


class CalendarError(ValueError):
    pass


# year outside the supported range (or a Gregorian date outside the years it covers)
class InvalidYearError(CalendarError):
    pass


# month out of range, or Adar I in a common year
class InvalidMonthError(CalendarError):
    pass


# day below 1 or beyond the end of its month
class InvalidDayError(CalendarError):
    pass
