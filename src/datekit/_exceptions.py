class CalendarError(Exception):
    """Base class for every error raised by datekit."""


class InvalidArgumentError(CalendarError, ValueError):
    """A numeric argument (month, year, pattern length) is out of range."""


class InvalidDateError(CalendarError, ValueError):
    """A date string could not be parsed."""
