# src/datekit/__init__.py
"""
datekit
~~~~~~~

Pure date-calculation utilities: calendar arithmetic, period tests,
next-occurrence search, work/off schedules and fixed-format rendering.

Every function accepts ``date``/``datetime`` values, ISO-8601 strings and
``numpy.datetime64`` scalars, and returns new values without touching its
inputs.

Public API
----------
See the subpackages: calendar, periods, search, schedule, formatting.
CalendarError         Base exception for all datekit errors.
InvalidArgumentError  Out-of-range numeric argument (e.g. month 13).
InvalidDateError      Unparseable date string.
"""

from __future__ import annotations

from datekit._exceptions import CalendarError, InvalidArgumentError, InvalidDateError
from datekit.calendar import (
    count_weekend_days,
    days_in_month,
    is_leap_year,
    quarter_of,
    week_number,
)
from datekit.formatting import (
    WEEKDAY_NAMES,
    date_to_timestamp,
    day_name,
    format_date,
    time_of_day,
)
from datekit.periods import DatePeriod, days_between_inclusive, is_within_period
from datekit.schedule import WorkPattern, count_work_days, generate_schedule
from datekit.search import next_friday, next_friday_the_13th

__all__ = [
    "CalendarError",
    "DatePeriod",
    "InvalidArgumentError",
    "InvalidDateError",
    "WEEKDAY_NAMES",
    "WorkPattern",
    "count_weekend_days",
    "count_work_days",
    "date_to_timestamp",
    "day_name",
    "days_between_inclusive",
    "days_in_month",
    "format_date",
    "generate_schedule",
    "is_leap_year",
    "is_within_period",
    "next_friday",
    "next_friday_the_13th",
    "quarter_of",
    "time_of_day",
    "week_number",
]
