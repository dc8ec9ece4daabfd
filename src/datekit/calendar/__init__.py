# src/datekit/calendar/__init__.py
"""
datekit.calendar
~~~~~~~~~~~~~~~~

Gregorian calendar arithmetic: leap years, month lengths, Monday-first week
numbers, weekend counts and quarters.

Basic usage::

    from datetime import date
    from datekit.calendar import count_weekend_days, days_in_month, week_number

    days_in_month(2, 2024)             # → 29
    week_number(date(2024, 1, 31))     # → 5
    count_weekend_days(5, 2022)        # → 9

NumPy integer arrays are accepted by the leap-year and month-length
resolvers::

    import numpy as np
    is_leap_year(np.array([1900, 2000, 2023, 2024]))
    # → array([False,  True, False,  True])

Public API
----------
is_leap_year        Gregorian leap-year rule.
days_in_month       Length of a month (1-12) in a given year.
week_number         Week of the year; week 1 contains January 1.
count_weekend_days  Saturdays plus Sundays in a month.
quarter_of          Quarter (1-4) of a date.
"""

from __future__ import annotations

from datekit.calendar.calendar import (
    count_weekend_days,
    days_in_month,
    is_leap_year,
    quarter_of,
    week_number,
)

__all__ = [
    "count_weekend_days",
    "days_in_month",
    "is_leap_year",
    "quarter_of",
    "week_number",
]
