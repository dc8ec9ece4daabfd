# src/datekit/formatting/__init__.py
"""
datekit.formatting
~~~~~~~~~~~~~~~~~~

Timestamps and fixed-format renderings of a single date.

Basic usage::

    from datekit.formatting import date_to_timestamp, day_name, format_date

    date_to_timestamp("04 Dec 1995 00:12:00 UTC")   # → 818035920000
    day_name("2024-01-30T00:00:00.000Z")            # → 'Tuesday'
    format_date("2024-02-01T15:00:00.000Z")         # → '2/1/2024, 3:00:00 PM'

Public API
----------
WEEKDAY_NAMES      English weekday names, Sunday first.
date_to_timestamp  Milliseconds since the Unix epoch.
time_of_day        'HH:MM:SS'.
day_name           English weekday name.
format_date        'M/D/YYYY, h:MM:SS AM|PM'.
"""

from __future__ import annotations

from datekit.formatting.formatting import (
    WEEKDAY_NAMES,
    date_to_timestamp,
    day_name,
    format_date,
    time_of_day,
)

__all__ = [
    "WEEKDAY_NAMES",
    "date_to_timestamp",
    "day_name",
    "format_date",
    "time_of_day",
]
