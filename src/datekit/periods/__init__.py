# src/datekit/periods/__init__.py
"""
datekit.periods
~~~~~~~~~~~~~~~

Day counts and membership tests over a ``DatePeriod``.  Bounds may be dates,
datetimes or ISO-8601 strings; a plain ``{"start": ..., "end": ...}`` mapping
works wherever a DatePeriod does.

Basic usage::

    from datekit.periods import DatePeriod, days_between_inclusive, is_within_period

    days_between_inclusive("2024-02-01", "2024-02-12")             # → 12
    is_within_period("2024-03-02", DatePeriod("2024-02-02", "2024-03-02"))
    # → False, the end bound is exclusive

Public API
----------
DatePeriod              Frozen (start, end) pair.
days_between_inclusive  Whole days between two dates, both ends counted.
is_within_period        start <= date < end.
"""

from __future__ import annotations

from datekit.periods.periods import (
    DatePeriod,
    days_between_inclusive,
    is_within_period,
)

__all__ = [
    "DatePeriod",
    "days_between_inclusive",
    "is_within_period",
]
