from __future__ import annotations

import math
from datetime import date
from typing import Union

import numpy as np

from .._dates import DateLike, as_utc, coerce_date
from .._exceptions import InvalidArgumentError

ArrayLike = Union[int, "np.ndarray"]

_DAYS_IN_MONTH: np.ndarray = np.array(
    [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31], dtype=np.int64
)

# Mon..Sun; busday_count counts the days flagged with 1.
_WEEKEND_MASK = "0000011"


def is_leap_year(year: ArrayLike | date) -> bool | np.ndarray:
    """
    Gregorian leap-year rule: divisible by 4, except centuries not divisible
    by 400. A date is resolved to its year; integer arrays are evaluated
    element-wise.
    """
    if isinstance(year, date):
        year = year.year
    if isinstance(year, int) and not isinstance(year, bool):
        # Python ints may exceed the int64 range numpy would need.
        return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)
    scalar = np.ndim(year) == 0
    y = np.asarray(year)
    if not np.issubdtype(y.dtype, np.integer):
        raise InvalidArgumentError(f"Year must be an integer; got {year!r}.")
    leap = (y % 4 == 0) & ((y % 100 != 0) | (y % 400 == 0))
    return bool(leap) if scalar else leap


def days_in_month(month: ArrayLike, year: ArrayLike) -> int | np.ndarray:
    scalar = np.ndim(month) == 0 and np.ndim(year) == 0
    m = np.asarray(month)
    if not np.issubdtype(m.dtype, np.integer):
        raise InvalidArgumentError(f"Month must be an integer; got {month!r}.")
    if np.any((m < 1) | (m > 12)):
        raise InvalidArgumentError(f"Month must be in 1..12; got {month!r}.")

    m, y = np.broadcast_arrays(m, np.asarray(year))
    days = _DAYS_IN_MONTH[m - 1] + ((m == 2) & is_leap_year(y)).astype(np.int64)
    return int(days) if scalar else days


def week_number(date_like: DateLike) -> int:
    """
    Week of the year, counting Monday-first weeks with week 1 being the week
    that contains January 1.

    Unlike ISO-8601, the days before the first Monday never belong to the
    previous year's last week; they are always week 1.
    """
    d = coerce_date(date_like)
    jan1_weekday = date(d.year, 1, 1).isoweekday()
    ordinal = d.day + sum(days_in_month(m, d.year) for m in range(1, d.month))
    return math.ceil((ordinal + jan1_weekday - 1) / 7)


def count_weekend_days(month: int, year: int) -> int:
    """Number of Saturdays and Sundays in the given month."""
    n_days = days_in_month(month, year)
    first = np.datetime64(date(year, month, 1), "D")
    last = first + np.timedelta64(n_days, "D")
    return int(np.busday_count(first, last, weekmask=_WEEKEND_MASK))


def quarter_of(date_like: DateLike) -> int:
    """Quarter (1-4) of the UTC month."""
    return (as_utc(date_like).month - 1) // 3 + 1
