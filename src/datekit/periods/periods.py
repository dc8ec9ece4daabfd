from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from .._dates import DateLike, as_utc, period_bounds

_ONE_DAY = timedelta(days=1)


@dataclass(frozen=True, slots=True)
class DatePeriod:
    """
    A pair of date-like bounds. ``start <= end`` is assumed by every consumer
    but never checked.
    """

    start: DateLike
    end: DateLike


def days_between_inclusive(start: DateLike, end: DateLike) -> int:
    """
    Number of days from start to end, counting both ends.

    The count is the floored absolute time difference in whole days plus
    one, so a 23h gap between two timestamps still counts as a single day.
    """
    return (as_utc(end) - as_utc(start)) // _ONE_DAY + 1


def is_within_period(date_like: DateLike, period: DatePeriod | Any) -> bool:
    """
    True if ``period.start <= date < period.end``.

    The end bound is exclusive: a date equal to ``period.end`` is outside.
    """
    start, end = period_bounds(period)
    ts = as_utc(date_like)
    return as_utc(start) <= ts < as_utc(end)
