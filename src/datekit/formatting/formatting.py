from __future__ import annotations

from datetime import datetime, timedelta, timezone

from .._dates import DateLike, as_utc, to_datetime

WEEKDAY_NAMES: tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


def date_to_timestamp(date_like: DateLike) -> int:
    """Milliseconds since 1970-01-01T00:00:00Z. Naive values count as UTC."""
    return (as_utc(date_like) - _EPOCH) // _ONE_MS


def time_of_day(date_like: DateLike) -> str:
    """Zero-padded 24-hour 'HH:MM:SS' from the value's own clock fields."""
    dt = to_datetime(date_like)
    return f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"


def day_name(date_like: DateLike) -> str:
    # date.weekday() is Monday-first; the name table is Sunday-first.
    return WEEKDAY_NAMES[(as_utc(date_like).weekday() + 1) % 7]


def format_date(date_like: DateLike) -> str:
    """
    'M/D/YYYY, h:MM:SS AM|PM' using UTC fields.

    Month, day and hour are not padded. Hours run 12, 1, ..., 11, so
    midnight is '12:00:00 AM' and noon '12:00:00 PM'.
    """
    dt = as_utc(date_like)
    suffix = "PM" if dt.hour >= 12 else "AM"
    hour = dt.hour % 12 or 12
    return (
        f"{dt.month}/{dt.day}/{dt.year}, "
        f"{hour}:{dt.minute:02d}:{dt.second:02d} {suffix}"
    )
