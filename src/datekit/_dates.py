from __future__ import annotations

import logging
from datetime import date, datetime, time, timezone
from typing import Any, Mapping, Union

import numpy as np
from dateutil import parser as _parser

from ._exceptions import InvalidDateError

logger = logging.getLogger(__name__)

DateLike = Union[str, date, datetime, np.datetime64]

SCHEDULE_DATE_FMT = "%d-%m-%Y"

_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def to_datetime(date_like: DateLike) -> datetime:
    """
    Convert a date-like value to a datetime.

    Accepts datetimes (returned unchanged), dates (midnight), numpy
    datetime64 scalars and strings. Strings are tried as ISO-8601 first and
    then handed to the dateutil parser, so '04 Dec 1995 00:12:00 UTC' works.
    """
    if isinstance(date_like, datetime):
        return date_like
    if isinstance(date_like, date):
        return datetime.combine(date_like, time())
    if isinstance(date_like, np.datetime64):
        if np.isnat(date_like):
            raise InvalidDateError("Cannot convert NaT to a datetime.")
        return date_like.astype("datetime64[us]").astype(datetime)
    if isinstance(date_like, str):
        return _parse_string(date_like)
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


def coerce_date(date_like: DateLike) -> date | datetime:
    """Like to_datetime, but plain dates stay dates."""
    if isinstance(date_like, date):
        return date_like
    return to_datetime(date_like)


def as_utc(date_like: DateLike) -> datetime:
    """Aware values are converted to UTC; naive values are read as UTC."""
    dt = to_datetime(date_like)
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _parse_string(text: str) -> datetime:
    try:
        return _parser.isoparse(text)
    except ValueError:
        logger.debug("Not ISO-8601, falling back to dateutil parser: %r", text)
    try:
        first = _parser.parse(text, default=_DEFAULTS[0])
        second = _parser.parse(text, default=_DEFAULTS[1])
    except (ValueError, OverflowError) as exc:
        raise InvalidDateError(f"Unsupported date string: {text!r}") from exc
    # Fields missing from the string are filled from the default; a string
    # that parses differently under two defaults has no date of its own.
    if first != second:
        raise InvalidDateError(f"Incomplete date string: {text!r}")
    return first


def parse_dmy(text: str) -> date:
    """Parse a 'DD-MM-YYYY' string."""
    try:
        return datetime.strptime(text, SCHEDULE_DATE_FMT).date()
    except (TypeError, ValueError) as exc:
        raise InvalidDateError(
            f"Expected a 'DD-MM-YYYY' date string; got {text!r}."
        ) from exc


def format_dmy(value: date) -> str:
    """Format a date as zero-padded 'DD-MM-YYYY'."""
    return f"{value.day:02d}-{value.month:02d}-{value.year:04d}"


def period_bounds(period: Any) -> tuple[Any, Any]:
    """Return (start, end) of a DatePeriod or a {'start', 'end'} mapping."""
    if isinstance(period, Mapping):
        return period["start"], period["end"]
    return period.start, period.end
