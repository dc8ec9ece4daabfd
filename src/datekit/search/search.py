from __future__ import annotations

import logging
from datetime import date

from dateutil.relativedelta import relativedelta

from .._dates import DateLike, coerce_date

logger = logging.getLogger(__name__)

FRIDAY = 4  # date.weekday(): Monday is 0
_ONE_WEEK = relativedelta(days=7)


def next_friday(date_like: DateLike) -> date:
    """
    First Friday strictly after the given date. A Friday moves a full week
    ahead. Time of day and tzinfo of a datetime are kept.
    """
    d = coerce_date(date_like)
    offset = (FRIDAY - d.weekday()) % 7 or 7
    return d + relativedelta(days=offset)


def next_friday_the_13th(date_like: DateLike) -> date:
    """
    First Friday the 13th on or after the given date.

    Rolls forward to the same-or-next Friday, then walks week by week until
    the day of month is 13. Fridays the 13th are never more than 14 months
    apart, so the walk is short.
    """
    d = coerce_date(date_like)
    d += relativedelta(days=(FRIDAY - d.weekday()) % 7)
    steps = 0
    while d.day != 13:
        d += _ONE_WEEK
        steps += 1
    logger.debug("Found Friday the 13th %s after %d weekly steps", d, steps)
    return d
