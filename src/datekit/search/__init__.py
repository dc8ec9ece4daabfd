# src/datekit/search/__init__.py
"""
datekit.search
~~~~~~~~~~~~~~

Rolling searches for the next occurrence of a weekday pattern.  Inputs are
never modified; a new value of the same type is returned (``date`` in,
``date`` out; a ``datetime`` keeps its time and tzinfo).

Basic usage::

    from datetime import date
    from datekit.search import next_friday, next_friday_the_13th

    next_friday(date(2024, 2, 16))             # → date(2024, 2, 23)
    next_friday_the_13th(date(2024, 1, 13))    # → date(2024, 9, 13)
"""

from __future__ import annotations

from datekit.search.search import FRIDAY, next_friday, next_friday_the_13th

__all__ = [
    "FRIDAY",
    "next_friday",
    "next_friday_the_13th",
]
