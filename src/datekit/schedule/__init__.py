# src/datekit/schedule/__init__.py
"""
datekit.schedule
~~~~~~~~~~~~~~~~

Shift schedules built from a repeating work/off cycle.  A WorkPattern maps
day offsets from the start of a period onto a cyclic 0/1 pattern; the
schedule is every offset that lands on a working day.

Basic usage::

    from datekit.schedule import generate_schedule

    generate_schedule({"start": "01-01-2024", "end": "15-01-2024"}, 1, 3)
    # → ['01-01-2024', '05-01-2024', '09-01-2024', '13-01-2024']

Working with the pattern directly::

    from datekit.schedule import WorkPattern

    pattern = WorkPattern(2, 1)        # two on, one off
    pattern.mask(6)                    # → array([ True,  True, False,  True,  True, False])

Public API
----------
WorkPattern        Cyclic work/off pattern.
generate_schedule  'DD-MM-YYYY' working days within a period.
count_work_days    Number of working days within a period.
"""

from __future__ import annotations

from datekit.schedule.schedule import WorkPattern, count_work_days, generate_schedule

__all__ = [
    "WorkPattern",
    "count_work_days",
    "generate_schedule",
]
