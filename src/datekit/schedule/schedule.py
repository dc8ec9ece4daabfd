from __future__ import annotations

import logging
from typing import Any

import numpy as np

from .._dates import format_dmy, parse_dmy, period_bounds
from .._exceptions import CalendarError
from ..periods import days_between_inclusive

logger = logging.getLogger(__name__)


class WorkPattern:
    """
    Cyclic work/off pattern: ``work_days`` working days followed by
    ``off_days`` days off, repeated from day offset 0.

    The pattern is held as a 0/1 weight array; a horizon of day offsets maps
    onto it by ``offset % cycle_length``.
    """

    def __init__(self, work_days: int, off_days: int) -> None:
        if work_days < 1:
            raise CalendarError(f"work_days must be >= 1; got {work_days}.")
        n = work_days + off_days
        if n < 1:
            raise CalendarError(
                f"Cycle length must be positive; got {work_days} + {off_days}."
            )
        self._work_days: int = int(work_days)
        self._off_days: int = int(off_days)
        self._n: int = int(n)
        # Negative off_days give a cycle shorter than the work block; every
        # day is then a work day.
        self._np_pattern: np.ndarray = np.arange(self._n) < self._work_days

    # ── queries ──────────────────────────────────────────────────────────

    def is_work_day(self, offset: int) -> bool:
        return bool(self._np_pattern[offset % self._n])

    def mask(self, horizon: int) -> np.ndarray:
        """Boolean work mask for day offsets ``0 .. horizon - 1``."""
        if horizon <= 0:
            return np.zeros(0, dtype=bool)
        return self._np_pattern[np.arange(horizon, dtype=np.int64) % self._n]

    def work_offsets(self, horizon: int) -> np.ndarray:
        return np.flatnonzero(self.mask(horizon))

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def work_days(self) -> int:
        return self._work_days

    @property
    def off_days(self) -> int:
        return self._off_days

    @property
    def cycle_length(self) -> int:
        return self._n

    def __repr__(self) -> str:
        return (
            f"WorkPattern(work_days={self._work_days}, "
            f"off_days={self._off_days}, "
            f"cycle_length={self._n})"
        )


def _schedule_offsets(
    period: Any, work_days: int, off_days: int
) -> tuple[np.datetime64, np.ndarray]:
    start_str, end_str = period_bounds(period)
    start, end = parse_dmy(start_str), parse_dmy(end_str)
    first = np.datetime64(start, "D")

    total = days_between_inclusive(start, end)
    if total <= 0 or work_days <= 0:
        return first, np.zeros(0, dtype=np.int64)

    offsets = WorkPattern(work_days, off_days).work_offsets(total)
    return first, offsets


def generate_schedule(period: Any, work_days: int, off_days: int) -> list[str]:
    """
    Working days of a repeating work/off cycle within a period.

    ``period`` has 'DD-MM-YYYY' ``start`` and ``end`` bounds, both inclusive.
    Starting on ``start``, ``work_days`` consecutive days are emitted, then
    ``off_days`` are skipped, and so on; the last block is cut at ``end``.
    An empty period or a non-positive ``work_days`` gives an empty schedule.
    ``off_days`` is not validated.
    """
    first, offsets = _schedule_offsets(period, work_days, off_days)
    days = (first + offsets).astype(object)
    schedule = [format_dmy(d) for d in days]
    logger.debug(
        "Generated %d work days for %d on / %d off", len(schedule), work_days, off_days
    )
    return schedule


def count_work_days(period: Any, work_days: int, off_days: int) -> int:
    """Length of ``generate_schedule(period, work_days, off_days)``."""
    _, offsets = _schedule_offsets(period, work_days, off_days)
    return int(offsets.size)
