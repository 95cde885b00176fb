from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Sequence

import numpy as np

from datekit.calendar._exceptions import CalendarError, InvalidDateFormat, InvalidRange
from datekit.period.period import DatePeriod, PeriodLike

logger = logging.getLogger(__name__)

SCHEDULE_DATE_FORMAT = "%d-%m-%Y"


class ShiftPattern:
    """
    Repeating cycle of working (True) and off (False) calendar days.

    Day ``i`` after the cycle start is a working day iff
    ``pattern[i % len(pattern)]`` is true.
    """

    def __init__(self, pattern: Sequence[bool]) -> None:
        if not len(pattern):
            raise CalendarError("Pattern must not be empty.")
        self._pattern: list[bool] = [bool(p) for p in pattern]
        self._n: int = len(self._pattern)
        self._np_pattern: np.ndarray = np.array(self._pattern, dtype=bool)

    @classmethod
    def from_counts(cls, work_days: int, off_days: int) -> ShiftPattern:
        """``work_days`` working days followed by ``off_days`` days off."""
        if work_days < 0 or off_days < 0:
            raise CalendarError(
                f"Day counts must be non-negative; got {work_days}, {off_days}."
            )
        if work_days + off_days == 0:
            raise CalendarError("A cycle needs at least one day.")
        return cls([True] * work_days + [False] * off_days)

    # ── queries ──────────────────────────────────────────────────────────────

    def is_working(self, start: date, day: date) -> bool:
        """Whether ``day`` is a working day of a cycle beginning on ``start``."""
        return self._pattern[(day - start).days % self._n]

    def working_days(self, start: date, end: date) -> list[date]:
        """All working days in ``[start, end]`` for a cycle beginning on ``start``."""
        if end < start:
            raise InvalidRange(f"Period end {end} precedes start {start}.")
        n_days = (end - start).days + 1
        mask = self._np_pattern[np.arange(n_days, dtype=np.int64) % self._n]
        days = np.datetime64(start, "D") + np.flatnonzero(mask)
        return days.tolist()

    # ── properties / repr ────────────────────────────────────────────────────

    @property
    def cycle_length(self) -> int:
        return self._n

    @property
    def cycle_work(self) -> int:
        return int(self._np_pattern.sum())

    @property
    def pattern(self) -> tuple[bool, ...]:
        return tuple(self._pattern)

    def __repr__(self) -> str:
        return (
            f"ShiftPattern(cycle_length={self._n}, "
            f"cycle_work={self.cycle_work})"
        )


def _parse_schedule_date(value: str) -> date:
    try:
        return datetime.strptime(value, SCHEDULE_DATE_FORMAT).date()
    except (TypeError, ValueError) as exc:
        raise InvalidDateFormat(
            f"Expected a DD-MM-YYYY date; got {value!r}."
        ) from exc


def _format_schedule_date(day: date) -> str:
    return f"{day.day:02d}-{day.month:02d}-{day.year}"


def get_work_schedule(
    period: PeriodLike, work_days: int, off_days: int
) -> list[str]:
    """
    Working days of a ``work_days`` on / ``off_days`` off rotation.

    ``period`` bounds are ``DD-MM-YYYY`` strings, both inclusive, and the
    rotation starts on the first day of the period. Dates are returned in
    the same format.

    Examples::

        get_work_schedule({"start": "01-01-2024", "end": "15-01-2024"}, 1, 3)
        # ['01-01-2024', '05-01-2024', '09-01-2024', '13-01-2024']
    """
    p = DatePeriod.coerce(period)
    start = _parse_schedule_date(p.start)
    end = _parse_schedule_date(p.end)

    shifts = ShiftPattern.from_counts(work_days, off_days)
    days = shifts.working_days(start, end)
    logger.debug(
        "Scheduled %d working days between %s and %s with %r.",
        len(days), start, end, shifts,
    )
    return [_format_schedule_date(d) for d in days]
