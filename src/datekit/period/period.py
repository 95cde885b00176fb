from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Mapping, Sequence, Union

from datekit.calendar._exceptions import InvalidRange
from datekit.calendar._parsing import DateLike, to_utc

MS_PER_DAY: int = 86_400_000

_MILLISECOND = timedelta(milliseconds=1)


@dataclass(frozen=True, slots=True)
class DatePeriod:
    """Inclusive ``[start, end]`` pair of dates."""

    start: Any
    end: Any

    @classmethod
    def coerce(cls, value: PeriodLike) -> DatePeriod:
        """Accept a ``DatePeriod``, a ``{"start", "end"}`` mapping or a pair."""
        if isinstance(value, DatePeriod):
            return value
        if isinstance(value, Mapping):
            return cls(value["start"], value["end"])
        start, end = value
        return cls(start, end)


PeriodLike = Union[DatePeriod, Mapping[str, Any], Sequence[Any]]


def _bounds(start: DateLike, end: DateLike) -> tuple[datetime, datetime]:
    s, e = to_utc(start), to_utc(end)
    if e < s:
        raise InvalidRange(f"Period end {end!r} precedes start {start!r}.")
    return s, e


def get_count_days_on_period(start: DateLike, end: DateLike) -> int:
    """
    Number of days from ``start`` to ``end``, both included.

    Any span of one day or less counts as 2, so equal dates give 2 as well.

    Examples::

        get_count_days_on_period("2024-02-01T00:00:00.000Z", "2024-02-02T00:00:00.000Z")  # 2
        get_count_days_on_period("2024-02-01T00:00:00.000Z", "2024-02-12T00:00:00.000Z")  # 12
    """
    s, e = _bounds(start, end)
    elapsed_ms = (e - s) // _MILLISECOND
    if elapsed_ms <= MS_PER_DAY:
        return 2
    return elapsed_ms // MS_PER_DAY + 1


def is_date_in_period(value: DateLike, period: PeriodLike) -> bool:
    """True if ``value`` lies within ``period``, boundaries included."""
    p = DatePeriod.coerce(period)
    s, e = _bounds(p.start, p.end)
    return s <= to_utc(value) <= e
