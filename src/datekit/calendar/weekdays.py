from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import TypeVar

import numpy as np

from ._parsing import DateLike, to_datetime, to_wall_clock

logger = logging.getLogger(__name__)

D = TypeVar("D", date, datetime)

# Sunday first. "Wendsday" is kept as published; existing consumers match on it.
DAY_NAMES: tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wendsday",
    "Thursday",
    "Friday",
    "Saturday",
)

DEFAULT_SCAN_UNTIL_YEAR: int = 2200

_FRIDAY = 4  # date.weekday()
_FRIDAY_MASK = "0000100"
_WEEK = timedelta(days=7)


def get_day_name(value: DateLike) -> str:
    """
    Name of the day of the week of ``value``, taken in UTC.

    Examples::

        get_day_name("01 Jan 1970 00:00:00 UTC")   # 'Thursday'
        get_day_name("2024-01-30T00:00:00.000Z")   # 'Tuesday'
    """
    return DAY_NAMES[(to_wall_clock(value).weekday() + 1) % 7]


def get_next_friday(value: D) -> D:
    """
    The next Friday after ``value``; a Friday moves a full week ahead.

    The weekday is taken in UTC, like ``get_day_name``. Returns a new value
    of the same type; time of day and tzinfo are kept.
    """
    if isinstance(value, str):
        value = to_datetime(value)
    days = (_FRIDAY - to_wall_clock(value).weekday()) % 7 or 7
    return value + timedelta(days=days)


def get_next_friday_the_13th(
    value: D, *, until_year: int = DEFAULT_SCAN_UNTIL_YEAR
) -> D:
    """
    The first Friday the 13th from the month of ``value`` on.

    When ``value`` itself falls on a 13th the scan starts one month later.
    Only years before ``until_year`` are scanned; if nothing is found the
    input is returned unchanged.

    Examples::

        get_next_friday_the_13th(date(2024, 1, 13))  # date(2024, 9, 13)
        get_next_friday_the_13th(date(2023, 2, 1))   # date(2023, 10, 13)
    """
    start = to_datetime(value) if isinstance(value, str) else value

    first = (start.year - 1970) * 12 + (start.month - 1)
    if start.day == 13:
        first += 1
    stop = (until_year - 1970) * 12

    thirteenths = (
        np.arange(first, stop, dtype=np.int64)
        .astype("datetime64[M]")
        .astype("datetime64[D]")
        + 12
    )
    hits = np.flatnonzero(np.is_busday(thirteenths, weekmask=_FRIDAY_MASK))
    if hits.size == 0:
        logger.debug(
            "No Friday the 13th between %s and year %d; returning input.",
            start, until_year,
        )
        return value

    year, month = divmod(first + int(hits[0]), 12)
    if isinstance(start, datetime):
        return datetime(year + 1970, month + 1, 13, tzinfo=start.tzinfo)
    return date(year + 1970, month + 1, 13)


# ── week numbers ─────────────────────────────────────────────────────────────

def _week_one_monday(year: int) -> datetime:
    # January 4th is always in week 1.
    jan4 = datetime(year, 1, 4)
    return jan4 - timedelta(days=jan4.weekday())


def get_week_number_by_date(value: DateLike) -> int:
    """
    Week number of ``value`` counted from the Monday of the week holding
    January 4th.

    The anchor advances a week at a time while a full week still lies
    strictly before ``value``, so Monday 00:00 belongs to the previous week.
    Dates before the anchor are week 1; dates past next year's anchor get
    the last week counted. A count of 33 is reported as 34.

    Examples::

        get_week_number_by_date(datetime(2024, 1, 3))    # 1
        get_week_number_by_date(datetime(2024, 1, 31))   # 5
        get_week_number_by_date(datetime(2024, 2, 23))   # 8
    """
    target = to_datetime(value).replace(tzinfo=None)
    anchor = _week_one_monday(target.year)
    next_anchor = _week_one_monday(target.year + 1)

    week = 1
    while anchor < next_anchor:
        if anchor + _WEEK < target:
            week += 1
            anchor += _WEEK
            continue
        if week == 33:
            logger.debug("Reporting week 33 of %s as week 34.", target.date())
            week = 34
        return week
    return week
