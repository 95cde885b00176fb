from __future__ import annotations

import logging
from datetime import date, datetime, time, timezone
from typing import Union

from dateutil import parser

from ._exceptions import InvalidDateFormat

logger = logging.getLogger(__name__)

DateLike = Union[str, datetime, date]

# Fields missing from a string are filled from these; a complete date
# parses identically under both.
_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def to_datetime(value: DateLike) -> datetime:
    """
    Coerce ``value`` to a ``datetime`` without touching its timezone.

    Strings go through ``dateutil.parser`` so both ISO-8601
    (``2024-02-01T15:00:00.000Z``) and RFC-2822-like forms
    (``04 Dec 1995 00:12:00 UTC``) are understood. Strings must spell out
    year, month and day; partial ones such as ``"13"`` or ``"Dec"`` are
    rejected rather than completed from the current date. A ``date``
    becomes midnight of that day.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, str):
        if not value.strip():
            raise InvalidDateFormat("Date string must not be empty.")
        try:
            first = parser.parse(value, default=_DEFAULTS[0])
            second = parser.parse(value, default=_DEFAULTS[1])
        except (ValueError, OverflowError) as exc:
            logger.debug("Failed to parse date string %r: %s", value, exc)
            raise InvalidDateFormat(f"Cannot parse date {value!r}.") from exc
        if first.date() != second.date():
            raise InvalidDateFormat(
                f"Date string {value!r} does not give year, month and day."
            )
        return first
    raise InvalidDateFormat(
        f"Expected a date string, date or datetime; got {type(value).__name__}."
    )


def to_utc(value: DateLike) -> datetime:
    """Coerce to an aware UTC ``datetime``; naive values are taken as UTC."""
    dt = to_datetime(value)
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_wall_clock(value: DateLike) -> datetime:
    """Naive UTC wall-clock ``datetime`` for field extraction."""
    return to_utc(value).replace(tzinfo=None)
