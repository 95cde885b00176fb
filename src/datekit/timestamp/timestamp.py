from __future__ import annotations

from datetime import datetime, timedelta, timezone

from datekit.calendar._parsing import DateLike, to_datetime, to_utc, to_wall_clock

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MILLISECOND = timedelta(milliseconds=1)


def date_to_timestamp(value: DateLike) -> int:
    """
    Milliseconds elapsed since 1970-01-01T00:00:00Z.

    Naive values are taken as UTC. Raises ``InvalidDateFormat`` if a string
    cannot be parsed.

    Examples::

        date_to_timestamp("01 Jan 1970 00:00:00 UTC")   # 0
        date_to_timestamp("04 Dec 1995 00:12:00 UTC")   # 818035920000
    """
    return (to_utc(value) - _EPOCH) // _MILLISECOND


def get_time(value: DateLike) -> str:
    """Local wall-clock time of ``value`` as ``HH:MM:SS``; aware values are
    converted to the system time zone first."""
    value = to_datetime(value)
    if value.tzinfo is not None:
        value = value.astimezone()
    return f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"


def format_date(value: DateLike) -> str:
    """
    ``M/D/YYYY, h:mm:ss AM|PM`` in UTC.

    Afternoon hours 13-23 become 1-11; the hours before noon, midnight
    included, are printed unchanged.

    Examples::

        format_date("2024-02-01T15:00:00.000Z")   # '2/1/2024, 3:00:00 PM'
        format_date("1999-01-05T02:20:00.000Z")   # '1/5/1999, 2:20:00 AM'
    """
    dt = to_wall_clock(value)
    suffix = "AM" if dt.hour < 12 else "PM"
    hour = dt.hour - 12 if dt.hour > 12 else dt.hour
    return (
        f"{dt.month}/{dt.day}/{dt.year}, "
        f"{hour}:{dt.minute:02d}:{dt.second:02d} {suffix}"
    )
