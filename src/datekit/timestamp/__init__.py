# src/datekit/timestamp/__init__.py
"""
datekit.timestamp
~~~~~~~~~~~~~~~~~

Conversions between dates, epoch timestamps and display strings.

Basic usage::

    from datekit.timestamp import date_to_timestamp, format_date

    date_to_timestamp("04 Dec 1995 00:12:00 UTC")   # → 818035920000
    format_date("2010-12-15T22:59:00.000Z")         # → '12/15/2010, 10:59:00 PM'
"""

from datekit.timestamp.timestamp import date_to_timestamp, format_date, get_time

__all__ = [
    "date_to_timestamp",
    "format_date",
    "get_time",
]
