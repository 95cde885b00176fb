# src/datekit/calendar/__init__.py
"""
datekit.calendar
~~~~~~~~~~~~~~~~

Calendar arithmetic on single dates: leap years, month lengths, weekend
counts, quarters, day names, upcoming Fridays and week numbers.

Basic usage::

    from datekit.calendar import get_count_days_in_month, get_day_name

    get_count_days_in_month(2, 2024)                 # → 29
    get_day_name("01 Jan 1970 00:00:00 UTC")         # → 'Thursday'

Month-level functions accept NumPy arrays wherever a scalar is::

    import numpy as np
    months = np.arange(1, 13)
    get_count_weekends_in_month(months, 2024)        # → array([8, 8, 10, ...])

Naive datetimes are read as UTC; aware ones are converted to UTC first.

Public API
----------
get_day_name, get_next_friday, get_next_friday_the_13th,
get_week_number_by_date, get_count_days_in_month,
get_count_weekends_in_month, get_quarter, is_leap_year
CalendarError      Base exception for all calendar-related errors.
InvalidDateFormat  A value could not be parsed into a date.
InvalidRange       A period ends before it starts.
"""

from __future__ import annotations

from datekit.calendar._exceptions import CalendarError, InvalidDateFormat, InvalidRange
from datekit.calendar.calendar import (
    get_count_days_in_month,
    get_count_weekends_in_month,
    get_quarter,
    is_leap_year,
)
from datekit.calendar.weekdays import (
    DAY_NAMES,
    DEFAULT_SCAN_UNTIL_YEAR,
    get_day_name,
    get_next_friday,
    get_next_friday_the_13th,
    get_week_number_by_date,
)

__all__ = [
    "CalendarError",
    "InvalidDateFormat",
    "InvalidRange",
    "DAY_NAMES",
    "DEFAULT_SCAN_UNTIL_YEAR",
    "get_count_days_in_month",
    "get_count_weekends_in_month",
    "get_day_name",
    "get_next_friday",
    "get_next_friday_the_13th",
    "get_quarter",
    "get_week_number_by_date",
    "is_leap_year",
]
