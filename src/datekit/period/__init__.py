# src/datekit/period/__init__.py
"""
datekit.period
~~~~~~~~~~~~~~

Operations on inclusive date ranges: day counts, containment checks and
work-rotation schedules.

Basic usage::

    from datekit.period import get_work_schedule, is_date_in_period

    is_date_in_period("2024-02-02", {"start": "2024-02-02", "end": "2024-03-02"})   # → True
    get_work_schedule({"start": "01-01-2024", "end": "10-01-2024"}, 1, 1)
    # → ['01-01-2024', '03-01-2024', '05-01-2024', '07-01-2024', '09-01-2024']

Arbitrary rotations are built with ShiftPattern::

    from datekit.period import ShiftPattern

    shifts = ShiftPattern([True, True, False, True, False, False])
    shifts.working_days(date(2024, 1, 1), date(2024, 1, 31))

Public API
----------
DatePeriod                Inclusive (start, end) pair.
ShiftPattern              Cyclic working/off-day pattern.
get_count_days_on_period, is_date_in_period, get_work_schedule
"""

from datekit.period.period import (
    DatePeriod,
    get_count_days_on_period,
    is_date_in_period,
)
from datekit.period.schedule import ShiftPattern, get_work_schedule

__all__ = [
    "DatePeriod",
    "ShiftPattern",
    "get_count_days_on_period",
    "get_work_schedule",
    "is_date_in_period",
]
