from __future__ import annotations


class CalendarError(Exception):
    """Base exception for all calendar-related errors."""


class InvalidDateFormat(CalendarError, ValueError):
    """A value could not be interpreted as a date."""


class InvalidRange(CalendarError, ValueError):
    """A period ends before it starts."""
