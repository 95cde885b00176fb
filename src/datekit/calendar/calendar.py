from __future__ import annotations

from typing import Union

import numpy as np

from ._exceptions import CalendarError
from ._parsing import DateLike, to_wall_clock

ArrayLike = Union[int, "np.ndarray"]

_DAYS_IN_MONTH: np.ndarray = np.array(
    [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31], dtype=np.int64
)

# np.busday_count weekmask, Monday first: only Saturday and Sunday are "valid".
WEEKEND_MASK = "0000011"


# ── helpers ──────────────────────────────────────────────────────────────────

def _is_leap(year: np.ndarray) -> np.ndarray:
    return (year % 4 == 0) & ((year % 100 != 0) | (year % 400 == 0))


def _month_and_year(
    month: ArrayLike, year: ArrayLike
) -> tuple[np.ndarray, np.ndarray]:
    m = np.asarray(month, dtype=np.int64)
    y = np.asarray(year, dtype=np.int64)
    if np.any((m < 1) | (m > 12)):
        raise CalendarError(f"Month must be in 1..12; got {month}.")
    m, y = np.broadcast_arrays(m, y)
    return m, y


def _first_of_month(m: np.ndarray, y: np.ndarray) -> np.ndarray:
    # datetime64[M] counts months since 1970-01.
    return ((y - 1970) * 12 + (m - 1)).astype("datetime64[M]")


# ── years ────────────────────────────────────────────────────────────────────

def is_leap_year(value: DateLike | int) -> bool:
    """
    True if the year of ``value`` is a leap year.

    A leap year is divisible by 4, but not by 100 unless it is also
    divisible by 400. ``value`` may be a date, a datetime, a date string or
    a plain year number.

    Examples::

        is_leap_year(datetime(2024, 3, 1))   # True
        is_leap_year(datetime(2022, 3, 1))   # False
        is_leap_year(1900)                   # False
    """
    if isinstance(value, (int, np.integer)):
        year = int(value)
    else:
        year = to_wall_clock(value).year
    return bool(_is_leap(np.int64(year)))


# ── months ───────────────────────────────────────────────────────────────────

def get_count_days_in_month(month: ArrayLike, year: ArrayLike) -> ArrayLike:
    """
    Number of days in ``month`` (1 = January) of ``year``.

    NumPy arrays are accepted for either argument and broadcast against each
    other; scalar arguments return an ``int``.
    """
    scalar = np.ndim(month) == 0 and np.ndim(year) == 0
    m, y = _month_and_year(month, year)
    days = _DAYS_IN_MONTH[m - 1] + ((m == 2) & _is_leap(y))
    return int(days) if scalar else days


def get_count_weekends_in_month(month: ArrayLike, year: ArrayLike) -> ArrayLike:
    """Number of Saturdays and Sundays in ``month`` (1 = January) of ``year``."""
    scalar = np.ndim(month) == 0 and np.ndim(year) == 0
    m, y = _month_and_year(month, year)
    first = _first_of_month(m, y)
    counts = np.busday_count(
        first.astype("datetime64[D]"),
        (first + 1).astype("datetime64[D]"),
        weekmask=WEEKEND_MASK,
    )
    return int(counts) if scalar else counts


def get_quarter(value: DateLike) -> int:
    """Quarter of the year (1-4) of the UTC month of ``value``."""
    return (to_wall_clock(value).month - 1) // 3 + 1
