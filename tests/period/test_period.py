"""
tests/period/test_period.py

Covers:
  - Inclusive day counts, including the one-day-or-less floor of 2
  - Containment checks at and beyond both boundaries
  - Period coercion from mappings, pairs and DatePeriod
  - Reversed periods raising InvalidRange
"""

from datetime import datetime, timedelta, timezone

import pytest

from datekit.calendar import InvalidRange
from datekit.period import DatePeriod, get_count_days_on_period, is_date_in_period


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def february():
    return {"start": "2024-02-02", "end": "2024-03-02"}


# ── Day counts ────────────────────────────────────────────────────────────────

class TestCountDaysOnPeriod:

    def test_consecutive_days(self):
        assert get_count_days_on_period(
            "2024-02-01T00:00:00.000Z", "2024-02-02T00:00:00.000Z"
        ) == 2

    def test_twelve_days(self):
        assert get_count_days_on_period(
            "2024-02-01T00:00:00.000Z", "2024-02-12T00:00:00.000Z"
        ) == 12

    def test_same_day_counts_two(self):
        d = "2024-02-01T00:00:00.000Z"
        assert get_count_days_on_period(d, d) == 2

    def test_less_than_a_day_counts_two(self):
        assert get_count_days_on_period(
            "2024-02-01T00:00:00.000Z", "2024-02-01T12:00:00.000Z"
        ) == 2

    def test_partial_days_are_floored(self):
        assert get_count_days_on_period(
            "2024-02-01T00:00:00.000Z", "2024-02-03T12:00:00.000Z"
        ) == 3

    def test_n_days_apart_counts_n_plus_one(self):
        start = datetime(2023, 12, 20, tzinfo=timezone.utc)
        for n in range(1, 60):
            assert get_count_days_on_period(start, start + timedelta(days=n)) == n + 1

    def test_returns_int(self):
        assert isinstance(
            get_count_days_on_period("2024-02-01", "2024-02-12"), int
        )

    def test_reversed_raises(self):
        with pytest.raises(InvalidRange):
            get_count_days_on_period("2024-02-12", "2024-02-01")


# ── Containment ───────────────────────────────────────────────────────────────

class TestIsDateInPeriod:

    def test_before_start(self, february):
        assert is_date_in_period("2024-02-01", february) is False

    def test_on_start(self, february):
        assert is_date_in_period("2024-02-02", february) is True

    def test_inside(self, february):
        assert is_date_in_period("2024-02-10", february) is True

    def test_on_end(self, february):
        assert is_date_in_period("2024-03-02", february) is True

    def test_after_end(self, february):
        assert is_date_in_period("2024-03-02T00:00:00.001Z", february) is False

    def test_compared_as_instants(self, february):
        # 01:00 at +02:00 is Feb 1st 23:00 UTC.
        assert is_date_in_period("2024-02-02T01:00:00+02:00", february) is False

    def test_datetime_values(self):
        start = datetime(2024, 1, 1, tzinfo=timezone.utc)
        end = datetime(2024, 1, 31, tzinfo=timezone.utc)
        assert is_date_in_period(datetime(2024, 1, 15), DatePeriod(start, end))

    def test_pair_period(self):
        assert is_date_in_period("2024-02-10", ("2024-02-02", "2024-03-02"))

    def test_single_instant_period(self):
        assert is_date_in_period("2024-02-02", ("2024-02-02", "2024-02-02"))

    def test_reversed_raises(self):
        with pytest.raises(InvalidRange):
            is_date_in_period("2024-02-10", {"start": "2024-03-02", "end": "2024-02-02"})


# ── DatePeriod ────────────────────────────────────────────────────────────────

class TestDatePeriod:

    def test_coerce_mapping(self):
        assert DatePeriod.coerce({"start": "a", "end": "b"}) == DatePeriod("a", "b")

    def test_coerce_pair(self):
        assert DatePeriod.coerce(("a", "b")) == DatePeriod("a", "b")

    def test_coerce_identity(self):
        p = DatePeriod("a", "b")
        assert DatePeriod.coerce(p) is p

    def test_frozen(self):
        p = DatePeriod("a", "b")
        with pytest.raises(AttributeError):
            p.start = "c"
