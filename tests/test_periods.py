"""
tests/test_periods.py
=====================

Billing periods and multi-period billing schedules.
"""

from datetime import date, timedelta

import pytest

from rentcalc.conventions.types import Frequency
from rentcalc.errors import ValidationError
from rentcalc.schedule import (
    BillingPeriod,
    billing_period,
    billing_schedule,
    schedule_frame,
)


def test_quarterly_period_is_the_containing_quarter():
    period = billing_period("2025-04-10", Frequency.QUARTERLY)
    assert period == BillingPeriod(date(2025, 3, 25), date(2025, 6, 23))


def test_quarterly_period_across_year_end():
    period = billing_period(date(2026, 1, 15), "quarterly")
    assert period == BillingPeriod(date(2025, 12, 25), date(2026, 3, 24))


@pytest.mark.parametrize(
    "start, end",
    [
        (date(2025, 1, 15), date(2025, 2, 14)),
        (date(2025, 12, 15), date(2026, 1, 14)),
        (date(2025, 3, 1), date(2025, 3, 31)),
        (date(2025, 1, 31), date(2025, 2, 27)),
        (date(2024, 1, 31), date(2024, 2, 28)),
    ],
)
def test_monthly_period_is_one_month_less_a_day(start, end):
    assert billing_period(start, "Monthly") == BillingPeriod(start, end)


def test_frequency_month_counts():
    assert Frequency.MONTHLY.months() == 1
    assert Frequency.QUARTERLY.months() == 3


def test_unknown_frequency_rejected():
    with pytest.raises(ValidationError) as excinfo:
        billing_period("2025-01-01", "weekly")
    assert excinfo.value.field == "frequency"


def test_period_end_before_start_rejected():
    with pytest.raises(ValidationError) as excinfo:
        BillingPeriod(date(2025, 2, 1), date(2025, 1, 31))
    assert excinfo.value.field == "end"


def test_period_day_counts():
    period = BillingPeriod("2025-03-25", "2025-06-23")
    assert period.start == date(2025, 3, 25)
    assert period.days == 90
    assert period.inclusive_days == 91
    assert period.exclusive_end == date(2025, 6, 24)
    assert period.to_dict() == {"start": "2025-03-25", "end": "2025-06-23"}


def test_monthly_schedule_keeps_month_end_roll():
    """A schedule starting on the 31st does not drift after February."""
    periods = billing_schedule("2025-01-31", "2025-05-01", Frequency.MONTHLY)
    assert [p.start for p in periods] == [
        date(2025, 1, 31),
        date(2025, 2, 28),
        date(2025, 3, 31),
        date(2025, 4, 30),
    ]
    assert periods[-1].end == date(2025, 5, 30)


@pytest.mark.parametrize("frequency", [Frequency.MONTHLY, Frequency.QUARTERLY])
def test_schedules_are_contiguous(frequency):
    periods = billing_schedule("2024-11-30", "2026-11-30", frequency)
    for current, following in zip(periods, periods[1:]):
        assert current.end + timedelta(days=1) == following.start


def test_quarterly_schedule():
    periods = billing_schedule("2025-05-01", "2025-12-31", "quarterly")
    assert [p.start for p in periods] == [
        date(2025, 3, 25),
        date(2025, 6, 24),
        date(2025, 9, 29),
        date(2025, 12, 25),
    ]


def test_quarterly_schedule_at_the_end_of_the_calendar():
    """The schedule stops at the last quarter it needs without resolving the one after."""
    periods = billing_schedule("9999-01-01", "9999-10-01", "quarterly")
    assert periods[0].start == date(9998, 12, 25)
    assert periods[-1] == BillingPeriod(date(9999, 9, 29), date(9999, 12, 24))
    assert len(periods) == 4


def test_schedule_until_before_start_rejected():
    with pytest.raises(ValidationError) as excinfo:
        billing_schedule("2025-05-01", "2025-04-01", "monthly")
    assert excinfo.value.field == "until"


def test_schedule_frame():
    periods = billing_schedule("2025-03-25", "2026-03-24", Frequency.QUARTERLY)
    frame = schedule_frame(periods)
    assert list(frame.columns) == ["start", "end", "days", "inclusive_days"]
    assert len(frame) == 4
    assert frame["days"].tolist() == [90, 96, 86, 89]
    assert frame["inclusive_days"].sum() == 365


def test_empty_schedule_frame_keeps_columns():
    frame = schedule_frame([])
    assert frame.empty
    assert list(frame.columns) == ["start", "end", "days", "inclusive_days"]
