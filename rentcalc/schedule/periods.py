"""
Billing period construction and multi-period billing schedules.
"""

import logging
from datetime import timedelta
from typing import Iterable, List, Union

import pandas as pd

from rentcalc.conventions.types import Frequency
from rentcalc.errors import ValidationError
from rentcalc.utils.date import DateLike, add_months, to_date

from .core import BillingPeriod
from .quarters import resolve_quarter

logger = logging.getLogger(__name__)

SCHEDULE_COLUMNS = ["start", "end", "days", "inclusive_days"]


def _monthly_end(start, months: int = 1):
    try:
        return add_months(start, months) - timedelta(days=1)
    except (ValueError, OverflowError) as exc:
        raise ValidationError("start", f"{start} is outside the supported date range") from exc


def billing_period(start: DateLike, frequency: Union[Frequency, str]) -> BillingPeriod:
    """
    Return the period an invoice starting on ``start`` bills for.

    Quarterly rent bills the whole quarter-day period containing ``start``.
    Monthly rent bills one calendar month less a day; month arithmetic
    clamps to the end of shorter months, so 31 Jan bills to 27 Feb.
    """
    freq = Frequency.parse(frequency)
    start_date = to_date(start, "start")

    if freq == Frequency.QUARTERLY:
        quarter = resolve_quarter(start_date)
        return BillingPeriod(quarter.start, quarter.end)

    return BillingPeriod(start_date, _monthly_end(start_date, freq.months()))


def billing_schedule(
    first_start: DateLike,
    until: DateLike,
    frequency: Union[Frequency, str],
) -> List[BillingPeriod]:
    """
    Generate consecutive billing periods from ``first_start``.

    Periods are produced while their start is on or before ``until``.
    Monthly periods are anchored on ``first_start`` (the n-th period starts
    n months after it), so a schedule starting on the 31st keeps rolling on
    the last day of each month instead of drifting after February.

    Args:
        first_start: Start of the first billed period
        until: Last date a period may start on
        frequency: Rent payment frequency

    Returns:
        Contiguous, non-overlapping billing periods
    """
    freq = Frequency.parse(frequency)
    first = to_date(first_start, "first_start")
    last = to_date(until, "until")
    if last < first:
        raise ValidationError("until", f"{last} is before first_start {first}")

    periods: List[BillingPeriod] = []

    if freq == Frequency.QUARTERLY:
        quarter = resolve_quarter(first)
        while quarter.start <= last:
            periods.append(BillingPeriod(quarter.start, quarter.end))
            if quarter.end >= last:
                break
            quarter = quarter.next()
    else:
        n = 0
        start = first
        while start <= last:
            periods.append(BillingPeriod(start, _monthly_end(first, (n + 1) * freq.months())))
            n += 1
            start = add_months(first, n * freq.months())

    logger.debug(
        "Generated %d %s periods from %s to %s",
        len(periods), freq.name.lower(), first, last,
    )
    return periods


def schedule_frame(periods: Iterable[BillingPeriod]) -> pd.DataFrame:
    """Tabulate billing periods, one row per period."""
    rows = [
        {
            "start": p.start,
            "end": p.end,
            "days": p.days,
            "inclusive_days": p.inclusive_days,
        }
        for p in periods
    ]
    return pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)
