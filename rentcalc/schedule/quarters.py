"""Quarter-day rental periods.

A rent year is split into four quarters that start on the English quarter
days (Lady Day, Midsummer, Michaelmas and Christmas) and each end the day
before the next one. The Christmas quarter runs across the year end.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Tuple

from rentcalc.conventions.quarter_days import (
    QUARTER_DAYS,
    QuarterDay,
    quarter_day_index,
)
from rentcalc.errors import ValidationError
from rentcalc.utils.date import DateLike, to_date

from .core import Period

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuarterPeriod(Period):
    """One rental quarter; ``start`` is always a quarter day."""

    @property
    def quarter_day(self) -> QuarterDay:
        """The quarter day this period starts on."""
        return QUARTER_DAYS[quarter_day_index(self.start.month, self.start.day)]

    def next(self) -> QuarterPeriod:
        return resolve_quarter(self.end + timedelta(days=1))

    def previous(self) -> QuarterPeriod:
        return resolve_quarter(self.start - timedelta(days=1))


def _quarter_at(year: int, index: int) -> QuarterPeriod:
    """Build the quarter starting on QUARTER_DAYS[index] of ``year``."""
    qd = QUARTER_DAYS[index]
    next_index = (index + 1) % len(QUARTER_DAYS)
    next_year = year + 1 if next_index == 0 else year
    nqd = QUARTER_DAYS[next_index]
    try:
        start = date(year, qd.month, qd.day)
        end = date(next_year, nqd.month, nqd.day) - timedelta(days=1)
    except ValueError as exc:
        raise ValidationError(
            "date", f"quarter starting {qd.name} {year} is outside the supported date range"
        ) from exc
    return QuarterPeriod(start, end)


def resolve_quarter(value: DateLike) -> QuarterPeriod:
    """
    Return the quarter-day period containing ``value``.

    Boundary dates belong to the period that starts on them, so 24 June is
    the first day of the Midsummer quarter rather than the last of Lady Day's.

    Examples
    --------
    >>> resolve_quarter(date(2025, 12, 25))
    QuarterPeriod(start=datetime.date(2025, 12, 25), end=datetime.date(2026, 3, 24))
    """
    d = to_date(value)
    index = quarter_day_index(d.month, d.day)
    year = d.year
    if index < 0:
        # Before Lady Day: still in the quarter that began last Christmas.
        index = len(QUARTER_DAYS) - 1
        year -= 1
    quarter = _quarter_at(year, index)
    logger.debug("Resolved %s to quarter %s - %s", d, quarter.start, quarter.end)
    return quarter


def quarters_for_year(year: int) -> Tuple[QuarterPeriod, ...]:
    """The four quarters of the rent year starting on Lady Day of ``year``."""
    if isinstance(year, bool) or not isinstance(year, int):
        raise ValidationError("year", f"expected an integer year, got {year!r}")
    return tuple(_quarter_at(year, i) for i in range(len(QUARTER_DAYS)))
