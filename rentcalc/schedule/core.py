"""
Core data structures for rental periods.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Dict

from rentcalc.errors import ValidationError
from rentcalc.utils.date import DateLike, actual_days, datetime_to_str, to_date


@dataclass(frozen=True)
class Period:
    """A span of calendar days with inclusive start and end."""

    start: date
    end: date

    def __post_init__(self):
        # Accept date-likes but store plain dates.
        object.__setattr__(self, "start", to_date(self.start, "start"))
        object.__setattr__(self, "end", to_date(self.end, "end"))
        if self.end < self.start:
            raise ValidationError(
                "end", f"period end {self.end} is before start {self.start}"
            )

    def contains(self, value: DateLike) -> bool:
        return self.start <= to_date(value) <= self.end

    @property
    def inclusive_days(self) -> int:
        """Number of calendar days covered, counting both ends."""
        return actual_days(self.start, self.end) + 1

    def to_dict(self) -> Dict[str, str]:
        return {"start": datetime_to_str(self.start), "end": datetime_to_str(self.end)}


@dataclass(frozen=True)
class BillingPeriod(Period):
    """The concrete span an invoice bills for."""

    @property
    def days(self) -> int:
        """Days between start and end, the day count used for proration."""
        return actual_days(self.start, self.end)

    @property
    def exclusive_end(self) -> date:
        """The day after the period ends, the form rental period ends are stored in."""
        return self.end + timedelta(days=1)
