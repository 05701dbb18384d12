"""
English quarter days.

The four fixed dates on which rental quarters start. Every quarter boundary
in the library is derived from this one ordered table.
"""

from typing import NamedTuple, Tuple


class QuarterDay(NamedTuple):
    """A (month, day) cut-point that starts a rental quarter."""

    name: str
    month: int
    day: int


# Ordered by position within the rent year, which starts on Lady Day.
QUARTER_DAYS: Tuple[QuarterDay, ...] = (
    QuarterDay("Lady Day", 3, 25),
    QuarterDay("Midsummer", 6, 24),
    QuarterDay("Michaelmas", 9, 29),
    QuarterDay("Christmas", 12, 25),
)


def quarter_day_index(month: int, day: int) -> int:
    """Return the index of the last quarter day on or before (month, day).

    Returns -1 when (month, day) falls before the first quarter day of the
    calendar year, i.e. in the quarter that started on the previous Christmas.
    """
    index = -1
    for i, qd in enumerate(QUARTER_DAYS):
        if (month, day) >= (qd.month, qd.day):
            index = i
    return index
