from typing import Union
from datetime import datetime, date, timedelta

import pandas as pd
from dateutil.relativedelta import relativedelta
from pandas import Timestamp

from rentcalc.errors import ValidationError

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"

DateLike = Union[str, date, datetime, Timestamp]


def to_date(date_like: DateLike, field: str = "date") -> date:
    """
    Convert a string, datetime or Timestamp to a plain date (time of day dropped).
    Accepts 'YYYY-MM-DD' and 'YYYYMMDD' string formats.
    """
    if date_like is None or date_like is pd.NaT:
        raise ValidationError(field)
    if isinstance(date_like, Timestamp):
        return date_like.date()
    if isinstance(date_like, datetime):
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        text = date_like.strip()
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(text, fmt).date()
            except ValueError:
                continue
        raise ValidationError(field, f"unsupported date string format: {date_like!r}")
    raise ValidationError(field, f"unsupported type for date: {type(date_like).__name__}")


def datetime_to_str(date_like: DateLike) -> str:
    """
    Format a date-like into 'YYYY-MM-DD' string.
    """
    return to_date(date_like).strftime(DATE_FMT)


def add_days(date_like: DateLike, days: int) -> date:
    return to_date(date_like) + timedelta(days=days)


def add_months(date_like: DateLike, months: int) -> date:
    """Add calendar months, clamping the day to the end of shorter months."""
    return to_date(date_like) + relativedelta(months=months)


def actual_days(start: date, end: date) -> int:
    """Number of calendar days from start to end (end exclusive)."""
    if end < start:
        raise ValidationError("end", f"{end} is before start {start}")
    return (end - start).days
