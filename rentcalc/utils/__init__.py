from .date import add_days, add_months, actual_days, datetime_to_str, to_date
from .money import (
    format_display_date,
    format_gbp,
    format_note_date,
    parse_currency_value,
    round_money,
    to_decimal,
)

__all__ = [
    "add_days",
    "add_months",
    "actual_days",
    "datetime_to_str",
    "to_date",
    "format_display_date",
    "format_gbp",
    "format_note_date",
    "parse_currency_value",
    "round_money",
    "to_decimal",
]
