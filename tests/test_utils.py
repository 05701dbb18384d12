"""
tests/test_utils.py
===================

Date coercion and money parsing, rounding and formatting helpers.
"""

from datetime import date, datetime
from decimal import Decimal

import pandas as pd
import pytest

from rentcalc.errors import RentCalcError, ValidationError
from rentcalc.utils import (
    add_days,
    add_months,
    actual_days,
    datetime_to_str,
    format_display_date,
    format_gbp,
    format_note_date,
    parse_currency_value,
    round_money,
    to_date,
    to_decimal,
)


# ---------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------
@pytest.mark.parametrize(
    "value",
    ["2025-03-05", "20250305", " 2025-03-05 ", date(2025, 3, 5), datetime(2025, 3, 5, 23, 59),
     pd.Timestamp("2025-03-05 08:00")],
)
def test_to_date(value):
    assert to_date(value) == date(2025, 3, 5)
    assert type(to_date(value)) is date


@pytest.mark.parametrize("value", [None, pd.NaT, "05/03/2025", 42])
def test_to_date_rejects(value):
    with pytest.raises(ValidationError) as excinfo:
        to_date(value, "invoice_date")
    assert excinfo.value.field == "invoice_date"


def test_date_arithmetic():
    assert add_days("2025-12-31", 1) == date(2026, 1, 1)
    assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
    assert actual_days(date(2025, 1, 1), date(2025, 1, 1)) == 0
    assert datetime_to_str(datetime(2025, 3, 5, 12)) == "2025-03-05"
    with pytest.raises(ValidationError):
        actual_days(date(2025, 1, 2), date(2025, 1, 1))


# ---------------------------------------------------------------------
# Money
# ---------------------------------------------------------------------
@pytest.mark.parametrize(
    "value, expected",
    [
        (Decimal("12.30"), Decimal("12.30")),
        (12, Decimal("12")),
        (0.1, Decimal("0.1")),
        ("  99.99 ", Decimal("99.99")),
        ("-5", Decimal("-5")),
    ],
)
def test_to_decimal(value, expected):
    assert to_decimal(value, "amount") == expected


@pytest.mark.parametrize(
    "value",
    [None, True, "", "12,000", "abc", float("nan"), float("inf"), "Infinity", Decimal("NaN"), [1]],
)
def test_to_decimal_rejects(value):
    with pytest.raises(ValidationError) as excinfo:
        to_decimal(value, "amount")
    assert excinfo.value.field == "amount"
    assert "amount" in str(excinfo.value)


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, Decimal("0")),
        ("", Decimal("0")),
        ("£1,250.50", Decimal("1250.50")),
        ("-45.10", Decimal("-45.10")),
        ("abc", Decimal("0")),
        ("1.2.3", Decimal("0")),
        ("-", Decimal("0")),
        (float("nan"), Decimal("0")),
        (12, Decimal("12")),
    ],
)
def test_parse_currency_value(value, expected):
    assert parse_currency_value(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [("2.005", Decimal("2.01")), ("-2.005", Decimal("-2.01")), ("2.004", Decimal("2.00")), (7, Decimal("7.00"))],
)
def test_round_money(value, expected):
    assert round_money(value) == expected
    assert round_money(value).as_tuple().exponent == -2


@pytest.mark.parametrize(
    "value, expected",
    [
        (1234.5, "£1,234.50"),
        (-50, "-£50.00"),
        (Decimal("1000000"), "£1,000,000.00"),
        (Decimal("-0.001"), "£0.00"),
        ("0.125", "£0.13"),
    ],
)
def test_format_gbp(value, expected):
    assert format_gbp(value) == expected


def test_date_formats():
    assert format_note_date("2025-03-05") == "05/03/2025"
    assert format_display_date(date(2025, 9, 1)) == "01 Sep 2025"


def test_errors_are_value_errors():
    assert issubclass(ValidationError, RentCalcError)
    assert issubclass(RentCalcError, ValueError)


@pytest.mark.parametrize("value", ["1e30", 1e300, Decimal("123456789012345678901234567")])
def test_round_money_rejects_amounts_beyond_pence_precision(value):
    """Amounts with more digits than the arithmetic carries cannot be rounded to pence."""
    with pytest.raises(ValidationError) as excinfo:
        round_money(value, "amount")
    assert excinfo.value.field == "amount"
    with pytest.raises(ValidationError):
        format_gbp(value)
