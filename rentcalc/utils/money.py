"""Decimal money helpers: coercion, rounding and en-GB / GBP formatting."""

from __future__ import annotations

import logging
import math
import re
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from rentcalc.conventions.defaults import CURRENCY_SYMBOL, MONEY_QUANTUM
from rentcalc.errors import ValidationError

from .date import DateLike, to_date

logger = logging.getLogger(__name__)

MoneyLike = Union[Decimal, int, float, str]

_NON_NUMERIC = re.compile(r"[^0-9.\-]")

_MONTH_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def to_decimal(value: MoneyLike, field: str) -> Decimal:
    """Return ``value`` as a finite Decimal or raise ValidationError naming ``field``.

    Floats go through ``str`` so that 0.1 becomes Decimal("0.1") rather than
    its binary expansion.
    """
    if value is None:
        raise ValidationError(field)
    if isinstance(value, bool):
        raise ValidationError(field, f"expected a number, got {value!r}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        if not math.isfinite(value):
            raise ValidationError(field, f"must be finite, got {value!r}")
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as exc:
            raise ValidationError(field, f"not a number: {value!r}") from exc
    else:
        raise ValidationError(field, f"expected a number, got {type(value).__name__}")

    if not result.is_finite():
        raise ValidationError(field, f"must be finite, got {value!r}")
    return result


def parse_currency_value(value: MoneyLike | None) -> Decimal:
    """Leniently read a monetary value from a form field or backend record.

    Absent, blank or unparseable values read as zero and currency symbols or
    thousands separators are ignored ("£1,250.00" -> 1250.00). Use this at the
    call site when loading MonetaryState from loose records; the calculators
    themselves reject missing values.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, bool):
        return Decimal("0")
    if isinstance(value, (Decimal, int, float)):
        try:
            return to_decimal(value, "value")
        except ValidationError:
            logger.debug("Non-finite currency value %r read as 0", value)
            return Decimal("0")

    normalized = _NON_NUMERIC.sub("", str(value))
    if not normalized:
        return Decimal("0")
    try:
        parsed = Decimal(normalized)
    except InvalidOperation:
        logger.debug("Unparseable currency value %r read as 0", value)
        return Decimal("0")
    return parsed if parsed.is_finite() else Decimal("0")


def round_money(value: MoneyLike, field: str = "value") -> Decimal:
    """Round to pence, half up."""
    amount = to_decimal(value, field)
    try:
        return amount.quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise ValidationError(field, "too large to round to pence") from exc


def format_gbp(value: MoneyLike) -> str:
    """Format as en-GB pounds sterling, e.g. ``£1,234.50`` or ``-£50.00``."""
    amount = round_money(value)
    sign = "-" if amount < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{abs(amount):,.2f}"


def format_note_date(value: DateLike) -> str:
    """dd/mm/yyyy, as used in invoice notes."""
    return to_date(value).strftime("%d/%m/%Y")


def format_display_date(value: DateLike) -> str:
    """dd Mon yyyy, as printed on the invoice."""
    d: date = to_date(value)
    return f"{d.day:02d} {_MONTH_ABBR[d.month - 1]} {d.year:04d}"
