"""
Invoice note text.
"""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal, localcontext
from typing import Optional

from rentcalc.conventions.defaults import DAYS_PER_YEAR
from rentcalc.errors import ValidationError
from rentcalc.schedule.core import Period
from rentcalc.utils.money import (
    MoneyLike,
    format_display_date,
    format_gbp,
    format_note_date,
    to_decimal,
)

from .amounts import DECIMAL_PRECISION


def format_period_label(period: Period) -> str:
    """'25 Mar 2025 to 23 Jun 2025', as printed on the invoice."""
    return f"{format_display_date(period.start)} to {format_display_date(period.end)}"


def build_proration_note(
    annual_rent: MoneyLike,
    period: Period,
    has_prior_invoices: bool = False,
) -> Optional[str]:
    """
    Explain the rent due for a tenant's first invoice.

    Rent per day is the annual rent over 365 days, charged for every day of
    the period including both ends. Returns None once the tenant has been
    invoiced before, or when no positive annual rent is agreed.

    Example
    -------
    >>> build_proration_note(Decimal("3650"), BillingPeriod("2025-01-01", "2025-01-10"))
    '10 days between 01/01/2025 to 10/01/2025. Rent per day is £3,650.00/365 = £10.00. Rent due for 10 days is £10.00 * 10 = £100.00.'
    """
    if has_prior_invoices:
        return None
    if period is None:
        raise ValidationError("period")

    annual = to_decimal(annual_rent, "annual_rent")
    if annual <= 0:
        return None

    days = period.inclusive_days
    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        ctx.rounding = ROUND_HALF_EVEN
        daily_rate = annual / Decimal(DAYS_PER_YEAR)
        rent_due = daily_rate * days

    return (
        f"{days} days between {format_note_date(period.start)} to "
        f"{format_note_date(period.end)}. "
        f"Rent per day is {format_gbp(annual)}/{DAYS_PER_YEAR} = {format_gbp(daily_rate)}. "
        f"Rent due for {days} days is {format_gbp(daily_rate)} * {days} = {format_gbp(rent_due)}."
    )
