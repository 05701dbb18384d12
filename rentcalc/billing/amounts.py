"""VAT, total and proration figures for a single invoice.

The net amount is chosen by the caller (the tenant's usual net, or a value
typed over it); this module only derives what follows from it:

    vat_amount            = round(net * VAT_RATE)
    total_amount          = round(net + vat_amount)
    prorated_daily_rate   = net * ANNUALISATION_FACTOR / DAYS_PER_YEAR
    prorated_period_total = prorated_daily_rate * days_in_period

Rounding is to pence, half up. The proration figures feed invoice notes and
are left unrounded; round them only for display.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal, localcontext
from typing import Dict, Optional

from rentcalc.conventions.defaults import (
    ANNUALISATION_FACTOR,
    DAYS_PER_YEAR,
    VAT_RATE,
)
from rentcalc.errors import ValidationError
from rentcalc.schedule.core import Period
from rentcalc.utils.date import actual_days
from rentcalc.utils.money import MoneyLike, round_money, to_decimal

from .terms import RentTerms

logger = logging.getLogger(__name__)

# Arithmetic precision, pinned so results do not depend on the caller's context.
DECIMAL_PRECISION = 28

_ZERO = Decimal("0")


@dataclass(frozen=True)
class InvoiceAmounts:
    """Derived invoice figures. Re-derive rather than edit."""

    net_amount: Decimal
    vat_rate: Decimal
    vat_amount: Decimal
    total_amount: Decimal
    days_in_period: int
    prorated_daily_rate: Decimal
    prorated_period_total: Decimal

    def to_dict(self) -> Dict[str, object]:
        return {
            "net_amount": str(self.net_amount),
            "vat_rate": str(self.vat_rate),
            "vat_amount": str(self.vat_amount),
            "total_amount": str(self.total_amount),
            "days_in_period": self.days_in_period,
            "prorated_daily_rate": str(round_money(self.prorated_daily_rate)),
            "prorated_period_total": str(round_money(self.prorated_period_total)),
        }


def compute_invoice_amounts(
    terms: RentTerms,
    period: Period,
    net_amount: Optional[MoneyLike] = None,
) -> InvoiceAmounts:
    """
    Compute VAT, total and proration for an invoice.

    Args:
        terms: Tenant rent terms (VAT registration and default net amount)
        period: Period the invoice bills for
        net_amount: Net amount for this invoice; overrides terms.net_amount

    Returns:
        InvoiceAmounts for the invoice
    """
    if terms is None:
        raise ValidationError("terms")
    if not isinstance(terms, RentTerms):
        raise ValidationError("terms", f"expected RentTerms, got {type(terms).__name__}")
    if period is None:
        raise ValidationError("period")
    if not isinstance(period, Period):
        raise ValidationError("period", f"expected a period, got {type(period).__name__}")

    if net_amount is not None:
        net = to_decimal(net_amount, "net_amount")
    elif terms.net_amount is not None:
        net = terms.net_amount
    else:
        raise ValidationError("net_amount")

    vat_rate = VAT_RATE if terms.vat_registered else _ZERO
    days = math.ceil(actual_days(period.start, period.end))

    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        ctx.rounding = ROUND_HALF_EVEN
        vat_amount = round_money(net * vat_rate, "net_amount")
        total_amount = round_money(net + vat_amount, "net_amount")
        daily_rate = net * ANNUALISATION_FACTOR / DAYS_PER_YEAR
        period_total = daily_rate * days

    logger.debug(
        "Invoice amounts for %s - %s: net=%s vat=%s total=%s",
        period.start, period.end, net, vat_amount, total_amount,
    )
    return InvoiceAmounts(
        net_amount=net,
        vat_rate=vat_rate,
        vat_amount=vat_amount,
        total_amount=total_amount,
        days_in_period=days,
        prorated_daily_rate=daily_rate,
        prorated_period_total=period_total,
    )
