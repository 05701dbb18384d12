"""Rental Billing Calculations.

This package provides the rule-governed parts of invoice drafting for a UK
property-management back office: quarter-day rental periods, structured
invoice numbers, and VAT, proration and balance figures.

Key modules:
- schedule: Quarter-day resolution and billing periods
- numbering: Invoice number abbreviation, parsing and allocation
- billing: Invoice amounts, balance due and proration notes
- conventions: Frequencies, invoice types and fixed billing conventions
- utils: Date coercion and money parsing/formatting helpers
"""

from rentcalc.billing import (
    InvoiceAmounts,
    MonetaryState,
    RentTerms,
    compute_balance_due,
    compute_invoice_amounts,
)
from rentcalc.conventions import Frequency, InvoiceType
from rentcalc.errors import (
    RentCalcError,
    SequenceOverflowError,
    UnsupportedInvoiceTypeError,
    ValidationError,
)
from rentcalc.numbering import InvoiceIdentity, abbreviate, next_invoice_number
from rentcalc.schedule import BillingPeriod, QuarterPeriod, billing_period, resolve_quarter

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "BillingPeriod",
    "Frequency",
    "InvoiceAmounts",
    "InvoiceIdentity",
    "InvoiceType",
    "MonetaryState",
    "QuarterPeriod",
    "RentCalcError",
    "RentTerms",
    "SequenceOverflowError",
    "UnsupportedInvoiceTypeError",
    "ValidationError",
    "abbreviate",
    "billing_period",
    "compute_balance_due",
    "compute_invoice_amounts",
    "next_invoice_number",
    "resolve_quarter",
]
