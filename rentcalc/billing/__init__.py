"""Invoice amounts and balances."""

from .amounts import InvoiceAmounts, compute_invoice_amounts
from .balance import compute_balance_due
from .notes import build_proration_note, format_period_label
from .terms import MonetaryState, RentTerms

__all__ = [
    "InvoiceAmounts",
    "MonetaryState",
    "RentTerms",
    "build_proration_note",
    "compute_balance_due",
    "compute_invoice_amounts",
    "format_period_label",
]
