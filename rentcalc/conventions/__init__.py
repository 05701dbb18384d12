from .defaults import ANNUALISATION_FACTOR, CURRENCY, DAYS_PER_YEAR, VAT_RATE
from .quarter_days import QUARTER_DAYS, QuarterDay
from .types import (
    INVOICE_TYPE_CODES,
    Frequency,
    InvoiceType,
    get_invoice_type,
    invoice_type_code,
)

__all__ = [
    "ANNUALISATION_FACTOR",
    "CURRENCY",
    "DAYS_PER_YEAR",
    "VAT_RATE",
    "QUARTER_DAYS",
    "QuarterDay",
    "INVOICE_TYPE_CODES",
    "Frequency",
    "InvoiceType",
    "get_invoice_type",
    "invoice_type_code",
]
