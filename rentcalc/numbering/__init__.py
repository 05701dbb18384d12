"""Structured invoice numbers: ``{property}/{tenant}/{type}/{sequence}``."""

from rentcalc.conventions.types import InvoiceType, invoice_type_code

from .abbreviations import abbreviate, property_code, tenant_code
from .generator import next_invoice_number
from .identity import InvoiceIdentity
from .parser import parse_invoice_number

__all__ = [
    "InvoiceType",
    "InvoiceIdentity",
    "abbreviate",
    "invoice_type_code",
    "next_invoice_number",
    "parse_invoice_number",
    "property_code",
    "tenant_code",
]
