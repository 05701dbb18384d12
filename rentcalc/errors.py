"""
Error types raised by the rental billing calculations.

All errors derive from :class:`ValueError` so callers that already guard
numeric parsing with ``except ValueError`` keep working.
"""

from __future__ import annotations


class RentCalcError(ValueError):
    """Base class for every error raised by ``rentcalc``."""


class ValidationError(RentCalcError):
    """Malformed or missing input.

    Attributes:
        field: Name of the offending input field
    """

    def __init__(self, field: str, message: str = "is required"):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class UnsupportedInvoiceTypeError(RentCalcError):
    """Invoice type outside the closed invoice type table."""

    def __init__(self, invoice_type):
        self.invoice_type = invoice_type
        super().__init__(f"Unsupported invoice type: {invoice_type!r}")


class SequenceOverflowError(RentCalcError):
    """Invoice sequence no longer fits the fixed-width number field."""

    def __init__(self, sequence: int, width: int = 3):
        self.sequence = sequence
        self.width = width
        super().__init__(
            f"Invoice sequence {sequence} does not fit in {width} digits"
        )
