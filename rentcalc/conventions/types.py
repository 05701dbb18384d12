"""
Basic types and enums used across the billing calculations.
"""

from enum import Enum
from typing import Dict, Union

from rentcalc.errors import UnsupportedInvoiceTypeError, ValidationError


class Frequency(Enum):
    """Rent payment frequencies."""

    MONTHLY = 1
    QUARTERLY = 3

    def months(self) -> int:
        return self.value

    @classmethod
    def parse(cls, value: Union["Frequency", str]) -> "Frequency":
        """Accept a Frequency or its case-insensitive name ("monthly", "quarterly")."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise ValidationError("frequency", f"unsupported frequency {value!r}")


class InvoiceType(Enum):
    """Invoice categories."""

    RENTAL = "rental"
    SERVICE_CHARGE = "service_charge"
    MAINTENANCE = "maintenance"
    INSURANCE = "insurance"
    RENTS_DEPOSIT = "rents_deposit"
    OTHER = "other"

    @property
    def code(self) -> str:
        return INVOICE_TYPE_CODES[self]


# Adding an invoice type is a single edit here plus the enum member above.
INVOICE_TYPE_CODES: Dict[InvoiceType, str] = {
    InvoiceType.RENTAL: "RI",
    InvoiceType.SERVICE_CHARGE: "SC",
    InvoiceType.MAINTENANCE: "MA",
    InvoiceType.INSURANCE: "IN",
    InvoiceType.RENTS_DEPOSIT: "RD",
    InvoiceType.OTHER: "OT",
}


def get_invoice_type(value: Union[InvoiceType, str]) -> InvoiceType:
    """Return the InvoiceType for an enum member or its string value."""
    if isinstance(value, InvoiceType):
        return value
    if isinstance(value, str):
        try:
            return InvoiceType(value.strip().lower())
        except ValueError as exc:
            raise UnsupportedInvoiceTypeError(value) from exc
    raise UnsupportedInvoiceTypeError(value)


def invoice_type_code(value: Union[InvoiceType, str]) -> str:
    """Return the two-letter code used in invoice numbers."""
    return INVOICE_TYPE_CODES[get_invoice_type(value)]
