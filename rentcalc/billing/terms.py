"""
Rent terms and carried-over ledger state, as read from the tenant record.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from rentcalc.conventions.types import Frequency
from rentcalc.errors import ValidationError
from rentcalc.utils.money import MoneyLike, parse_currency_value, to_decimal


@dataclass(frozen=True)
class RentTerms:
    """Rent terms agreed with a tenant.

    Attributes:
        annual_rent: Agreed annual rent
        frequency: How often rent is invoiced
        net_amount: Net amount billed per invoice, if the tenant record has one
        vat_registered: Whether VAT is charged to this tenant
    """

    annual_rent: Decimal
    frequency: Frequency
    net_amount: Optional[Decimal] = None
    vat_registered: bool = True

    def __post_init__(self):
        annual_rent = to_decimal(self.annual_rent, "annual_rent")
        if annual_rent < 0:
            raise ValidationError("annual_rent", f"must not be negative, got {annual_rent}")
        object.__setattr__(self, "annual_rent", annual_rent)
        object.__setattr__(self, "frequency", Frequency.parse(self.frequency))
        if self.net_amount is not None:
            object.__setattr__(self, "net_amount", to_decimal(self.net_amount, "net_amount"))
        if not isinstance(self.vat_registered, bool):
            raise ValidationError(
                "vat_registered", f"expected a bool, got {self.vat_registered!r}"
            )


@dataclass(frozen=True)
class MonetaryState:
    """Ledger facts carried into an invoice from earlier periods.

    Attributes:
        previous_balance: Balance outstanding before this invoice
        payment_made: Payments received against this invoice
        credit_note_amount: Credit notes issued against this invoice
    """

    previous_balance: Decimal
    payment_made: Decimal
    credit_note_amount: Decimal

    def __post_init__(self):
        for name in ("previous_balance", "payment_made", "credit_note_amount"):
            object.__setattr__(self, name, to_decimal(getattr(self, name), name))

    @classmethod
    def from_record(
        cls,
        previous_balance: MoneyLike | None = None,
        payment_made: MoneyLike | None = None,
        credit_note_amount: MoneyLike | None = None,
    ) -> MonetaryState:
        """Build from loose tenant/invoice record values.

        Absent or blank fields are read as zero here, before any arithmetic,
        because the backend omits them when nothing has been paid or credited.
        Construct MonetaryState directly to have missing values rejected.
        """
        return cls(
            previous_balance=parse_currency_value(previous_balance),
            payment_made=parse_currency_value(payment_made),
            credit_note_amount=parse_currency_value(credit_note_amount),
        )
