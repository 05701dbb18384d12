"""
Next-invoice-number allocation.
"""

import logging
from typing import Iterable, Union

from rentcalc.conventions.defaults import SEQUENCE_WIDTH
from rentcalc.conventions.types import InvoiceType, invoice_type_code
from rentcalc.errors import SequenceOverflowError, ValidationError

from .abbreviations import property_code, tenant_code
from .identity import InvoiceIdentity
from .parser import parse_invoice_number

logger = logging.getLogger(__name__)

MAX_FIXED_WIDTH_SEQUENCE = 10 ** SEQUENCE_WIDTH - 1


def next_invoice_number(
    property_address: str,
    tenant_name: str,
    invoice_type: Union[InvoiceType, str],
    existing_numbers: Iterable[str],
    widen: bool = True,
) -> InvoiceIdentity:
    """
    Allocate the next invoice number for a property/tenant/type triple.

    The sequence is one more than the highest sequence already issued for
    the same triple, or 1 when there is none. Numbers not in canonical form
    are skipped: they never block numbering, but they do not count towards
    the highest sequence either.

    Callers creating invoices concurrently for the same triple must serialise
    calls themselves; ``existing_numbers`` has to be a consistent snapshot.

    Args:
        property_address: Address of the property
        tenant_name: Name of the tenant
        invoice_type: Invoice category
        existing_numbers: Invoice numbers already issued
        widen: Past 999, widen the sequence field instead of raising
            SequenceOverflowError

    Returns:
        The allocated invoice identity
    """
    type_code = invoice_type_code(invoice_type)
    scope = (property_code(property_address), tenant_code(tenant_name), type_code)

    if existing_numbers is None:
        raise ValidationError("existing_numbers")
    if isinstance(existing_numbers, str):
        raise ValidationError(
            "existing_numbers", "expected a collection of invoice numbers, got a single string"
        )

    highest = 0
    for number in existing_numbers:
        if not isinstance(number, str):
            raise ValidationError(
                "existing_numbers", f"invoice numbers must be strings, got {number!r}"
            )
        parsed = parse_invoice_number(number)
        if parsed is None:
            logger.debug("Ignoring non-canonical invoice number %r", number)
            continue
        if parsed.scope == scope and parsed.sequence > highest:
            highest = parsed.sequence

    sequence = highest + 1
    if sequence > MAX_FIXED_WIDTH_SEQUENCE:
        if not widen:
            raise SequenceOverflowError(sequence, SEQUENCE_WIDTH)
        logger.warning(
            "Invoice sequence for %s passed %d; widening to %d digits",
            "/".join(scope), MAX_FIXED_WIDTH_SEQUENCE, len(str(sequence)),
        )

    identity = InvoiceIdentity(*scope, sequence=sequence)
    logger.debug("Allocated invoice number %s", identity.formatted)
    return identity
