"""
Strict parser for structured invoice numbers (``PP/TTT/CC/NNN``).
"""

from string import ascii_uppercase, digits
from typing import Optional

from rentcalc.conventions.defaults import (
    NUMBER_SEPARATOR,
    PROPERTY_CODE_LENGTH,
    SEQUENCE_WIDTH,
    TENANT_CODE_LENGTH,
    TYPE_CODE_LENGTH,
)

from .identity import InvoiceIdentity

_LETTERS = frozenset(ascii_uppercase)
_ALNUM = frozenset(ascii_uppercase + digits)
_DIGITS = frozenset(digits)


def _is_code(text: str, length: int, alphabet: frozenset) -> bool:
    return len(text) == length and all(ch in alphabet for ch in text)


def _is_sequence(text: str) -> bool:
    """Three zero-padded digits, or the unpadded digits of a sequence past 999."""
    if not text or not all(ch in _DIGITS for ch in text):
        return False
    if len(text) == SEQUENCE_WIDTH:
        return True
    return len(text) > SEQUENCE_WIDTH and text[0] != "0"


def parse_invoice_number(text: str) -> Optional[InvoiceIdentity]:
    """
    Split an invoice number into its fields.

    Returns None for anything not in canonical form: wrong number of fields,
    lower-case codes, other separators, or a suffix of the wrong width.
    Such numbers are ignored when allocating the next sequence.
    """
    if not isinstance(text, str):
        return None

    fields = text.split(NUMBER_SEPARATOR)
    if len(fields) != 4:
        return None

    prop, tenant, type_code, suffix = fields
    if not _is_code(prop, PROPERTY_CODE_LENGTH, _ALNUM):
        return None
    if not _is_code(tenant, TENANT_CODE_LENGTH, _LETTERS):
        return None
    if not _is_code(type_code, TYPE_CODE_LENGTH, _LETTERS):
        return None
    if not _is_sequence(suffix):
        return None

    return InvoiceIdentity(prop, tenant, type_code, int(suffix))
