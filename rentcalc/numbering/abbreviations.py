"""Fixed-width codes derived from free-text names and addresses."""

from __future__ import annotations

import re

from rentcalc.conventions.defaults import (
    PROPERTY_CODE_LENGTH,
    PROPERTY_FALLBACK,
    TENANT_CODE_LENGTH,
    TENANT_FALLBACK,
)
from rentcalc.errors import ValidationError

_NON_ALPHA = re.compile(r"[^A-Za-z]")
_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")


def abbreviate(value: str, length: int, fallback: str, keep_digits: bool = False) -> str:
    """
    Reduce ``value`` to an upper-case code of exactly ``length`` characters.

    Everything but ASCII letters is dropped (letters and digits when
    ``keep_digits``). Short results are padded on the right by repeating
    ``fallback``; long ones are truncated.

    >>> abbreviate("", 3, "TEN")
    'TEN'
    >>> abbreviate("Jo", 3, "TEN")
    'JOT'
    """
    if value is None:
        raise ValidationError("value")
    if not isinstance(value, str):
        raise ValidationError("value", f"expected a string, got {type(value).__name__}")
    if length <= 0:
        raise ValidationError("length", f"must be positive, got {length}")
    if not fallback:
        raise ValidationError("fallback", "must not be empty")

    pattern = _NON_ALNUM if keep_digits else _NON_ALPHA
    code = pattern.sub("", value).upper()
    if len(code) < length:
        code += fallback * (length // len(fallback) + 1)
    return code[:length]


def property_code(address: str) -> str:
    """Two-character property code; house numbers are kept ("12 High Street" -> "12")."""
    if not isinstance(address, str):
        raise ValidationError("property_address", f"expected a string, got {address!r}")
    return abbreviate(address, PROPERTY_CODE_LENGTH, PROPERTY_FALLBACK, keep_digits=True)


def tenant_code(name: str) -> str:
    """Three-letter tenant code ("ABC Holdings" -> "ABC")."""
    if not isinstance(name, str):
        raise ValidationError("tenant_name", f"expected a string, got {name!r}")
    return abbreviate(name, TENANT_CODE_LENGTH, TENANT_FALLBACK)
