"""
Structured invoice number value object.
"""

from dataclasses import dataclass
from typing import Dict, Union

from rentcalc.conventions.defaults import NUMBER_SEPARATOR, SEQUENCE_WIDTH
from rentcalc.errors import ValidationError


@dataclass(frozen=True)
class InvoiceIdentity:
    """An invoice number split into its fields.

    Attributes:
        property_code: Two-character property abbreviation
        tenant_code: Three-letter tenant abbreviation
        type_code: Two-letter invoice type code
        sequence: Position in the property/tenant/type sequence
    """

    property_code: str
    tenant_code: str
    type_code: str
    sequence: int

    def __post_init__(self):
        if isinstance(self.sequence, bool) or not isinstance(self.sequence, int):
            raise ValidationError("sequence", f"expected an integer, got {self.sequence!r}")
        if self.sequence < 0:
            raise ValidationError("sequence", f"must not be negative, got {self.sequence}")

    @property
    def scope(self) -> tuple:
        """The (property, tenant, type) triple a sequence is counted within."""
        return (self.property_code, self.tenant_code, self.type_code)

    @property
    def formatted(self) -> str:
        # Zero padded to three digits; sequences past 999 widen rather than wrap.
        return NUMBER_SEPARATOR.join(
            (
                self.property_code,
                self.tenant_code,
                self.type_code,
                f"{self.sequence:0{SEQUENCE_WIDTH}d}",
            )
        )

    def to_dict(self) -> Dict[str, Union[str, int]]:
        return {
            "property_code": self.property_code,
            "tenant_code": self.tenant_code,
            "type_code": self.type_code,
            "sequence": self.sequence,
            "formatted": self.formatted,
        }

    def __str__(self) -> str:
        return self.formatted
