"""
Fixed billing conventions.

These are not configurable per call: the back office bills in GBP under a
single VAT rate and formats everything for en-GB.
"""

from decimal import Decimal

CURRENCY = "GBP"
CURRENCY_SYMBOL = "£"

VAT_RATE = Decimal("0.20")

# Money is carried in pounds and pence.
MONEY_QUANTUM = Decimal("0.01")

DAYS_PER_YEAR = 365

# Multiplier applied to a period net amount to approximate an annual figure
# when prorating. Kept as found in production billing records; a monthly net
# would annualise with 12 and a quarterly one with 4.
ANNUALISATION_FACTOR = 10

# Invoice number layout: PP/TTT/CC/NNN
PROPERTY_CODE_LENGTH = 2
TENANT_CODE_LENGTH = 3
TYPE_CODE_LENGTH = 2
SEQUENCE_WIDTH = 3
NUMBER_SEPARATOR = "/"

PROPERTY_FALLBACK = "PR"
TENANT_FALLBACK = "TEN"
