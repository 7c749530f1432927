"""
Core math modules для rounding-audit

Точное десятичное разложение binary64 и строковое округление.
"""

# Decimal Expansion
from rounding_audit.core.math.decimal_expansion import (
    # Constants
    EXPONENT_BIAS,
    FRACTION_BITS,
    # Exceptions
    UnsupportedValue,
    # Types
    DecimalExpansion,
    DigitSource,
    # Functions
    decompose,
    expand,
    expand_exact,
    expand_shortest,
)

# Rounding
from rounding_audit.core.math.rounding import (
    DisplayRounder,
    ReferenceRounder,
    Rounder,
    RoundingPolicy,
    round_expansion,
)

__all__ = [
    # Decimal Expansion — Constants
    "EXPONENT_BIAS",
    "FRACTION_BITS",
    # Decimal Expansion — Exceptions
    "UnsupportedValue",
    # Decimal Expansion — Types
    "DecimalExpansion",
    "DigitSource",
    # Decimal Expansion — Functions
    "decompose",
    "expand",
    "expand_exact",
    "expand_shortest",
    # Rounding — Types
    "DisplayRounder",
    "ReferenceRounder",
    "Rounder",
    "RoundingPolicy",
    # Rounding — Functions
    "round_expansion",
]
