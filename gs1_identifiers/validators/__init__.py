"""
Validation modules for GS1 identifiers.
"""

from .validators import (
    ValidationResult,
    strip_formatting,
    is_numeric,
    validate_charset,
    FORMATTING_CHARACTERS,
    CSET82,
    CSET39,
    NUMERIC,
)
from .luhn import (
    ChecksumParameters,
    luhn_check,
    luhn_failure,
    validate_luhn,
    weighted_sum,
    DEFAULT_DIVISOR,
    DEFAULT_MULTIPLIER,
)

__all__ = [
    "ValidationResult",
    "strip_formatting",
    "is_numeric",
    "validate_charset",
    "FORMATTING_CHARACTERS",
    "CSET82",
    "CSET39",
    "NUMERIC",
    "ChecksumParameters",
    "luhn_check",
    "luhn_failure",
    "validate_luhn",
    "weighted_sum",
    "DEFAULT_DIVISOR",
    "DEFAULT_MULTIPLIER",
]
