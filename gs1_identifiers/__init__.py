"""
GS1 Identifier Validation

Validates and normalizes GS1 identifiers used in logistics and retail:
fixed-length barcodes (GTIN-8/12/13/14, GLN, SSCC, GSRN, UDI), the returnable
asset identifier GRAI, and the composite
GDTI (GTIN-13 + document reference + serial).

Based on GS1 General Specifications.
"""

from .errors import (
    ErrorCode,
    InvalidIdentifierError,
    InvalidBarcodeError,
    InvalidGDTIError,
)
from .validators import (
    ChecksumParameters,
    ValidationResult,
    luhn_check,
    luhn_failure,
    validate_luhn,
    strip_formatting,
    DEFAULT_DIVISOR,
    DEFAULT_MULTIPLIER,
)
from .core import (
    AbstractBarcode,
    IdentifierResult,
    create_with_validation,
    GTIN8,
    GTIN12,
    GTIN13,
    GTIN14,
    GLN,
    SSCC,
    GSRN,
    UDI,
    GDTI,
    GRAI,
    IDENTIFIER_TYPES,
    get_identifier_type,
    validate_identifier,
    detect_identifier,
)
from .formatters import result_to_dict, result_to_json

__version__ = "1.0.0"
__all__ = [
    "ErrorCode",
    "InvalidIdentifierError",
    "InvalidBarcodeError",
    "InvalidGDTIError",
    "ChecksumParameters",
    "ValidationResult",
    "luhn_check",
    "luhn_failure",
    "validate_luhn",
    "strip_formatting",
    "DEFAULT_DIVISOR",
    "DEFAULT_MULTIPLIER",
    "AbstractBarcode",
    "IdentifierResult",
    "create_with_validation",
    "GTIN8",
    "GTIN12",
    "GTIN13",
    "GTIN14",
    "GLN",
    "SSCC",
    "GSRN",
    "UDI",
    "GDTI",
    "GRAI",
    "IDENTIFIER_TYPES",
    "get_identifier_type",
    "validate_identifier",
    "detect_identifier",
    "result_to_dict",
    "result_to_json",
]
