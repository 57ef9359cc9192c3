"""
Identifier value objects for GS1 barcodes and composite identifiers.
"""

from .barcode import AbstractBarcode, IdentifierResult, create_with_validation
from .gtin import GTIN8, GTIN12, GTIN13, GTIN14, GLN, SSCC, GSRN, UDI
from .gdti import GDTI, split_gdti
from .grai import GRAI, split_grai
from .registry import (
    IDENTIFIER_TYPES,
    get_identifier_type,
    validate_identifier,
    detect_identifier,
)

__all__ = [
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
    "split_gdti",
    "GRAI",
    "split_grai",
    "IDENTIFIER_TYPES",
    "get_identifier_type",
    "validate_identifier",
    "detect_identifier",
]
