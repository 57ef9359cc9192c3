"""
Identifier type registry.

Maps short names used by the CLI and batch reports to identifier classes.
"""

from __future__ import annotations

import logging
from typing import Dict, Type, Union

from .barcode import AbstractBarcode, IdentifierResult
from .gdti import GDTI
from .grai import GRAI
from .gtin import GLN, GSRN, GTIN8, GTIN12, GTIN13, GTIN14, SSCC, UDI

logger = logging.getLogger(__name__)

IdentifierType = Union[Type[AbstractBarcode], Type[GDTI], Type[GRAI]]

# detect_identifier() returns the first type that accepts a value:
# GTIN-13 shadows GLN, SSCC shadows GSRN, and the GTINs shadow UDI.
IDENTIFIER_TYPES: Dict[str, IdentifierType] = {
    "gdti": GDTI,
    "gtin13": GTIN13,
    "gtin8": GTIN8,
    "gtin12": GTIN12,
    "gtin14": GTIN14,
    "sscc": SSCC,
    "gln": GLN,
    "gsrn": GSRN,
    "udi": UDI,
    "grai": GRAI,
}


def get_identifier_type(name: str) -> IdentifierType:
    """
    Look up an identifier class by name ("gtin13", "GTIN-13", "gdti", ...).

    Raises:
        KeyError: for unknown names
    """
    key = name.lower().replace("-", "").replace("_", "")
    try:
        return IDENTIFIER_TYPES[key]
    except KeyError:
        known = ", ".join(sorted(IDENTIFIER_TYPES))
        raise KeyError(f"Unknown identifier type {name!r} (known: {known})") from None


def validate_identifier(value: str, kind: str = "gtin13") -> IdentifierResult:
    """Validate one value as the named type without raising for bad input."""
    return get_identifier_type(kind).try_create(value)


def detect_identifier(value: str) -> IdentifierResult:
    """
    Try each registered type and return the first valid result.

    When nothing matches the GTIN-13 failure is returned.
    """
    for identifier_type in IDENTIFIER_TYPES.values():
        result = identifier_type.try_create(value)
        if result.valid:
            logger.debug("Detected %r as %s", value, result.kind)
            return result
    return GTIN13.try_create(value)
