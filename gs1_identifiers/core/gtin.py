"""
Fixed-length GS1 barcodes.

Each type is a thin specialization of AbstractBarcode that only fixes the
type label and the digit count:

- GTIN-8  (EAN-8)   small retail items
- GTIN-12 (UPC-A)   North American retail
- GTIN-13 (EAN-13)  worldwide retail, ISBN-13
- GTIN-14           trade units above the consumer unit
- GLN               Global Location Number (13 digits)
- SSCC              Serial Shipping Container Code (18 digits)
- GSRN              Global Service Relation Number (18 digits)
- UDI               medical device identifier (8, 12, 13 or 14 digits)

See https://www.gs1.org/standards/id-keys
"""

from __future__ import annotations

from .barcode import AbstractBarcode


class GTIN8(AbstractBarcode):
    """Global Trade Item Number, 8 digits (EAN-8)."""
    KIND = "GTIN-8"
    LENGTH = 8


class GTIN12(AbstractBarcode):
    """Global Trade Item Number, 12 digits (UPC-A)."""
    KIND = "GTIN-12"
    LENGTH = 12


class GTIN13(AbstractBarcode):
    """
    Global Trade Item Number, 13 digits (EAN-13).

    GS1 prefix, company prefix, item reference and check digit. ISBN-13
    values are valid GTIN-13s.

    Example:
        >>> GTIN13.create_from_string("4006381333931").to_string()
        '4006381333931'
    """
    KIND = "GTIN-13"
    LENGTH = 13


class GTIN14(AbstractBarcode):
    """Global Trade Item Number, 14 digits (packaging indicator + GTIN)."""
    KIND = "GTIN-14"
    LENGTH = 14


class GLN(AbstractBarcode):
    """Global Location Number identifying parties and physical locations."""
    KIND = "GLN"
    LENGTH = 13


class SSCC(AbstractBarcode):
    """Serial Shipping Container Code identifying logistic units."""
    KIND = "SSCC"
    LENGTH = 18


class GSRN(AbstractBarcode):
    """Global Service Relation Number identifying service relationships."""
    KIND = "GSRN"
    LENGTH = 18


class UDI(AbstractBarcode):
    """
    Unique Device Identification device identifier (UDI-DI).

    Medical device identifiers issued as GTIN-8, GTIN-12, GTIN-13 or GTIN-14;
    the checksum runs at whichever of those lengths the stripped value has.
    """
    KIND = "UDI"
    LENGTH = 14
    LENGTHS = (8, 12, 13, 14)
