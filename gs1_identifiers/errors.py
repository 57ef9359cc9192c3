"""
Error codes and exceptions for GS1 identifier validation.
"""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Reasons an identifier is rejected."""
    WRONG_LENGTH = "WRONG_LENGTH"
    NOT_NUMERIC = "NOT_NUMERIC"
    CHECKSUM_FAILED = "CHECKSUM_FAILED"
    ALL_ZERO = "ALL_ZERO"
    MALFORMED_STRUCTURE = "MALFORMED_STRUCTURE"


class InvalidIdentifierError(ValueError):
    """
    Raised when a value cannot be turned into an identifier.

    Attributes:
        kind: Identifier type label, e.g. "GTIN-13" or "GDTI"
        value: The rejected input, unchanged
        code: Why it was rejected
    """

    def __init__(self, kind: str, value: str, code: ErrorCode):
        super().__init__(f"Invalid {kind}: {value}")
        self.kind = kind
        self.value = value
        self.code = code


class InvalidBarcodeError(InvalidIdentifierError):
    """A fixed-length barcode failed length or checksum validation."""


class InvalidGDTIError(InvalidIdentifierError):
    """A GDTI string is malformed or carries an invalid GTIN component."""
