"""
Global Document Type Identifier (GDTI)

A GDTI identifies a document type (invoice, purchase order, shipping notice)
and is written as three components separated by spaces or hyphens:

    <GTIN-13> <document reference> <serial>
    4719512002889 1234567890 123456
    4719512002889-1234567890-123456

Parsing rules:
- The separator is either space or hyphen, never both; a dot is never accepted
- Split at most twice: further separators stay inside the serial component
- No component may be empty
- The first component is a 13-digit GTIN validated with the Luhn checksum
- Reference and serial use the GS1 CSET 82 character set
- At most 30 characters once separators are removed
- The original string is the canonical value; the separator style is kept

See https://www.gs1.org/standards/id-keys/gdti
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import ClassVar, Tuple

from ..errors import ErrorCode, InvalidGDTIError
from ..validators.luhn import ChecksumParameters, luhn_failure
from ..validators.validators import validate_charset
from .barcode import IdentifierResult
from .gtin import GTIN13

logger = logging.getLogger(__name__)


GDTI_SEPARATORS = (' ', '-')
GDTI_DISALLOWED_SEPARATORS = ('.',)
GDTI_MAX_LENGTH = 30
GDTI_GTIN_PARAMETERS = ChecksumParameters(length=13)


def split_gdti(value: str) -> Tuple[str, str, str, str]:
    """
    Split and validate a GDTI string.

    Args:
        value: GDTI string as supplied

    Returns:
        (gtin_component, document_reference, serial_component, separator)

    Raises:
        InvalidGDTIError: on the first structural or checksum problem found
    """
    def reject(code: ErrorCode) -> InvalidGDTIError:
        return InvalidGDTIError(GDTI.KIND, value, code)

    if not value:
        raise reject(ErrorCode.MALFORMED_STRUCTURE)

    if any(char in value for char in GDTI_DISALLOWED_SEPARATORS):
        raise reject(ErrorCode.MALFORMED_STRUCTURE)

    present = [sep for sep in GDTI_SEPARATORS if sep in value]
    if len(present) != 1:
        # none found, or spaces and hyphens mixed
        raise reject(ErrorCode.MALFORMED_STRUCTURE)
    separator = present[0]

    parts = value.split(separator, 2)
    if len(parts) < 3 or not all(parts):
        raise reject(ErrorCode.MALFORMED_STRUCTURE)
    gtin, reference, serial = parts

    code = luhn_failure(gtin, GDTI_GTIN_PARAMETERS)
    if code is not None:
        raise reject(code)

    if len(value.replace(separator, '')) > GDTI_MAX_LENGTH:
        raise reject(ErrorCode.WRONG_LENGTH)

    for component in (reference, serial.replace(separator, '')):
        if not validate_charset(component, "cset82").valid:
            raise reject(ErrorCode.MALFORMED_STRUCTURE)

    return gtin, reference, serial, separator


@dataclass(frozen=True)
class GDTI:
    """
    GDTI value object.

    Validated on construction. `value` holds the original string and is the
    only field used for equality; the components are derived from it.
    A GDTI never compares equal to a barcode, even with the same digits.
    """
    KIND: ClassVar[str] = "GDTI"

    value: str
    gtin_component: str = field(init=False, compare=False)
    document_reference: str = field(init=False, compare=False)
    serial_component: str = field(init=False, compare=False)
    separator: str = field(init=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise TypeError(f"GDTI value must be a string, got {type(self.value).__name__}")
        gtin, reference, serial, separator = split_gdti(self.value)
        object.__setattr__(self, "gtin_component", gtin)
        object.__setattr__(self, "document_reference", reference)
        object.__setattr__(self, "serial_component", serial)
        object.__setattr__(self, "separator", separator)

    def __str__(self) -> str:
        return self.value

    def to_string(self) -> str:
        return self.value

    def is_equal_to(self, other: object) -> bool:
        return self == other

    @property
    def gtin(self) -> GTIN13:
        """The embedded GTIN-13."""
        return GTIN13(self.gtin_component)

    @classmethod
    def create_from_string(cls, value: str) -> "GDTI":
        """
        Create a GDTI from a string, raising on invalid input.

        Raises:
            InvalidGDTIError: when the value is not a valid GDTI
        """
        return cls(value)

    @classmethod
    def try_create(cls, value: str) -> IdentifierResult:
        """Create a GDTI without raising; failures come back in the result."""
        try:
            return IdentifierResult(raw=value, kind=cls.KIND, value=cls(value))
        except InvalidGDTIError as exc:
            logger.debug("Rejected GDTI %r: %s", value, exc.code.value)
            return IdentifierResult(raw=value, kind=cls.KIND, error=exc)

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return cls.try_create(value).valid
