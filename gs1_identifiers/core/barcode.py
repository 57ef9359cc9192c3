"""
GS1 Barcode Base Contract

Shared validation and construction for fixed-length, checksum-protected
numeric identifiers (GTIN, GLN, SSCC, GSRN, UDI).

Rules:
- Spaces and hyphens are cosmetic; they are stripped before validation
- The stripped digits must have the exact length of the barcode type
- The digits must pass the Luhn checksum (divisor 10, multiplier 3)
- The original string, formatting included, is the canonical value
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional, Tuple, Type, TypeVar

from ..errors import ErrorCode, InvalidBarcodeError, InvalidIdentifierError
from ..validators.luhn import ChecksumParameters, luhn_failure
from ..validators.validators import strip_formatting

logger = logging.getLogger(__name__)

B = TypeVar("B", bound="AbstractBarcode")


@dataclass(frozen=True)
class IdentifierResult:
    """
    Tagged outcome of a non-raising factory call.

    Attributes:
        raw: Input as supplied
        kind: Identifier type label
        value: The identifier, when valid
        error: The rejection, when invalid
    """
    raw: str
    kind: str
    value: Optional[Any] = None
    error: Optional[InvalidIdentifierError] = None

    @property
    def valid(self) -> bool:
        return self.error is None

    @property
    def code(self) -> Optional[ErrorCode]:
        return self.error.code if self.error is not None else None

    @property
    def message(self) -> str:
        return str(self.error) if self.error is not None else ""

    def unwrap(self) -> Any:
        """Return the identifier or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value


def create_with_validation(value: str, kind: str, length: int) -> str:
    """
    Validate a barcode string for a fixed-length type.

    Args:
        value: Barcode string, may contain spaces or hyphens
        kind: Type label used in error messages (e.g. "GTIN-13")
        length: Expected number of digits after stripping formatting

    Returns:
        The stripped digit string

    Raises:
        InvalidBarcodeError: on wrong length, non-digits, all zeros or checksum failure
    """
    digits = strip_formatting(value)

    if len(digits) != length:
        raise InvalidBarcodeError(kind, value, ErrorCode.WRONG_LENGTH)

    code = luhn_failure(digits, ChecksumParameters(length=length))
    if code is not None:
        raise InvalidBarcodeError(kind, value, code)

    return digits


@dataclass(frozen=True)
class AbstractBarcode:
    """
    Base class for GS1 barcode value objects.

    Subclasses set KIND and LENGTH. Instances are validated on construction,
    keep the supplied string as `value` and the stripped digits as `digits`.
    Equality compares `value` and requires the same concrete class.

    Types accepting several lengths list them in LENGTHS; the checksum then
    runs at the stripped length, and LENGTH is what other lengths are
    reported against.
    """
    KIND: ClassVar[str] = ""
    LENGTH: ClassVar[int] = 0
    LENGTHS: ClassVar[Tuple[int, ...]] = ()

    value: str
    digits: str = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not self.KIND:
            raise TypeError(f"{type(self).__name__} does not define a barcode type")
        if not isinstance(self.value, str):
            raise TypeError(f"{self.KIND} value must be a string, got {type(self.value).__name__}")
        digits = create_with_validation(self.value, self.KIND, self.expected_length(self.value))
        object.__setattr__(self, "digits", digits)

    @classmethod
    def expected_length(cls, value: str) -> int:
        """Digit count the checksum runs at for this value."""
        if cls.LENGTHS:
            length = len(strip_formatting(value))
            if length in cls.LENGTHS:
                return length
        return cls.LENGTH

    def __str__(self) -> str:
        return self.value

    def to_string(self) -> str:
        """The barcode as supplied, formatting characters included."""
        return self.value

    def is_equal_to(self, other: object) -> bool:
        return self == other

    @classmethod
    def create_from_string(cls: Type[B], value: str) -> B:
        """
        Create a barcode from a string, raising on invalid input.

        Raises:
            InvalidBarcodeError: when the value is not a valid barcode of this type
        """
        return cls(value)

    @classmethod
    def try_create(cls, value: str) -> IdentifierResult:
        """Create a barcode without raising; failures come back in the result."""
        try:
            return IdentifierResult(raw=value, kind=cls.KIND, value=cls(value))
        except InvalidBarcodeError as exc:
            logger.debug("Rejected %s %r: %s", cls.KIND, value, exc.code.value)
            return IdentifierResult(raw=value, kind=cls.KIND, error=exc)

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return cls.try_create(value).valid
