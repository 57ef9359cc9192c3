"""
Global Returnable Asset Identifier (GRAI)

A GRAI identifies reusable assets such as kegs, pallets and crates:

    0 <13-digit asset type> [serial]
    04719512002889 1234567890 12345A
    012345678900051234AX01

Rules:
- Spaces and hyphens are cosmetic; they are stripped before validation
- At least 13 characters as supplied
- The stripped value starts with the '0' indicator digit
- After the indicator: a 13-digit asset type passing the Luhn checksum,
  then an optional ASCII alphanumeric serial
- At most 29 characters after stripping and dropping the indicator
- The original string is the canonical value

See https://www.gs1.org/standards/id-keys/grai
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import ClassVar, Tuple

from ..errors import ErrorCode, InvalidBarcodeError
from ..validators.luhn import ChecksumParameters, luhn_failure
from ..validators.validators import strip_formatting
from .barcode import IdentifierResult

logger = logging.getLogger(__name__)


GRAI_INDICATOR = '0'
GRAI_MIN_LENGTH = 13
GRAI_MAX_LENGTH = 29
GRAI_ASSET_PARAMETERS = ChecksumParameters(length=13)


def split_grai(value: str) -> Tuple[str, str]:
    """
    Validate a GRAI string and split it into asset type and serial.

    Returns:
        (asset_type, serial); serial may be empty

    Raises:
        InvalidBarcodeError: on the first problem found
    """
    def reject(code: ErrorCode) -> InvalidBarcodeError:
        return InvalidBarcodeError(GRAI.KIND, value, code)

    if len(value) < GRAI_MIN_LENGTH:
        raise reject(ErrorCode.WRONG_LENGTH)

    stripped = strip_formatting(value)
    if not stripped:
        raise reject(ErrorCode.WRONG_LENGTH)
    if stripped[0] != GRAI_INDICATOR:
        raise reject(ErrorCode.MALFORMED_STRUCTURE)

    stripped = stripped[1:]
    if len(stripped) > GRAI_MAX_LENGTH:
        raise reject(ErrorCode.WRONG_LENGTH)

    asset_type, serial = stripped[:13], stripped[13:]
    if serial and not (serial.isascii() and serial.isalnum()):
        raise reject(ErrorCode.MALFORMED_STRUCTURE)

    code = luhn_failure(asset_type, GRAI_ASSET_PARAMETERS)
    if code is not None:
        raise reject(code)

    return asset_type, serial


@dataclass(frozen=True)
class GRAI:
    """
    GRAI value object.

    Validated on construction; `value` holds the original string and is the
    only field used for equality.
    """
    KIND: ClassVar[str] = "GRAI"

    value: str
    asset_type: str = field(init=False, compare=False)
    serial_component: str = field(init=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise TypeError(f"GRAI value must be a string, got {type(self.value).__name__}")
        asset_type, serial = split_grai(self.value)
        object.__setattr__(self, "asset_type", asset_type)
        object.__setattr__(self, "serial_component", serial)

    def __str__(self) -> str:
        return self.value

    def to_string(self) -> str:
        return self.value

    def is_equal_to(self, other: object) -> bool:
        return self == other

    @classmethod
    def create_from_string(cls, value: str) -> "GRAI":
        """
        Create a GRAI from a string, raising on invalid input.

        Raises:
            InvalidBarcodeError: when the value is not a valid GRAI
        """
        return cls(value)

    @classmethod
    def try_create(cls, value: str) -> IdentifierResult:
        try:
            return IdentifierResult(raw=value, kind=cls.KIND, value=cls(value))
        except InvalidBarcodeError as exc:
            logger.debug("Rejected GRAI %r: %s", value, exc.code.value)
            return IdentifierResult(raw=value, kind=cls.KIND, error=exc)

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return cls.try_create(value).valid
