"""
Luhn Checksum Evaluator

Luhn-family checksum used to validate GS1 barcodes (GTIN, GLN, SSCC, GSRN)
and the GTIN component of composite identifiers.

Algorithm:
1. The value must be exactly `length` ASCII digits and not all zeros
2. Digits are read in pairs from the left, in steps of 2
3. Even length: multiplier on the first digit of each pair, weight 1 on the second
4. Odd length: weight 1 on the first digit of each pair, multiplier on the second
   (the last digit has no partner and counts with weight 1)
5. Valid when the weighted sum is divisible by `divisor`

This is not the textbook right-to-left "double every second digit" Luhn;
results for odd lengths depend on the left-to-right pairing above.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..errors import ErrorCode
from .validators import ValidationResult, is_numeric


DEFAULT_DIVISOR = 10
DEFAULT_MULTIPLIER = 3


@dataclass(frozen=True)
class ChecksumParameters:
    """
    Configuration for one checksum evaluation.

    Attributes:
        length: Exact number of digits expected
        divisor: Modulo divisor for the weighted sum
        multiplier: Weight applied to alternating digits
    """
    length: int
    divisor: int = DEFAULT_DIVISOR
    multiplier: int = DEFAULT_MULTIPLIER

    def __post_init__(self):
        if self.length <= 0:
            raise ValueError(f"Checksum length must be positive, got {self.length}")
        if self.divisor <= 0:
            raise ValueError(f"Checksum divisor must be positive, got {self.divisor}")

    def check(self, value: Any) -> bool:
        """True if value passes the checksum with these parameters."""
        return luhn_failure(value, self) is None


def _coerce(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


def _digit_at(digits: str, index: int) -> int:
    return int(digits[index]) if index < len(digits) else 0


def weighted_sum(digits: str, params: ChecksumParameters) -> int:
    """
    Compute the parity-dependent weighted digit sum.

    Args:
        digits: Numeric string of exactly params.length digits
        params: Checksum configuration

    Returns:
        The weighted sum (before the modulo test)
    """
    total = 0
    even = params.length % 2 == 0
    for i in range(0, params.length, 2):
        first = _digit_at(digits, i)
        second = _digit_at(digits, i + 1)
        if even:
            total += params.multiplier * first + second
        else:
            total += first + params.multiplier * second
    return total


def luhn_failure(value: Any, params: ChecksumParameters) -> Optional[ErrorCode]:
    """
    Find the first rule a value breaks, or None if it passes.

    Rules are checked in order: length, digits only, not all zeros, checksum.
    Never raises for malformed input.
    """
    value = _coerce(value)

    if len(value) != params.length:
        return ErrorCode.WRONG_LENGTH

    if not is_numeric(value):
        return ErrorCode.NOT_NUMERIC

    if not value.strip("0"):
        return ErrorCode.ALL_ZERO

    if weighted_sum(value, params) % params.divisor != 0:
        return ErrorCode.CHECKSUM_FAILED

    return None


def luhn_check(
    value: Any,
    length: int,
    divisor: int = DEFAULT_DIVISOR,
    multiplier: int = DEFAULT_MULTIPLIER
) -> bool:
    """
    Validate a fixed-length digit string with the Luhn-variant checksum.

    Args:
        value: Value to check; non-strings are converted with str()
        length: Expected number of digits
        divisor: Modulo divisor, typically 10
        multiplier: Factor for alternating digits, typically 3

    Returns:
        True if the value passes, False otherwise

    Example:
        >>> luhn_check("4719512002889", 13)
        True
        >>> luhn_check("0000000000000", 13)
        False
    """
    params = ChecksumParameters(length=length, divisor=divisor, multiplier=multiplier)
    return luhn_failure(value, params) is None


def validate_luhn(value: Any, params: ChecksumParameters) -> ValidationResult:
    """
    Luhn validation with a reason and the computed sum in meta.

    Returns:
        ValidationResult; meta['code'] holds the ErrorCode on failure and
        meta['weighted_sum'] the sum whenever the digits could be summed
    """
    value = _coerce(value)
    result = ValidationResult(valid=True)

    code = luhn_failure(value, params)
    if code in (None, ErrorCode.CHECKSUM_FAILED):
        total = weighted_sum(value, params)
        result.meta['weighted_sum'] = total
        result.meta['remainder'] = total % params.divisor

    if code is None:
        return result

    result.valid = False
    result.meta['code'] = code
    if code is ErrorCode.WRONG_LENGTH:
        result.errors.append(f"Length must be exactly {params.length}, got {len(value)}")
    elif code is ErrorCode.NOT_NUMERIC:
        result.errors.append("Value contains non-numeric characters")
    elif code is ErrorCode.ALL_ZERO:
        result.errors.append("All-zero value is not a valid code")
    else:
        result.errors.append(
            f"Checksum mismatch: weighted sum {result.meta['weighted_sum']} "
            f"is not divisible by {params.divisor}"
        )
    return result
