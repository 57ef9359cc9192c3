"""
GS1 Validation Helpers

Shared pieces used by the identifier types:
- ValidationResult for non-raising checks
- GS1 character sets (CSET82, CSET39, NUMERIC)
- Formatting character stripping
- Character set validation for free-form components

Based on GS1 General Specifications.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ValidationResult:
    """Result of a validation operation."""
    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    meta: Dict[str, Any] = field(default_factory=dict)


# GS1 Character Sets
CSET82 = frozenset(
    '!"%&\'()*+,-./0123456789:;<=>?'
    'ABCDEFGHIJKLMNOPQRSTUVWXYZ_'
    'abcdefghijklmnopqrstuvwxyz'
)

CSET39 = frozenset('#-/0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ')

NUMERIC = frozenset('0123456789')

# Cosmetic characters removed before checksum validation.
# '‐' is the Unicode HYPHEN some label printers emit instead of '-'.
FORMATTING_CHARACTERS = ('‐', '-', ' ')


def strip_formatting(value: str) -> str:
    """
    Remove formatting characters (spaces, hyphens) from a barcode string.

    Example: "4006 3813-33931" -> "4006381333931"
    """
    for char in FORMATTING_CHARACTERS:
        value = value.replace(char, '')
    return value


def is_numeric(value: str) -> bool:
    """True if value is non-empty and made of ASCII digits only."""
    return bool(value) and all(c in NUMERIC for c in value)


def validate_charset(
    value: str,
    charset: str = "cset82",
    min_length: int = 1,
    max_length: Optional[int] = None
) -> ValidationResult:
    """
    Validate a free-form component against a GS1 character set.

    Args:
        value: Value to validate
        charset: 'cset82' or 'cset39'
        min_length: Minimum length
        max_length: Maximum length (None for no limit)

    Returns:
        ValidationResult
    """
    result = ValidationResult(valid=True)

    if len(value) < min_length:
        result.valid = False
        result.errors.append(f"Length {len(value)} below minimum {min_length}")
        return result

    allowed = CSET82 if charset == "cset82" else CSET39

    invalid_chars = set(value) - allowed
    if invalid_chars:
        result.valid = False
        result.errors.append(f"Invalid characters: {''.join(sorted(invalid_chars))!r}")

    if max_length is not None and len(value) > max_length:
        result.valid = False
        result.errors.append(f"Length {len(value)} exceeds maximum {max_length}")

    return result
