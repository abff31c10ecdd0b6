"""Check digit validation for 17-character VINs.

Each character is transliterated to a number, multiplied by its positional
weight and summed.  The sum modulo 11 must equal the check digit at position
9, where ``W`` stands for 10.
"""

from __future__ import annotations

from vindecode._internal.vin import normalize
from vindecode.tables.checksum import (
    CHECK_DIGIT_POSITION,
    TRANSLITERATION,
    VIN_LENGTH,
    WEIGHT_FACTORS,
)

_CHECK_TEN = "W"
_DIGITS = "0123456789"


def check_value(vin: str) -> int | None:
    """Return the numeric value of the check digit in *vin*, or ``None``."""
    char = vin[CHECK_DIGIT_POSITION]
    if char == _CHECK_TEN:
        return 10
    return _DIGITS.index(char) if char in _DIGITS else None


def digit_value(char: str) -> int | None:
    """Return the checksum value of a single VIN character, or ``None``."""
    if len(char) == 1 and char in _DIGITS:
        return int(char)
    return TRANSLITERATION.get(char)


def _weighted_sum(vin: str) -> int | None:
    total = 0
    for char, weight in zip(vin, WEIGHT_FACTORS, strict=True):
        value = digit_value(char)
        if value is None:
            return None
        total += value * weight
    return total


def compute_check_digit(number: str) -> str | None:
    """Return the check digit *number* should carry (``"0"``-``"9"`` or ``"W"``).

    The character currently at the check position is ignored.  Returns
    ``None`` when the normalized input is not 17 characters long or contains
    a character with no checksum value.
    """
    vin = normalize(number)
    if len(vin) != VIN_LENGTH:
        return None
    # Weight 0 at the check position, so any digit will do there.
    vin = vin[:CHECK_DIGIT_POSITION] + "0" + vin[CHECK_DIGIT_POSITION + 1 :]
    total = _weighted_sum(vin)
    if total is None:
        return None
    remainder = total % 11
    return _CHECK_TEN if remainder == 10 else str(remainder)


def is_valid(number: str) -> bool:
    """Return ``True`` if *number* is a 17-character VIN with a correct check digit."""
    vin = normalize(number)
    if len(vin) != VIN_LENGTH:
        return False

    expected = check_value(vin)
    if expected is None:
        return False

    total = _weighted_sum(vin)
    if total is None:
        return False
    return total % 11 == expected
