"""Check digit transliteration and positional weights (ISO 3779 / 49 CFR 565).

See https://en.wikibooks.org/wiki/Vehicle_Identification_Numbers_(VIN_codes)/Check_digit
"""

from __future__ import annotations

from types import MappingProxyType

# I, O and Q are not legal VIN characters and have no value.
# fmt: off
TRANSLITERATION: MappingProxyType[str, int] = MappingProxyType(
    {
        "A": 1, "J": 1,
        "B": 2, "K": 2, "S": 2,
        "C": 3, "L": 3, "T": 3,
        "D": 4, "M": 4, "U": 4,
        "E": 5, "N": 5, "V": 5,
        "F": 6, "W": 6,
        "G": 7, "P": 7, "X": 7,
        "H": 8, "Y": 8,
        "R": 9, "Z": 9,
    }
)
# fmt: on

# Position 9 (the check digit itself) carries weight 0.  Order matters.
WEIGHT_FACTORS: tuple[int, ...] = (8, 7, 6, 5, 4, 3, 2, 10, 0, 9, 8, 7, 6, 5, 4, 3, 2)

VIN_LENGTH = 17
CHECK_DIGIT_POSITION = 8
