"""Model year codes (VIN position 10).

The code repeats every 30 years, so any single table is a convention.  This
one maps digits to 2001-2009 and letters to the current 2010-2030 cycle.
"""

from __future__ import annotations

from types import MappingProxyType

FALLBACK_YEAR = 2001
"""Year reported when the model year character is not in :data:`YEAR_CODES`."""

_LETTERS = "ABCDEFGHJKLMNPRSTVWXY"  # I, O, Q, U, Z and 0 are never year codes

YEAR_CODES: MappingProxyType[str, int] = MappingProxyType(
    {
        **{str(digit): 2000 + digit for digit in range(1, 10)},
        **{letter: 2010 + offset for offset, letter in enumerate(_LETTERS)},
    }
)
