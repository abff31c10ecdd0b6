"""Region codes keyed by the first WMI character."""

from __future__ import annotations

REGIONS: tuple[tuple[frozenset[str], str], ...] = (
    (frozenset("ABCDEFGH"), "AF"),  # Africa
    (frozenset("JKLMNPR"), "AS"),  # Asia
    (frozenset("STUVWXYZ"), "EU"),  # Europe
    (frozenset("12345"), "NA"),  # North America
    (frozenset("67"), "OC"),  # Oceania
    (frozenset("89"), "SA"),  # South America
)

EUROPE = "EU"


def region_for(char: str) -> str | None:
    """Return the 2-letter region code for *char*, or ``None``.

    I, O, Q and 0 are not valid leading characters and have no region.
    """
    for chars, code in REGIONS:
        if char in chars:
            return code
    return None
