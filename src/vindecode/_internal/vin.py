"""VIN input normalization."""

from __future__ import annotations


def normalize(number: str) -> str:
    """Return *number* uppercased with hyphens removed.

    No other characters are touched; whitespace, punctuation and illegal
    letters are left for validation to reject.
    """
    return number.upper().replace("-", "")
