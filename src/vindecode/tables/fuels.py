"""NHTSA ``FuelTypePrimary`` names and their numeric codes."""

from __future__ import annotations

from types import MappingProxyType

FUEL_TYPE_CODES: MappingProxyType[str, int] = MappingProxyType(
    {
        "Diesel": 1,
        "Battery": 2,
        "Gasoline": 4,
        "CNG": 6,
        "LNG": 7,
        "Hydrogen": 8,
        "LPG": 9,
        "E85": 10,
        "E100": 11,
        "M85": 13,
        "M100": 14,
        "FFV": 15,
    }
)
