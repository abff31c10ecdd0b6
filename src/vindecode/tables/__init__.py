"""Static VIN lookup tables."""

from vindecode.tables.checksum import (
    CHECK_DIGIT_POSITION,
    TRANSLITERATION,
    VIN_LENGTH,
    WEIGHT_FACTORS,
)
from vindecode.tables.fuels import FUEL_TYPE_CODES
from vindecode.tables.manufacturers import MANUFACTURERS
from vindecode.tables.regions import EUROPE, REGIONS, region_for
from vindecode.tables.years import FALLBACK_YEAR, YEAR_CODES

__all__ = [
    "CHECK_DIGIT_POSITION",
    "EUROPE",
    "FALLBACK_YEAR",
    "FUEL_TYPE_CODES",
    "MANUFACTURERS",
    "REGIONS",
    "TRANSLITERATION",
    "VIN_LENGTH",
    "WEIGHT_FACTORS",
    "YEAR_CODES",
    "region_for",
]
