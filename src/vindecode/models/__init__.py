from __future__ import annotations

from vindecode.models.config import DEFAULT_NHTSA_BASE_URL, AppSettings
from vindecode.models.nhtsa import DecodeVinValuesResponse
from vindecode.models.vin import VIN

__all__ = [
    # config
    "DEFAULT_NHTSA_BASE_URL",
    "AppSettings",
    # nhtsa
    "DecodeVinValuesResponse",
    # vin
    "VIN",
]
