"""Shared fixtures for vindecode tests."""

from __future__ import annotations

from typing import Any

import pytest

HONDA_VIN = "1HGCM82633A004352"


@pytest.fixture
def honda_vin() -> str:
    return HONDA_VIN


@pytest.fixture
def sample_decode_response() -> dict[str, Any]:
    """Trimmed ``DecodeVinValues`` payload for :data:`HONDA_VIN`."""
    return {
        "Count": 1,
        "Message": "Results returned successfully",
        "SearchCriteria": f"VIN:{HONDA_VIN}",
        "Results": [
            {
                "ABS": "",
                "BodyClass": "Coupe",
                "ErrorCode": "0",
                "FuelTypePrimary": "Gasoline",
                "Make": "HONDA",
                "MakeID": "474",
                "Manufacturer": "AMERICAN HONDA MOTOR CO., INC.",
                "Model": "Accord",
                "ModelID": "1861",
                "ModelYear": "2003",
                "VIN": HONDA_VIN,
                "VehicleType": "PASSENGER CAR",
            }
        ],
    }


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Any) -> None:
    """Keep a developer's environment or .env file out of the tests."""
    for key in ("VINDECODE_NHTSA_BASE_URL", "VINDECODE_NHTSA_TIMEOUT", "VINDECODE_USER_AGENT"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
