"""Extended vehicle information gateway interface."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

# Response keys consumed by :class:`~vindecode.models.vin.VIN`.
FUEL_TYPE_KEY = "FuelTypePrimary"
MAKE_KEY = "Make"
MAKE_ID_KEY = "MakeID"
MODEL_KEY = "Model"
MODEL_ID_KEY = "ModelID"
VEHICLE_TYPE_KEY = "VehicleType"


@runtime_checkable
class ExtendedInfoGateway(Protocol):
    """Resolves a normalized VIN to a mapping of named vehicle attributes.

    Implementations return an empty mapping when the VIN is unknown and raise
    :class:`~vindecode.api.errors.GatewayError` on transport failures.
    """

    async def fetch(self, number: str) -> dict[str, Any]: ...
