"""The parsed VIN record."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, PrivateAttr, field_validator

from vindecode._internal.vin import normalize
from vindecode.api.errors import GatewayError
from vindecode.api.gateway import (
    FUEL_TYPE_KEY,
    MAKE_ID_KEY,
    MAKE_KEY,
    MODEL_ID_KEY,
    MODEL_KEY,
    VEHICLE_TYPE_KEY,
    ExtendedInfoGateway,
)
from vindecode.tables.checksum import CHECK_DIGIT_POSITION, VIN_LENGTH
from vindecode.tables.fuels import FUEL_TYPE_CODES
from vindecode.tables.manufacturers import MANUFACTURERS
from vindecode.tables.regions import EUROPE, region_for
from vindecode.tables.years import FALLBACK_YEAR, YEAR_CODES
from vindecode.validator import is_valid

logger = logging.getLogger(__name__)


class VIN(BaseModel):
    """A Vehicle Identification Number split into WMI, VDS and VIS.

    The code is normalized on construction.  Structural accessors are
    synchronous and read only :attr:`number`; the extended accessors are
    coroutines that query the gateway once (when *extended* is enabled) and
    cache the result on the instance.

    Construction rejects codes shorter than 17 characters but does not check
    characters or the check digit; use :meth:`valid` for that.
    """

    model_config = ConfigDict(frozen=True)

    number: str
    extended: bool = False

    _gateway: ExtendedInfoGateway | None = PrivateAttr(default=None)
    _vehicle_info: dict[str, Any] = PrivateAttr(default_factory=dict)
    _fetch_lock: asyncio.Lock = PrivateAttr(default_factory=asyncio.Lock)

    def __init__(
        self,
        number: str,
        *,
        extended: bool = False,
        gateway: ExtendedInfoGateway | None = None,
    ) -> None:
        super().__init__(number=number, extended=extended)
        self._gateway = gateway

    @field_validator("number")
    @classmethod
    def _normalize_number(cls, value: str) -> str:
        value = normalize(value)
        if len(value) < VIN_LENGTH:
            raise ValueError(f"VIN must be at least {VIN_LENGTH} characters, got {len(value)}")
        return value

    # -- Value semantics -----------------------------------------------------

    def __str__(self) -> str:
        return self.wmi + self.vds + self.vis

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VIN):
            return NotImplemented
        return (self.number, self.extended) == (other.number, other.extended)

    def __hash__(self) -> int:
        return hash((self.number, self.extended))

    def __copy__(self) -> Self:
        # Copies share the gateway but never the extended cache or its lock.
        copied = super().__copy__()
        copied._vehicle_info = {}
        copied._fetch_lock = asyncio.Lock()
        return copied

    def __deepcopy__(self, memo: dict[int, Any] | None = None) -> Self:
        return self.__copy__()

    # -- Structure -----------------------------------------------------------

    normalize = staticmethod(normalize)

    @property
    def wmi(self) -> str:
        """World Manufacturer Identifier (characters 1-3)."""
        return self.number[0:3]

    @property
    def vds(self) -> str:
        """Vehicle Descriptor Section (characters 4-9)."""
        return self.number[3:9]

    @property
    def vis(self) -> str:
        """Vehicle Identifier Section (characters 10-17)."""
        return self.number[9:17]

    def valid(self, number: str | None = None) -> bool:
        """Validate *number* if given, otherwise this record's own code."""
        return is_valid(number if number is not None else self.number)

    def region(self) -> str | None:
        """Return the 2-letter region code of the manufacturing region."""
        return region_for(self.number[0])

    def manufacturer(self) -> str | None:
        """Return the manufacturer name for the WMI, or ``None`` if unknown.

        Some manufacturers register only the first two characters and use
        the third for vehicle class, so a 3-character miss falls back to the
        2-character prefix.
        """
        name = MANUFACTURERS.get(self.wmi)
        if name is None:
            name = MANUFACTURERS.get(self.wmi[:2])
        return name

    def checksum(self) -> str | None:
        """Return the check digit character.

        ISO 3779 defines no check digit for European VINs, so ``None`` is
        returned for the EU region.
        """
        if self.region() == EUROPE:
            return None
        return self.number[CHECK_DIGIT_POSITION]

    def model_year(self) -> str:
        """Return the single-character model year code."""
        return self.number[9]

    def year(self) -> int:
        """Return the model year, or :data:`FALLBACK_YEAR` for unknown codes."""
        return YEAR_CODES.get(self.model_year(), FALLBACK_YEAR)

    def assembly_plant(self) -> str:
        """Return the assembly plant character (manufacturer specific)."""
        return self.number[10]

    def serial_number(self) -> str:
        """Return the 5-character production serial number."""
        return self.number[12:17]

    # -- Extended info -------------------------------------------------------

    def _resolve_gateway(self) -> ExtendedInfoGateway:
        if self._gateway is None:
            from vindecode.api.nhtsa import NHTSAClient

            self._gateway = NHTSAClient()
        return self._gateway

    async def _fetch_extended_info(self) -> None:
        if not self.extended or self._vehicle_info:
            return

        async with self._fetch_lock:
            # Another task may have populated the cache while we waited.
            if self._vehicle_info:
                return
            gateway = self._resolve_gateway()
            try:
                info = await gateway.fetch(self.number)
            except GatewayError as exc:
                logger.warning("Extended info unavailable for VIN %s...: %s", self.number[:6], exc)
                return
            if info:
                self._vehicle_info.update(info)
            else:
                logger.debug("No extended info for VIN %s...", self.number[:6])

    async def extended_info(self) -> dict[str, Any]:
        """Return a copy of the cached extended attributes."""
        await self._fetch_extended_info()
        return dict(self._vehicle_info)

    async def fuel_type(self) -> int | None:
        """Return the numeric fuel type code, or ``None`` if unknown."""
        await self._fetch_extended_info()
        name = self._vehicle_info.get(FUEL_TYPE_KEY)
        if not isinstance(name, str):
            return None
        return FUEL_TYPE_CODES.get(name)

    async def make(self) -> str | None:
        await self._fetch_extended_info()
        return self._vehicle_info.get(MAKE_KEY)

    async def make_id(self) -> int | None:
        """Return the vPIC make ID.

        Raises :class:`ValueError` if the service returned a non-numeric ID.
        """
        await self._fetch_extended_info()
        return _parse_id(self._vehicle_info.get(MAKE_ID_KEY))

    async def model(self) -> str | None:
        await self._fetch_extended_info()
        return self._vehicle_info.get(MODEL_KEY)

    async def model_id(self) -> int | None:
        """Return the vPIC model ID.

        Raises :class:`ValueError` if the service returned a non-numeric ID.
        """
        await self._fetch_extended_info()
        return _parse_id(self._vehicle_info.get(MODEL_ID_KEY))

    async def vehicle_type(self) -> str | None:
        await self._fetch_extended_info()
        return self._vehicle_info.get(VEHICLE_TYPE_KEY)


def _parse_id(value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    raise ValueError(f"Invalid numeric ID: {value!r}")
