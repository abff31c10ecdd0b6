"""NHTSA vPIC client implementing :class:`ExtendedInfoGateway`."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from vindecode.api.errors import ConfigError, GatewayError
from vindecode.models.config import AppSettings
from vindecode.models.nhtsa import DecodeVinValuesResponse

logger = logging.getLogger(__name__)


class NHTSAClient:
    """Fetch decoded vehicle attributes from the free NHTSA vPIC API.

    Pass *client* to reuse an existing :class:`httpx.AsyncClient`; otherwise a
    short-lived client is opened for every request.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float | None = None,
        user_agent: str | None = None,
        client: httpx.AsyncClient | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        settings = settings or AppSettings()
        self._base_url = (base_url or settings.nhtsa_base_url).rstrip("/")
        self._timeout = settings.nhtsa_timeout if timeout is None else timeout
        self._user_agent = user_agent or settings.user_agent
        self._client = client

        if not self._base_url:
            raise ConfigError("NHTSA base URL must not be empty")
        if self._timeout <= 0:
            raise ConfigError(f"NHTSA timeout must be positive, got {self._timeout!r}")

    @property
    def base_url(self) -> str:
        return self._base_url

    def decode_url(self, number: str) -> str:
        """Return the ``DecodeVinValues`` URL for *number* (without query).

        *number* is escaped as a single path segment.
        """
        segment = quote(number, safe="")
        return f"{self._base_url}/DecodeVinValues/{segment}"

    async def _get(self, url: str) -> httpx.Response:
        params = {"format": "json"}
        headers = {"User-Agent": self._user_agent}
        if self._client is not None:
            return await self._client.get(
                url, params=params, headers=headers, timeout=self._timeout
            )
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            return await client.get(url, params=params, headers=headers)

    async def decode_vin_values(self, number: str) -> DecodeVinValuesResponse:
        """Fetch and parse the full ``DecodeVinValues`` envelope for *number*."""
        try:
            resp = await self._get(self.decode_url(number))
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise GatewayError(f"NHTSA request failed: {exc}") from exc

        if resp.status_code != 200:
            raise GatewayError(
                f"NHTSA returned HTTP {resp.status_code}", status_code=resp.status_code
            )

        try:
            return DecodeVinValuesResponse.model_validate(resp.json())
        except ValueError as exc:  # JSONDecodeError and ValidationError
            raise GatewayError(f"Malformed NHTSA response: {exc}") from exc

    async def fetch(self, number: str) -> dict[str, Any]:
        """Return the decoded attributes for *number*, or ``{}`` if none."""
        logger.debug("Fetching NHTSA values for VIN %s...", number[:6])
        data = await self.decode_vin_values(number)
        return data.first_result()
