"""Tests for vindecode.api.nhtsa — NHTSAClient."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx
import pytest

from vindecode.api.errors import ConfigError, GatewayError
from vindecode.api.gateway import ExtendedInfoGateway
from vindecode.api.nhtsa import NHTSAClient
from vindecode.models.config import DEFAULT_NHTSA_BASE_URL, AppSettings

if TYPE_CHECKING:
    from pytest_httpx import HTTPXMock

VIN = "1HGCM82633A004352"
DECODE_URL = f"{DEFAULT_NHTSA_BASE_URL}/DecodeVinValues/{VIN}?format=json"


@pytest.fixture
def client() -> NHTSAClient:
    return NHTSAClient()


class TestConstruction:
    def test_is_a_gateway(self, client: NHTSAClient) -> None:
        assert isinstance(client, ExtendedInfoGateway)

    def test_defaults_from_settings(self, client: NHTSAClient) -> None:
        assert client.base_url == DEFAULT_NHTSA_BASE_URL
        assert client.decode_url(VIN) == f"{DEFAULT_NHTSA_BASE_URL}/DecodeVinValues/{VIN}"

    def test_decode_url_escapes_vin(self, client: NHTSAClient) -> None:
        assert client.decode_url("1HG/../X?Y") == (
            f"{DEFAULT_NHTSA_BASE_URL}/DecodeVinValues/1HG%2F..%2FX%3FY"
        )

    def test_explicit_base_url(self) -> None:
        client = NHTSAClient("https://mirror.example.test/vpic/")
        assert client.base_url == "https://mirror.example.test/vpic"

    def test_rejects_non_positive_timeout(self) -> None:
        with pytest.raises(ConfigError):
            NHTSAClient(timeout=0)

    def test_rejects_empty_base_url(self) -> None:
        with pytest.raises(ConfigError):
            NHTSAClient(settings=AppSettings(nhtsa_base_url=""))


class TestFetch:
    @pytest.mark.asyncio
    async def test_returns_first_result(
        self,
        httpx_mock: HTTPXMock,
        client: NHTSAClient,
        sample_decode_response: dict[str, Any],
    ) -> None:
        httpx_mock.add_response(url=DECODE_URL, json=sample_decode_response)

        info = await client.fetch(VIN)

        assert info["Make"] == "HONDA"
        assert info["MakeID"] == "474"
        assert info["FuelTypePrimary"] == "Gasoline"
        assert "ABS" not in info

    @pytest.mark.asyncio
    async def test_sends_user_agent(
        self,
        httpx_mock: HTTPXMock,
        sample_decode_response: dict[str, Any],
    ) -> None:
        httpx_mock.add_response(json=sample_decode_response)
        await NHTSAClient(user_agent="garage-tool/2.0").fetch(VIN)

        request = httpx_mock.get_requests()[0]
        assert request.headers["user-agent"] == "garage-tool/2.0"
        assert request.url.params["format"] == "json"

    @pytest.mark.asyncio
    async def test_no_results(self, httpx_mock: HTTPXMock, client: NHTSAClient) -> None:
        httpx_mock.add_response(json={"Count": 0, "Message": "No data", "Results": []})
        assert await client.fetch(VIN) == {}

    @pytest.mark.asyncio
    async def test_reuses_injected_client(
        self,
        httpx_mock: HTTPXMock,
        sample_decode_response: dict[str, Any],
    ) -> None:
        httpx_mock.add_response(json=sample_decode_response)
        httpx_mock.add_response(json=sample_decode_response)

        async with httpx.AsyncClient() as http:
            client = NHTSAClient(client=http)
            first = await client.fetch(VIN)
            second = await client.fetch(VIN)

        assert first == second
        assert len(httpx_mock.get_requests()) == 2

    @pytest.mark.asyncio
    async def test_full_envelope(
        self,
        httpx_mock: HTTPXMock,
        client: NHTSAClient,
        sample_decode_response: dict[str, Any],
    ) -> None:
        httpx_mock.add_response(json=sample_decode_response)

        data = await client.decode_vin_values(VIN)

        assert data.count == 1
        assert data.search_criteria == f"VIN:{VIN}"
        assert data.results[0]["ABS"] == ""


class TestFetchErrors:
    @pytest.mark.asyncio
    async def test_http_error_status(self, httpx_mock: HTTPXMock, client: NHTSAClient) -> None:
        httpx_mock.add_response(status_code=503)
        with pytest.raises(GatewayError) as exc_info:
            await client.fetch(VIN)
        assert exc_info.value.status_code == 503

    @pytest.mark.asyncio
    async def test_transport_error(self, httpx_mock: HTTPXMock, client: NHTSAClient) -> None:
        httpx_mock.add_exception(httpx.ConnectError("connection refused"))
        with pytest.raises(GatewayError, match="request failed"):
            await client.fetch(VIN)

    @pytest.mark.asyncio
    async def test_invalid_url(self) -> None:
        client = NHTSAClient("https://vpic.example.test/api\nvehicles")
        with pytest.raises(GatewayError, match="request failed"):
            await client.fetch(VIN)

    @pytest.mark.asyncio
    async def test_invalid_json(self, httpx_mock: HTTPXMock, client: NHTSAClient) -> None:
        httpx_mock.add_response(text="<html>maintenance</html>")
        with pytest.raises(GatewayError, match="Malformed"):
            await client.fetch(VIN)

    @pytest.mark.asyncio
    async def test_unexpected_shape(self, httpx_mock: HTTPXMock, client: NHTSAClient) -> None:
        httpx_mock.add_response(json={"Results": "nope"})
        with pytest.raises(GatewayError, match="Malformed"):
            await client.fetch(VIN)
