from __future__ import annotations

import httpx
import pytest
import respx

from adapters.github_licenses import GitHubLicenseRegistry
from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.errors import RegistryError
from core.domain.models import LicenseSummary, LicenseText

API_BASE_URL = "https://api.github.com"


@pytest.mark.asyncio
async def test_list_licenses_parses_entries(licenses_payload: list[dict[str, object]]) -> None:
    settings = AppSettings()
    async with respx.mock(base_url=API_BASE_URL) as mock:
        route = mock.get("/licenses").mock(return_value=httpx.Response(200, json=licenses_payload))
        async with build_async_client(settings) as client:
            licenses = await GitHubLicenseRegistry(client, settings).list_licenses()

    assert licenses == [
        LicenseSummary(key="mit", name="MIT License", spdx_id="MIT"),
        LicenseSummary(key="apache-2.0", name="Apache License 2.0", spdx_id="Apache-2.0"),
    ]
    request = route.calls.last.request
    assert request.headers["User-Agent"] == "lic-cli-python"
    assert request.headers["Accept"] == "application/vnd.github+json"


@pytest.mark.asyncio
async def test_fetch_license_returns_name_and_body() -> None:
    settings = AppSettings()
    async with respx.mock(base_url=API_BASE_URL) as mock:
        mock.get("/licenses/apache-2.0").mock(
            return_value=httpx.Response(
                200,
                json={
                    "key": "apache-2.0",
                    "name": "Apache License 2.0",
                    "body": "Copyright [yyyy] [name of copyright owner]",
                    "permissions": ["commercial-use"],
                },
            )
        )
        async with build_async_client(settings) as client:
            detail = await GitHubLicenseRegistry(client, settings).fetch_license("apache-2.0")

    assert detail == LicenseText(name="Apache License 2.0", body="Copyright [yyyy] [name of copyright owner]")


@pytest.mark.asyncio
async def test_user_agent_comes_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LIC_USER_AGENT", "custom-agent/1.0")
    settings = AppSettings()
    async with respx.mock(base_url=API_BASE_URL) as mock:
        route = mock.get("/licenses/mit").mock(
            return_value=httpx.Response(200, json={"name": "MIT License", "body": "x"})
        )
        async with build_async_client(settings) as client:
            await GitHubLicenseRegistry(client, settings).fetch_license("mit")

    assert route.calls.last.request.headers["User-Agent"] == "custom-agent/1.0"


@pytest.mark.asyncio
async def test_unknown_key_raises_registry_error_with_status() -> None:
    settings = AppSettings()
    async with respx.mock(base_url=API_BASE_URL) as mock:
        mock.get("/licenses/nope").mock(return_value=httpx.Response(404, json={"message": "Not Found"}))
        async with build_async_client(settings) as client:
            with pytest.raises(RegistryError) as excinfo:
                await GitHubLicenseRegistry(client, settings).fetch_license("nope")

    assert excinfo.value.status_code == 404
    assert "404" in str(excinfo.value)


@pytest.mark.asyncio
async def test_server_error_on_listing_raises_registry_error() -> None:
    settings = AppSettings()
    async with respx.mock(base_url=API_BASE_URL) as mock:
        mock.get("/licenses").mock(return_value=httpx.Response(503))
        async with build_async_client(settings) as client:
            with pytest.raises(RegistryError) as excinfo:
                await GitHubLicenseRegistry(client, settings).list_licenses()

    assert excinfo.value.status_code == 503


@pytest.mark.asyncio
async def test_transport_failure_raises_registry_error() -> None:
    settings = AppSettings()
    async with respx.mock(base_url=API_BASE_URL) as mock:
        mock.get("/licenses/mit").mock(side_effect=httpx.ConnectError("connection refused"))
        async with build_async_client(settings) as client:
            with pytest.raises(RegistryError) as excinfo:
                await GitHubLicenseRegistry(client, settings).fetch_license("mit")

    assert excinfo.value.status_code is None


@pytest.mark.asyncio
async def test_non_json_body_raises_registry_error() -> None:
    settings = AppSettings()
    async with respx.mock(base_url=API_BASE_URL) as mock:
        mock.get("/licenses/mit").mock(return_value=httpx.Response(200, text="<html>rate limited</html>"))
        async with build_async_client(settings) as client:
            with pytest.raises(RegistryError):
                await GitHubLicenseRegistry(client, settings).fetch_license("mit")


@pytest.mark.asyncio
async def test_listing_with_wrong_shape_raises_registry_error() -> None:
    settings = AppSettings()
    async with respx.mock(base_url=API_BASE_URL) as mock:
        mock.get("/licenses").mock(return_value=httpx.Response(200, json=[{"key": "mit", "name": "MIT License"}]))
        async with build_async_client(settings) as client:
            with pytest.raises(RegistryError):
                await GitHubLicenseRegistry(client, settings).list_licenses()


@pytest.mark.asyncio
async def test_license_without_body_raises_registry_error() -> None:
    settings = AppSettings()
    async with respx.mock(base_url=API_BASE_URL) as mock:
        mock.get("/licenses/mit").mock(return_value=httpx.Response(200, json={"name": "MIT License"}))
        async with build_async_client(settings) as client:
            with pytest.raises(RegistryError):
                await GitHubLicenseRegistry(client, settings).fetch_license("mit")


@pytest.mark.asyncio
async def test_base_url_is_configurable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LIC_API_BASE_URL", "https://licenses.example.test/api/")
    settings = AppSettings()
    async with respx.mock(base_url="https://licenses.example.test/api") as mock:
        route = mock.get("/licenses/mit").mock(
            return_value=httpx.Response(200, json={"name": "MIT License", "body": "x"})
        )
        async with build_async_client(settings) as client:
            await GitHubLicenseRegistry(client, settings).fetch_license("mit")

    assert route.called
