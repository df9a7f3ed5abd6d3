"""Registro de licencias: API REST de GitHub (`/licenses`).

Endpoints:
- `GET /licenses` -> lista de objetos con `key`, `name`, `spdx_id`.
- `GET /licenses/{key}` -> objeto con `name`, `body` (404 si la clave no existe).

Un único intento por llamada; cualquier fallo se eleva como `RegistryError`.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter

from core.config import AppSettings
from core.domain.errors import RegistryError
from core.domain.models import LicenseSummary, LicenseText
from core.interfaces.registry import LicenseRegistry

logger = logging.getLogger(__name__)

_SUMMARIES = TypeAdapter(list[LicenseSummary])


class GitHubLicenseRegistry(LicenseRegistry):
    """Cliente del registro de licencias de GitHub."""

    def __init__(self, client: httpx.AsyncClient, settings: AppSettings | None = None) -> None:
        self._client = client
        self._settings = settings or AppSettings()

    @property
    def base_url(self) -> str:
        return self._settings.api_base_url.rstrip("/")

    async def list_licenses(self) -> list[LicenseSummary]:
        url = f"{self.base_url}/licenses"
        payload = await self._get_json(url)
        try:
            return _SUMMARIES.validate_python(payload)
        except ValueError as exc:
            raise RegistryError(f"Unexpected response from {url}: {exc}") from exc

    async def fetch_license(self, key: str) -> LicenseText:
        url = f"{self.base_url}/licenses/{quote(key, safe='')}"
        payload = await self._get_json(url)
        try:
            return LicenseText.model_validate(payload)
        except ValueError as exc:
            raise RegistryError(f"Unexpected response from {url}: {exc}") from exc

    async def _get_json(self, url: str) -> Any:
        logger.debug("GET %s", url)
        try:
            resp = await self._client.get(url)
        except httpx.HTTPError as exc:
            raise RegistryError(f"Could not reach license registry at {url}: {exc}") from exc

        logger.debug("GET %s -> HTTP %s", url, resp.status_code)
        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise RegistryError(
                f"License registry returned HTTP {resp.status_code} for {url}",
                status_code=resp.status_code,
            ) from exc

        try:
            return resp.json()
        except ValueError as exc:
            raise RegistryError(f"Unexpected response from {url}: body is not JSON") from exc
