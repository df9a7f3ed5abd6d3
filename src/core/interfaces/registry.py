"""Contrato del registro de licencias.

`Protocol` estructural: el pipeline depende de esto y no de httpx, así que
los tests pueden pasar un registro en memoria.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import LicenseSummary, LicenseText


@runtime_checkable
class LicenseRegistry(Protocol):
    """Contrato mínimo para una fuente remota de plantillas.

    Reglas de diseño:
    - Ambos métodos son asíncronos porque hacen I/O (HTTP).
    - Un único intento por llamada; los fallos se elevan como `RegistryError`.
    """

    async def list_licenses(self) -> list[LicenseSummary]:
        """Devuelve todas las licencias disponibles."""

        ...

    async def fetch_license(self, key: str) -> LicenseText:
        """Devuelve la plantilla completa de `key`."""

        ...
