"""Wrapper de httpx.

Estandariza headers (User-Agent fijo, Accept de la API de GitHub) para todas
las peticiones al registro. El timeout es el de httpx por defecto.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings

GITHUB_ACCEPT = "application/vnd.github+json"


def build_async_client(
    settings: AppSettings | None = None,
) -> httpx.AsyncClient:
    """Crea el `httpx.AsyncClient` compartido por toda la ejecución."""

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": GITHUB_ACCEPT,
    }
    return httpx.AsyncClient(
        follow_redirects=True,
        headers=headers,
    )
