"""Configuración del Core.

Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
Los adaptadores HTTP leen de aquí la URL del registro y el User-Agent.

Nota: lic no lee ni escribe ficheros de configuración; solo entorno (`LIC_*`).
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "lic"
APP_VERSION = "0.1.0"

LICENSE_FILENAME = "LICENSE"
DEFAULT_LICENSE_KEY = "mit"
FALLBACK_AUTHOR = "Your Name"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación."""

    model_config = SettingsConfigDict(
        env_prefix="LIC_",
        extra="ignore",
        case_sensitive=False,
    )

    api_base_url: str = Field(
        default="https://api.github.com",
        min_length=8,
        description="Base URL del registro de licencias (API REST de GitHub).",
    )
    user_agent: str = Field(
        default="lic-cli-python",
        min_length=1,
        description="Identificador de cliente enviado en cada petición.",
    )
