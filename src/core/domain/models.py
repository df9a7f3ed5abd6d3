"""Modelos del dominio (Pydantic v2).

Describen *qué* es una licencia y *qué* parámetros necesita una ejecución,
no *cómo* se obtienen. El registro remoto devuelve más campos de los que
usamos; se ignoran (`extra="ignore"`).
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class LicenseSummary(BaseModel):
    """Entrada del listado de licencias (una opción del selector)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    key: str = Field(
        ...,
        min_length=1,
        description="Identificador corto de la plantilla (p.ej. 'mit', 'apache-2.0').",
    )
    name: str = Field(
        ...,
        description="Nombre legible de la licencia.",
    )
    spdx_id: str = Field(
        ...,
        description="Identificador SPDX mostrado junto a la clave.",
    )


class LicenseText(BaseModel):
    """Plantilla completa de una licencia, aún con placeholders."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = Field(
        ...,
        description="Nombre legible de la licencia.",
    )
    body: str = Field(
        ...,
        description="Texto crudo de la plantilla.",
    )


class RunParameters(BaseModel):
    """Valores finales de una invocación: qué licencia, para quién y qué año."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    license_key: str = Field(
        ...,
        min_length=1,
        description="Clave de la licencia a descargar.",
    )
    author: str = Field(
        ...,
        min_length=1,
        description="Titular del copyright.",
    )
    year: str = Field(
        ...,
        min_length=1,
        description="Año (o rango) del copyright.",
    )
