"""Errores del dominio.

Los adaptadores traducen las excepciones de sus librerías (httpx, pydantic,
OSError, typer) a esta jerarquía; la CLI es el único punto que las captura.
"""

from __future__ import annotations


class LicError(Exception):
    """Base de todos los errores que terminan la ejecución con código != 0."""


class ConfigError(LicError):
    """Un valor obligatorio no se pudo resolver desde flags ni entorno."""


class RegistryError(LicError):
    """Fallo de red, estado HTTP no exitoso o respuesta inesperada del registro."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class WriteError(LicError):
    """El sistema de ficheros rechazó la escritura del LICENSE."""


class InteractionCancelled(LicError):
    """El usuario abortó un prompt interactivo."""
