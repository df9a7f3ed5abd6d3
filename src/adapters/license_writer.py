"""Escritura del fichero LICENSE.

Un único `write_text` al final del flujo: si algo falla antes, el disco no se
toca. Sobrescribe sin confirmación.
"""

from __future__ import annotations

import logging
from pathlib import Path

from core.config import LICENSE_FILENAME
from core.domain.errors import WriteError

logger = logging.getLogger(__name__)


def write_license(text: str, directory: Path | None = None) -> Path:
    """Escribe `text` en `<directory>/LICENSE` (UTF-8) y devuelve la ruta."""

    output_path = (directory or Path.cwd()) / LICENSE_FILENAME
    try:
        output_path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise WriteError(f"Could not write {output_path}: {exc}") from exc
    logger.debug("wrote %d characters to %s", len(text), output_path)
    return output_path
