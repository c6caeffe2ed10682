"""Excepciones del verificador.

Solo `ReferenceLocaleMissingError` aborta una ejecución; el resto de
condiciones estructurales se convierten en issues y la verificación continúa.
"""

from __future__ import annotations

from pathlib import Path


class VerificationError(Exception):
    """Base de los errores del verificador."""


class ReferenceLocaleMissingError(VerificationError):
    """El directorio del locale de referencia no existe."""

    def __init__(self, locale: str, path: Path) -> None:
        super().__init__(f"Reference locale '{locale}' not found at {path}")
        self.locale = locale
        self.path = path


class ResourceParseError(VerificationError):
    """Un fichero de recursos no se pudo interpretar como objeto JSON."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path.name}: {reason}")
        self.path = path
        self.reason = reason
