"""Tipos de fallo que reporta la frontera del launcher.

Viven en el dominio para que CLI, servicios y adaptadores compartan el mismo
vocabulario de "qué salió mal" sin importarse entre sí.
"""

from __future__ import annotations

from enum import Enum


class FailureKind(str, Enum):
    """Categorías de fallo capturadas en la frontera de errores."""

    MISSING_ARGUMENT = "missing_argument"
    INSTALLER_UNAVAILABLE = "installer_unavailable"
    INSTALL_FAILED = "install_failed"
    UNEXPECTED = "unexpected"

    @classmethod
    def from_exception(cls, exc: BaseException) -> "FailureKind":
        """Categoría de una excepción; cualquier excepción ajena es `UNEXPECTED`."""

        kind = getattr(exc, "kind", None)
        return kind if isinstance(kind, cls) else cls.UNEXPECTED

    def label(self) -> str:
        """Etiqueta legible para diagnósticos y logging."""

        return self.value.replace("_", " ")
