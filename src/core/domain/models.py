"""Modelos del dominio (Pydantic v2).

- Describen *qué* produce el launcher (resultado, fallo, instalación
  detectada), no *cómo* se obtiene.
- Se serializan sin esfuerzo para logs o exportación.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from core.domain.failure import FailureKind


class LaunchFailure(BaseModel):
    """Diagnóstico capturado por la frontera de errores del launcher."""

    kind: FailureKind = Field(
        ...,
        description="Categoría del fallo.",
    )
    error_type: str = Field(
        ...,
        min_length=1,
        description="Nombre de la clase de la excepción original (p.ej. 'FileNotFoundError').",
    )
    message: str = Field(
        default="",
        description="Mensaje de la excepción (puede ser vacío).",
    )
    traceback: str = Field(
        ...,
        min_length=1,
        description="Traza formateada tal como se imprime en stderr.",
    )

    def headline(self) -> str:
        """`Tipo: mensaje`, como la última línea de una traza de Python."""

        if self.message:
            return f"{self.error_type}: {self.message}"
        return self.error_type


class LaunchOutcome(BaseModel):
    """Resultado de una ejecución del launcher."""

    target: Path | None = Field(
        default=None,
        description="Ruta objetivo construida a partir del primer argumento.",
    )
    failure: LaunchFailure | None = Field(
        default=None,
        description="Presente solo si la instalación falló.",
    )

    @property
    def ok(self) -> bool:
        return self.failure is None


class CommandResult(BaseModel):
    """Salida capturada de un subproceso."""

    argv: list[str] = Field(default_factory=list)
    returncode: int = 0
    stdout: str = ""
    stderr: str = ""


class OptiFineInstall(BaseModel):
    """Instalación de OptiFine encontrada dentro de `<minecraft>/versions`."""

    version: str = Field(
        ...,
        min_length=1,
        description="Id de versión (nombre del directorio), p.ej. '1.16.5-OptiFine_HD_U_G8'.",
    )
    jar: Path = Field(
        ...,
        description="Jar de la versión OptiFine.",
    )
    config_path: Path = Field(
        ...,
        description="JSON de la versión OptiFine.",
    )
    config: dict[str, Any] = Field(
        default_factory=dict,
        description="Contenido parseado del JSON de versión.",
    )
