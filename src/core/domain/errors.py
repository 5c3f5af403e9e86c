"""Jerarquía de excepciones del launcher.

Cada clase declara su `FailureKind`, así la frontera de errores no necesita
una cadena de `except` por tipo.
"""

from __future__ import annotations

from core.domain.failure import FailureKind


class LauncherError(Exception):
    """Base de los errores propios del launcher."""

    kind: FailureKind = FailureKind.UNEXPECTED


class MissingTargetError(LauncherError, IndexError):
    """No se pasó la ruta objetivo en la línea de comandos."""

    kind = FailureKind.MISSING_ARGUMENT

    def __init__(self, message: str = "missing required argument: target path") -> None:
        super().__init__(message)


class InstallerUnavailableError(LauncherError):
    """La install capability no se pudo construir (config, import, Java ausente)."""

    kind = FailureKind.INSTALLER_UNAVAILABLE


class InstallFailedError(LauncherError):
    """El instalador se ejecutó pero terminó con error."""

    kind = FailureKind.INSTALL_FAILED

    def __init__(self, message: str, *, returncode: int | None = None, stderr: str = "") -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr
