"""Launcher: reenvía la ruta objetivo a la install capability.

Secuencia lineal con una sola bifurcación (éxito / fallo capturado):

1. precondición: al menos un argumento
2. `Path(argv[0])`, sin comprobar existencia
3. construir la install capability y llamar `do_install` una vez
4. cualquier excepción se convierte en `LaunchFailure`; nada se relanza

La CLI decide qué imprimir y qué exit code usar; este módulo no escribe en
consola.
"""

from __future__ import annotations

import logging
import traceback
from pathlib import Path
from typing import Callable, Sequence

from core.config import AppSettings
from core.domain.errors import MissingTargetError
from core.domain.failure import FailureKind
from core.domain.models import LaunchFailure, LaunchOutcome
from core.installer_loader import load_installer
from core.interfaces.installer import InstallCapability

logger = logging.getLogger(__name__)

InstallerProvider = Callable[[], InstallCapability]


def read_target(argv: Sequence[str]) -> Path:
    """Devuelve `Path(argv[0])`; los argumentos extra se ignoran."""

    if len(argv) < 1:
        raise MissingTargetError()
    return Path(argv[0])


def capture_failure(exc: Exception) -> LaunchFailure:
    """Empaqueta una excepción como diagnóstico (tipo, mensaje, traza)."""

    trace = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return LaunchFailure(
        kind=FailureKind.from_exception(exc),
        error_type=type(exc).__name__,
        message=str(exc),
        traceback=trace,
    )


def launch(
    argv: Sequence[str],
    installer_provider: InstallerProvider | None = None,
    *,
    settings: AppSettings | None = None,
) -> LaunchOutcome:
    """Ejecuta el launcher y devuelve el resultado; nunca lanza `Exception`.

    `installer_provider` permite inyectar la capability; si no se da, se
    construye desde `settings.installer_factory`.
    """

    target: Path | None = None
    try:
        target = read_target(argv)
        if installer_provider is None:
            installer = load_installer(settings)
        else:
            installer = installer_provider()
        logger.info("Installing from %s", target)
        installer.do_install(target)
    except Exception as exc:
        failure = capture_failure(exc)
        logger.error("Install failed (%s): %s", failure.kind.label(), failure.headline(), exc_info=exc)
        return LaunchOutcome(target=target, failure=failure)

    logger.info("Install finished for %s", target)
    return LaunchOutcome(target=target)


def exit_code(outcome: LaunchOutcome, settings: AppSettings | None = None) -> int:
    """0 si fue bien; en fallo, 0 salvo que `exit_nonzero_on_failure` esté activo."""

    if outcome.ok:
        return 0
    settings = settings or AppSettings()
    return 1 if settings.exit_nonzero_on_failure else 0
