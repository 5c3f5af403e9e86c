"""Resolución de la install capability configurada.

`AppSettings.installer_factory` apunta a una factory `modulo:atributo` que
recibe los settings y devuelve un objeto con `do_install(target)`.
"""

from __future__ import annotations

import importlib
import logging

from core.config import AppSettings
from core.domain.errors import InstallerUnavailableError
from core.interfaces.installer import InstallCapability, InstallerFactory

logger = logging.getLogger(__name__)


def resolve_factory(spec: str) -> InstallerFactory:
    """Importa `modulo:atributo` y devuelve el callable."""

    module_name, sep, attr = spec.partition(":")
    if not sep or not module_name.strip() or not attr.strip():
        raise InstallerUnavailableError(
            f"invalid installer factory {spec!r}: expected 'module:attribute'"
        )

    try:
        module = importlib.import_module(module_name.strip())
    except ImportError as exc:
        raise InstallerUnavailableError(f"cannot import installer module {module_name!r}: {exc}") from exc

    factory = getattr(module, attr.strip(), None)
    if factory is None or not callable(factory):
        raise InstallerUnavailableError(f"{spec!r} is not a callable installer factory")
    return factory


def load_installer(settings: AppSettings | None = None) -> InstallCapability:
    """Construye la install capability a partir de la configuración."""

    settings = settings or AppSettings()
    factory = resolve_factory(settings.installer_factory)
    logger.debug("Building installer from %s", settings.installer_factory)

    installer = factory(settings)
    if not isinstance(installer, InstallCapability):
        raise InstallerUnavailableError(
            f"{settings.installer_factory!r} returned {type(installer).__name__}, "
            "which has no do_install(target)"
        )
    return installer
