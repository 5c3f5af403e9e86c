"""Contrato de la install capability.

Un `Protocol` estructural: cualquier objeto con `do_install(target)` sirve,
sea el adaptador Java, un stub de tests o un plugin externo.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Protocol, runtime_checkable

from core.config import AppSettings


@runtime_checkable
class InstallCapability(Protocol):
    """Operación única que realiza la instalación a partir de una ruta.

    Reglas:
    - Síncrona y bloqueante.
    - Puede lanzar cualquier excepción; el launcher la captura en su frontera.
    """

    def do_install(self, target: Path) -> None:
        """Instala usando `target`; no devuelve nada si todo fue bien."""

        ...


InstallerFactory = Callable[[AppSettings], InstallCapability]
