"""Configuración de logging.

El launcher no escribe nada en consola cuando todo va bien, así que el log
va a archivo; la consola (Rich, stderr) es opcional.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

_CONFIGURED_ATTR = "_optifine_launcher_configured"
_PATH_ATTR = "_optifine_launcher_log_path"
_HANDLERS_ATTR = "_optifine_launcher_handlers"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def fallback_log_file() -> Path:
    return Path.cwd() / "optifine-launcher.log"


def _open_file_handler(log_file: Path) -> logging.FileHandler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(log_file, encoding="utf-8")


def configure_logging(
    log_file: Path,
    level: int | str = logging.WARNING,
    also_console: bool = False,
) -> Path | None:
    """Configura el logger raíz y devuelve el archivo realmente usado.

    - Si `log_file` no es escribible, cae a `./optifine-launcher.log`.
    - Si tampoco ese lo es, no hay log a archivo y devuelve `None`; un log
      inaccesible no debe impedir la instalación.
    - Llamadas repetidas no duplican handlers.
    """

    root = logging.getLogger()
    if getattr(root, _CONFIGURED_ATTR, False):
        return getattr(root, _PATH_ATTR)

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    root.setLevel(level)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z")

    handlers: list[logging.Handler] = []
    chosen: Path | None = None
    for candidate in (log_file, fallback_log_file()):
        try:
            file_handler = _open_file_handler(candidate)
        except OSError:
            continue
        file_handler.setFormatter(fmt)
        handlers.append(file_handler)
        chosen = candidate
        break
    else:
        # Sin handlers, logging.lastResort escribiría en stderr.
        handlers.append(logging.NullHandler())

    if also_console:
        console = RichHandler(console=Console(stderr=True), show_path=False)
        console.setLevel(logging.WARNING)
        handlers.append(console)

    for handler in handlers:
        root.addHandler(handler)

    setattr(root, _CONFIGURED_ATTR, True)
    setattr(root, _PATH_ATTR, chosen)
    setattr(root, _HANDLERS_ATTR, handlers)

    logging.getLogger(__name__).debug("Logging initialized (requested=%s, actual=%s)", log_file, chosen)
    return chosen


def reset_logging() -> None:
    """Quita los handlers instalados por `configure_logging` (tests, re-ejecución)."""

    root = logging.getLogger()
    if not getattr(root, _CONFIGURED_ATTR, False):
        return
    for handler in getattr(root, _HANDLERS_ATTR, []):
        root.removeHandler(handler)
        handler.close()
    setattr(root, _HANDLERS_ATTR, [])
    setattr(root, _CONFIGURED_ATTR, False)
