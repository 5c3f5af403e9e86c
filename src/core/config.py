"""Configuración del Core.

- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- El instalador Java, el logging y la política de exit code leen de aquí.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_DIR_NAME = "optifine-launcher"
DEFAULT_INSTALLER_FACTORY = "adapters.java_installer:build_installer"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario.

    Por qué fuera del proyecto: el launcher se instala como script y se lanza
    desde cualquier cwd; la ruta del jar y de Java tienen que persistir entre
    ejecuciones sin un `.env` junto al código. Sigue las convenciones de cada
    plataforma (APPDATA, Application Support, XDG).
    """

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_DIR_NAME
    return Path.home() / ".config" / APP_DIR_NAME


def get_user_env_file() -> Path:
    """`.env` que escribe `optifine-launcher-doctor setup` y lee `AppSettings`."""

    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    """Lee pares `CLAVE=valor` de un `.env`.

    Por qué un parser propio y no pydantic-settings: aquí solo hace falta
    reescribir el archivo conservando claves ajenas al launcher, sin validar.
    Ignora comentarios, líneas sin `=` y claves vacías; quita comillas.
    """

    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        key, sep, value = raw_line.strip().partition("=")
        key = key.strip()
        if not sep or not key or key.startswith("#"):
            continue
        data[key] = value.strip().strip('"').strip("'")
    return data


def write_user_env_vars(values: dict[str, str | None]) -> Path:
    """Fusiona `values` en el `.env` de usuario y devuelve su ruta.

    Por qué fusionar: `setup` solo pregunta por Java y el jar; el resto de
    `OPTIFINE_LAUNCHER_*` que el usuario haya puesto a mano debe sobrevivir.
    Los `None` no pisan nada. Las claves se escriben ordenadas para que el
    archivo sea estable entre ejecuciones.
    """

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    merged = _parse_env_lines(env_path.read_text(encoding="utf-8")) if env_path.is_file() else {}
    merged.update((key, value) for key, value in values.items() if value is not None)

    body = "".join(f"{key}={merged[key]}\n" for key in sorted(merged))
    env_path.write_text("# optifine-launcher user config (.env)\n" + body, encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Se lee de variables `OPTIFINE_LAUNCHER_*`, del `.env` del proyecto y del
    `.env` de usuario (en ese orden de prioridad).
    """

    model_config = SettingsConfigDict(
        env_prefix="OPTIFINE_LAUNCHER_",
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    java_path: str = Field(
        default="java",
        min_length=1,
        description="Ejecutable de Java usado para correr el instalador.",
    )
    installer_jar: Path | None = Field(
        default=None,
        description="Ruta al jar del instalador de OptiFine (p.ej. OptiFine_1.16.5_HD_U_G8.jar).",
    )
    extra_classpath: list[Path] = Field(
        default_factory=list,
        description="Entradas extra de classpath antepuestas al jar (JSON list en env).",
    )
    main_class: str = Field(
        default="OptiFineInstaller",
        min_length=1,
        description="Clase principal que invoca el instalador headless.",
    )
    installer_factory: str = Field(
        default=DEFAULT_INSTALLER_FACTORY,
        min_length=3,
        description="Factory `modulo:atributo` que construye la install capability.",
    )

    exit_nonzero_on_failure: bool = Field(
        default=False,
        description="Devolver exit code 1 si la instalación falla.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging para el archivo de log.",
    )
    log_to_console: bool = Field(
        default=False,
        description="Duplicar warnings/errores del log en stderr (Rich).",
    )
    log_file: Path | None = Field(
        default=None,
        description="Archivo de log; por defecto <config de usuario>/launcher.log.",
    )

    def resolved_log_file(self) -> Path:
        return self.log_file or get_user_config_dir() / "launcher.log"
