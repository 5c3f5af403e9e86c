"""Install capability por defecto: el instalador de OptiFine en un subproceso Java.

Línea de comandos:

    <java_path> -cp <extra_classpath...><sep><installer_jar> <main_class> <target>

`<sep>` es `;` en Windows y `:` en el resto. `main_class` es una clase puente
que llama a `optifine.Installer.doInstall(new File(args[0]))`.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from adapters.command import format_argv, run_cmd
from adapters.launcher_profiles import ensure_launcher_profiles
from core.config import AppSettings
from core.domain.errors import InstallerUnavailableError, InstallFailedError

logger = logging.getLogger(__name__)


def classpath_separator() -> str:
    return ";" if os.name == "nt" else ":"


@dataclass
class JavaInstaller:
    """Ejecuta el instalador de OptiFine contra un directorio de Minecraft."""

    installer_jar: Path
    java_path: str = "java"
    main_class: str = "OptiFineInstaller"
    extra_classpath: list[Path] = field(default_factory=list)

    def classpath(self) -> str:
        entries = [str(p) for p in self.extra_classpath] + [str(self.installer_jar)]
        return classpath_separator().join(entries)

    def build_argv(self, target: Path) -> list[str]:
        return [self.java_path, "-cp", self.classpath(), self.main_class, str(target)]

    def do_install(self, target: Path) -> None:
        if not self.installer_jar.is_file():
            raise InstallerUnavailableError(f"installer jar not found: {self.installer_jar}")
        if not target.is_dir():
            raise InstallFailedError(f"minecraft directory not found: {target}")

        ensure_launcher_profiles(target)

        argv = self.build_argv(target)
        logger.info("install-start %s", target)
        try:
            result = run_cmd(argv)
        except FileNotFoundError as exc:
            raise InstallerUnavailableError(f"java executable not found: {self.java_path}") from exc

        if result.stdout:
            logger.info("install-data %s", result.stdout.strip())
        if result.stderr:
            logger.warning("install-error %s", result.stderr.strip())

        if result.returncode != 0:
            raise InstallFailedError(
                f"installer exited with code {result.returncode}: {format_argv(argv)}\n{result.stderr}".rstrip(),
                returncode=result.returncode,
                stderr=result.stderr,
            )
        logger.info("install-finish %s", target)


def build_installer(settings: AppSettings) -> JavaInstaller:
    """Factory por defecto (`adapters.java_installer:build_installer`)."""

    if settings.installer_jar is None:
        raise InstallerUnavailableError(
            "no installer jar configured; set OPTIFINE_LAUNCHER_INSTALLER_JAR "
            "or run `optifine-launcher-doctor setup`"
        )
    return JavaInstaller(
        installer_jar=settings.installer_jar,
        java_path=settings.java_path,
        main_class=settings.main_class,
        extra_classpath=list(settings.extra_classpath),
    )
