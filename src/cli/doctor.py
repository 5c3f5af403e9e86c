"""Doctor command for environment diagnostics."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from adapters.command import run_cmd
from adapters.launcher_profiles import PROFILES_FILENAME
from adapters.optifine_detect import detect_optifine_install
from cli.ui_components import add_check_row, build_doctor_table
from core.config import AppSettings, write_user_env_vars
from core.domain.errors import InstallerUnavailableError
from core.installer_loader import load_installer

app = typer.Typer(no_args_is_help=True, add_completion=False, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_java(java_path: str) -> tuple[bool, str]:
    try:
        result = run_cmd([java_path, "-version"])
    except OSError as exc:
        return False, str(exc)
    # `java -version` escribe en stderr.
    output = (result.stderr or result.stdout).strip()
    first_line = output.splitlines()[0] if output else ""
    if result.returncode != 0:
        return False, first_line or f"exit code {result.returncode}"
    return True, first_line or "OK"


def _check_installer(settings: AppSettings) -> tuple[bool, str]:
    try:
        installer = load_installer(settings)
    except InstallerUnavailableError as exc:
        return False, str(exc)
    return True, type(installer).__name__


@app.command()
def check(
    minecraft_dir: Path = typer.Argument(..., help="Minecraft root directory (e.g. ~/.minecraft)."),
    version: str | None = typer.Option(None, "--version", "-v", help="Minecraft version to look OptiFine up for."),
) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()
    table = build_doctor_table()

    ok_java, detail_java = _check_java(settings.java_path)
    add_check_row(table, "Java", "OK" if ok_java else "FAIL", detail_java)

    jar = settings.installer_jar
    if jar is None:
        add_check_row(table, "Installer jar", "MISSING", "Set OPTIFINE_LAUNCHER_INSTALLER_JAR or run `setup`")
    elif jar.is_file():
        add_check_row(table, "Installer jar", "OK", str(jar))
    else:
        add_check_row(table, "Installer jar", "FAIL", f"Not found: {jar}")

    ok_factory, detail_factory = _check_installer(settings)
    add_check_row(table, "Installer factory", "OK" if ok_factory else "FAIL", detail_factory)

    profiles = minecraft_dir / PROFILES_FILENAME
    if profiles.is_file():
        add_check_row(table, "Launcher profiles", "OK", str(profiles))
    else:
        add_check_row(table, "Launcher profiles", "OPTIONAL", "Missing -> created before install")

    if version:
        install = detect_optifine_install(minecraft_dir, version)
        if install:
            add_check_row(table, "OptiFine", "OK", install.version)
        else:
            add_check_row(table, "OptiFine", "MISSING", f"No OptiFine install for {version}")

    _console.print(table)


@app.command()
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    settings = AppSettings()

    java_path = typer.prompt("Java executable", default=settings.java_path, show_default=True).strip()
    default_jar = str(settings.installer_jar) if settings.installer_jar else ""
    installer_jar = typer.prompt("OptiFine installer jar", default=default_jar, show_default=bool(default_jar)).strip()

    if not java_path or not installer_jar:
        raise typer.BadParameter("java path and installer jar are required")
    if not Path(installer_jar).expanduser().is_file():
        _console.print(f"[yellow]Warning:[/yellow] {installer_jar} does not exist yet.")

    env_path = write_user_env_vars(
        {
            "OPTIFINE_LAUNCHER_JAVA_PATH": java_path,
            "OPTIFINE_LAUNCHER_INSTALLER_JAR": str(Path(installer_jar).expanduser()),
        }
    )

    _console.print(f"[green]Saved launcher config to:[/green] {env_path}")
