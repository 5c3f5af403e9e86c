"""CLI `optifine-launcher`.

Un único argumento posicional (la ruta objetivo); sin flags ni ayuda. Los
argumentos extra se ignoran. En éxito no imprime nada; en fallo imprime la
traza en stderr.
"""

from __future__ import annotations

from typing import Sequence

import typer
from pydantic import ValidationError
from rich.console import Console

from cli.ui_components import print_failure
from core.config import AppSettings
from core.logging_utils import configure_logging
from core.services.launcher import InstallerProvider, capture_failure, exit_code, launch

app = typer.Typer(add_completion=False)

_err_console = Console(stderr=True)


def execute(
    argv: Sequence[str],
    installer_provider: InstallerProvider | None = None,
    *,
    settings: AppSettings | None = None,
) -> int:
    """Corre el launcher con `argv` y devuelve el exit code."""

    if settings is None:
        try:
            settings = AppSettings()
        except ValidationError as exc:
            print_failure(_err_console, capture_failure(exc))
            return 0

    configure_logging(settings.resolved_log_file(), settings.log_level, also_console=settings.log_to_console)

    outcome = launch(argv, installer_provider, settings=settings)
    if outcome.failure is not None:
        print_failure(_err_console, outcome.failure)
    return exit_code(outcome, settings)


@app.command(
    add_help_option=False,
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
)
def main(args: list[str] | None = typer.Argument(None, show_default=False)) -> None:
    raise typer.Exit(code=execute(list(args or [])))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
