"""Componentes de UI para CLI (Rich).

- Separa la presentación de la lógica de los comandos.
- El diagnóstico de fallo se imprime tal cual (traza de Python), sin markup.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from core.domain.models import LaunchFailure

STATUS_STYLES = {
    "OK": "green",
    "OPTIONAL": "yellow",
    "MISSING": "yellow",
    "FAIL": "red",
}


def print_failure(console: Console, failure: LaunchFailure) -> None:
    """Imprime la traza completa; la última línea es `Tipo: mensaje`."""

    console.print(Text(failure.traceback.rstrip("\n")), markup=False, highlight=False, soft_wrap=True)


def build_doctor_table() -> Table:
    table = Table(title="OptiFine Launcher Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table


def add_check_row(table: Table, check: str, status: str, details: str) -> None:
    table.add_row(check, Text(status, style=STATUS_STYLES.get(status, "white")), details)
