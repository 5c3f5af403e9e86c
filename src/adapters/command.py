"""Ejecución de subprocesos con logging consistente."""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
from pathlib import Path
from typing import Mapping, Sequence

from core.domain.models import CommandResult

logger = logging.getLogger(__name__)


def format_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


def run_cmd(
    argv: Sequence[str],
    *,
    env: Mapping[str, str] | None = None,
    cwd: Path | None = None,
) -> CommandResult:
    """Ejecuta `argv` capturando stdout/stderr (texto).

    No comprueba el returncode: eso lo decide quien llama. Un ejecutable
    inexistente propaga `FileNotFoundError`.
    """

    argv_list = [str(a) for a in argv]
    logger.info("CMD %s", format_argv(argv_list))

    proc = subprocess.run(
        argv_list,
        text=True,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        cwd=str(cwd) if cwd else None,
        env=dict(os.environ, **(env or {})),
    )

    if proc.stdout:
        logger.debug("STDOUT %s", proc.stdout.strip())
    if proc.stderr:
        logger.debug("STDERR %s", proc.stderr.strip())

    return CommandResult(
        argv=argv_list,
        returncode=proc.returncode,
        stdout=proc.stdout or "",
        stderr=proc.stderr or "",
    )
