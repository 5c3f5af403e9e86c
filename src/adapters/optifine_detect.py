"""Detección de instalaciones de OptiFine en un directorio de Minecraft.

Layout esperado (el que deja el instalador):

    <minecraft>/versions/<id>/<id>.jar
    <minecraft>/versions/<id>/<id>.json

con `<id>` del estilo `1.16.5-OptiFine_HD_U_G8`.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from core.domain.models import OptiFineInstall

logger = logging.getLogger(__name__)


def detect_optifine_install(mc_path: Path, version: str) -> OptiFineInstall | None:
    """Busca la primera versión `<version>-OptiFine*` completa (jar + json)."""

    versions_dir = mc_path / "versions"
    if not versions_dir.is_dir():
        return None

    marker = f"{version}-OptiFine"
    candidates = sorted(p.name for p in versions_dir.iterdir() if p.is_dir() and marker in p.name)
    if not candidates:
        return None

    version_id = candidates[0]
    jar = versions_dir / version_id / f"{version_id}.jar"
    config_path = versions_dir / version_id / f"{version_id}.json"
    if not jar.is_file() or not config_path.is_file():
        logger.debug("Incomplete OptiFine install at %s", versions_dir / version_id)
        return None

    return OptiFineInstall(
        version=version_id,
        jar=jar,
        config_path=config_path,
        config=json.loads(config_path.read_text(encoding="utf-8")),
    )


def parse_version_id(version: str, target: str) -> str:
    """Deriva el id de versión a partir del nombre del instalador.

    `parse_version_id("1.16.5", "OptiFine_1.16.5_HD_U_G8.jar")`
    -> `"1.16.5-OptiFine_HD_U_G8"`
    """

    _, sep, tail = target.partition("H")
    if not sep:
        raise ValueError(f"not an OptiFine installer name: {target!r}")
    edition = tail.split("H", 1)[0].split(".", 1)[0]
    return f"{version}-OptiFine_H{edition}"
