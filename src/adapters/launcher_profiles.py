"""`launcher_profiles.json` del directorio de Minecraft.

El instalador de OptiFine aborta si el archivo no existe, aunque no lo
necesite para nada más; basta con un objeto JSON vacío.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

PROFILES_FILENAME = "launcher_profiles.json"


def ensure_launcher_profiles(root: Path) -> Path:
    """Crea `<root>/launcher_profiles.json` con `{}` si falta; no toca uno existente.

    `root` debe existir: un directorio inexistente propaga `FileNotFoundError`.
    """

    profile_path = root / PROFILES_FILENAME
    if profile_path.exists():
        return profile_path

    profile_path.write_text(json.dumps({}, indent=4), encoding="utf-8")
    logger.info("Created empty %s", profile_path)
    return profile_path
