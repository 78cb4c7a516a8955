"""borshgen.toml discovery.

The project root is the directory holding ``borshgen.toml``.  The file is
found by walking up from the working directory, unless ``BORSHGEN_CONFIG``
names one explicitly (``--config`` takes precedence over both).
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "borshgen.toml"
CONFIG_ENV_VAR = "BORSHGEN_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest borshgen.toml at or above *start* (default: cwd).

    A set but non-existent ``BORSHGEN_CONFIG`` disables discovery.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        explicit = Path(env_path)
        return explicit if explicit.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
