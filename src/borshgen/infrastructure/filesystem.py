"""Filesystem output for generated artifacts.

Writes are plain overwrites: no temp file, no cleanup on failure.  A failed
write may leave a truncated file behind, which the next (idempotent)
generation run replaces.
"""

from __future__ import annotations

from pathlib import Path


def write_generated_file(directory: Path, filename: str, text: str) -> Path:
    """Write *text* to ``directory / filename``, creating *directory* as needed.

    Line endings are written as ``\\n`` on every platform so regenerated
    files are byte-identical.  ``OSError`` propagates unchanged.
    """
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / filename
    path.write_text(text, encoding="utf-8", newline="\n")
    return path
