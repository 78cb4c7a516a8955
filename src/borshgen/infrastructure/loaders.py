"""Schema container files — TOML, JSON, or YAML.

All three formats share one shape::

    [types.Point]
    kind = "struct"
    fields = [["x", "u32"], ["y", "u32"]]

Type and member order in the file is declaration order.
"""

from __future__ import annotations

import json
import tomllib
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from borshgen.domain.container import SchemaContainer


class ContainerLoadError(Exception):
    """A container file is missing, unparseable, or has the wrong shape."""

    code = "INVALID_CONTAINER"

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot load schema container {path}: {reason}")
        self.path = path
        self.reason = reason


def _read_yaml(raw: str) -> Any:
    return YAML(typ="safe", pure=True).load(raw)


_READERS: dict[str, Callable[[str], Any]] = {
    ".toml": tomllib.loads,
    ".json": json.loads,
    ".yaml": _read_yaml,
    ".yml": _read_yaml,
}


def supported_suffixes() -> list[str]:
    return sorted(_READERS)


def load_container(path: Path) -> SchemaContainer:
    """Read and validate the container file at *path*.

    Raises:
        ContainerLoadError: Unknown suffix, unreadable file, parse error,
            or a document that does not validate as a container.
    """
    reader = _READERS.get(path.suffix.lower())
    if reader is None:
        reason = f"unsupported file type {path.suffix!r} (expected one of {supported_suffixes()})"
        raise ContainerLoadError(path, reason)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ContainerLoadError(path, str(exc)) from exc

    try:
        data = reader(raw)
    except (tomllib.TOMLDecodeError, json.JSONDecodeError, YAMLError) as exc:
        raise ContainerLoadError(path, str(exc)) from exc

    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ContainerLoadError(path, "top level must be a table with a 'types' key")

    try:
        return SchemaContainer.model_validate(data)
    except ValidationError as exc:
        raise ContainerLoadError(path, str(exc)) from exc
