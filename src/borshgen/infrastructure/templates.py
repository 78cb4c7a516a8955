"""Shared Jinja2 template loading with per-project override support."""

from __future__ import annotations

from pathlib import Path

from jinja2 import (
    BaseLoader,
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    StrictUndefined,
)

OVERRIDE_DIR = Path(".borshgen") / "templates"


def build_template_environment(group: str, *, project_root: Path | None = None) -> Environment:
    """Build a Jinja2 environment with project overrides before packaged defaults.

    Overrides are looked up in ``<project_root>/.borshgen/templates/<group>/``
    and then in ``<project_root>/.borshgen/templates/``.  Block tags own their
    line (``trim_blocks``/``lstrip_blocks``) so templates read like the code
    they emit, and undefined variables fail loudly.
    """
    loaders: list[BaseLoader] = []
    if project_root is not None:
        template_root = project_root / OVERRIDE_DIR
        loaders.append(FileSystemLoader([str(template_root / group), str(template_root)]))

    loaders.append(PackageLoader("borshgen", f"templates/{group}"))
    return Environment(
        loader=ChoiceLoader(loaders),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
        autoescape=False,
    )
