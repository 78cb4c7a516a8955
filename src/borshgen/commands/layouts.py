"""Command: show the resolved layouts without writing anything."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from borshgen.commands._base import BorshgenCommand

if TYPE_CHECKING:
    from borshgen.commands._context import AppContext


@click.command(
    cls=BorshgenCommand,
    examples="""\
  borshgen layouts schema.toml
  borshgen layouts schema.toml --root Shape
  borshgen --json layouts schema.json""",
)
@click.argument("container", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--root", "roots", multiple=True, help="Root type to resolve (repeatable).")
@click.pass_obj
def layouts(app: AppContext, container: Path, roots: tuple[str, ...]) -> None:
    """Resolve CONTAINER into layouts and print them."""
    from borshgen.services.generate import GenerateService

    app.emit(GenerateService(app.settings).inspect(container.resolve(), roots=roots or None))
