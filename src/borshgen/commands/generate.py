"""Command: generate schema.ts from a schema container file."""

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
  borshgen generate schema.toml
  borshgen generate schema.toml --root Instruction --output app/src/generated
  borshgen --json generate types.yaml --root Point --root Shape""",
)
@click.argument("container", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--root",
    "roots",
    multiple=True,
    help="Root type to generate (repeatable). Default: every declared type.",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Output directory. Default: [generator] output_dir.",
)
@click.pass_obj
def generate(app: AppContext, container: Path, roots: tuple[str, ...], output: Path | None) -> None:
    """Write TypeScript classes and the borsh SCHEMA map for CONTAINER."""
    from borshgen.services.generate import GenerateService

    result = GenerateService(app.settings).generate(
        container.resolve(),
        roots=roots or None,
        output_dir=output.resolve() if output is not None else None,
    )
    app.emit(result)
