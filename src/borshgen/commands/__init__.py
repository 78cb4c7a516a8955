"""Subcommand modules for borshgen.

register_commands() imports command modules lazily so ``borshgen --help``
does not pull in Jinja2 or the emitter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from borshgen.commands.generate import generate
    from borshgen.commands.layouts import layouts

    cli.add_command(generate)
    cli.add_command(layouts)
