"""AppContext — shared Click context for all commands.

Created once by the root CLI group; subcommands receive it through
``@click.pass_obj``.  Owns logging setup and result emission (stdout/stderr
routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from borshgen.config.logging import configure_logging
from borshgen.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from borshgen.config.settings import BorshgenSettings
    from borshgen.services.result import ServiceResult


class AppContext:
    """Settings plus output handling for one CLI invocation."""

    def __init__(self, settings: BorshgenSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout, normal return.  Warnings go to stderr so they
          don't pollute piped output (JSON mode carries them in-payload).
        * Failure: stderr, exit code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
