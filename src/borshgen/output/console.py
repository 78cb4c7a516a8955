"""Rich Console factory and theme for borshgen output.

Consoles render to a StringIO buffer so formatters keep a plain
``-> str`` contract.  In non-TTY environments (tests, pipes) Rich
disables color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

BORSHGEN_THEME = Theme(
    {
        "bg.ok": "bold green",
        "bg.error": "bold red",
        "bg.warning": "bold yellow",
        "bg.op": "bold cyan",
        "bg.key": "dim",
        "bg.path": "dim",
        "bg.name": "bold",
        "bg.kind.struct": "blue",
        "bg.kind.enum": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=BORSHGEN_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
