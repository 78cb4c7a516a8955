"""Human, quiet, and JSON rendering of ServiceResult.

Human output is rendered through Rich; ``--json`` dumps the result model
as-is so scripts see the same payload the service produced.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from borshgen.domain.layout import format_declaration
from borshgen.domain.types import Layout
from borshgen.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from borshgen.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    json_output: bool = False
    quiet: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return _format_quiet(result)

    console = create_console()
    if not result.ok:
        _render_error(result, console)
    elif result.op == "layouts":
        _render_layouts(result, console)
    else:
        _render_generic(result, console)
    return get_output(console).rstrip("\n")


def _format_quiet(result: ServiceResult) -> str:
    if not result.ok:
        message = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {message}"
    if result.op == "generate":
        return str(result.data.get("output_path", ""))
    if result.op == "layouts":
        return "\n".join(item["name"] for item in result.data.get("layouts", []))
    return f"OK: {result.op}"


def _render_error(result: ServiceResult, console: Console) -> None:
    line = Text()
    line.append("ERROR", style="bg.error")
    line.append(f" {result.op}")
    if result.error is not None:
        line.append(f" [{result.error.code}]", style="bg.key")
        line.append(f" {result.error.message}")
    console.print(line)


def _render_generic(result: ServiceResult, console: Console) -> None:
    header = Text()
    header.append("OK", style="bg.ok")
    header.append(f" {result.op}", style="bg.op")
    console.print(header)
    for key, value in result.data.items():
        console.print(Text.assemble(("  " + key + ": ", "bg.key"), _value_text(value)))


def _value_text(value: Any) -> str:
    if isinstance(value, list):
        return ", ".join(str(item) for item in value)
    return str(value)


def _render_layouts(result: ServiceResult, console: Console) -> None:
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Type", style="bg.name")
    table.add_column("Kind")
    table.add_column("Fields")

    for item in result.data.get("layouts", []):
        layout = Layout.model_validate(item)
        fields = ", ".join(
            f"{field.name}: {format_declaration(field.type)}" for field in layout.fields
        )
        kind = str(layout.kind)
        table.add_row(Text(layout.name), Text(kind, style=f"bg.kind.{kind}"), Text(fields))

    console.print(table)
