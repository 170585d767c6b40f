# topmark:header:start
#
#   project      : WeaveMark
#   file         : languages.py
#   file_relpath : src/weavemark/cli/commands/languages.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""WeaveMark `languages` command.

Lists all source languages known to WeaveMark along with their prose marker
and description. Useful for discovering valid ``--language`` values.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from weavemark.cli.cli_types import EnumChoiceParam, OutputFormat
from weavemark.cli.cmd_common import get_console, get_effective_verbosity
from weavemark.filetypes.instances import get_file_type_registry

if TYPE_CHECKING:
    from weavemark.filetypes.base import FileType


def _serialize(ft: FileType, *, show_details: bool) -> dict[str, Any]:
    data: dict[str, Any] = {
        "name": ft.name,
        "marker": ft.marker,
        "description": ft.description,
    }
    if show_details:
        data["highlight"] = ft.highlight
        data["extensions"] = list(ft.extensions)
        data["filenames"] = list(ft.filenames)
    return data


def _markdown_table(rows: list[dict[str, Any]]) -> str:
    headers: list[str] = list(rows[0]) if rows else ["name", "marker", "description"]
    lines: list[str] = [
        "| " + " | ".join(headers) + " |",
        "| " + " | ".join("---" for _ in headers) + " |",
    ]
    for row in rows:
        cells: list[str] = []
        for key in headers:
            value: Any = row[key]
            text = ", ".join(value) if isinstance(value, list) else str(value)
            cells.append(f"`{text}`" if key == "marker" else text)
        lines.append("| " + " | ".join(cells) + " |")
    return "\n".join(lines)


@click.command(
    name="languages",
    help="List all supported source languages.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@click.option(
    "--long",
    "show_details",
    is_flag=True,
    help="Show extended information (highlight name, extensions, filenames).",
)
def languages_command(
    *,
    show_details: bool = False,
    output_format: OutputFormat | None = None,
) -> None:
    """List supported source languages.

    Args:
        show_details (bool): If True, include highlight identifiers, extensions and
            filenames.
        output_format (OutputFormat | None): Output format to use; ``None`` means the
            default human-readable format.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    show_details = show_details or get_effective_verbosity(ctx) > 0

    file_types: list[FileType] = [ft for _name, ft in sorted(get_file_type_registry().items())]
    rows: list[dict[str, Any]] = [_serialize(ft, show_details=show_details) for ft in file_types]

    if fmt == OutputFormat.JSON:
        console.print(json.dumps(rows, indent=2))
        return
    if fmt == OutputFormat.MARKDOWN:
        console.print("# Supported Languages\n")
        console.print(_markdown_table(rows))
        return

    width: int = max((len(ft.name) for ft in file_types), default=0)
    for ft in file_types:
        name: str = console.styled(ft.name.ljust(width), bold=True)
        console.print(f"{name}  {ft.marker}  {ft.description}")
        if show_details:
            patterns: list[str] = [*ft.extensions, *ft.filenames]
            indent: str = " " * (width + 5)
            console.print(f"{indent}highlight: {ft.highlight}; files: {', '.join(patterns)}")
