# topmark:header:start
#
#   project      : WeaveMark
#   file         : version.py
#   file_relpath : src/weavemark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""WeaveMark `version` command.

Prints the current WeaveMark version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from weavemark.cli.cli_types import EnumChoiceParam, OutputFormat
from weavemark.cli.cmd_common import get_console, get_effective_verbosity
from weavemark.constants import WEAVEMARK_VERSION


@click.command(
    name="version",
    help="Show the current version of WeaveMark.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of WeaveMark.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": WEAVEMARK_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# WeaveMark Version\n")
        console.print(f"**WeaveMark version: {WEAVEMARK_VERSION}**")
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("WeaveMark version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(WEAVEMARK_VERSION, bold=True)}")
    else:
        console.print(console.styled(WEAVEMARK_VERSION, bold=True))
