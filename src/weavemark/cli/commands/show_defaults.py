# topmark:header:start
#
#   project      : WeaveMark
#   file         : show_defaults.py
#   file_relpath : src/weavemark/cli/commands/show_defaults.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""WeaveMark `show-defaults` command.

Prints the runtime default configuration as TOML, either as a standalone
``weavemark.toml`` or nested for ``pyproject.toml``.
"""

from __future__ import annotations

import click

from weavemark.cli.cmd_common import get_console
from weavemark.config.loaders import render_defaults_toml_text


@click.command(
    name="show-defaults",
    help="Display the default configuration as a TOML document.",
)
@click.option(
    "--pyproject",
    "for_pyproject",
    is_flag=True,
    help="Nest the output under [tool.weavemark] for use in pyproject.toml.",
)
def show_defaults_command(*, for_pyproject: bool = False) -> None:
    """Print the default configuration.

    Args:
        for_pyproject (bool): Render for ``pyproject.toml`` instead of ``weavemark.toml``.
    """
    console = get_console(click.get_current_context())
    console.print(render_defaults_toml_text(for_pyproject=for_pyproject), nl=False)
