# topmark:header:start
#
#   project      : WeaveMark
#   file         : main.py
#   file_relpath : src/weavemark/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""WeaveMark Click CLI.

Key ideas:
- Group-level options are initialized once, placed into ``ctx.obj``.
- Program output (console) and diagnostics (logging) are kept apart; both go
  to STDERR while ``weave`` owns STDOUT for the document.
"""

from __future__ import annotations

import click

from weavemark.cli.cmd_common import get_console
from weavemark.cli.commands.dump_config import dump_config_command
from weavemark.cli.commands.languages import languages_command
from weavemark.cli.commands.show_defaults import show_defaults_command
from weavemark.cli.commands.version import version_command
from weavemark.cli.commands.weave import weave_command
from weavemark.cli.console import ClickConsole
from weavemark.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
    verbosity_to_log_level,
)
from weavemark.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    verbosity: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = verbosity

    # WEAVEMARK_LOG_LEVEL wins; otherwise -v/-q drive the internal log level too.
    level: int | None = resolve_env_log_level()
    if level is None and verbosity != 0:
        level = verbosity_to_log_level(verbosity)
    ctx.obj["log_level"] = level
    setup_logging(level=level)

    effective_color_mode = ColorMode.NEVER if no_color else ColorMode(color_mode or "auto")
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="WeaveMark: weave literate sources into reStructuredText.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the WeaveMark CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )

    if ctx.invoked_subcommand is None:
        console: ClickConsole = get_console(ctx)
        console.print("Hint: use 'weavemark weave [PATH]' to convert a literate source.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(weave_command)

cli.add_command(languages_command)

cli.add_command(show_defaults_command)

cli.add_command(dump_config_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
