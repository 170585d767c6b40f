# topmark:header:start
#
#   project      : WeaveMark
#   file         : cmd_common.py
#   file_relpath : src/weavemark/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

This module holds small, focused helpers used by multiple CLI commands.
They avoid policy (exit code rules, messages) and only encapsulate plumbing
such as reading shared state from the Click context.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from weavemark.cli.console import ClickConsole

if TYPE_CHECKING:
    from weavemark.config import Config


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console stored on the context by the group, creating one if needed."""
    ctx.ensure_object(dict)
    console: ClickConsole | None = ctx.obj.get("console")
    if console is None:
        console = ClickConsole(enable_color=False)
        ctx.obj["console"] = console
    return console


def get_effective_verbosity(ctx: click.Context, config: Config | None = None) -> int:
    """Return the effective program-output verbosity for this command.

    Resolution order:
        1. Config.verbosity_level if set (not None)
        2. ctx.obj["verbosity_level"] if present
        3. 0 (terse)
    """
    cfg_level = config.verbosity_level if config is not None else None
    if cfg_level is not None:
        return int(cfg_level)
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", 0))
