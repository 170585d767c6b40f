# topmark:header:start
#
#   project      : WeaveMark
#   file         : options.py
#   file_relpath : src/weavemark/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the Click-based WeaveMark CLI.

This module centralizes reusable options (verbosity, color) and their
resolution logic, so commands and groups can stay thin. The helpers here are
Click-aware.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from weavemark.cli.errors import WeavemarkUsageError
from weavemark.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")

# Custom verbosity levels, mapped to standard logging levels
LOG_LEVELS = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v``/``-q`` counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        ``verbose_count`` when verbose, ``-1`` when quiet, ``0`` otherwise.

    Raises:
        WeavemarkUsageError: If both verbose and quiet flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise WeavemarkUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return verbose_count


def verbosity_to_log_level(verbosity: int) -> int:
    """Map a program-output verbosity onto a logging level.

    Three or more -v flags set TRACE, two set DEBUG and one sets INFO.
    Quiet sets ERROR; the default is WARNING.
    """
    if verbosity >= 3:
        return LOG_LEVELS["TRACE"]
    if verbosity == 2:
        return LOG_LEVELS["DEBUG"]
    if verbosity == 1:
        return LOG_LEVELS["INFO"]
    if verbosity < 0:
        return LOG_LEVELS["ERROR"]
    return LOG_LEVELS["WARNING"]


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress informational output.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stream_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode: Explicit color mode from CLI options (auto, always, never).
        stream_isatty: Whether stderr is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.

    Behavior:
        Honors --color and --no-color CLI flags.
        Honors FORCE_COLOR and NO_COLOR environment variables.
        Defaults to enabling color if stderr is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stream_isatty is None:
        stream_isatty = sys.stderr.isatty()
    return bool(stream_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f
