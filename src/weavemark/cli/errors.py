# topmark:header:start
#
#   project      : WeaveMark
#   file         : errors.py
#   file_relpath : src/weavemark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the WeaveMark CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. `error_from_exception` maps library and stream I/O
    errors onto them at the command boundary.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from weavemark.cli.exit_codes import ExitCode
from weavemark.errors import ConfigError, UnknownLanguageError, UnknownProfileError


class WeavemarkCliError(click.ClickException):
    """Base class for all WeaveMark CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class WeavemarkUsageError(WeavemarkCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class WeavemarkConfigError(WeavemarkCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class WeavemarkFileNotFoundError(WeavemarkCliError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class WeavemarkPermissionDeniedError(WeavemarkCliError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class WeavemarkIOError(WeavemarkCliError):
    """Error for I/O errors reading/writing streams."""

    exit_code = ExitCode.IO_ERROR


class WeavemarkEncodingError(WeavemarkCliError):
    """Error for text decoding/encoding errors (e.g., UnicodeDecodeError)."""

    exit_code = ExitCode.ENCODING_ERROR


class WeavemarkUnsupportedError(WeavemarkCliError):
    """Error for an unknown source language or markup profile."""

    exit_code = ExitCode.UNSUPPORTED_FILE_TYPE


def error_from_exception(exc: Exception, *, what: str) -> WeavemarkCliError:
    """Return the CLI error matching ``exc``.

    Args:
        exc (Exception): The exception raised by the library or by stream I/O.
        what (str): Short description of the stream or path involved; the
            file name carried by an `OSError` takes precedence.

    Returns:
        WeavemarkCliError: The error to raise; unknown exceptions map to a generic
            failure carrying the original message.
    """
    if isinstance(exc, OSError) and exc.filename:
        what = str(exc.filename)
    if isinstance(exc, (UnknownLanguageError, UnknownProfileError)):
        return WeavemarkUnsupportedError(str(exc))
    if isinstance(exc, ConfigError):
        return WeavemarkConfigError(str(exc))
    if isinstance(exc, UnicodeError):
        return WeavemarkEncodingError(f"Cannot decode {what}: {exc}")
    if isinstance(exc, FileNotFoundError):
        return WeavemarkFileNotFoundError(f"No such file: {what}")
    if isinstance(exc, PermissionError):
        return WeavemarkPermissionDeniedError(f"Permission denied: {what}")
    if isinstance(exc, OSError):
        return WeavemarkIOError(f"I/O error on {what}: {exc.strerror or exc}")
    return WeavemarkCliError(str(exc))
