# topmark:header:start
#
#   project      : WeaveMark
#   file         : errors.py
#   file_relpath : src/weavemark/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Library-level exceptions for WeaveMark.

These are raised by the API, configuration and registry layers. The CLI maps
them onto `click` exceptions with standardized exit codes (see
`weavemark.cli.errors`).
"""

from __future__ import annotations


class WeavemarkError(Exception):
    """Base class for all WeaveMark library errors."""


class ConfigError(WeavemarkError):
    """Invalid or malformed configuration value."""


class UnknownLanguageError(WeavemarkError):
    """No source language is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown source language: {name!r}")
        self.name = name


class UnknownProfileError(WeavemarkError):
    """No markup profile is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown markup profile: {name!r}")
        self.name = name
