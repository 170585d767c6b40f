# topmark:header:start
#
#   project      : WeaveMark
#   file         : keys.py
#   file_relpath : src/weavemark/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for WeaveMark configuration.

These strings are the external configuration API as it appears in
``weavemark.toml`` and in ``[tool.weavemark]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by WeaveMark configuration."""

    # pyproject.toml nesting: [tool.weavemark]
    SECTION_TOOL: Final[str] = "tool"
    SECTION_TOOL_NAME: Final[str] = "weavemark"

    # [weave]
    SECTION_WEAVE: Final[str] = "weave"

    KEY_LANGUAGE: Final[str] = "language"
    KEY_MARKER: Final[str] = "marker"
    KEY_PROFILE: Final[str] = "profile"
    KEY_EMIT_HEADER: Final[str] = "emit_header"

    # [markup]
    SECTION_MARKUP: Final[str] = "markup"

    KEY_ROLES: Final[str] = "roles"
    KEY_BLOCK_CLASSES: Final[str] = "block_classes"
    KEY_STYLESHEET: Final[str] = "stylesheet"


class ArgKey:
    """Keys of the argument mapping accepted by `MutableConfig.apply_cli_args`."""

    LANGUAGE: Final[str] = "language"
    MARKER: Final[str] = "marker"
    PROFILE: Final[str] = "profile"
    NO_HEADER: Final[str] = "no_header"
    VERBOSITY_LEVEL: Final[str] = "verbosity_level"
