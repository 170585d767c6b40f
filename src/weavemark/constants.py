# topmark:header:start
#
#   project      : WeaveMark
#   file         : constants.py
#   file_relpath : src/weavemark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""WeaveMark Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

WEAVEMARK_VERSION: str = get_version("weavemark")

# Local configuration file names, looked up while walking towards the filesystem root:
DEFAULT_TOML_CONFIG_NAME: str = "weavemark.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"

# Environment variable consulted for the internal log level
LOG_LEVEL_ENV_VAR: str = "WEAVEMARK_LOG_LEVEL"

DEFAULT_LANGUAGE: str = "scheme"
DEFAULT_MARKER: str = ";"
DEFAULT_PROFILE: str = "rst"

# Every code line is prefixed with this; the renderer needs it to keep the literal block open.
CODE_INDENT: str = "  "

STDIN_SENTINEL: str = "-"
