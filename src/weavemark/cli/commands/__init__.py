# topmark:header:start
#
#   project      : WeaveMark
#   file         : __init__.py
#   file_relpath : src/weavemark/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""WeaveMark CLI subcommands."""

from __future__ import annotations
