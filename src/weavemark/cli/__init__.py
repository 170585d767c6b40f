# topmark:header:start
#
#   project      : WeaveMark
#   file         : __init__.py
#   file_relpath : src/weavemark/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for WeaveMark."""

from __future__ import annotations
