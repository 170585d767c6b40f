# topmark:header:start
#
#   project      : WeaveMark
#   file         : __init__.py
#   file_relpath : src/weavemark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""WeaveMark package.

WeaveMark turns literate source files, where prose is written as line comments
between runs of program code, into reStructuredText document source. It exposes
both a streaming CLI filter and a small typed API for automation.
"""

from __future__ import annotations
