# topmark:header:start
#
#   project      : WeaveMark
#   file         : __init__.py
#   file_relpath : src/weavemark/filetypes/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Source languages known to WeaveMark."""

from __future__ import annotations

from weavemark.filetypes.base import FileType
from weavemark.filetypes.instances import (
    get_file_type,
    get_file_type_registry,
    resolve_file_type,
)

__all__ = ["FileType", "get_file_type", "get_file_type_registry", "resolve_file_type"]
