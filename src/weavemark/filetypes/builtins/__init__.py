# topmark:header:start
#
#   project      : WeaveMark
#   file         : __init__.py
#   file_relpath : src/weavemark/filetypes/builtins/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in source language groups.

Each module in this package exports a ``FILETYPES`` list that is picked up by
`weavemark.filetypes.instances`.
"""

from __future__ import annotations
