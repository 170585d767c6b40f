# topmark:header:start
#
#   project      : WeaveMark
#   file         : base.py
#   file_relpath : src/weavemark/filetypes/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Source language definitions.

Defines the FileType class, which describes a host language whose line comments
carry the prose of a literate source: how its files are recognized, which
single character leads a comment line, and which identifier the renderer should
use for syntax highlighting.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class FileType:
    """Represents a source language recognized by WeaveMark.

    Attributes:
        name (str): Internal identifier of the language (e.g. ``"scheme"``).
        marker (str): The line-comment leader that marks a prose line (one character).
        extensions (tuple[str, ...]): Filename extensions, including the leading dot.
            Matching is case-sensitive, so ``.r`` and ``.R`` are listed separately.
        filenames (tuple[str, ...]): Exact basenames (e.g. ``"Makefile"``).
        highlight (str): Language identifier put on code blocks; defaults to ``name``.
        description (str): Human-readable description.
    """

    name: str
    marker: str
    extensions: tuple[str, ...] = ()
    filenames: tuple[str, ...] = ()
    highlight: str = ""
    description: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if len(self.marker) != 1:
            raise ValueError(f"FileType {self.name!r}: marker must be one character")
        if not self.highlight:
            object.__setattr__(self, "highlight", self.name)

    def matches(self, path: Path) -> bool:
        """Return True if ``path`` belongs to this language (extension or exact basename)."""
        if self.extensions and path.suffix in self.extensions:
            return True
        return path.name in self.filenames
