# topmark:header:start
#
#   project      : WeaveMark
#   file         : scripting.py
#   file_relpath : src/weavemark/filetypes/builtins/scripting.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scripting and data languages whose line comments start with ``#``.

Exports:
    FILETYPES (list[FileType]): Python, shell, Ruby, Perl, R, TOML, YAML and
        Makefiles.

Notes:
    Shebang lines start with ``#`` too, so they come out as prose.
"""

from __future__ import annotations

from ..base import FileType

FILETYPES: list[FileType] = [
    FileType(
        name="python",
        marker="#",
        extensions=(".py", ".pyi"),
        description="Python sources and stubs (*.py, *.pyi)",
    ),
    FileType(
        name="shell",
        marker="#",
        extensions=(".sh", ".bash"),
        highlight="bash",
        description="Shell scripts (*.sh, *.bash)",
    ),
    FileType(
        name="ruby",
        marker="#",
        extensions=(".rb",),
        description="Ruby sources (*.rb)",
    ),
    FileType(
        name="perl",
        marker="#",
        extensions=(".pl", ".pm"),
        description="Perl sources (*.pl, *.pm)",
    ),
    FileType(
        name="r",
        marker="#",
        extensions=(".r", ".R"),
        description="R sources (*.r, *.R)",
    ),
    FileType(
        name="toml",
        marker="#",
        extensions=(".toml",),
        description="TOML documents (*.toml)",
    ),
    FileType(
        name="yaml",
        marker="#",
        extensions=(".yaml", ".yml"),
        description="YAML documents (*.yaml, *.yml)",
    ),
    FileType(
        name="makefile",
        marker="#",
        filenames=("Makefile", "makefile", "GNUmakefile"),
        highlight="make",
        description="Makefiles (Makefile, makefile, GNUmakefile)",
    ),
]
