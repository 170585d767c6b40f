# topmark:header:start
#
#   project      : WeaveMark
#   file         : percent.py
#   file_relpath : src/weavemark/filetypes/builtins/percent.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Languages whose line comments start with ``%``.

Exports:
    FILETYPES (list[FileType]): Erlang, Prolog, TeX/LaTeX and MATLAB.
"""

from __future__ import annotations

from ..base import FileType

FILETYPES: list[FileType] = [
    FileType(
        name="erlang",
        marker="%",
        extensions=(".erl", ".hrl"),
        description="Erlang sources (*.erl, *.hrl)",
    ),
    FileType(
        name="prolog",
        marker="%",
        extensions=(".pro", ".P"),
        description="Prolog sources (*.pro, *.P)",
    ),
    FileType(
        name="tex",
        marker="%",
        extensions=(".tex", ".sty"),
        description="TeX and LaTeX sources (*.tex, *.sty)",
    ),
    FileType(
        name="matlab",
        marker="%",
        extensions=(".m",),
        description="MATLAB sources (*.m)",
    ),
]
