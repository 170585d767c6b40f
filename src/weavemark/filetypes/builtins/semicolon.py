# topmark:header:start
#
#   project      : WeaveMark
#   file         : semicolon.py
#   file_relpath : src/weavemark/filetypes/builtins/semicolon.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Languages whose line comments start with ``;``.

Exports:
    FILETYPES (list[FileType]): Scheme, Racket, Common Lisp / Emacs Lisp,
        Clojure, assembly and INI files.
"""

from __future__ import annotations

from ..base import FileType

FILETYPES: list[FileType] = [
    FileType(
        name="scheme",
        marker=";",
        extensions=(".scm", ".ss", ".sld", ".sls"),
        description="Scheme sources (*.scm, *.ss, *.sld, *.sls)",
    ),
    FileType(
        name="racket",
        marker=";",
        extensions=(".rkt",),
        description="Racket sources (*.rkt)",
    ),
    FileType(
        name="lisp",
        marker=";",
        extensions=(".lisp", ".lsp", ".cl", ".el"),
        description="Common Lisp and Emacs Lisp sources (*.lisp, *.lsp, *.cl, *.el)",
    ),
    FileType(
        name="clojure",
        marker=";",
        extensions=(".clj", ".cljs", ".cljc", ".edn"),
        description="Clojure sources (*.clj, *.cljs, *.cljc, *.edn)",
    ),
    FileType(
        name="asm",
        marker=";",
        extensions=(".asm", ".s"),
        highlight="nasm",
        description="Assembly sources (*.asm, *.s)",
    ),
    FileType(
        name="ini",
        marker=";",
        extensions=(".ini",),
        description="INI configuration files (*.ini)",
    ),
]
