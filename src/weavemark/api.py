# topmark:header:start
#
#   project      : WeaveMark
#   file         : api.py
#   file_relpath : src/weavemark/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public API for WeaveMark.

Small, typed entry points for weaving from Python code. All functions accept an
optional frozen `weavemark.config.Config`; when omitted, the runtime defaults
are used and no configuration files are read.

Example:
    ```python
    from weavemark.api import weave_text

    print(weave_text("; Square a number.\\n(define (sq x) (* x x))\\n"))
    ```
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import TYPE_CHECKING

from weavemark.config import Config, MutableConfig
from weavemark.config.logging import get_logger
from weavemark.weave.emitter import BlockEmitter, WeaveStats
from weavemark.weave.io import iter_lines

if TYPE_CHECKING:
    from collections.abc import Iterable
    from typing import TextIO

    from weavemark.config.logging import WeavemarkLogger
    from weavemark.filetypes.base import FileType

logger: WeavemarkLogger = get_logger(__name__)


def _default_config() -> Config:
    return MutableConfig.from_defaults().freeze()


def build_emitter(
    out: TextIO,
    config: Config,
    *,
    path: Path | None = None,
    language: str | None = None,
) -> BlockEmitter:
    """Create a `BlockEmitter` for ``config``.

    Args:
        out (TextIO): Destination stream.
        config (Config): Effective configuration.
        path (Path | None): Input path (real or assumed) used to infer the language.
        language (str | None): Explicit language name; wins over ``path``.

    Returns:
        BlockEmitter: A fresh emitter.

    Raises:
        UnknownLanguageError: If the language cannot be found.
        UnknownProfileError: If the configured profile is not registered.
    """
    file_type: FileType = config.resolve_file_type(path, explicit=language)
    marker: str = config.resolve_marker(file_type)
    logger.info(
        "Weaving %s as %s (marker %r, profile %s)",
        path or "<stream>",
        file_type.name,
        marker,
        config.profile,
    )
    return BlockEmitter(
        out,
        config.resolve_profile(),
        marker=marker,
        language=file_type.highlight,
    )


def weave(
    lines: Iterable[str],
    out: TextIO,
    *,
    config: Config | None = None,
    language: str | None = None,
) -> WeaveStats:
    """Weave ``lines`` (without terminators) into ``out``.

    Returns:
        WeaveStats: Line and block counters.
    """
    cfg: Config = config or _default_config()
    emitter: BlockEmitter = build_emitter(out, cfg, language=language)
    return emitter.run(lines, emit_header=cfg.emit_header)


def weave_text(
    text: str,
    *,
    config: Config | None = None,
    language: str | None = None,
) -> str:
    """Weave a complete source text and return the document text."""
    out = io.StringIO()
    weave(iter_lines(io.StringIO(text)), out, config=config, language=language)
    return out.getvalue()


def weave_file(
    path: Path | str,
    out: TextIO,
    *,
    config: Config | None = None,
    language: str | None = None,
    encoding: str = "utf-8",
) -> WeaveStats:
    """Weave the file at ``path`` into ``out``.

    The language is inferred from the file name unless ``language`` is given.

    Raises:
        OSError: If the file cannot be read (propagated unchanged).
        UnicodeDecodeError: If the file is not valid text in ``encoding``.
    """
    cfg: Config = config or _default_config()
    file_path = Path(path)
    emitter: BlockEmitter = build_emitter(out, cfg, path=file_path, language=language)
    with file_path.open(encoding=encoding) as fh:
        return emitter.run(iter_lines(fh), emit_header=cfg.emit_header)


__all__ = ["build_emitter", "weave", "weave_file", "weave_text"]
