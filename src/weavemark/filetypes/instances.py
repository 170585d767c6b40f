# topmark:header:start
#
#   project      : WeaveMark
#   file         : instances.py
#   file_relpath : src/weavemark/filetypes/instances.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Source language instances and registry for WeaveMark.

Builds the runtime registry of `weavemark.filetypes.base.FileType` objects
from built-in groups and optionally from plugin entry points. The registry is
constructed lazily on first access and cached thereafter.

Notes:
    * Built-ins are imported lazily from topical modules.
    * Plugins are discovered via the ``weavemark.filetypes`` entry point group.
    * The returned mapping is a plain ``dict`` but should be treated as
      immutable by callers.
"""

from __future__ import annotations

from collections.abc import Iterable as IterABC
from functools import lru_cache
from importlib import import_module
from importlib.metadata import EntryPoints, entry_points
from typing import TYPE_CHECKING, Any, Final, Iterable, Sequence, cast

from weavemark.config.logging import WeavemarkLogger, get_logger
from weavemark.errors import UnknownLanguageError

from .base import FileType

if TYPE_CHECKING:
    from pathlib import Path
    from types import ModuleType

logger: WeavemarkLogger = get_logger(__name__)

_BUILTIN_MODULES: Final[tuple[str, ...]] = (
    "weavemark.filetypes.builtins.semicolon",
    "weavemark.filetypes.builtins.scripting",
    "weavemark.filetypes.builtins.percent",
)

ENTRYPOINT_GROUP: Final[str] = "weavemark.filetypes"


def _iter_builtin_filetypes() -> Iterable[FileType]:
    """Yield built-in FileType objects from topical modules (lazy import)."""
    for modname in _BUILTIN_MODULES:
        mod: ModuleType = import_module(modname)
        filetypes: Any = getattr(mod, "FILETYPES", None)
        if not isinstance(filetypes, list):
            logger.warning("Module %s has no FILETYPES list; skipping", modname)
            continue
        for obj in cast("Sequence[object]", filetypes):
            if isinstance(obj, FileType):
                yield obj
            else:
                logger.warning("Non-FileType entry in %s.FILETYPES: %r", modname, obj)


def _iter_plugin_filetypes() -> Iterable[FileType]:
    """Yield FileType objects provided by external plugins (entry points)."""
    candidates: EntryPoints = entry_points().select(group=ENTRYPOINT_GROUP)

    for ep in candidates:
        try:
            provider: Any = ep.load()
            provided: Any = provider() if callable(provider) else provider
        except Exception:
            logger.exception("Failed loading filetypes from entry point %s", ep.name)
            continue
        if not isinstance(provided, IterABC):
            logger.warning(
                "Entry point %s did not return an iterable of FileType objects: %r",
                ep.name,
                provided,
            )
            continue
        for obj in cast("IterABC[object]", provided):
            if isinstance(obj, FileType):
                yield obj
            else:
                logger.warning("Entry point %s provided non-FileType: %r", ep.name, obj)


def _dedupe_by_name(items: Iterable[FileType]) -> list[FileType]:
    """Deduplicate by FileType.name, preserving first occurrence order."""
    seen: set[str] = set()
    acc: list[FileType] = []
    for ft in items:
        if ft.name in seen:
            logger.warning("Duplicate FileType name detected: %s (keeping first)", ft.name)
            continue
        seen.add(ft.name)
        acc.append(ft)
    return acc


@lru_cache(maxsize=1)
def get_file_type_registry() -> dict[str, FileType]:
    """Return (and cache) the FileType registry (lazy; import-time light)."""
    ordered: list[FileType] = list(_iter_builtin_filetypes())
    ordered.extend(_iter_plugin_filetypes())
    registry: dict[str, FileType] = {ft.name: ft for ft in _dedupe_by_name(ordered)}
    logger.debug("Loaded %d source languages", len(registry))
    return registry


def get_file_type(name: str) -> FileType:
    """Return the language registered as ``name``.

    Raises:
        UnknownLanguageError: If no such language is registered.
    """
    try:
        return get_file_type_registry()[name]
    except KeyError:
        raise UnknownLanguageError(name) from None


def resolve_file_type(path: Path) -> FileType | None:
    """Return the first registered language that matches ``path``, or None."""
    for ft in get_file_type_registry().values():
        if ft.matches(path):
            logger.trace("Resolved %s to language %s", path, ft.name)
            return ft
    logger.debug("No source language matches %s", path)
    return None
