# topmark:header:start
#
#   project      : WeaveMark
#   file         : loaders.py
#   file_relpath : src/weavemark/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and render TOML configuration sources.

This module provides I/O helpers for reading WeaveMark configuration from
on-disk TOML files (`weavemark.toml` / `pyproject.toml`) and for rendering the
runtime defaults back to TOML text.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from weavemark.config.keys import Toml
from weavemark.config.logging import get_logger
from weavemark.constants import DEFAULT_LANGUAGE, DEFAULT_PROFILE
from weavemark.errors import ConfigError
from weavemark.weave.profiles import DEFAULT_BLOCK_CLASSES, DEFAULT_ROLES

if TYPE_CHECKING:
    from pathlib import Path

    from weavemark.config.logging import WeavemarkLogger

TomlTable = dict[str, Any]

logger: WeavemarkLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return WeaveMark's **runtime defaults** as a Python dict.

    This function performs no I/O. The marker and stylesheet are left unset:
    the marker follows the language and the stylesheet follows the profile.

    Returns:
        A new TOML-table-compatible dict containing the runtime defaults.
    """
    return {
        Toml.SECTION_WEAVE: {
            Toml.KEY_LANGUAGE: DEFAULT_LANGUAGE,
            Toml.KEY_PROFILE: DEFAULT_PROFILE,
            Toml.KEY_EMIT_HEADER: True,
        },
        Toml.SECTION_MARKUP: {
            Toml.KEY_ROLES: list(DEFAULT_ROLES),
            Toml.KEY_BLOCK_CLASSES: list(DEFAULT_BLOCK_CLASSES),
        },
    }


def _section_table(values: TomlTable) -> Any:
    table = tomlkit.table()
    for key, value in values.items():
        table.add(key, value)
    return table


def to_toml(data: TomlTable) -> str:
    """Render a table of sections as TOML text with tomlkit."""
    doc: tomlkit.TOMLDocument = tomlkit.document()
    for section, values in data.items():
        doc.add(section, _section_table(values))
    return tomlkit.dumps(doc)


def render_defaults_toml_text(*, for_pyproject: bool = False) -> str:
    """Render the runtime defaults as TOML text.

    Args:
        for_pyproject: If True, nest the sections under ``[tool.weavemark]``.

    Returns:
        TOML document text.
    """
    data: TomlTable = load_defaults_dict()
    if not for_pyproject:
        return to_toml(data)

    # Super tables keep `[tool]` and `[tool.weavemark]` headers out of the output.
    doc: tomlkit.TOMLDocument = tomlkit.document()
    tool = tomlkit.table(is_super_table=True)
    nested = tomlkit.table(is_super_table=True)
    for section, values in data.items():
        nested.add(section, _section_table(values))
    tool.add(Toml.SECTION_TOOL_NAME, nested)
    doc.add(Toml.SECTION_TOOL, tool)
    return tomlkit.dumps(doc)


def load_toml_dict(path: Path, *, strict: bool = False) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``weavemark.toml`` or ``pyproject.toml``).
        strict: If True, raise instead of logging and returning an empty dict.

    Returns:
        The parsed TOML content.

    Raises:
        ConfigError: If ``strict`` is set and the file cannot be read, decoded or parsed.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        message = f"Error loading TOML from {path}: {e}"
    except TomlkitParseError as e:
        message = f"Error decoding TOML from {path}: {e}"
    except (TypeError, ValueError) as e:
        message = f"Unknown error while reading TOML from {path}: {e}"

    if strict:
        raise ConfigError(message)
    logger.error("%s", message)
    return {}


def extract_tool_section(data: TomlTable) -> TomlTable | None:
    """Return the ``[tool.weavemark]`` table of a ``pyproject.toml`` document, if any."""
    tool: Any = data.get(Toml.SECTION_TOOL, {})
    if not isinstance(tool, dict):
        return None
    section: Any = cast("TomlTable", tool).get(Toml.SECTION_TOOL_NAME)
    if not isinstance(section, dict) or not section:
        return None
    return cast("TomlTable", section)
