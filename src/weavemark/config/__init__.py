# topmark:header:start
#
#   project      : WeaveMark
#   file         : __init__.py
#   file_relpath : src/weavemark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration management for WeaveMark.

Configuration is layered: runtime defaults, then configuration files found by
walking from the input towards the filesystem root (``pyproject.toml`` with a
``[tool.weavemark]`` table and ``weavemark.toml``), then files passed with
``--config``, then CLI overrides.

`MutableConfig` is the builder used while merging; `MutableConfig.freeze`
produces the immutable `Config` snapshot consumed by the weaver.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

from weavemark.config.keys import ArgKey, Toml
from weavemark.config.loaders import extract_tool_section, load_defaults_dict, load_toml_dict
from weavemark.config.logging import get_logger
from weavemark.constants import (
    DEFAULT_LANGUAGE,
    DEFAULT_PROFILE,
    DEFAULT_TOML_CONFIG_NAME,
    PYPROJECT_TOML_NAME,
)
from weavemark.errors import ConfigError

if TYPE_CHECKING:
    from weavemark.config.loaders import TomlTable
    from weavemark.config.logging import WeavemarkLogger
    from weavemark.filetypes.base import FileType
    from weavemark.weave.profiles import MarkupProfile

logger: WeavemarkLogger = get_logger(__name__)


def _opt_str(table: TomlTable, key: str, where: str) -> str | None:
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"{where}: '{key}' must be a string (got {type(value).__name__})")
    return value


def _opt_bool(table: TomlTable, key: str, where: str) -> bool | None:
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise ConfigError(f"{where}: '{key}' must be a boolean (got {type(value).__name__})")
    return value


def _opt_str_list(table: TomlTable, key: str, where: str) -> list[str] | None:
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(
        isinstance(v, str) for v in cast("list[Any]", value)
    ):
        raise ConfigError(f"{where}: '{key}' must be a list of strings")
    return list(cast("list[str]", value))


def _opt_table(data: TomlTable, section: str, where: str) -> TomlTable:
    value: Any = data.get(section, {})
    if not isinstance(value, dict):
        raise ConfigError(f"{where}: [{section}] must be a table")
    return cast("TomlTable", value)


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for WeaveMark.

    Attributes:
        config_files (tuple[Path | str, ...]): Configuration sources, in merge order.
        verbosity_level (int | None): None = inherit, 0 = terse, 1+ = verbose.
        language (str): Fallback source language when nothing more specific applies.
        marker (str | None): Prose marker override; None follows the language.
        profile (str): Markup profile name.
        emit_header (bool): Whether the style and role blocks are written.
        roles (tuple[str, ...] | None): Role names; None keeps the profile's.
        block_classes (tuple[str, ...] | None): Code block classes; None keeps the profile's.
        stylesheet (str | None): CSS override; None keeps the profile's.
    """

    config_files: tuple[Path | str, ...]
    verbosity_level: int | None
    language: str
    marker: str | None
    profile: str
    emit_header: bool
    roles: tuple[str, ...] | None
    block_classes: tuple[str, ...] | None
    stylesheet: str | None

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this snapshot."""
        return MutableConfig(
            config_files=list(self.config_files),
            verbosity_level=self.verbosity_level,
            language=self.language,
            marker=self.marker,
            profile=self.profile,
            emit_header=self.emit_header,
            roles=list(self.roles) if self.roles is not None else None,
            block_classes=list(self.block_classes) if self.block_classes is not None else None,
            stylesheet=self.stylesheet,
        )

    def resolve_file_type(
        self, path: Path | None = None, *, explicit: str | None = None
    ) -> FileType:
        """Return the source language for a run.

        Resolution order: ``explicit`` name, then the language matching ``path``,
        then `language`.

        Raises:
            UnknownLanguageError: If a named language is not registered.
        """
        from weavemark.filetypes.instances import get_file_type, resolve_file_type

        if explicit:
            return get_file_type(explicit)
        if path is not None:
            ft: FileType | None = resolve_file_type(path)
            if ft is not None:
                return ft
        return get_file_type(self.language)

    def resolve_marker(self, file_type: FileType) -> str:
        """Return the effective prose marker: the override if set, else the language's."""
        return self.marker if self.marker is not None else file_type.marker

    def resolve_profile(self) -> MarkupProfile:
        """Return the markup profile with this configuration's overrides applied.

        Raises:
            UnknownProfileError: If `profile` is not registered.
        """
        from weavemark.weave.profiles import get_profile

        return get_profile(self.profile).with_overrides(
            stylesheet=self.stylesheet,
            roles=self.roles,
            block_classes=self.block_classes,
        )

    def to_toml_dict(self) -> TomlTable:
        """Convert this snapshot into a TOML-serializable dict (unset values omitted)."""
        weave: TomlTable = {
            Toml.KEY_LANGUAGE: self.language,
            Toml.KEY_PROFILE: self.profile,
            Toml.KEY_EMIT_HEADER: self.emit_header,
        }
        if self.marker is not None:
            weave[Toml.KEY_MARKER] = self.marker
        markup: TomlTable = {}
        if self.roles is not None:
            markup[Toml.KEY_ROLES] = list(self.roles)
        if self.block_classes is not None:
            markup[Toml.KEY_BLOCK_CLASSES] = list(self.block_classes)
        if self.stylesheet is not None:
            markup[Toml.KEY_STYLESHEET] = self.stylesheet
        return {Toml.SECTION_WEAVE: weave, Toml.SECTION_MARKUP: markup}


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Every field defaults to ``None`` (unset) so that merging can tell a value
    that was configured apart from one that was not. `freeze` fills in the
    fallbacks.
    """

    config_files: list[Path | str] = field(default_factory=lambda: [])
    verbosity_level: int | None = None
    language: str | None = None
    marker: str | None = None
    profile: str | None = None
    emit_header: bool | None = None
    roles: list[str] | None = None
    block_classes: list[str] | None = None
    stylesheet: str | None = None

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze the draft into an immutable `Config` snapshot."""
        return Config(
            config_files=tuple(self.config_files),
            verbosity_level=self.verbosity_level,
            language=self.language or DEFAULT_LANGUAGE,
            marker=self.marker,
            profile=self.profile or DEFAULT_PROFILE,
            emit_header=True if self.emit_header is None else self.emit_header,
            roles=tuple(self.roles) if self.roles is not None else None,
            block_classes=tuple(self.block_classes) if self.block_classes is not None else None,
            stylesheet=self.stylesheet,
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft populated with the runtime defaults."""
        draft: MutableConfig = cls.from_toml_dict(load_defaults_dict(), config_file=None)
        draft.config_files = ["<defaults>"]
        return draft

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None = None) -> MutableConfig:
        """Build a draft from a parsed TOML table.

        Args:
            data (TomlTable): The ``[weave]``/``[markup]`` document (already unwrapped
                from ``[tool.weavemark]`` for ``pyproject.toml``).
            config_file (Path | None): Source of ``data``, used in error messages.

        Returns:
            MutableConfig: A draft holding only the values present in ``data``.

        Raises:
            ConfigError: If a value has the wrong type or the marker is not one character.
        """
        where: str = str(config_file) if config_file is not None else "<defaults>"
        weave: TomlTable = _opt_table(data, Toml.SECTION_WEAVE, where)
        markup: TomlTable = _opt_table(data, Toml.SECTION_MARKUP, where)

        for section in data:
            if section not in (Toml.SECTION_WEAVE, Toml.SECTION_MARKUP):
                logger.warning("%s: ignoring unknown section [%s]", where, section)

        marker: str | None = _opt_str(weave, Toml.KEY_MARKER, where)
        if marker is not None and len(marker) != 1:
            raise ConfigError(f"{where}: '{Toml.KEY_MARKER}' must be exactly one character")

        return cls(
            config_files=[config_file] if config_file is not None else [],
            language=_opt_str(weave, Toml.KEY_LANGUAGE, where),
            marker=marker,
            profile=_opt_str(weave, Toml.KEY_PROFILE, where),
            emit_header=_opt_bool(weave, Toml.KEY_EMIT_HEADER, where),
            roles=_opt_str_list(markup, Toml.KEY_ROLES, where),
            block_classes=_opt_str_list(markup, Toml.KEY_BLOCK_CLASSES, where),
            stylesheet=_opt_str(markup, Toml.KEY_STYLESHEET, where),
        )

    @classmethod
    def from_toml_file(cls, path: Path, *, strict: bool = False) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``weavemark.toml`` and ``pyproject.toml``; for the latter only
        the ``[tool.weavemark]`` table is considered.

        Args:
            path (Path): The configuration file.
            strict (bool): Treat an unreadable or malformed file as an error instead
                of an empty layer.

        Returns:
            MutableConfig | None: The draft, or None if ``pyproject.toml`` has no
                ``[tool.weavemark]`` table.

        Raises:
            ConfigError: If ``strict`` is set and the file cannot be read or parsed.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        toml_data: TomlTable = load_toml_dict(path, strict=strict)

        if path.name == PYPROJECT_TOML_NAME:
            section: TomlTable | None = extract_tool_section(toml_data)
            if section is None:
                logger.debug("No [tool.weavemark] table in %s", path)
                return None
            toml_data = section

        draft: MutableConfig = cls.from_toml_dict(toml_data, config_file=path)
        logger.debug("Generated MutableConfig: %s", draft)
        return draft

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files found walking upward from ``start``.

        Files are returned **root-most → nearest** so that later (nearer) files
        override earlier ones when merged. Within one directory ``pyproject.toml``
        comes before ``weavemark.toml``.
        """
        anchor: Path = start.resolve()
        if anchor.is_file():
            anchor = anchor.parent

        per_dir: list[list[Path]] = []
        for directory in (anchor, *anchor.parents):
            found: list[Path] = []
            for name in (PYPROJECT_TOML_NAME, DEFAULT_TOML_CONFIG_NAME):
                candidate: Path = directory / name
                if candidate.is_file():
                    found.append(candidate)
            if found:
                per_dir.append(found)

        ordered: list[Path] = [p for found in reversed(per_dir) for p in found]
        logger.trace("Discovered config files: %s", ordered)
        return ordered

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_config_files: Sequence[Path] = (),
        no_config: bool = False,
    ) -> MutableConfig:
        """Merge defaults, discovered config files and explicit config files.

        Args:
            start (Path | None): Anchor for discovery (input file or working directory).
            extra_config_files (Sequence[Path]): Files given explicitly; applied last.
            no_config (bool): Skip discovery (explicit files are still applied).

        Returns:
            MutableConfig: The merged draft.

        Raises:
            ConfigError: If an explicit config file does not exist or cannot be read or parsed.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            for path in cls.discover_local_config_files(start or Path.cwd()):
                layer: MutableConfig | None = cls.from_toml_file(path)
                if layer is not None:
                    draft = draft.merge_with(layer)

        for path in extra_config_files:
            if not path.is_file():
                raise ConfigError(f"Config file not found: {path}")
            layer = cls.from_toml_file(path, strict=True)
            if layer is None:
                raise ConfigError(f"[tool.weavemark] section missing or malformed in {path}")
            draft = draft.merge_with(layer)

        return draft

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft."""

        def pick(mine: Any, theirs: Any) -> Any:
            return theirs if theirs is not None else mine

        return MutableConfig(
            config_files=self.config_files + other.config_files,
            verbosity_level=pick(self.verbosity_level, other.verbosity_level),
            language=pick(self.language, other.language),
            marker=pick(self.marker, other.marker),
            profile=pick(self.profile, other.profile),
            emit_header=pick(self.emit_header, other.emit_header),
            roles=pick(self.roles, other.roles),
            block_classes=pick(self.block_classes, other.block_classes),
            stylesheet=pick(self.stylesheet, other.stylesheet),
        )

    def apply_cli_args(self, args: Mapping[str, Any]) -> MutableConfig:
        """Apply overrides from a parsed arguments mapping (CLI or API) in place.

        Missing keys and ``None`` values leave the draft unchanged.

        Raises:
            ConfigError: If the marker override is not one character.
        """
        language: str | None = args.get(ArgKey.LANGUAGE)
        if language is not None:
            self.language = language

        marker: str | None = args.get(ArgKey.MARKER)
        if marker is not None:
            if len(marker) != 1:
                raise ConfigError(f"Prose marker must be exactly one character (got {marker!r})")
            self.marker = marker

        profile: str | None = args.get(ArgKey.PROFILE)
        if profile is not None:
            self.profile = profile

        if args.get(ArgKey.NO_HEADER):
            self.emit_header = False

        verbosity: int | None = args.get(ArgKey.VERBOSITY_LEVEL)
        if verbosity is not None:
            self.verbosity_level = verbosity

        self.config_files.append("<CLI overrides>")
        return self


__all__ = ["Config", "MutableConfig"]
