# topmark:header:start
#
#   project      : WeaveMark
#   file         : profiles.py
#   file_relpath : src/weavemark/weave/profiles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markup profiles: the literal text WeaveMark writes around the input lines.

A `MarkupProfile` bundles everything that depends on the target markup
language: the two constant header blocks (style declaration and role
declarations), the block-start unit emitted before each code run, and the code
indentation. The emitter receives a profile at construction and never reaches
for module globals.

The built-in ``rst`` profile produces reStructuredText:

```rst
.. class:: program scheme

::

  (define (f x) x)
```
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Final

from weavemark.config.logging import get_logger
from weavemark.constants import CODE_INDENT, DEFAULT_PROFILE
from weavemark.errors import UnknownProfileError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from weavemark.config.logging import WeavemarkLogger

logger: WeavemarkLogger = get_logger(__name__)

DEFAULT_ROLES: Final[tuple[str, ...]] = ("procedure", "variable", "value", "macro", "module")

DEFAULT_BLOCK_CLASSES: Final[tuple[str, ...]] = ("program",)

DEFAULT_STYLESHEET: Final[str] = """\
.program { background-color: #f8f8f8; border-left: 3px solid #c0c0c0; padding: 0.5em 1em; }
.procedure { font-weight: bold; }
.variable { font-style: italic; }
.value { color: #204a87; }
.macro { font-weight: bold; color: #5c3566; }
.module { color: #4e9a06; }
"""


@dataclass(frozen=True)
class MarkupProfile:
    """Target-markup vocabulary used by the block emitter.

    Attributes:
        name (str): Profile identifier (e.g. ``"rst"``).
        stylesheet (str): CSS embedded by the style-declaration block.
        roles (tuple[str, ...]): Inline role names declared in the role block.
        block_classes (tuple[str, ...]): Classes attached to every code block;
            the source language is appended when the block start is rendered.
        code_indent (str): Prefix written before every code line.
        newline (str): Output line terminator.
    """

    name: str
    stylesheet: str = DEFAULT_STYLESHEET
    roles: tuple[str, ...] = DEFAULT_ROLES
    block_classes: tuple[str, ...] = DEFAULT_BLOCK_CLASSES
    code_indent: str = CODE_INDENT
    newline: str = "\n"

    def _lines(self, lines: Sequence[str]) -> str:
        return "".join(f"{line}{self.newline}" for line in lines)

    def render_style_block(self) -> str:
        """Return the style-declaration header block (empty if there is no stylesheet)."""
        css: list[str] = self.stylesheet.splitlines()
        if not css:
            return ""
        lines: list[str] = [".. raw:: html", "", '   <style type="text/css">']
        lines.extend(f"   {rule}" if rule else "" for rule in css)
        lines.extend(["   </style>", ""])
        return self._lines(lines)

    def render_role_block(self) -> str:
        """Return the role-declaration header block: one literal role per name."""
        lines: list[str] = []
        for role in self.roles:
            lines.extend([f".. role:: {role}(literal)", f"   :class: {role}", ""])
        return self._lines(lines)

    def render_block_start(self, language: str) -> str:
        """Return the unit that opens a tagged literal block for ``language``."""
        classes: str = " ".join((*self.block_classes, language))
        return self._lines(["", f".. class:: {classes}", "", "::", ""])

    def with_overrides(
        self,
        *,
        stylesheet: str | None = None,
        roles: Sequence[str] | None = None,
        block_classes: Sequence[str] | None = None,
    ) -> MarkupProfile:
        """Return a copy of this profile with the given (non-None) values replaced."""
        profile: MarkupProfile = self
        if stylesheet is not None:
            profile = replace(profile, stylesheet=stylesheet)
        if roles is not None:
            profile = replace(profile, roles=tuple(roles))
        if block_classes is not None:
            profile = replace(profile, block_classes=tuple(block_classes))
        return profile


RST_PROFILE: Final[MarkupProfile] = MarkupProfile(name=DEFAULT_PROFILE)

_PROFILES: dict[str, MarkupProfile] = {
    RST_PROFILE.name: RST_PROFILE,
}


def available_profiles() -> list[str]:
    """Return the names of the registered markup profiles, sorted."""
    return sorted(_PROFILES)


def get_profile(name: str) -> MarkupProfile:
    """Look up a markup profile by name.

    Raises:
        UnknownProfileError: If no profile is registered under ``name``.
    """
    try:
        return _PROFILES[name]
    except KeyError:
        logger.debug("Known profiles: %s", ", ".join(available_profiles()))
        raise UnknownProfileError(name) from None
