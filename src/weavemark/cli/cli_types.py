# topmark:header:start
#
#   project      : WeaveMark
#   file         : cli_types.py
#   file_relpath : src/weavemark/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom Click parameter types and shared output formats for the WeaveMark CLI."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, Iterable, NoReturn, TypeVar, cast

import click

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem

E = TypeVar("E", bound=Enum)


class OutputFormat(str, Enum):
    """Output formats for informational commands (``languages``, ``version``)."""

    DEFAULT = "default"
    JSON = "json"
    MARKDOWN = "markdown"


class EnumChoiceParam(click.ParamType, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum."""

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = [cast("str", getattr(e, "value", str(e))) for e in self.enum_cls]

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        """Raise a BadParameter with a NoReturn signature (clear to type checkers)."""
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Converts a string to a member of the Enum (case-insensitive)."""
        if value is None or isinstance(value, self.enum_cls):
            return value

        lookup: dict[str, E] = {
            cast("str", getattr(choice, "value", str(choice))).lower(): choice
            for choice in cast("Iterable[E]", self.enum_cls)
        }
        key = str(value).lower()
        if key in lookup:
            return lookup[key]

        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def shell_complete(
        self,
        ctx: click.Context,  # pylint: disable=unused-argument
        param: click.Parameter,  # pylint: disable=unused-argument
        incomplete: str,
    ) -> list[CompletionItem]:
        """Tab completion for Click.

        Bash: `eval "$(_WEAVEMARK_COMPLETE=bash_source weavemark)"`
        """
        from click.shell_completion import CompletionItem as RuntimeCompletionItem

        prefix = (incomplete or "").lower()
        return [
            RuntimeCompletionItem(choice)
            for choice in self.choices
            if choice.lower().startswith(prefix)
        ]

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"EnumParam({self.enum_cls.__name__})"
