# topmark:header:start
#
#   project      : WeaveMark
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the WeaveMark test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.

Notes:
    Tests should respect the immutable/mutable configuration split: build configs
    with `weavemark.config.MutableConfig`, then `freeze()` them into a
    `weavemark.config.Config` for API calls.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from weavemark.config import MutableConfig, logging
from weavemark.constants import LOG_LEVEL_ENV_VAR
from weavemark.weave.emitter import BlockEmitter
from weavemark.weave.profiles import RST_PROFILE

if TYPE_CHECKING:
    from collections.abc import Sequence

    from weavemark.config import Config
    from weavemark.weave.profiles import MarkupProfile

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type."""

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_weave: DecoratorType[Any] = as_typed_mark(pytest.mark.weave)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


@pytest.fixture(autouse=True)
def silence_weavemark_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure WeaveMark's runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise on STDERR when the developer has
    exported WEAVEMARK_LOG_LEVEL in their shell.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so that log calls are exercised in every test."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and attribute overrides."""
    m: MutableConfig = MutableConfig.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()


def weave_lines(
    lines: Sequence[str],
    *,
    marker: str = ";",
    language: str = "scheme",
    profile: MarkupProfile = RST_PROFILE,
    emit_header: bool = False,
) -> list[str]:
    """Run a fresh emitter over ``lines`` and return the output split into lines.

    The header blocks are skipped by default so assertions can focus on the
    line-derived output.
    """
    out = io.StringIO()
    emitter = BlockEmitter(out, profile, marker=marker, language=language)
    emitter.run(lines, emit_header=emit_header)
    return out.getvalue().splitlines()


#: The block-start unit of the built-in profile for Scheme, as output lines.
BLOCK_START_LINES: list[str] = ["", ".. class:: program scheme", "", "::", ""]
