# topmark:header:start
#
#   project      : WeaveMark
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running WeaveMark in a controlled working directory.

`run_cli_in()` changes the process working directory to the given `tmp_path`
before invoking the Click CLI, so that relative paths and configuration
discovery (which starts from the working directory when reading STDIN) are
confined to the temporary test directory.

Both helpers pass ``--no-color`` so assertions never see ANSI escapes, even
when ``FORCE_COLOR`` is exported in the environment.
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any, Sequence

import pytest
from click.testing import CliRunner, Result

from weavemark.cli.exit_codes import ExitCode
from weavemark.cli.main import cli
from weavemark.config import logging

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def restore_test_logging():
    """Reattach TRACE logging after each CLI run replaced the root handler."""
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


def run_cli_in(
    tmp_path: Path,
    argv: Sequence[str],
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Pytest-provided temporary directory used as the CWD.
        argv (Sequence[str]): CLI argument vector, e.g. ``["weave", "lib.scm"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return run_cli(argv, input_text=input_text)
    finally:
        os.chdir(cwd)


def run_cli(
    argv: Sequence[str],
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper when the test does not read STDIN or discover configuration
    (e.g. ``--help``, ``version``, ``languages``).

    Args:
        argv (Sequence[str]): CLI argument vector.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, ["--no-color", *argv], input=input_text)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with ``code``."""
    assert result.exit_code == code, result.output
