# topmark:header:start
#
#   project      : WeaveMark
#   file         : test_show_defaults.py
#   file_relpath : tests/cli/test_show_defaults.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: the `show-defaults` command."""

from __future__ import annotations

import tomlkit

from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli
from weavemark.config.loaders import extract_tool_section, load_defaults_dict


@mark_cli
def test_show_defaults_is_valid_toml() -> None:
    result = run_cli(["show-defaults"])

    assert_SUCCESS(result)
    assert tomlkit.parse(result.output).unwrap() == load_defaults_dict()


@mark_cli
def test_show_defaults_for_pyproject() -> None:
    result = run_cli(["show-defaults", "--pyproject"])

    assert_SUCCESS(result)
    data = tomlkit.parse(result.output).unwrap()
    assert extract_tool_section(data) == load_defaults_dict()
