# topmark:header:start
#
#   project      : WeaveMark
#   file         : test_properties.py
#   file_relpath : tests/weave/test_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Property-based checks of the block emitter."""

from __future__ import annotations

import io

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tests.conftest import mark_weave
from weavemark.weave.classifier import LineKind, classify
from weavemark.weave.emitter import BlockEmitter
from weavemark.weave.profiles import RST_PROFILE

# Lines never contain a terminator; everything else is fair game.
line_text = st.text(
    alphabet=st.characters(exclude_categories=("Cs",), exclude_characters="\n\r"),
    max_size=20,
)
prose_line = line_text.map(lambda s: ";" + s)
code_line = line_text.filter(lambda s: not s.startswith(";"))
any_line = st.one_of(prose_line, code_line)


def _count_code_runs_after_prose(lines: list[str]) -> int:
    previous = LineKind.CODE
    runs = 0
    for line in lines:
        current = classify(line)
        if previous is LineKind.PROSE and current is LineKind.CODE:
            runs += 1
        previous = current
    return runs


@mark_weave
@settings(max_examples=200)
@given(st.lists(any_line, max_size=30))
def test_block_starts_match_prose_to_code_edges(lines: list[str]) -> None:
    out = io.StringIO()
    stats = BlockEmitter(out, RST_PROFILE).run(lines, emit_header=False)

    assert stats.blocks_started == _count_code_runs_after_prose(lines)
    assert stats.total_lines == len(lines)


@mark_weave
@settings(max_examples=200)
@given(st.lists(code_line, max_size=30))
def test_code_only_input_is_indented_verbatim(lines: list[str]) -> None:
    out = io.StringIO()
    BlockEmitter(out, RST_PROFILE).run(lines, emit_header=False)

    assert out.getvalue() == "".join(f"  {line}\n" for line in lines)


@mark_weave
@settings(max_examples=200)
@given(st.lists(line_text, max_size=30))
def test_prose_only_input_has_no_markup(texts: list[str]) -> None:
    out = io.StringIO()
    BlockEmitter(out, RST_PROFILE).run([f"; {t}" for t in texts], emit_header=False)

    assert out.getvalue() == "".join(f"{t}\n" for t in texts)


@pytest.mark.hypothesis_slow
@settings(max_examples=5000, deadline=None)
@given(st.lists(any_line, max_size=200), st.sampled_from([";", "#", "%"]))
def test_output_line_count_is_exact(lines: list[str], marker: str) -> None:
    """Every input line yields one output line plus the block-start lines."""
    lines = [marker + line[1:] if line.startswith(";") else line for line in lines]
    out = io.StringIO()
    stats = BlockEmitter(out, RST_PROFILE, marker=marker).run(lines, emit_header=False)

    block_start_lines = RST_PROFILE.render_block_start("scheme").count("\n")
    assert out.getvalue().count("\n") == len(lines) + block_start_lines * stats.blocks_started
