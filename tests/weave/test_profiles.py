# topmark:header:start
#
#   project      : WeaveMark
#   file         : test_profiles.py
#   file_relpath : tests/weave/test_profiles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markup profile rendering and lookup."""

from __future__ import annotations

import pytest

from tests.conftest import mark_weave
from weavemark.errors import UnknownProfileError
from weavemark.weave.profiles import (
    DEFAULT_ROLES,
    RST_PROFILE,
    MarkupProfile,
    available_profiles,
    get_profile,
)


@mark_weave
def test_block_start_tags_program_and_language() -> None:
    assert RST_PROFILE.render_block_start("scheme") == "\n.. class:: program scheme\n\n::\n\n"


@mark_weave
def test_block_start_uses_configured_classes() -> None:
    profile = RST_PROFILE.with_overrides(block_classes=["listing", "code"])

    assert profile.render_block_start("python").splitlines()[1] == ".. class:: listing code python"


@mark_weave
def test_role_block_declares_each_role() -> None:
    text = RST_PROFILE.render_role_block()

    for role in DEFAULT_ROLES:
        assert f".. role:: {role}(literal)\n   :class: {role}\n\n" in text
    assert text.count(".. role::") == len(DEFAULT_ROLES)


@mark_weave
def test_style_block_indents_css_under_raw_html() -> None:
    profile = MarkupProfile(name="t", stylesheet=".a { x: y; }\n\n.b { z: w; }\n")

    assert profile.render_style_block().splitlines() == [
        ".. raw:: html",
        "",
        '   <style type="text/css">',
        "   .a { x: y; }",
        "",
        "   .b { z: w; }",
        "   </style>",
        "",
    ]


@mark_weave
def test_empty_stylesheet_and_roles_render_nothing() -> None:
    profile = RST_PROFILE.with_overrides(stylesheet="", roles=[])

    assert profile.render_style_block() == ""
    assert profile.render_role_block() == ""


@mark_weave
def test_with_overrides_keeps_unset_values() -> None:
    profile = RST_PROFILE.with_overrides(roles=["proc"])

    assert profile.roles == ("proc",)
    assert profile.stylesheet == RST_PROFILE.stylesheet
    assert profile.block_classes == RST_PROFILE.block_classes
    assert RST_PROFILE.with_overrides() is RST_PROFILE


@mark_weave
def test_custom_newline_is_used_everywhere() -> None:
    profile = MarkupProfile(name="crlf", stylesheet="", roles=("r",), newline="\r\n")

    assert profile.render_role_block() == ".. role:: r(literal)\r\n   :class: r\r\n\r\n"
    assert profile.render_block_start("c").startswith("\r\n.. class:: program c\r\n")


def test_get_profile_lookup() -> None:
    assert get_profile("rst") is RST_PROFILE
    assert "rst" in available_profiles()


def test_get_profile_unknown_raises() -> None:
    with pytest.raises(UnknownProfileError) as excinfo:
        get_profile("asciidoc")

    assert excinfo.value.name == "asciidoc"
    assert "asciidoc" in str(excinfo.value)
