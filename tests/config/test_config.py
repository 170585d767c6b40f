# topmark:header:start
#
#   project      : WeaveMark
#   file         : test_config.py
#   file_relpath : tests/config/test_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration drafts: TOML parsing, layering, discovery and overrides."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.conftest import make_config
from weavemark.config import Config, MutableConfig
from weavemark.config.keys import ArgKey
from weavemark.errors import ConfigError, UnknownLanguageError, UnknownProfileError
from weavemark.weave.profiles import DEFAULT_ROLES


def test_defaults_freeze() -> None:
    cfg = MutableConfig.from_defaults().freeze()

    assert cfg.language == "scheme"
    assert cfg.profile == "rst"
    assert cfg.marker is None
    assert cfg.emit_header is True
    assert cfg.roles == DEFAULT_ROLES
    assert cfg.block_classes == ("program",)
    assert cfg.config_files == ("<defaults>",)


def test_empty_draft_freezes_to_fallbacks() -> None:
    cfg = MutableConfig().freeze()

    assert cfg.language == "scheme"
    assert cfg.profile == "rst"
    assert cfg.emit_header is True
    assert cfg.roles is None


def test_from_toml_dict_reads_both_sections() -> None:
    draft = MutableConfig.from_toml_dict(
        {
            "weave": {"language": "racket", "marker": "#", "emit_header": False},
            "markup": {"roles": ["proc"], "stylesheet": ".x {}"},
        }
    )

    assert draft.language == "racket"
    assert draft.marker == "#"
    assert draft.emit_header is False
    assert draft.roles == ["proc"]
    assert draft.stylesheet == ".x {}"
    assert draft.profile is None


@pytest.mark.parametrize(
    "data",
    [
        {"weave": {"marker": ";;"}},
        {"weave": {"marker": ""}},
        {"weave": {"language": 3}},
        {"weave": {"emit_header": "yes"}},
        {"markup": {"roles": "procedure"}},
        {"markup": {"roles": ["ok", 1]}},
        {"weave": "not a table"},
    ],
)
def test_from_toml_dict_rejects_bad_values(data: dict[str, object]) -> None:
    with pytest.raises(ConfigError):
        MutableConfig.from_toml_dict(data, config_file=Path("weavemark.toml"))


def test_from_toml_dict_ignores_unknown_sections() -> None:
    draft = MutableConfig.from_toml_dict({"other": {"a": 1}, "weave": {"language": "lisp"}})

    assert draft.language == "lisp"


def test_merge_with_prefers_set_values() -> None:
    base = MutableConfig(language="scheme", profile="rst", roles=["a"])
    layer = MutableConfig(language="racket", roles=None, emit_header=False)

    merged = base.merge_with(layer)

    assert merged.language == "racket"
    assert merged.profile == "rst"
    assert merged.roles == ["a"]
    assert merged.emit_header is False


def test_thaw_roundtrip() -> None:
    cfg = make_config(marker="%", stylesheet="")

    assert cfg.thaw().freeze() == cfg


def test_from_toml_file_weavemark_toml(tmp_path: Path) -> None:
    path = tmp_path / "weavemark.toml"
    path.write_text('[weave]\nlanguage = "clojure"\n', encoding="utf-8")

    draft = MutableConfig.from_toml_file(path)

    assert draft is not None
    assert draft.language == "clojure"
    assert draft.config_files == [path]


def test_from_toml_file_pyproject(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text(
        '[project]\nname = "x"\n\n[tool.weavemark.weave]\nlanguage = "python"\n',
        encoding="utf-8",
    )

    draft = MutableConfig.from_toml_file(path)

    assert draft is not None
    assert draft.language == "python"


def test_from_toml_file_pyproject_without_section(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "x"\n', encoding="utf-8")

    assert MutableConfig.from_toml_file(path) is None


def test_discovery_orders_root_most_first(tmp_path: Path) -> None:
    (tmp_path / "weavemark.toml").write_text('[weave]\nlanguage = "lisp"\n', encoding="utf-8")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "pyproject.toml").write_text(
        '[tool.weavemark.weave]\nlanguage = "racket"\n', encoding="utf-8"
    )
    (sub / "weavemark.toml").write_text('[weave]\nprofile = "rst"\n', encoding="utf-8")
    src = sub / "lib.scm"
    src.write_text("; hi\n", encoding="utf-8")

    found = MutableConfig.discover_local_config_files(src)
    ours = [p for p in found if tmp_path.resolve() in p.parents]

    assert ours == [
        tmp_path.resolve() / "weavemark.toml",
        sub.resolve() / "pyproject.toml",
        sub.resolve() / "weavemark.toml",
    ]

    merged = MutableConfig.load_merged(start=src)
    assert merged.language == "racket"


def test_load_merged_no_config_skips_discovery(tmp_path: Path) -> None:
    (tmp_path / "weavemark.toml").write_text('[weave]\nlanguage = "lisp"\n', encoding="utf-8")

    merged = MutableConfig.load_merged(start=tmp_path, no_config=True)

    assert merged.language == "scheme"


def test_load_merged_explicit_file_applied_last(tmp_path: Path) -> None:
    (tmp_path / "weavemark.toml").write_text('[weave]\nlanguage = "lisp"\n', encoding="utf-8")
    extra = tmp_path / "extra.toml"
    extra.write_text('[weave]\nlanguage = "erlang"\n', encoding="utf-8")

    merged = MutableConfig.load_merged(start=tmp_path, extra_config_files=[extra])

    assert merged.language == "erlang"
    assert merged.config_files[-1] == extra


def test_load_merged_missing_explicit_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        MutableConfig.load_merged(
            start=tmp_path, extra_config_files=[tmp_path / "nope.toml"], no_config=True
        )


def test_load_merged_explicit_pyproject_without_section(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "x"\n', encoding="utf-8")

    with pytest.raises(ConfigError):
        MutableConfig.load_merged(extra_config_files=[path], no_config=True)


def test_load_merged_malformed_explicit_file(tmp_path: Path) -> None:
    bad = tmp_path / "bad.toml"
    bad.write_text("[weave\nlanguage = \n", encoding="utf-8")

    with pytest.raises(ConfigError, match="bad.toml"):
        MutableConfig.load_merged(extra_config_files=[bad], no_config=True)


def test_load_merged_undecodable_discovered_file_is_skipped(tmp_path: Path) -> None:
    (tmp_path / "weavemark.toml").write_bytes(b"# caf\xe9\n[weave]\n")

    merged = MutableConfig.load_merged(start=tmp_path)

    assert merged.language == "scheme"


def test_apply_cli_args() -> None:
    draft = MutableConfig.from_defaults()

    draft.apply_cli_args(
        {
            ArgKey.LANGUAGE: "python",
            ArgKey.MARKER: "!",
            ArgKey.PROFILE: None,
            ArgKey.NO_HEADER: True,
            ArgKey.VERBOSITY_LEVEL: 2,
        }
    )
    cfg = draft.freeze()

    assert cfg.language == "python"
    assert cfg.marker == "!"
    assert cfg.profile == "rst"
    assert cfg.emit_header is False
    assert cfg.verbosity_level == 2
    assert cfg.config_files[-1] == "<CLI overrides>"


def test_apply_cli_args_rejects_long_marker() -> None:
    with pytest.raises(ConfigError):
        MutableConfig.from_defaults().apply_cli_args({ArgKey.MARKER: "--"})


def test_resolve_file_type_order() -> None:
    cfg = make_config(language="lisp")

    assert cfg.resolve_file_type().name == "lisp"
    assert cfg.resolve_file_type(Path("x.py")).name == "python"
    assert cfg.resolve_file_type(Path("x.unknown")).name == "lisp"
    assert cfg.resolve_file_type(Path("x.py"), explicit="erlang").name == "erlang"

    with pytest.raises(UnknownLanguageError):
        cfg.resolve_file_type(explicit="cobol")


def test_resolve_marker_override() -> None:
    python = make_config().resolve_file_type(explicit="python")

    assert make_config().resolve_marker(python) == "#"
    assert make_config(marker="!").resolve_marker(python) == "!"


def test_resolve_profile_applies_overrides() -> None:
    cfg: Config = make_config(roles=["proc"], block_classes=["listing"], stylesheet="")
    profile = cfg.resolve_profile()

    assert profile.roles == ("proc",)
    assert profile.block_classes == ("listing",)
    assert profile.render_style_block() == ""

    with pytest.raises(UnknownProfileError):
        make_config(profile="markdown").resolve_profile()


def test_to_toml_dict_omits_unset() -> None:
    data = MutableConfig().freeze().to_toml_dict()

    assert data["weave"] == {"language": "scheme", "profile": "rst", "emit_header": True}
    assert data["markup"] == {}
