# topmark:header:start
#
#   project      : WeaveMark
#   file         : dump_config.py
#   file_relpath : src/weavemark/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""WeaveMark `dump-config` command.

Emits the effective WeaveMark configuration as TOML after applying defaults,
discovered and explicit config files, and any CLI overrides. The output is
wrapped between `# === BEGIN ===` and `# === END ===` markers for easy
parsing in tests or tooling.
"""

from __future__ import annotations

from pathlib import Path

import click

from weavemark.cli.cmd_common import get_console
from weavemark.cli.errors import error_from_exception
from weavemark.config import MutableConfig
from weavemark.config.keys import ArgKey
from weavemark.config.loaders import to_toml
from weavemark.config.logging import get_logger
from weavemark.errors import WeavemarkError

logger = get_logger(__name__)


@click.command(
    name="dump-config",
    help="Dump the final merged WeaveMark configuration as TOML.",
    epilog="Output is wrapped between '# === BEGIN ===' and '# === END ===' markers.",
)
@click.option("-l", "--language", default=None, help="Override the fallback source language.")
@click.option("--marker", default=None, help="Override the prose marker character.")
@click.option("--profile", default=None, help="Override the markup profile.")
@click.option(
    "--no-header",
    "no_header",
    is_flag=True,
    help="Disable the style and role declaration blocks.",
)
@click.option(
    "--config",
    "config_files",
    multiple=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Additional configuration file(s), applied after discovered ones.",
)
@click.option(
    "--no-config",
    is_flag=True,
    help="Do not discover weavemark.toml / pyproject.toml configuration.",
)
def dump_config_command(
    *,
    language: str | None,
    marker: str | None,
    profile: str | None,
    no_header: bool,
    config_files: tuple[Path, ...],
    no_config: bool,
) -> None:
    """Dump the final merged configuration as TOML.

    Discovery starts from the current working directory.

    Args:
        language (str | None): Fallback language override.
        marker (str | None): Prose marker override.
        profile (str | None): Markup profile override.
        no_header (bool): Disable the header blocks.
        config_files (tuple[Path, ...]): Extra configuration files.
        no_config (bool): Disable configuration discovery.
    """
    console = get_console(click.get_current_context())

    try:
        draft: MutableConfig = MutableConfig.load_merged(
            extra_config_files=config_files,
            no_config=no_config,
        )
        draft.apply_cli_args(
            {
                ArgKey.LANGUAGE: language,
                ArgKey.MARKER: marker,
                ArgKey.PROFILE: profile,
                ArgKey.NO_HEADER: no_header,
            }
        )
    except WeavemarkError as exc:
        raise error_from_exception(exc, what="configuration") from exc

    config = draft.freeze()
    logger.debug("Effective config sources: %s", config.config_files)

    console.print("# === BEGIN ===")
    console.print(to_toml(config.to_toml_dict()), nl=False)
    console.print("# === END ===")
