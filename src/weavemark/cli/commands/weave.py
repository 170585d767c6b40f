# topmark:header:start
#
#   project      : WeaveMark
#   file         : weave.py
#   file_relpath : src/weavemark/cli/commands/weave.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""WeaveMark `weave` command.

Reads a literate source from PATH (or STDIN when PATH is omitted or ``-``) and
writes the woven document to ``--output`` (STDOUT by default). Each line is
written as soon as it has been read.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from weavemark.api import build_emitter
from weavemark.cli.cmd_common import get_console, get_effective_verbosity
from weavemark.cli.errors import error_from_exception
from weavemark.config import MutableConfig
from weavemark.config.keys import ArgKey
from weavemark.config.logging import get_logger
from weavemark.constants import STDIN_SENTINEL
from weavemark.errors import WeavemarkError
from weavemark.weave.io import iter_lines

if TYPE_CHECKING:
    from weavemark.config import Config
    from weavemark.config.logging import WeavemarkLogger
    from weavemark.weave.emitter import WeaveStats

logger: WeavemarkLogger = get_logger(__name__)


def _display(name: str) -> str:
    return "<stdin>" if name == STDIN_SENTINEL else name


@click.command(
    name="weave",
    help="Convert a literate source into reStructuredText.",
    epilog="""
Lines starting with the prose marker (e.g. ';' for Scheme) become prose; all other
lines are emitted as indented code blocks. Reads STDIN when PATH is omitted or '-'.
""",
)
@click.argument(
    "path",
    required=False,
    default=STDIN_SENTINEL,
    type=click.Path(dir_okay=False, allow_dash=True),
)
@click.option(
    "-o",
    "--output",
    default=STDIN_SENTINEL,
    type=click.Path(dir_okay=False, writable=True, allow_dash=True),
    help="Write the document here instead of STDOUT.",
)
@click.option(
    "-l",
    "--language",
    default=None,
    help="Source language (see 'weavemark languages'); inferred from PATH by default.",
)
@click.option(
    "--marker",
    default=None,
    help="Prose marker character; overrides the language's comment leader.",
)
@click.option(
    "--profile",
    default=None,
    help="Markup profile for the generated document.",
)
@click.option(
    "--no-header",
    "no_header",
    is_flag=True,
    help="Do not write the style and role declaration blocks.",
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
@click.option(
    "--stdin-filename",
    default=None,
    help="Assumed filename when reading from STDIN (used to infer the language).",
)
def weave_command(
    *,
    path: str,
    output: str,
    language: str | None,
    marker: str | None,
    profile: str | None,
    no_header: bool,
    config_files: tuple[Path, ...],
    no_config: bool,
    stdin_filename: str | None,
) -> None:
    """Weave one literate source into a document.

    Args:
        path (str): Input path or ``-`` for STDIN.
        output (str): Output path or ``-`` for STDOUT.
        language (str | None): Explicit source language name.
        marker (str | None): Explicit prose marker.
        profile (str | None): Explicit markup profile name.
        no_header (bool): Skip the header blocks.
        config_files (tuple[Path, ...]): Extra configuration files.
        no_config (bool): Disable configuration discovery.
        stdin_filename (str | None): Assumed name of the STDIN content.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)

    from_stdin: bool = path == STDIN_SENTINEL
    input_path: Path | None = None if from_stdin else Path(path)
    assumed_path: Path | None = input_path
    if stdin_filename:
        if from_stdin:
            assumed_path = Path(stdin_filename)
        else:
            console.warn(f"Note: --stdin-filename is ignored when reading {path}.")

    try:
        draft: MutableConfig = MutableConfig.load_merged(
            start=input_path,
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
        config: Config = draft.freeze()
        # Fail on an unknown language/profile before the output file is created.
        config.resolve_file_type(assumed_path, explicit=language)
        config.resolve_profile()
    except WeavemarkError as exc:
        raise error_from_exception(exc, what=_display(path)) from exc

    logger.debug("Effective config sources: %s", config.config_files)

    try:
        with click.open_file(path, "r", encoding="utf-8") as src:
            with click.open_file(output, "w", encoding="utf-8") as dst:
                emitter = build_emitter(dst, config, path=assumed_path, language=language)
                stats: WeaveStats = emitter.run(iter_lines(src), emit_header=config.emit_header)
    except (WeavemarkError, OSError, UnicodeError) as exc:
        raise error_from_exception(exc, what=_display(path)) from exc

    if get_effective_verbosity(ctx, config) > 0:
        console.info(
            console.styled(
                f"{_display(path)}: {stats.prose_lines} prose line(s), "
                f"{stats.code_lines} code line(s), {stats.blocks_started} code block(s)",
                bold=True,
            )
        )
