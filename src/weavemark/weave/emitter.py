# topmark:header:start
#
#   project      : WeaveMark
#   file         : emitter.py
#   file_relpath : src/weavemark/weave/emitter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Block-transition emitter.

The emitter writes each input line as soon as it has been classified. The only
state it carries between lines is the classification of the previous line
(`StreamState`): a code line that follows a prose line opens a new literal
block, so the block-start markup is written right before it.

| previous | current | action before the line        |
|----------|---------|-------------------------------|
| PROSE    | PROSE   | none                          |
| PROSE    | CODE    | write block-start markup      |
| CODE     | CODE    | none                          |
| CODE     | PROSE   | none                          |

The previous classification starts out as CODE, so a leading code run never
gets a block start.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from weavemark.config.logging import get_logger
from weavemark.constants import DEFAULT_LANGUAGE, DEFAULT_MARKER
from weavemark.weave.classifier import LineKind, classify, strip_prose, validate_marker

if TYPE_CHECKING:
    from collections.abc import Iterable
    from typing import TextIO

    from weavemark.config.logging import WeavemarkLogger
    from weavemark.weave.profiles import MarkupProfile

logger: WeavemarkLogger = get_logger(__name__)


@dataclass
class StreamState:
    """Carried state between two consecutive lines.

    Attributes:
        previous (LineKind): Classification of the last processed line.
    """

    previous: LineKind = LineKind.CODE


@dataclass
class WeaveStats:
    """Counters collected while weaving one stream."""

    prose_lines: int = 0
    code_lines: int = 0
    blocks_started: int = 0

    @property
    def total_lines(self) -> int:
        return self.prose_lines + self.code_lines


class BlockEmitter:
    """Streams classified lines to ``out`` with block markup at PROSE→CODE edges.

    Args:
        out (TextIO): Destination stream; written to once per unit, never buffered here.
        profile (MarkupProfile): Markup vocabulary (header blocks, block start, indent).
        marker (str): The prose marker character.
        language (str): Highlight identifier attached to every code block.
    """

    def __init__(
        self,
        out: TextIO,
        profile: MarkupProfile,
        *,
        marker: str = DEFAULT_MARKER,
        language: str = DEFAULT_LANGUAGE,
    ) -> None:
        self.out = out
        self.profile = profile
        self.marker = validate_marker(marker)
        self.language = language
        self.state = StreamState()
        self.stats = WeaveStats()
        self._block_start: str = profile.render_block_start(language)
        self._preamble_written = False

    def write_preamble(self) -> None:
        """Write the style and role declaration blocks (once)."""
        if self._preamble_written:
            return
        self.out.write(self.profile.render_style_block())
        self.out.write(self.profile.render_role_block())
        self._preamble_written = True

    def transition(self, current: LineKind) -> bool:
        """Apply the action for ``previous → current``; return True if a block was opened."""
        if self.state.previous is LineKind.PROSE and current is LineKind.CODE:
            logger.trace("PROSE -> CODE: opening code block #%d", self.stats.blocks_started + 1)
            self.out.write(self._block_start)
            self.stats.blocks_started += 1
            return True
        return False

    def feed(self, line: str) -> LineKind:
        """Process one line (without terminator) and return its classification."""
        kind: LineKind = classify(line, self.marker)
        self.transition(kind)
        newline: str = self.profile.newline
        if kind is LineKind.PROSE:
            self.out.write(f"{strip_prose(line, self.marker)}{newline}")
            self.stats.prose_lines += 1
        else:
            self.out.write(f"{self.profile.code_indent}{line}{newline}")
            self.stats.code_lines += 1
        self.state.previous = kind
        return kind

    def run(self, lines: Iterable[str], *, emit_header: bool = True) -> WeaveStats:
        """Weave all ``lines`` into ``out`` and return the collected counters.

        Args:
            lines (Iterable[str]): Lines without terminators, consumed lazily.
            emit_header (bool): Whether to write the header blocks first.

        Returns:
            WeaveStats: Line and block counters for this run.
        """
        if emit_header:
            self.write_preamble()
        for line in lines:
            self.feed(line)
        logger.debug(
            "Woven %d line(s): %d prose, %d code, %d code block(s)",
            self.stats.total_lines,
            self.stats.prose_lines,
            self.stats.code_lines,
            self.stats.blocks_started,
        )
        return self.stats
