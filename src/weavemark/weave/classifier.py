# topmark:header:start
#
#   project      : WeaveMark
#   file         : classifier.py
#   file_relpath : src/weavemark/weave/classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line classification for literate sources.

A line is *prose* when its very first character is the host language's
line-comment leader (the *marker*); every other line, including the empty
line, is *code*. Classification looks at the line alone, never at its
neighbours.
"""

from __future__ import annotations

from enum import Enum

from weavemark.constants import DEFAULT_MARKER


class LineKind(Enum):
    """Classification of a single input line.

    Attributes:
        PROSE: Narrative text, written as a line comment.
        CODE: Program source, passed through verbatim.
    """

    PROSE = "prose"
    CODE = "code"


def validate_marker(marker: str) -> str:
    """Return ``marker`` if it is a single character.

    Raises:
        ValueError: If ``marker`` is empty or longer than one character.
    """
    if len(marker) != 1:
        raise ValueError(f"Prose marker must be exactly one character (got {marker!r})")
    return marker


def classify(line: str, marker: str = DEFAULT_MARKER) -> LineKind:
    """Classify ``line`` as prose or code.

    Args:
        line (str): Line content without its terminator.
        marker (str): The prose marker character.

    Returns:
        LineKind: ``PROSE`` iff the line is non-empty and starts with ``marker``.
    """
    if line and line[0] == marker:
        return LineKind.PROSE
    return LineKind.CODE


def strip_prose(line: str, marker: str = DEFAULT_MARKER) -> str:
    """Return the prose text of a prose line.

    The marker is removed, followed by at most one space. Further leading spaces
    are indentation inside the prose and are kept.

    Args:
        line (str): A line that classifies as ``PROSE``.
        marker (str): The prose marker character.

    Returns:
        str: The remaining text, otherwise unchanged.

    Raises:
        ValueError: If ``line`` is not a prose line.
    """
    if classify(line, marker) is not LineKind.PROSE:
        raise ValueError(f"Not a prose line for marker {marker!r}: {line!r}")
    text: str = line[1:]
    if text.startswith(" "):
        return text[1:]
    return text
