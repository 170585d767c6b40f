# topmark:header:start
#
#   project      : WeaveMark
#   file         : io.py
#   file_relpath : src/weavemark/weave/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line reading for the weaver."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


def iter_lines(stream: Iterable[str]) -> Iterator[str]:
    r"""Yield lines from ``stream`` without their terminator.

    Only a trailing ``\n`` (and a ``\r`` right before it) is removed; any other
    trailing whitespace is part of the line. Lines are pulled one at a time, so
    the caller can write output before the next line is read.
    """
    for raw in stream:
        line: str = raw
        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
        yield line
