# topmark:header:start
#
#   project      : WeaveMark
#   file         : __init__.py
#   file_relpath : src/weavemark/weave/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Weaving core: line classification, block transitions and markup profiles."""

from __future__ import annotations

from weavemark.weave.classifier import LineKind, classify, strip_prose, validate_marker
from weavemark.weave.emitter import BlockEmitter, StreamState, WeaveStats
from weavemark.weave.io import iter_lines
from weavemark.weave.profiles import MarkupProfile, available_profiles, get_profile

__all__ = [
    "BlockEmitter",
    "LineKind",
    "MarkupProfile",
    "StreamState",
    "WeaveStats",
    "available_profiles",
    "classify",
    "get_profile",
    "iter_lines",
    "strip_prose",
    "validate_marker",
]
