"""Normalization, host filtering and shape checks for captured stacks.

``normalize`` is the only producer of ``Frame`` sequences. Its output is ordered
outermost call first; every later step keeps that order.
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Sequence
from typing import Any

from errorstack.classify import LIBRARY_MARKER, classify
from errorstack.errors import ShapeViolationWarning
from errorstack.paths import resolve_host_root
from errorstack.types import Frame, RawFrame

logger = logging.getLogger(__name__)

SHAPE_VIOLATION_MESSAGE = "a non-normalized stack object was used, something went horribly wrong."


def verify_shape(frames: Sequence[Any]) -> None:
    """Report, without raising, when ``frames`` is not a normalized stack.

    Empty sequences pass: filtering can legitimately leave nothing behind.
    Only the first element is inspected.
    """

    if len(frames) == 0:
        return
    if isinstance(frames[0], Frame):
        return
    logger.error("%s (got %s)", SHAPE_VIOLATION_MESSAGE, type(frames[0]).__name__)
    warnings.warn(SHAPE_VIOLATION_MESSAGE, ShapeViolationWarning, stacklevel=3)


def normalize(
    raw_frames: Sequence[RawFrame],
    *,
    library_marker: str = LIBRARY_MARKER,
    host_root: str | None = None,
) -> list[Frame]:
    """Turn an innermost-first raw stack into an outermost-first ``Frame`` list.

    Native frames (no source on disk) are dropped.
    """

    root = resolve_host_root() if host_root is None else host_root
    stack: list[Frame] = []
    for raw in reversed(raw_frames):
        if raw.is_native:
            continue
        stack.append(classify(raw, library_marker, root))
    return stack


def filter_stack(frames: Sequence[Frame]) -> list[Frame]:
    """Keep only host application frames, preserving their relative order."""

    verify_shape(frames)

    kept: list[Frame] = []
    for frame in reversed(frames):
        # unnormalized input is reported above and then treated as foreign
        if not getattr(frame, "is_host_application", False):
            continue
        kept.append(frame)
    kept.reverse()

    verify_shape(kept)
    return kept


__all__ = [
    "SHAPE_VIOLATION_MESSAGE",
    "filter_stack",
    "normalize",
    "verify_shape",
]
