"""Raw stack acquisition from the running interpreter.

Both entry points return ``CallSite`` records innermost first, the order in which
the interpreter links frames together. Normalization reverses it later.
"""

from __future__ import annotations

import itertools
import sys
from dataclasses import dataclass
from types import CodeType, FrameType, TracebackType


@dataclass(frozen=True)
class CallSite:
    """Concrete ``RawFrame`` captured from a frame or traceback object."""

    file_name: str
    line_number: int
    column_number: int
    type_name: str
    method_name: str
    function_name: str
    is_native: bool


def _is_native_file(file_name: str) -> bool:
    # <frozen importlib._bootstrap>, <string>, <stdin>: nothing on disk to point at
    return file_name.startswith("<") and file_name.endswith(">")


def _column_of(code: CodeType, lasti: int) -> int:
    if lasti < 0:
        return 0
    position = next(itertools.islice(code.co_positions(), lasti // 2, None), None)
    if position is None or position[2] is None:
        return 0
    return position[2] + 1


def _names_of(code: CodeType) -> tuple[str, str, str]:
    name = code.co_name
    function_name = "" if name == "<module>" else name
    owner = code.co_qualname.rpartition(".")[0]
    owner = owner.rpartition(".")[2]
    if not owner or owner.startswith("<"):
        return "", "", function_name
    return owner, name, function_name


def _call_site(code: CodeType, lineno: int | None, lasti: int) -> CallSite:
    type_name, method_name, function_name = _names_of(code)
    return CallSite(
        file_name=code.co_filename,
        line_number=lineno or 0,
        column_number=_column_of(code, lasti),
        type_name=type_name,
        method_name=method_name,
        function_name=function_name,
        is_native=_is_native_file(code.co_filename),
    )


def call_site_from_frame(frame: FrameType) -> CallSite:
    return _call_site(frame.f_code, frame.f_lineno, frame.f_lasti)


def capture_raw(skip: int = 0) -> list[CallSite]:
    """Snapshot the caller's stack.

    Args:
        skip: Extra frames to drop above the caller (e.g. wrappers around this call).

    Returns:
        Call sites from the caller of ``capture_raw`` outwards, innermost first.
    """

    frame: FrameType | None = sys._getframe(skip + 1)
    sites: list[CallSite] = []
    while frame is not None:
        sites.append(call_site_from_frame(frame))
        frame = frame.f_back
    return sites


def parse_fault_trace(fault: BaseException) -> list[CallSite]:
    """Read the trace an exception carries, innermost first."""

    sites: list[CallSite] = []
    tb: TracebackType | None = fault.__traceback__
    while tb is not None:
        sites.append(_call_site(tb.tb_frame.f_code, tb.tb_lineno, tb.tb_lasti))
        tb = tb.tb_next
    sites.reverse()
    return sites


__all__ = ["CallSite", "call_site_from_frame", "capture_raw", "parse_fault_trace"]
