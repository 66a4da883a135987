"""Display tree construction for normalized stacks.

The tree is sink-agnostic: ``errorstack.console`` draws it with rich, and
``format_display_tree`` produces plain text for logs.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from errorstack.config import load_config
from errorstack.paths import truncate_file_path
from errorstack.stack import verify_shape
from errorstack.types import CapturedFault, Frame


@dataclass(frozen=True)
class FaultHeader:
    label: str
    message: str

    @property
    def text(self) -> str:
        if not self.message:
            return self.label
        return f"{self.label}: {self.message}"


@dataclass(frozen=True)
class FrameEntry:
    file_name: str
    line: int
    function_name: str
    subtext: str


@dataclass(frozen=True)
class DisplayTree:
    header: FaultHeader | None
    entries: tuple[FrameEntry, ...]


def _entry_for(frame: Frame, keep: int) -> FrameEntry:
    if isinstance(frame, Frame):
        source_file, line, column = frame.source_file, frame.line, frame.column
        function_name = frame.function_name
    else:
        # Raw frames slipped through; verify_shape has already reported it.
        source_file = str(getattr(frame, "file_name", "<unknown>"))
        line = getattr(frame, "line_number", 0)
        column = getattr(frame, "column_number", 0)
        function_name = getattr(frame, "function_name", "")
    return FrameEntry(
        file_name=truncate_file_path(source_file, keep),
        line=line,
        function_name=function_name or "",
        subtext=f"{source_file}:{line}:{column}",
    )


@runtime_checkable
class DisplaySink(Protocol):
    def display(self, tree: DisplayTree) -> None: ...


def build_display_tree(
    frames: Sequence[Frame],
    fault: CapturedFault | None = None,
    *,
    segments: int | None = None,
) -> DisplayTree:
    """Lay out ``frames`` innermost first, under an optional fault header."""

    verify_shape(frames)
    keep = load_config().path_segments if segments is None else segments

    header = None
    if fault is not None:
        header = FaultHeader(label=fault.label, message=fault.message)

    entries: list[FrameEntry] = []
    for index in range(len(frames) - 1, -1, -1):
        entries.append(_entry_for(frames[index], keep))
    return DisplayTree(header=header, entries=tuple(entries))


def render(
    frames: Sequence[Frame],
    fault: CapturedFault | None = None,
    *,
    sink: DisplaySink | None = None,
    segments: int | None = None,
) -> None:
    """Build the display tree for ``frames`` and hand it to ``sink``."""

    tree = build_display_tree(frames, fault, segments=segments)
    if sink is None:
        from errorstack.console import RichConsoleSink

        sink = RichConsoleSink()
    sink.display(tree)


def format_display_tree(tree: DisplayTree) -> str:
    lines: list[str] = []
    if tree.header is not None:
        lines.append(tree.header.text)
        lines.append("")
    if not tree.entries:
        lines.append("  (no application frames)")
    for entry in tree.entries:
        head = f"  - {entry.file_name}:{entry.line}"
        if entry.function_name:
            head += f"  {entry.function_name}"
        lines.append(head)
        lines.append(f"      {entry.subtext}")
    return "\n".join(lines)


__all__ = [
    "DisplaySink",
    "DisplayTree",
    "FaultHeader",
    "FrameEntry",
    "build_display_tree",
    "format_display_tree",
    "render",
]
