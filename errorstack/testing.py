"""Test doubles for errorstack sinks and process termination."""

from __future__ import annotations

from dataclasses import dataclass, field

from errorstack.display import DisplayTree
from errorstack.native import CallSite


@dataclass
class RecordingSink:
    """Sink that keeps every tree it is asked to display."""

    trees: list[DisplayTree] = field(default_factory=list)

    def display(self, tree: DisplayTree) -> None:
        self.trees.append(tree)

    @property
    def last(self) -> DisplayTree:
        if not self.trees:
            raise AssertionError("nothing was displayed")
        return self.trees[-1]


@dataclass
class ExitRecorder:
    """Stand-in for ``sys.exit`` that records requested status codes."""

    codes: list[int] = field(default_factory=list)

    def __call__(self, code: int) -> None:
        self.codes.append(code)


def make_raw_frame(
    file_name: str,
    line_number: int = 1,
    column_number: int = 1,
    *,
    function_name: str = "",
    type_name: str = "",
    method_name: str = "",
    is_native: bool = False,
) -> CallSite:
    return CallSite(
        file_name=file_name,
        line_number=line_number,
        column_number=column_number,
        type_name=type_name,
        method_name=method_name,
        function_name=function_name,
        is_native=is_native,
    )


__all__ = ["ExitRecorder", "RecordingSink", "make_raw_frame"]
