"""Core data types shared by the capture, normalization and display steps.

Two stack shapes exist and must not be confused:

- raw frames: whatever the capture capability produced (``RawFrame``), innermost first.
- normalized frames: ``Frame`` records carrying provenance tags, outermost first.

Only ``Frame`` sequences are accepted by filtering and rendering.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Final, Protocol, runtime_checkable


@runtime_checkable
class RawFrame(Protocol):
    """One entry of an interpreter stack snapshot, before classification."""

    @property
    def file_name(self) -> str: ...

    @property
    def line_number(self) -> int: ...

    @property
    def column_number(self) -> int: ...

    @property
    def type_name(self) -> str: ...

    @property
    def method_name(self) -> str: ...

    @property
    def function_name(self) -> str: ...

    @property
    def is_native(self) -> bool: ...


@dataclass(frozen=True)
class Frame:
    """A classified call-stack entry.

    Attributes:
        source_file: Full path of the file the frame executes in.
        line: 1-based line number.
        column: 1-based column number, 0 when unknown.
        type_name: Enclosing class name, empty for plain functions.
        method_name: Method name when ``type_name`` is set, empty otherwise.
        function_name: Function name, empty for module-level code.
        is_library_internal: The path contains errorstack's own directory.
        is_host_application: The file sits directly in the host application root.
        raw: The raw frame this record was built from (diagnostics only).
    """

    source_file: str
    line: int
    column: int
    type_name: str
    method_name: str
    function_name: str
    is_library_internal: bool
    is_host_application: bool
    raw: RawFrame | None = field(default=None, compare=False, repr=False)

    @property
    def location(self) -> str:
        return f"{self.source_file}:{self.line}:{self.column}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "source_file": self.source_file,
            "line": self.line,
            "column": self.column,
            "type_name": self.type_name,
            "method_name": self.method_name,
            "function_name": self.function_name,
            "is_library_internal": self.is_library_internal,
            "is_host_application": self.is_host_application,
        }


@dataclass(frozen=True)
class CapturedFault:
    """The exception being diagnosed, with its message resolved at capture time."""

    error: BaseException
    message: str

    @classmethod
    def from_exception(cls, error: BaseException) -> CapturedFault:
        return cls(error=error, message=str(error))

    @property
    def label(self) -> str:
        return type(self.error).__name__

    @property
    def display_text(self) -> str:
        if not self.message:
            return self.label
        return f"{self.label}: {self.message}"


class Uncaptured(Enum):
    """Sentinel type for a reporter that has not captured anything yet."""

    UNCAPTURED = "uncaptured"

    def __repr__(self) -> str:
        return "UNCAPTURED"


UNCAPTURED: Final = Uncaptured.UNCAPTURED


__all__ = [
    "UNCAPTURED",
    "CapturedFault",
    "Frame",
    "RawFrame",
    "Uncaptured",
]
