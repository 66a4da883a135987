from __future__ import annotations

import os

from errorstack.paths import split_path
from errorstack.types import Frame, RawFrame

LIBRARY_MARKER = "errorstack"


def is_library_path(file_name: str, library_marker: str = LIBRARY_MARKER) -> bool:
    return library_marker in split_path(file_name)


def is_host_path(file_name: str, host_root: str) -> bool:
    # Exact directory match only: files in subdirectories of the root do not count.
    return os.path.dirname(file_name) == host_root


def classify(raw: RawFrame, library_marker: str, host_root: str) -> Frame:
    """Build a tagged ``Frame`` from one raw frame."""

    file_name = raw.file_name
    return Frame(
        source_file=file_name,
        line=raw.line_number,
        column=raw.column_number,
        type_name=raw.type_name or "",
        method_name=raw.method_name or "",
        function_name=raw.function_name or "",
        is_library_internal=is_library_path(file_name, library_marker),
        is_host_application=is_host_path(file_name, host_root),
        raw=raw,
    )


__all__ = ["LIBRARY_MARKER", "classify", "is_host_path", "is_library_path"]
