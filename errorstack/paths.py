"""Path helpers: host application root resolution and display truncation."""

from __future__ import annotations

import os
import re
import sys
from functools import cache

from errorstack.config import DEFAULT_PATH_SEGMENTS, load_config

_SEPARATORS = re.compile(r"[\\/]")


def split_path(path: str) -> list[str]:
    """Split on both separator styles, dropping empty segments."""

    return [segment for segment in _SEPARATORS.split(path) if segment]


def truncate_file_path(path: str, segments: int = DEFAULT_PATH_SEGMENTS) -> str:
    """Keep the trailing ``segments`` components of ``path`` for compact display."""

    parts = split_path(path)
    if len(parts) <= segments:
        return path
    return "/".join(parts[-segments:])


def _main_module_dir() -> str | None:
    main = sys.modules.get("__main__")
    main_file = getattr(main, "__file__", None)
    if not main_file:
        return None
    return os.path.dirname(os.path.abspath(main_file))


@cache
def resolve_host_root() -> str:
    """Absolute root directory of the application using errorstack.

    Resolved once per process: ``ERRORSTACK_HOST_ROOT`` when set, else the
    directory of the ``__main__`` script, else the working directory.
    """

    configured = load_config().host_root
    if configured:
        return os.path.abspath(configured)
    return _main_module_dir() or os.getcwd()


__all__ = ["resolve_host_root", "split_path", "truncate_file_path"]
