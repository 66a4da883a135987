"""Environment-driven settings for errorstack."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

_TRUTHY = ("1", "true", "yes")

DEFAULT_PATH_SEGMENTS = 2
DEFAULT_EXIT_CODE = 1


def _int_setting(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(key, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True)
class ErrorStackConfig:
    host_root: str | None = None
    path_segments: int = DEFAULT_PATH_SEGMENTS
    exit_code: int = DEFAULT_EXIT_CODE
    debug: bool = False


def load_config(environ: Mapping[str, str] | None = None) -> ErrorStackConfig:
    """Read ``ERRORSTACK_*`` variables from ``environ`` (``os.environ`` by default)."""

    env = os.environ if environ is None else environ
    path_segments = _int_setting(env, "ERRORSTACK_PATH_SEGMENTS", DEFAULT_PATH_SEGMENTS)
    if path_segments < 1:
        raise ValueError(f"ERRORSTACK_PATH_SEGMENTS must be >= 1, got {path_segments}")
    return ErrorStackConfig(
        host_root=env.get("ERRORSTACK_HOST_ROOT") or None,
        path_segments=path_segments,
        exit_code=_int_setting(env, "ERRORSTACK_EXIT_CODE", DEFAULT_EXIT_CODE),
        debug=env.get("ERRORSTACK_DEBUG", "").lower() in _TRUTHY,
    )


__all__ = ["DEFAULT_EXIT_CODE", "DEFAULT_PATH_SEGMENTS", "ErrorStackConfig", "load_config"]
