"""
errorstack - readable call stacks for Python applications.

Captures the interpreter stack on demand or when an exception goes uncaught,
tags every frame with its provenance (errorstack itself, the host application,
or native runtime code) and renders the result as a tree on the terminal.

Example:
    >>> import errorstack
    >>> errorstack.catch_exceptions()  # render uncaught errors, then exit(1)
    >>>
    >>> errorstack.capture()
    >>> frames = errorstack.get_stack()
    >>> errorstack.render_stack(errorstack.clean_stack(frames))
"""

from loguru import logger as _loguru_logger

from errorstack.classify import LIBRARY_MARKER, classify
from errorstack.config import ErrorStackConfig, load_config
from errorstack.display import (
    DisplaySink,
    DisplayTree,
    FaultHeader,
    FrameEntry,
    build_display_tree,
    format_display_tree,
    render,
)
from errorstack.errors import ErrorStackError, ShapeViolationWarning, UncapturedStackError
from errorstack.native import CallSite, capture_raw, parse_fault_trace
from errorstack.paths import resolve_host_root, truncate_file_path
from errorstack.reporter import (
    StackReporter,
    capture,
    catch_exceptions,
    clean_stack,
    default_reporter,
    get_stack,
    parse_error,
    render_stack,
)
from errorstack.stack import filter_stack, normalize, verify_shape
from errorstack.types import UNCAPTURED, CapturedFault, Frame, RawFrame

# Quiet by default; ERRORSTACK_DEBUG=1 turns the sink logs back on.
_loguru_logger.disable("errorstack")
if load_config().debug:
    _loguru_logger.enable("errorstack")

__version__ = "0.1.0"

__all__ = [
    "LIBRARY_MARKER",
    "UNCAPTURED",
    "CallSite",
    "CapturedFault",
    "DisplaySink",
    "DisplayTree",
    "ErrorStackConfig",
    "ErrorStackError",
    "FaultHeader",
    "Frame",
    "FrameEntry",
    "RawFrame",
    "ShapeViolationWarning",
    "StackReporter",
    "UncapturedStackError",
    "build_display_tree",
    "capture",
    "capture_raw",
    "catch_exceptions",
    "classify",
    "clean_stack",
    "default_reporter",
    "filter_stack",
    "format_display_tree",
    "get_stack",
    "load_config",
    "normalize",
    "parse_error",
    "parse_fault_trace",
    "render",
    "render_stack",
    "resolve_host_root",
    "truncate_file_path",
    "verify_shape",
]
