"""Capture and report controller.

A ``StackReporter`` owns the "current raw stack" and "captured fault" slots. Each
capture replaces the previous one; nothing accumulates across calls.

Usage:
    from errorstack import StackReporter

    reporter = StackReporter().install_fault_handler()

    # or, without terminating the process:
    try:
        run()
    except Exception as exc:
        reporter.render(filter_stack(reporter.parse_fault(exc)), CapturedFault.from_exception(exc))

Module-level helpers (``capture``, ``catch_exceptions``, ``get_stack`` ...) drive a
lazily created process-default reporter.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Sequence
from types import TracebackType
from typing import Any

from errorstack.classify import LIBRARY_MARKER
from errorstack.config import ErrorStackConfig, load_config
from errorstack.display import DisplaySink, render
from errorstack.errors import UncapturedStackError
from errorstack.native import capture_raw, parse_fault_trace
from errorstack.stack import filter_stack, normalize
from errorstack.types import UNCAPTURED, CapturedFault, Frame, RawFrame, Uncaptured

logger = logging.getLogger(__name__)

ExceptHook = Callable[[type[BaseException], BaseException, TracebackType | None], Any]
FaultHandler = Callable[[CapturedFault], Any]


class StackReporter:
    """Holds the current capture and drives normalize -> filter -> render."""

    def __init__(
        self,
        *,
        host_root: str | None = None,
        library_marker: str = LIBRARY_MARKER,
        sink: DisplaySink | None = None,
        exit_process: Callable[[int], Any] = sys.exit,
        config: ErrorStackConfig | None = None,
    ) -> None:
        self.config = load_config() if config is None else config
        self.host_root = host_root
        self.library_marker = library_marker
        self.sink = sink
        self.current_raw_stack: list[RawFrame] | Uncaptured = UNCAPTURED
        self.captured_fault: CapturedFault | None = None
        self._exit = exit_process
        self._fault_handler: FaultHandler = self._exit_after_fault
        self._previous_hook: ExceptHook | None = None
        self._installed = False

    # ------------------------------------------------------------------
    # Capture
    # ------------------------------------------------------------------

    def capture_now(self, skip: int = 0) -> None:
        """Snapshot the caller's stack, replacing any earlier capture."""

        self.current_raw_stack = capture_raw(skip=skip + 1)
        if self.config.debug:
            logger.debug("captured %d raw frames", len(self.current_raw_stack))

    def parse_fault(self, fault: BaseException) -> list[Frame]:
        """Adopt the trace carried by ``fault`` as the current stack and normalize it."""

        self.current_raw_stack = parse_fault_trace(fault)
        if self.config.debug:
            logger.debug(
                "parsed %d raw frames from %s",
                len(self.current_raw_stack),
                type(fault).__name__,
            )
        return self.current_stack()

    def current_stack(self) -> list[Frame]:
        if self.current_raw_stack is UNCAPTURED:
            raise UncapturedStackError()
        return normalize(
            self.current_raw_stack,
            library_marker=self.library_marker,
            host_root=self.host_root,
        )

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, frames: Sequence[Frame], fault: CapturedFault | None = None) -> None:
        render(frames, fault, sink=self.sink, segments=self.config.path_segments)

    def render_current(self, *, host_only: bool = False) -> None:
        frames = self.current_stack()
        if host_only:
            frames = filter_stack(frames)
        self.render(frames, self.captured_fault)

    # ------------------------------------------------------------------
    # Uncaught faults
    # ------------------------------------------------------------------

    def on_uncaptured_fault(self, handler: FaultHandler) -> FaultHandler:
        """Register what happens after an uncaught fault is rendered.

        Replaces the default, which exits with ``config.exit_code``.
        """

        self._fault_handler = handler
        return handler

    def _exit_after_fault(self, fault: CapturedFault) -> None:
        self._exit(self.config.exit_code)

    def handle_fault(
        self,
        exc_type: type[BaseException],
        exc: BaseException,
        tb: TracebackType | None,
    ) -> None:
        if issubclass(exc_type, KeyboardInterrupt):
            (self._previous_hook or sys.__excepthook__)(exc_type, exc, tb)
            return

        if exc.__traceback__ is None and tb is not None:
            exc = exc.with_traceback(tb)

        self.captured_fault = CapturedFault.from_exception(exc)
        logger.error("uncaught %s", self.captured_fault.display_text)

        frames = filter_stack(self.parse_fault(exc))
        self.render(frames, self.captured_fault)
        self._fault_handler(self.captured_fault)

    def install_fault_handler(self) -> StackReporter:
        """Route uncaught exceptions through this reporter via ``sys.excepthook``.

        Installing again replaces whatever hook is current with this reporter's;
        the hook seen at first installation is the one ``uninstall_fault_handler``
        restores.
        """

        if not self._installed:
            self._previous_hook = sys.excepthook
        sys.excepthook = self.handle_fault
        self._installed = True
        logger.debug("fault handler installed")
        return self

    def uninstall_fault_handler(self) -> None:
        if not self._installed:
            return
        if sys.excepthook == self.handle_fault:
            sys.excepthook = self._previous_hook or sys.__excepthook__
        self._installed = False
        self._previous_hook = None
        logger.debug("fault handler removed")


_default_reporter: StackReporter | None = None


def default_reporter() -> StackReporter:
    global _default_reporter
    if _default_reporter is None:
        _default_reporter = StackReporter()
    return _default_reporter


def capture() -> None:
    default_reporter().capture_now(skip=1)


def catch_exceptions() -> StackReporter:
    return default_reporter().install_fault_handler()


def get_stack() -> list[Frame]:
    return default_reporter().current_stack()


def parse_error(error: BaseException) -> list[Frame]:
    return default_reporter().parse_fault(error)


def clean_stack(frames: Sequence[Frame]) -> list[Frame]:
    return filter_stack(frames)


def render_stack(frames: Sequence[Frame]) -> None:
    reporter = default_reporter()
    reporter.render(frames, reporter.captured_fault)


__all__ = [
    "StackReporter",
    "capture",
    "catch_exceptions",
    "clean_stack",
    "default_reporter",
    "get_stack",
    "parse_error",
    "render_stack",
]
