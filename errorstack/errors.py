from __future__ import annotations


class ErrorStackError(Exception):
    """Base class for errors raised by errorstack."""


class UncapturedStackError(ErrorStackError, RuntimeError):
    """Raised when the current stack is requested before anything was captured."""

    def __init__(self) -> None:
        super().__init__(
            "Cannot get trace from a non-captured stack\n"
            "Hint: call `capture_now()` or `parse_fault(exc)` before `current_stack()`"
        )


class ShapeViolationWarning(RuntimeWarning):
    """A frame-sequence consumer received a stack that was never normalized."""


__all__ = ["ErrorStackError", "ShapeViolationWarning", "UncapturedStackError"]
