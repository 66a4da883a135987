"""
Pytest configuration for errorstack tests.

Provides recording doubles for the display sink and process exit, and keeps
process-wide state (host root cache, excepthook, default reporter) isolated
between tests.
"""

import sys

import pytest

from errorstack import reporter as reporter_module
from errorstack.config import ErrorStackConfig
from errorstack.paths import resolve_host_root
from errorstack.reporter import StackReporter
from errorstack.testing import ExitRecorder, RecordingSink

HOST_ROOT = "/app"


@pytest.fixture(autouse=True)
def _isolate_process_state(monkeypatch: pytest.MonkeyPatch):
    resolve_host_root.cache_clear()
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    monkeypatch.setattr(reporter_module, "_default_reporter", None)
    for key in (
        "ERRORSTACK_HOST_ROOT",
        "ERRORSTACK_PATH_SEGMENTS",
        "ERRORSTACK_EXIT_CODE",
        "ERRORSTACK_DEBUG",
    ):
        monkeypatch.delenv(key, raising=False)
    yield
    resolve_host_root.cache_clear()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def exit_recorder() -> ExitRecorder:
    return ExitRecorder()


@pytest.fixture
def make_reporter(sink: RecordingSink, exit_recorder: ExitRecorder):
    def _make(host_root: str = HOST_ROOT, **config: object) -> StackReporter:
        return StackReporter(
            host_root=host_root,
            sink=sink,
            exit_process=exit_recorder,
            config=ErrorStackConfig(**config),
        )

    return _make
