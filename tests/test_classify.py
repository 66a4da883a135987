from __future__ import annotations

from errorstack.classify import LIBRARY_MARKER, classify, is_host_path, is_library_path
from errorstack.testing import make_raw_frame


def test_classify_copies_location_and_names() -> None:
    raw = make_raw_frame(
        "/app/widgets.py",
        12,
        5,
        function_name="render",
        type_name="Widget",
        method_name="render",
    )

    frame = classify(raw, LIBRARY_MARKER, "/app")

    assert frame.source_file == "/app/widgets.py"
    assert (frame.line, frame.column) == (12, 5)
    assert (frame.type_name, frame.method_name, frame.function_name) == (
        "Widget",
        "render",
        "render",
    )
    assert frame.raw is raw
    assert frame.location == "/app/widgets.py:12:5"


def test_library_frames_are_detected_by_path_segment() -> None:
    assert is_library_path("/venv/lib/python3.12/site-packages/errorstack/stack.py")
    assert is_library_path("C:\\venv\\Lib\\site-packages\\errorstack\\stack.py")
    assert not is_library_path("/app/errorstack_helpers.py")
    assert not is_library_path("/app/my-errorstack/main.py")


def test_custom_library_marker() -> None:
    raw = make_raw_frame("/opt/vendor/tracing/core.py")

    assert classify(raw, "tracing", "/app").is_library_internal
    assert not classify(raw, LIBRARY_MARKER, "/app").is_library_internal


def test_host_application_requires_exact_directory() -> None:
    assert is_host_path("/app/main.py", "/app")
    assert not is_host_path("/srv/main.py", "/app")
    assert not is_host_path("/application/main.py", "/app")


def test_host_application_match_is_shallow() -> None:
    # Files below the host root are not recognised as host frames.
    frame = classify(make_raw_frame("/app/pkg/models.py"), LIBRARY_MARKER, "/app")

    assert frame.is_host_application is False


def test_frame_can_be_both_library_and_host() -> None:
    frame = classify(make_raw_frame("/errorstack/demo.py"), LIBRARY_MARKER, "/errorstack")

    assert frame.is_library_internal
    assert frame.is_host_application


def test_missing_names_become_empty_strings() -> None:
    raw = make_raw_frame("/app/main.py")

    frame = classify(raw, LIBRARY_MARKER, "/app")

    assert frame.function_name == ""
    assert frame.type_name == ""
    assert frame.method_name == ""


def test_to_dict_omits_raw_reference() -> None:
    frame = classify(make_raw_frame("/app/main.py", 3, 1, function_name="main"), LIBRARY_MARKER, "/app")

    assert frame.to_dict() == {
        "source_file": "/app/main.py",
        "line": 3,
        "column": 1,
        "type_name": "",
        "method_name": "",
        "function_name": "main",
        "is_library_internal": False,
        "is_host_application": True,
    }
