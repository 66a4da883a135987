from __future__ import annotations

from pathlib import Path

from errorstack.native import CallSite, capture_raw, parse_fault_trace

THIS_FILE = Path(__file__).name


def _capture_here() -> list[CallSite]:
    return capture_raw()


def _capture_through_wrapper() -> list[CallSite]:
    return _wrapped()


def _wrapped() -> list[CallSite]:
    return capture_raw(skip=1)


class Widget:
    def render(self) -> list[CallSite]:
        return capture_raw()


def _outer() -> list[CallSite]:
    def inner() -> list[CallSite]:
        return capture_raw()

    return inner()


def _explode() -> None:
    raise ValueError("boom")


def _call_explode() -> None:
    _explode()


def test_capture_raw_starts_at_caller() -> None:
    sites = _capture_here()

    assert sites[0].function_name == "_capture_here"
    assert sites[1].function_name == "test_capture_raw_starts_at_caller"
    assert Path(sites[0].file_name).name == THIS_FILE
    assert sites[0].line_number > 0
    assert sites[0].column_number >= 1
    assert sites[0].is_native is False


def test_capture_raw_skip_drops_wrapper_frames() -> None:
    sites = _capture_through_wrapper()

    assert sites[0].function_name == "_capture_through_wrapper"


def test_method_frames_carry_type_name() -> None:
    site = Widget().render()[0]

    assert site.type_name == "Widget"
    assert site.method_name == "render"
    assert site.function_name == "render"


def test_nested_functions_have_no_type_name() -> None:
    site = _outer()[0]

    assert site.function_name == "inner"
    assert site.type_name == ""
    assert site.method_name == ""


def test_module_level_code_is_native_and_unnamed() -> None:
    namespace = {"capture_raw": capture_raw}
    exec(compile("sites = capture_raw()", "<generated>", "exec"), namespace)
    site = namespace["sites"][0]

    assert site.file_name == "<generated>"
    assert site.is_native is True
    assert site.function_name == ""


def test_parse_fault_trace_is_innermost_first() -> None:
    try:
        _call_explode()
    except ValueError as exc:
        sites = parse_fault_trace(exc)

    assert [site.function_name for site in sites] == [
        "_explode",
        "_call_explode",
        "test_parse_fault_trace_is_innermost_first",
    ]
    assert all(Path(site.file_name).name == THIS_FILE for site in sites)


def test_parse_fault_trace_without_traceback() -> None:
    assert parse_fault_trace(ValueError("never raised")) == []
