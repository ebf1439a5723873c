"""
tests.test_location

Call-site resolver tests.

Responsibilities:
- Exercise the outer-to-inner walk on hand-built traces (no real stack).
- Check attribution through the live stack via the Logger handle.
"""

from __future__ import annotations

import inspect
import logging

import pytest
from wrapper_helpers import log_it

from logevent import location as location_module
from logevent.event import LoggingEvent
from logevent.frames import StackFrame, capture_stack
from logevent.levels import Level
from logevent.location import LocationInfo, ResolverConfig, resolve_location
from logevent.logger import Logger
from logevent.runtime import EventRuntime

FQCN = "logevent.logger.Logger"


def _innermost_first(*oldest_first: StackFrame) -> list[StackFrame]:
    return list(reversed(oldest_first))


def test_logger_frame_is_skipped_and_caller_attributed() -> None:
    trace = _innermost_first(
        StackFrame(class_name="App", function="run", file="/x/app.py", line=10),
        StackFrame(class_name="Logger", function="info", file="/lib/logger.py", line=5),
    )

    loc = resolve_location(trace, FQCN, ResolverConfig())

    assert loc == LocationInfo(
        class_name="App", function_name="run", file_name="/x/app.py", line_number=10, fqcn=FQCN
    )


def test_wrapper_file_attributes_to_wrapper_caller() -> None:
    cfg = ResolverConfig(ignore_file_regex=r"/x/wrapper\.py$")
    trace = _innermost_first(
        StackFrame(class_name="App", function="go", file="/x/app.py", line=20),
        StackFrame(class_name="Helper", function="logIt", file="/x/wrapper.py", line=8),
        StackFrame(class_name="Logger", function="info", file="/lib/logger.py", line=5),
    )

    loc = resolve_location(trace, FQCN, cfg)

    assert (loc.file_name, loc.line_number) == ("/x/app.py", 20)
    assert (loc.class_name, loc.function_name) == ("App", "go")


def test_without_ignore_pattern_wrapper_is_the_caller() -> None:
    trace = _innermost_first(
        StackFrame(class_name="App", function="go", file="/x/app.py", line=20),
        StackFrame(class_name="Helper", function="logIt", file="/x/wrapper.py", line=8),
        StackFrame(class_name="Logger", function="info", file="/lib/logger.py", line=5),
    )

    loc = resolve_location(trace, FQCN, ResolverConfig())

    assert (loc.class_name, loc.file_name, loc.line_number) == ("Helper", "/x/wrapper.py", 8)


def test_empty_trace_yields_sentinels() -> None:
    loc = resolve_location([], FQCN, ResolverConfig())

    assert loc == LocationInfo(fqcn=FQCN)
    assert (loc.class_name, loc.function_name, loc.file_name, loc.line_number) == (
        "main",
        "main",
        "",
        0,
    )


def test_match_is_case_insensitive_and_covers_direct_subclasses() -> None:
    trace = _innermost_first(
        StackFrame(class_name="Job", function="tick", file="/x/job.py", line=3),
        StackFrame(
            class_name="AuditLogger", parent_class="LOGGER", function="audit", file="/l.py", line=1
        ),
    )

    loc = resolve_location(trace, "", ResolverConfig())

    assert (loc.class_name, loc.function_name, loc.line_number) == ("Job", "tick", 3)


def test_fqcn_simple_name_marks_framework_frames() -> None:
    trace = _innermost_first(
        StackFrame(class_name="Worker", function="run", file="/w.py", line=7),
        StackFrame(class_name="Facade", function="emit", file="/f.py", line=2),
    )

    loc = resolve_location(trace, "acme.logging.Facade", ResolverConfig())

    assert (loc.class_name, loc.line_number) == ("Worker", 7)


def test_free_function_wrapper_is_skipped() -> None:
    cfg = ResolverConfig(ignore_file_regex=r"wrapper\.py$")
    trace = _innermost_first(
        StackFrame(class_name="App", function="go", file="/x/app.py", line=20),
        StackFrame(function="log_it", file="/x/wrapper.py", line=8),
        StackFrame(class_name="Logger", function="info", file="/lib/logger.py", line=5),
    )

    loc = resolve_location(trace, FQCN, cfg)

    assert (loc.class_name, loc.function_name, loc.file_name, loc.line_number) == (
        "App",
        "go",
        "/x/app.py",
        20,
    )


def test_classless_frames_are_not_framework_frames() -> None:
    trace = _innermost_first(
        StackFrame(function="logger", file="/x/script.py", line=3),
        StackFrame(function="emit", file="/x/util.py", line=9),
    )

    loc = resolve_location(trace, "Logger", ResolverConfig(logger_base_name="logger"))

    assert (loc.function_name, loc.file_name, loc.line_number) == ("emit", "/x/util.py", 9)


def test_exhausted_walk_uses_innermost_frame() -> None:
    trace = _innermost_first(
        StackFrame(class_name="A", function="outer", file="/a.py", line=1),
        StackFrame(class_name="B", function="inner", file="/b.py", line=2),
    )

    loc = resolve_location(trace, FQCN, ResolverConfig())

    assert (loc.class_name, loc.function_name, loc.file_name, loc.line_number) == (
        "B",
        "inner",
        "/b.py",
        2,
    )


def test_module_level_and_inclusion_functions_report_main() -> None:
    for fn in ("<module>", "include", "include_once", "require", "require_once", None):
        trace = _innermost_first(
            StackFrame(function=fn, file="/x/script.py", line=4),
            StackFrame(class_name="Logger", function="info", file="/lib/logger.py", line=5),
        )

        loc = resolve_location(trace, FQCN, ResolverConfig())

        assert (loc.class_name, loc.function_name, loc.line_number) == ("main", "main", 4)


def test_logger_as_outermost_frame_has_no_caller() -> None:
    trace = [StackFrame(class_name="Logger", function="info", file="/lib/logger.py", line=5)]

    loc = resolve_location(trace, FQCN, ResolverConfig())

    assert loc == LocationInfo(fqcn=FQCN)


def test_ignore_path_regex_strips_prefix() -> None:
    trace = _innermost_first(
        StackFrame(class_name="App", function="run", file="/home/me/proj/src/app.py", line=10),
        StackFrame(class_name="Logger", function="info", file="/lib/logger.py", line=5),
    )

    keep_src = resolve_location(trace, FQCN, ResolverConfig(ignore_path_regex=r"^.*/(src/)"))
    base_only = resolve_location(trace, FQCN, ResolverConfig(ignore_path_regex=r"^.*/([^/]+)$"))
    no_group = resolve_location(trace, FQCN, ResolverConfig(ignore_path_regex=r"^/home/me/"))

    assert keep_src.file_name == "src/app.py"
    assert base_only.file_name == "app.py"
    assert no_group.file_name == "proj/src/app.py"


def test_config_setters_affect_later_resolutions_only(runtime: EventRuntime) -> None:
    event = LoggingEvent(FQCN, "app", Level.INFO, "m", runtime=runtime)
    first = event.location_info

    runtime.resolver.set_ignore_path_regex(r"^.*/([^/]+)$")

    assert event.location_info is first
    assert runtime.resolver.strip_path("/a/b/c.py") == "c.py"
    runtime.resolver.set_ignore_path_regex(None)
    assert runtime.resolver.strip_path("/a/b/c.py") == "/a/b/c.py"


def test_full_info_uses_na_for_missing_pieces() -> None:
    assert LocationInfo("App", "run", "/x/app.py", 10).full_info == "App.run(/x/app.py:10)"
    assert LocationInfo().full_info == "main.main(NA:NA)"


class _RecordingLog:
    def __init__(self, level: int) -> None:
        self.level = level
        self.events: list[str] = []

    def isEnabledFor(self, level: int) -> bool:
        return level >= self.level

    def debug(self, event: str, **kw: object) -> None:
        self.events.append(event)


@pytest.mark.parametrize("level, expected", [(logging.WARNING, []), (logging.DEBUG, ["location.resolved"])])
def test_resolution_debug_log_only_when_enabled(
    monkeypatch: pytest.MonkeyPatch, level: int, expected: list[str]
) -> None:
    recorder = _RecordingLog(level)
    monkeypatch.setattr(location_module, "log", recorder)
    trace = [StackFrame(class_name="App", function="run", file="/x/app.py", line=1)]

    resolve_location(trace, FQCN, ResolverConfig())

    assert recorder.events == expected


# -- live stack ---------------------------------------------------------------


class AuditLogger(Logger):
    def audit(self, message: str) -> LoggingEvent:
        return self.log(Level.INFO, message)


class CheckoutService:
    def place_order(self, logger: Logger) -> int:
        line = inspect.currentframe().f_lineno + 1
        log_it(logger, "order placed")
        return line


class TestLiveStack:
    def test_capture_stack_starts_at_caller(self) -> None:
        trace = capture_stack()

        assert trace[0].function == "test_capture_stack_starts_at_caller"
        assert trace[0].class_name == "TestLiveStack"
        assert trace[0].file == __file__

    def test_logger_call_site_is_resolved(self, runtime: EventRuntime) -> None:
        seen: list[LocationInfo] = []
        logger = Logger("app", runtime=runtime, handlers=[lambda e: seen.append(e.location_info)])

        line = inspect.currentframe().f_lineno + 1
        event = logger.info("hello")

        assert seen[0] is event.location_info
        assert seen[0].class_name == "TestLiveStack"
        assert seen[0].function_name == "test_logger_call_site_is_resolved"
        assert seen[0].file_name == __file__
        assert seen[0].line_number == line
        assert seen[0].fqcn == Logger.FQCN

    def test_subclass_methods_are_framework_frames(self, runtime: EventRuntime) -> None:
        seen: list[LocationInfo] = []
        logger = AuditLogger("audit", runtime=runtime, handlers=[lambda e: seen.append(e.location_info)])

        line = inspect.currentframe().f_lineno + 1
        logger.audit("who did what")

        assert seen[0].function_name == "test_subclass_methods_are_framework_frames"
        assert seen[0].line_number == line

    def test_path_prefix_stripping_on_live_stack(self, runtime: EventRuntime) -> None:
        seen: list[LocationInfo] = []
        logger = Logger("app", runtime=runtime, handlers=[lambda e: seen.append(e.location_info)])
        runtime.resolver.set_ignore_path_regex(r"^.*/([^/]+)$")

        line = inspect.currentframe().f_lineno + 1
        logger.warn("short path")

        assert seen[0].file_name == "test_location.py"
        assert seen[0].line_number == line

    def test_free_function_wrapper_on_live_stack(self, runtime: EventRuntime) -> None:
        seen: list[LocationInfo] = []
        logger = Logger("app", runtime=runtime, handlers=[lambda e: seen.append(e.location_info)])
        runtime.resolver.set_ignore_file_regex(r"/wrapper_helpers\.py$")

        line = CheckoutService().place_order(logger)

        loc = seen[0]
        assert (loc.class_name, loc.function_name) == ("CheckoutService", "place_order")
        assert loc.file_name == __file__
        assert loc.line_number == line


# --- Module Notes -----------------------------------------------------------
# Hand-built traces are innermost-first, matching `capture_stack`; `_innermost_first`
# lets each case be written oldest-first for readability.
