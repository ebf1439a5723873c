"""
logevent.location

Call-site resolution for logging events.

Responsibilities:
- Hold the process-wide resolver configuration (wrapper files, path prefix stripping).
- Walk a captured trace outer-to-inner and attribute the log call to the first
  frame that is not part of the logging framework.
- Represent the result as an immutable location record.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass

from logevent.frames import StackFrame
from logevent.observability.logging import get_logger

log = get_logger(__name__)

LOCATION_INFO_NA = "NA"
MAIN = "main"

# Pseudo-functions that mean "top level of a file", never a real caller name.
_INCLUSION_FUNCTIONS = frozenset(
    {"include", "include_once", "require", "require_once", "<module>"}
)


@dataclass(frozen=True, slots=True)
class LocationInfo:
    class_name: str = MAIN
    function_name: str = MAIN
    file_name: str = ""
    line_number: int = 0
    fqcn: str = ""

    @property
    def full_info(self) -> str:
        # e.g. "App.run(/x/app.py:10)"
        return "{}.{}({}:{})".format(
            self.class_name or LOCATION_INFO_NA,
            self.function_name or LOCATION_INFO_NA,
            self.file_name or LOCATION_INFO_NA,
            self.line_number or LOCATION_INFO_NA,
        )


class ResolverConfig:
    """
    Mutable resolver settings shared by every event built on the same runtime.

    Changes affect later resolutions only; already cached locations are kept.
    """

    def __init__(
        self,
        *,
        ignore_file_regex: str | re.Pattern[str] | None = None,
        ignore_path_regex: str | re.Pattern[str] | None = None,
        logger_base_name: str = "Logger",
    ) -> None:
        self._ignore_file: re.Pattern[str] | None = _compile(ignore_file_regex)
        self._ignore_path: re.Pattern[str] | None = _compile(ignore_path_regex)
        self.logger_base_name = logger_base_name

    @property
    def ignore_file_regex(self) -> re.Pattern[str] | None:
        return self._ignore_file

    @property
    def ignore_path_regex(self) -> re.Pattern[str] | None:
        return self._ignore_path

    def set_ignore_file_regex(self, regex: str | re.Pattern[str] | None) -> None:
        """
        Files holding the application's own logging wrappers, e.g. r"/my_log_wrapper\\.py$".
        """

        self._ignore_file = _compile(regex)
        log.info("resolver.ignore_file_regex.set", pattern=_pattern_text(self._ignore_file))

    def set_ignore_path_regex(self, regex: str | re.Pattern[str] | None) -> None:
        """
        Shortens reported files: each match is replaced by its first group, e.g.
        r"^.*/(src/)" keeps "src/..." and r"^.*/([^/]+)$" keeps the base name.
        """

        self._ignore_path = _compile(regex)
        log.info("resolver.ignore_path_regex.set", pattern=_pattern_text(self._ignore_path))

    def is_wrapper_file(self, file: str | None) -> bool:
        return file is not None and self._ignore_file is not None and bool(
            self._ignore_file.search(file)
        )

    def strip_path(self, file: str | None) -> str:
        if not file:
            return ""
        if self._ignore_path is None:
            return file
        pattern = self._ignore_path
        return pattern.sub(lambda m: (m.group(1) or "") if pattern.groups else "", file)


def _compile(regex: str | re.Pattern[str] | None) -> re.Pattern[str] | None:
    if regex is None or isinstance(regex, re.Pattern):
        return regex
    return re.compile(regex)


def _pattern_text(pattern: re.Pattern[str] | None) -> str | None:
    return pattern.pattern if pattern is not None else None


def _framework_names(fqcn: str, config: ResolverConfig) -> frozenset[str]:
    names = {config.logger_base_name.lower()}
    if fqcn:
        names.add(fqcn.rsplit(".", 1)[-1].lower())
    return frozenset(names)


def resolve_location(
    trace: Sequence[StackFrame], fqcn: str, config: ResolverConfig
) -> LocationInfo:
    """
    Attribute a log call to its real caller.

    `trace` is innermost-first (as returned by `capture_stack`). The walk runs from the
    oldest frame inward and stops at the first wrapper-file frame or framework frame;
    the frame examined just before it is the caller. Never raises.
    """

    framework = _framework_names(fqcn, config)
    previous: StackFrame | None = None
    matched = False

    for frame in reversed(trace):
        # Wrapper helpers are often plain functions, so the file test needs no class.
        if config.is_wrapper_file(frame.file):
            matched = True
            break
        if frame.class_name and (
            frame.class_name.lower() in framework
            or (frame.parent_class or "").lower() in framework
        ):
            matched = True
            break
        previous = frame

    # Both stop cases, and an exhausted walk, attribute to the last non-matching frame.
    source = previous
    file_name = config.strip_path(source.file) if source is not None else ""
    line_number = (source.line or 0) if source is not None else 0

    class_name = source.class_name if source is not None and source.class_name else MAIN
    function = source.function if source is not None else None
    function_name = function if function and function not in _INCLUSION_FUNCTIONS else MAIN

    location = LocationInfo(
        class_name=class_name,
        function_name=function_name,
        file_name=file_name,
        line_number=line_number,
        fqcn=fqcn,
    )
    if log.isEnabledFor(logging.DEBUG):
        log.debug(
            "location.resolved",
            matched=matched,
            depth=len(trace),
            location=location.full_info,
        )
    return location


# --- Module Notes -----------------------------------------------------------
# A Python frame's line is where it is currently executing, so both stop cases (wrapper
# file and framework frame) read file/line from the frame just outside the match.
