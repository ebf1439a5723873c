"""
logevent

Logging events with lazy call-site resolution.

Responsibilities:
- Expose package version metadata and the public API.
"""

from logevent.event import ByHandle, ByName, LoggerHandle, LoggingEvent
from logevent.frames import StackFrame, capture_stack
from logevent.levels import Level
from logevent.location import LocationInfo, ResolverConfig, resolve_location
from logevent.logger import Logger
from logevent.runtime import (
    EventRuntime,
    configure,
    get_runtime,
    get_start_time,
    set_ignore_file_regex,
    set_ignore_path_regex,
)
from logevent.throwable import ThrowableInformation

__all__ = [
    "ByHandle",
    "ByName",
    "EventRuntime",
    "Level",
    "LocationInfo",
    "Logger",
    "LoggerHandle",
    "LoggingEvent",
    "ResolverConfig",
    "StackFrame",
    "ThrowableInformation",
    "__version__",
    "capture_stack",
    "configure",
    "get_runtime",
    "get_start_time",
    "resolve_location",
    "set_ignore_file_regex",
    "set_ignore_path_regex",
]

__version__ = "0.1.0"

# Anchor the default clock as close to process start as the first import allows.
get_start_time()


# --- Module Notes -----------------------------------------------------------
# Importing the package reads settings from the environment (LOGEVENT_*) once.
