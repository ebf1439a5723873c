"""
logevent.event

The logging event: an immutable snapshot of a single logging call.

Responsibilities:
- Capture logger name, level, message, timestamp and optional exception at construction.
- Compute the expensive fields (rendered message, location, process id, nested context)
  lazily, exactly once, and keep them for the life of the event.
- Define what survives serialization (pickle and `LoggingEventRecord`).
"""

from __future__ import annotations

import numbers
import os
from dataclasses import dataclass
from functools import cached_property
from typing import Any, Protocol, runtime_checkable

from logevent.frames import capture_stack
from logevent.levels import Level
from logevent.location import LocationInfo, resolve_location
from logevent.observability.logging import get_logger
from logevent.records import LocationRecord, LoggingEventRecord
from logevent.runtime import EventRuntime, get_runtime
from logevent.throwable import ThrowableInformation

log = get_logger(__name__)


@runtime_checkable
class LoggerHandle(Protocol):
    name: str


@dataclass(frozen=True, slots=True)
class ByHandle:
    handle: LoggerHandle


@dataclass(frozen=True, slots=True)
class ByName:
    name: str


LoggerRef = ByHandle | ByName


def logger_ref(logger: Any) -> LoggerRef:
    # Anything exposing `name` is a handle; everything else is coerced to its str().
    if isinstance(logger, LoggerHandle):
        return ByHandle(logger)
    return ByName(str(logger))


def _is_numeric(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


class LoggingEvent:
    """
    Everything except the timestamp is filled when actually needed.

    Memoized fields are `cached_property` values: once present in the instance dict they
    are never recomputed. A racing first access from two threads recomputes an equal
    value, which is harmless.
    """

    def __init__(
        self,
        fqcn: str,
        logger: Any,
        level: Level,
        message: Any,
        timestamp: Any = None,
        throwable: Any = None,
        *,
        runtime: EventRuntime | None = None,
    ) -> None:
        self._runtime = runtime or get_runtime()
        self._fqcn = fqcn

        ref = logger_ref(logger)
        match ref:
            case ByHandle(handle):
                self._logger: LoggerHandle | None = handle
                self._logger_name = str(handle.name)
            case ByName(name):
                self._logger = None
                self._logger_name = name

        self._level = level
        self._message = message
        self._timestamp = timestamp if _is_numeric(timestamp) else self._runtime.clock.now()

        self._throwable_info: ThrowableInformation | None = None
        if isinstance(throwable, BaseException):
            self._throwable_info = ThrowableInformation(throwable)
        elif throwable is not None:
            log.debug("event.throwable.ignored", type=type(throwable).__name__)

        # True until the nested context store has been queried once.
        self._ndc_lookup_required = True
        self._ndc: str | None = None

    # -- plain accessors ------------------------------------------------------

    @property
    def fqcn(self) -> str:
        return self._fqcn

    @property
    def logger(self) -> LoggerHandle | None:
        return self._logger

    @property
    def logger_name(self) -> str:
        return self._logger_name

    @property
    def level(self) -> Level:
        return self._level

    @property
    def message(self) -> Any:
        return self._message

    @property
    def timestamp(self) -> Any:
        return self._timestamp

    @property
    def throwable_info(self) -> ThrowableInformation | None:
        return self._throwable_info

    @property
    def runtime(self) -> EventRuntime:
        return self._runtime

    # -- memoized fields ------------------------------------------------------

    @cached_property
    def rendered_message(self) -> str | None:
        """
        The message as text. Non-string payloads go through the runtime's renderer once;
        renderer errors propagate and nothing is cached.
        """

        if self._message is None or isinstance(self._message, str):
            return self._message
        return self._runtime.renderer.find_and_render(self._message)

    @cached_property
    def thread_name(self) -> str:
        # No thread naming here: the process id stands in for it.
        return str(os.getpid())

    @cached_property
    def location_info(self) -> LocationInfo:
        """
        Caller attribution, resolved from the live stack on first access.

        Must first be read while the logging call is still on the stack (i.e. by a
        handler); afterwards the cached record is returned.
        """

        return resolve_location(capture_stack(), self._fqcn, self._runtime.resolver)

    @property
    def ndc(self) -> str | None:
        if self._ndc_lookup_required:
            self._ndc_lookup_required = False
            self._ndc = self._runtime.ndc.get()
        return self._ndc

    # -- pass-through queries -------------------------------------------------

    def mdc(self, key: str) -> str | None:
        # Not cached: always reflects the store at call time.
        return self._runtime.mdc.get(key)

    def mdc_map(self) -> dict[str, str]:
        return self._runtime.mdc.get_map()

    # -- timing ---------------------------------------------------------------

    @property
    def relative_time(self) -> float:
        """
        Seconds between the process clock anchor and this event.
        """

        return self._timestamp - self._runtime.clock.start_time

    @property
    def relative_time_millis(self) -> int:
        return int(round(self.relative_time * 1000))

    # -- serialization --------------------------------------------------------

    def __getstate__(self) -> dict[str, Any]:
        state = self.__dict__.copy()
        # The handle, the runtime (locks, contextvars) and live exceptions stay local.
        state.pop("_runtime", None)
        state["_logger"] = None
        state["_throwable_info"] = None
        # The receiver must consult its own nested context, not trust ours.
        state["_ndc_lookup_required"] = True
        return state

    def __setstate__(self, state: dict[str, Any]) -> None:
        self.__dict__.update(state)
        self._runtime = get_runtime()

    def to_record(self) -> LoggingEventRecord:
        """
        JSON-safe snapshot. Renders the message if that has not happened yet; the
        location is included only when already resolved.
        """

        location = self.__dict__.get("location_info")
        return LoggingEventRecord(
            fqcn=self._fqcn,
            logger_name=self._logger_name,
            level=getattr(self._level, "name", str(self._level)),
            message=self.rendered_message,
            timestamp=float(self._timestamp),
            thread_name=self.thread_name,
            ndc=None if self._ndc_lookup_required else self._ndc,
            location=(
                LocationRecord(
                    class_name=location.class_name,
                    function_name=location.function_name,
                    file_name=location.file_name,
                    line_number=location.line_number,
                )
                if location is not None
                else None
            ),
            throwable=(
                self._throwable_info.string_representation()
                if self._throwable_info is not None
                else None
            ),
        )

    @classmethod
    def from_record(
        cls, record: LoggingEventRecord | dict[str, Any], *, runtime: EventRuntime | None = None
    ) -> LoggingEvent:
        """
        Rehydrate a transported event. The nested context lookup starts over on this side.
        """

        if not isinstance(record, LoggingEventRecord):
            record = LoggingEventRecord.model_validate(record)
        event = cls(
            record.fqcn,
            record.logger_name,
            Level.of(record.level),
            record.message,
            timestamp=record.timestamp,
            runtime=runtime,
        )
        event.__dict__["thread_name"] = record.thread_name
        event._ndc = record.ndc
        if record.location is not None:
            event.__dict__["location_info"] = LocationInfo(
                class_name=record.location.class_name,
                function_name=record.location.function_name,
                file_name=record.location.file_name,
                line_number=record.location.line_number,
                fqcn=record.fqcn,
            )
        return event

    def __repr__(self) -> str:
        return (
            f"LoggingEvent(logger={self._logger_name!r}, level={self._level!s}, "
            f"timestamp={self._timestamp!r})"
        )


# --- Module Notes -----------------------------------------------------------
# Events are built by `logevent.logger.Logger` and handed to handlers by reference;
# handlers only read them.
