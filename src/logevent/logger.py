"""
logevent.logger

Named logger handle that produces logging events.

Responsibilities:
- Build a LoggingEvent per call, tagged with this class as the framework entry point.
- Hand each event, by reference, to the registered handlers.

Note:
- Level filtering and output are handler concerns; this handle does neither.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from logevent.event import LoggingEvent
from logevent.levels import Level
from logevent.runtime import EventRuntime

Handler = Callable[[LoggingEvent], None]


class Logger:
    # The resolver treats frames of this class (and of direct subclasses) as framework code.
    FQCN = "logevent.logger.Logger"

    def __init__(
        self,
        name: str,
        *,
        runtime: EventRuntime | None = None,
        handlers: list[Handler] | None = None,
    ) -> None:
        self.name = name
        self._runtime = runtime
        self._handlers: list[Handler] = list(handlers or [])

    def add_handler(self, handler: Handler) -> None:
        self._handlers.append(handler)

    def remove_handler(self, handler: Handler) -> None:
        self._handlers.remove(handler)

    def log(self, level: Level, message: Any, throwable: Any = None) -> LoggingEvent:
        event = LoggingEvent(
            self.FQCN, self, level, message, throwable=throwable, runtime=self._runtime
        )
        # Handlers run while the caller is still on the stack, so they can resolve location.
        for handler in self._handlers:
            handler(event)
        return event

    def trace(self, message: Any, throwable: Any = None) -> LoggingEvent:
        return self.log(Level.TRACE, message, throwable)

    def debug(self, message: Any, throwable: Any = None) -> LoggingEvent:
        return self.log(Level.DEBUG, message, throwable)

    def info(self, message: Any, throwable: Any = None) -> LoggingEvent:
        return self.log(Level.INFO, message, throwable)

    def warn(self, message: Any, throwable: Any = None) -> LoggingEvent:
        return self.log(Level.WARN, message, throwable)

    def error(self, message: Any, throwable: Any = None) -> LoggingEvent:
        return self.log(Level.ERROR, message, throwable)

    def fatal(self, message: Any, throwable: Any = None) -> LoggingEvent:
        return self.log(Level.FATAL, message, throwable)

    def __repr__(self) -> str:
        return f"Logger({self.name!r})"


# --- Module Notes -----------------------------------------------------------
# Handlers that render location must read `event.location_info` inside the call; the
# returned event only carries whatever was resolved by then.
