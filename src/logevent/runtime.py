"""
logevent.runtime

Explicit handle on process-wide logging-event state.

Responsibilities:
- Bundle the resolver config, clock anchor, context stores and renderer events consume.
- Build the runtime from Settings and provide one cached process-wide default.
- Offer module-level setters for the default runtime's resolver patterns.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache

from logevent.clock import ProcessClock
from logevent.context import (
    KeyedContextStore,
    MappedDiagnosticContext,
    NestedContextStore,
    NestedDiagnosticContext,
)
from logevent.location import ResolverConfig
from logevent.observability.logging import configure_logging
from logevent.renderers import Renderer, RendererMap
from logevent.settings import Settings, get_settings


@dataclass(slots=True)
class EventRuntime:
    """
    Single object injected into every LoggingEvent.

    Events hold a reference, never a copy: changes to `resolver` are seen by
    every later location lookup of every event sharing this runtime.
    """

    resolver: ResolverConfig = field(default_factory=ResolverConfig)
    clock: ProcessClock = field(default_factory=ProcessClock)
    ndc: NestedContextStore = field(default_factory=NestedDiagnosticContext)
    mdc: KeyedContextStore = field(default_factory=MappedDiagnosticContext)
    renderer: Renderer = field(default_factory=RendererMap)

    @classmethod
    def from_settings(cls, settings: Settings) -> EventRuntime:
        return cls(
            resolver=ResolverConfig(
                ignore_file_regex=settings.ignore_file_regex,
                ignore_path_regex=settings.ignore_path_regex,
                logger_base_name=settings.logger_base_name,
            )
        )


@lru_cache(maxsize=1)
def get_runtime() -> EventRuntime:
    # Cached: there is exactly one default runtime (and clock anchor) per process.
    return EventRuntime.from_settings(get_settings())


def configure(settings: Settings | None = None, *, json_output: bool = True) -> EventRuntime:
    """
    Opt-in composition root: wire structured logging from settings and return the default runtime.
    """

    settings = settings or get_settings()
    configure_logging(
        service_name=settings.service_name, level=settings.log_level, json_output=json_output
    )
    return get_runtime()


def set_ignore_file_regex(regex: str | re.Pattern[str] | None) -> None:
    get_runtime().resolver.set_ignore_file_regex(regex)


def set_ignore_path_regex(regex: str | re.Pattern[str] | None) -> None:
    get_runtime().resolver.set_ignore_path_regex(regex)


def get_start_time() -> float:
    return get_runtime().clock.start_time


# --- Module Notes -----------------------------------------------------------
# Tests and embedded hosts build their own EventRuntime instead of mutating the default.
