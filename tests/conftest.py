"""
tests.conftest

Shared fixtures.

Responsibilities:
- Give each test an isolated EventRuntime (own resolver config, clock and NDC stack).
- Reset process-wide context stores between tests.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog

from logevent.clock import ProcessClock
from logevent.context import NestedDiagnosticContext
from logevent.location import ResolverConfig
from logevent.renderers import RendererMap
from logevent.runtime import EventRuntime, get_runtime


@pytest.fixture(autouse=True)
def _clean_context() -> Iterator[None]:
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()
    default_ndc = get_runtime().ndc
    if isinstance(default_ndc, NestedDiagnosticContext):
        default_ndc.clear()


@pytest.fixture
def runtime() -> EventRuntime:
    return EventRuntime(
        resolver=ResolverConfig(),
        clock=ProcessClock(),
        ndc=NestedDiagnosticContext(name="test_ndc"),
        renderer=RendererMap(),
    )


class CountingRenderer:
    def __init__(self) -> None:
        self.calls = 0

    def find_and_render(self, obj: object) -> str:
        self.calls += 1
        return f"rendered#{self.calls}:{obj!r}"


@pytest.fixture
def counting_renderer() -> CountingRenderer:
    return CountingRenderer()


# --- Module Notes -----------------------------------------------------------
# MDC values live in structlog contextvars (shared with the host); the autouse reset
# keeps them from leaking between tests.
