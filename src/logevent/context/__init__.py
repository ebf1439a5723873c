"""
logevent.context

Diagnostic context stores queried (never owned) by logging events.

Responsibilities:
- Declare the store interfaces the event consumes.
- Export the default contextvars-backed implementations.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from logevent.context.mdc import MappedDiagnosticContext
from logevent.context.ndc import NestedDiagnosticContext


@runtime_checkable
class NestedContextStore(Protocol):
    def get(self) -> str | None: ...


@runtime_checkable
class KeyedContextStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def get_map(self) -> dict[str, str]: ...


__all__ = [
    "KeyedContextStore",
    "MappedDiagnosticContext",
    "NestedContextStore",
    "NestedDiagnosticContext",
]
