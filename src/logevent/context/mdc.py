"""
logevent.context.mdc

Mapped (keyed) diagnostic context (MDC).

Responsibilities:
- Store key/value context for the current execution context.
- Share storage with `structlog.contextvars` so MDC keys also enrich structured logs.
- Only ever report, remove or clear the keys this store bound itself.
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Any

import structlog


class MappedDiagnosticContext:
    """
    Thin facade over structlog's contextvars.

    Keys the host binds directly (e.g. a request_id from middleware) are neither reported
    by `get`/`get_map` nor removed by `clear`. Values are stored as strings; the map
    returned by `get_map()` is a snapshot copy.
    """

    def __init__(self, *, name: str = "logevent_mdc_keys") -> None:
        self._keys: ContextVar[frozenset[str]] = ContextVar(name, default=frozenset())

    def put(self, key: str, value: Any) -> None:
        structlog.contextvars.bind_contextvars(**{key: str(value)})
        self._keys.set(self._keys.get() | {key})

    def get(self, key: str) -> str | None:
        if key not in self._keys.get():
            return None
        value = structlog.contextvars.get_contextvars().get(key)
        return None if value is None else str(value)

    def get_map(self) -> dict[str, str]:
        bound = structlog.contextvars.get_contextvars()
        return {k: str(bound[k]) for k in self._keys.get() if k in bound}

    def remove(self, key: str) -> None:
        keys = self._keys.get()
        if key in keys:
            structlog.contextvars.unbind_contextvars(key)
            self._keys.set(keys - {key})

    def clear(self) -> None:
        keys = self._keys.get()
        if keys:
            structlog.contextvars.unbind_contextvars(*keys)
        self._keys.set(frozenset())


# --- Module Notes -----------------------------------------------------------
# A host `structlog.contextvars.clear_contextvars()` also drops MDC values; the key set
# is filtered against what is still bound, so stale keys are never reported.
