"""
logevent.clock

Process clock anchor used for relative event times.

Responsibilities:
- Record the wall-clock instant of the first read, exactly once.
- Give every reader the same value, including under concurrent first reads.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable

from logevent.observability.logging import get_logger

log = get_logger(__name__)


class ProcessClock:
    """
    Lazily initialized, never reset.

    The anchor is whatever the wall clock says on the first `start_time` read, so an
    event constructed before that read can report a relative time near zero or
    slightly negative.
    """

    def __init__(self, *, now: Callable[[], float] = time.time) -> None:
        self._now = now
        self._start: float | None = None
        self._lock = threading.Lock()

    @property
    def start_time(self) -> float:
        start = self._start
        if start is not None:
            return start
        with self._lock:
            # Double-checked: a concurrent first reader may have won the race.
            if self._start is None:
                self._start = self._now()
                log.debug("clock.anchor.initialized", start_time=self._start)
            return self._start

    @property
    def is_anchored(self) -> bool:
        return self._start is not None

    def now(self) -> float:
        return self._now()


# --- Module Notes -----------------------------------------------------------
# The default runtime reads `start_time` once at import so the anchor sits close to
# process start.
