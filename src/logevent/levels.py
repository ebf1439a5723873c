"""
logevent.levels

Ordered severity levels consulted (read-only) by logging events.

Responsibilities:
- Define the level values and their ordering.
- Resolve a level from its name when rehydrating transported events.
"""

from __future__ import annotations

from enum import IntEnum


class Level(IntEnum):
    OFF = 2147483647
    FATAL = 50000
    ERROR = 40000
    WARN = 30000
    INFO = 20000
    DEBUG = 10000
    TRACE = 5000
    ALL = -2147483647

    def is_greater_or_equal(self, other: Level) -> bool:
        return self >= other

    @classmethod
    def of(cls, name: str, default: Level | None = None) -> Level:
        """
        Case-insensitive lookup by name; `WARNING` is accepted for `WARN`.
        Falls back to `default` (or `DEBUG`) for unknown names.
        """

        key = name.strip().upper()
        if key == "WARNING":
            key = "WARN"
        try:
            return cls[key]
        except KeyError:
            return default if default is not None else cls.DEBUG

    def __str__(self) -> str:
        return self.name


# --- Module Notes -----------------------------------------------------------
# Filtering on these values belongs to the logger hierarchy, not to the event.
