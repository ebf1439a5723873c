"""
logevent.throwable

Wrapper around an exception attached to a logging event.
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ThrowableInformation:
    throwable: BaseException

    def string_representation(self) -> list[str]:
        """
        Formatted traceback, one entry per line (chained causes included).
        """

        lines: list[str] = []
        for chunk in traceback.format_exception(self.throwable):
            lines.extend(chunk.rstrip("\n").split("\n"))
        return lines

    @property
    def previous(self) -> ThrowableInformation | None:
        prev = self.throwable.__cause__ or self.throwable.__context__
        return ThrowableInformation(prev) if prev is not None else None
