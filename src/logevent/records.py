"""
logevent.records

Transport schema for logging events (Pydantic).

Responsibilities:
- Define the JSON-safe shape an event takes when it crosses a process or storage boundary.
- Validate records coming back in before they are rehydrated into events.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LocationRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    class_name: str
    function_name: str
    file_name: str = ""
    line_number: int = 0


class LoggingEventRecord(BaseModel):
    """
    Snapshot of an event's transportable fields.

    Excluded: the logger handle (not transportable) and the nested-context lookup flag
    (receivers always look the nested context up again).
    """

    model_config = ConfigDict(frozen=True)

    fqcn: str
    logger_name: str
    level: str
    message: str | None = None
    timestamp: float
    thread_name: str
    # Value seen by the producer, when it had looked it up.
    ndc: str | None = None
    location: LocationRecord | None = None
    throwable: list[str] | None = Field(default=None, description="Formatted traceback lines.")


# --- Module Notes -----------------------------------------------------------
# `LoggingEvent.to_record` / `LoggingEvent.from_record` convert to and from this model.
