"""
logevent.observability.logging

Structured logging configuration for the package's own diagnostics.

Responsibilities:
- Configure `structlog` (JSON or console output) when the host application asks for it.
- Provide a small wrapper for obtaining bound loggers.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog


def configure_logging(*, service_name: str, level: str, json_output: bool = True) -> None:
    """
    Route resolver/runtime diagnostics through stdlib logging with structlog processors.
    """

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.WARNING),
    )

    renderer: Any = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    # MDC values are bound as contextvars, so merge_contextvars must stay first.
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _add_static_fields(service=service_name, pid=os.getpid()),
            structlog.processors.dict_tracebacks,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _add_static_fields(**fields: Any):
    def processor(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        for key, value in fields.items():
            event_dict.setdefault(key, value)
        return event_dict

    return processor


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    # Always backed by a stdlib logger: unconfigured hosts get stdlib level filtering
    # (WARNING) instead of structlog's print-everything default.
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )


# --- Module Notes -----------------------------------------------------------
# The package never calls `configure_logging` on import; hosts opt in, otherwise
# structlog's default processors render into plain stdlib loggers.
