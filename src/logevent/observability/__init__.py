"""
logevent.observability

Observability package.

Responsibilities:
- Structured logging configuration for the package's internal diagnostics.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Diagnostic context stores live in `logevent.context`; MDC values are bound through
# structlog contextvars so they also show up here.
