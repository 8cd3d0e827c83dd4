"""Context management for structured logging.

Request-scoped fields (request ID, path) are stored in a ContextVar and
injected into every LogRecord by ``ContextInjectingFilter``, so handlers
and formatters see them without callers passing ``extra=`` each time.
Each asyncio task gets its own copy of the context.
"""

from __future__ import annotations

from contextvars import ContextVar
import logging
from typing import Any

_log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})


def set_log_context(**kwargs: Any) -> None:
    """Add fields to the logging context of the current task.

    Example:
        set_log_context(request_id="abc-123", path="/paginate")
        logger.info("Processing request")  # includes request_id and path
    """
    current = _log_context.get().copy()
    current.update(kwargs)
    _log_context.set(current)


def get_log_context() -> dict[str, Any]:
    """Get a copy of the current logging context."""
    return _log_context.get().copy()


def clear_log_context() -> None:
    """Clear all logging context for the current task."""
    _log_context.set({})


class ContextInjectingFilter(logging.Filter):
    """Copy the current log context onto each record.

    Fields already set on the record through ``extra=`` win over context
    values of the same name.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in _log_context.get().items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True
