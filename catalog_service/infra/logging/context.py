"""Context management for structured logging.

Provides automatic context injection into log records using contextvars,
so identifiers such as ``request_id`` are attached to every log line
emitted while they are set, without passing them around explicitly.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any

_log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})


def set_log_context(**kwargs: Any) -> None:
    """Set logging context for the current task/thread.

    Args:
        **kwargs: Key-value pairs to add to logging context.

    Example:
        set_log_context(request_id="abc-123")
        logger.info("Paginating books")  # Includes request_id
    """
    current = _log_context.get().copy()
    current.update(kwargs)
    _log_context.set(current)


def get_log_context() -> dict[str, Any]:
    """Get a copy of the current logging context."""
    return _log_context.get().copy()


def clear_log_context() -> None:
    """Clear all logging context for the current task/thread."""
    _log_context.set({})


def remove_from_log_context(*keys: str) -> None:
    """Remove specific keys from logging context."""
    current = _log_context.get().copy()
    for key in keys:
        current.pop(key, None)
    _log_context.set(current)


class ContextInjectingFilter(logging.Filter):
    """Logging filter that copies the current log context onto each record.

    Attached to the root QueueHandler so it sees records propagated from
    every application logger:

        queue_handler.addFilter(ContextInjectingFilter())
    """

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in _log_context.get().items():
            # Don't overwrite existing attributes
            if not hasattr(record, key):
                setattr(record, key, value)
        return True
