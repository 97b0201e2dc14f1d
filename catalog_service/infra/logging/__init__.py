"""Logging infrastructure.

Provides structured logging with:
- JSONL format for log aggregation
- Automatic context injection (request_id, etc.)
- QueueHandler + QueueListener for non-blocking I/O

Basic usage:
    import logging

    from catalog_service.infra.logging import set_log_context, setup_logging

    setup_logging()
    logger = logging.getLogger(__name__)

    set_log_context(request_id="abc-123")
    logger.info("Paginating books")  # Includes request_id
"""

from catalog_service.infra.logging.config import (
    complete,
    configure_logging,
    setup_logging,
    shutdown,
)
from catalog_service.infra.logging.context import (
    ContextInjectingFilter,
    clear_log_context,
    get_log_context,
    remove_from_log_context,
    set_log_context,
)
from catalog_service.infra.logging.formatters import JSONFormatter

__all__ = [
    "ContextInjectingFilter",
    "JSONFormatter",
    "clear_log_context",
    "complete",
    "configure_logging",
    "get_log_context",
    "remove_from_log_context",
    "set_log_context",
    "setup_logging",
    "shutdown",
]
