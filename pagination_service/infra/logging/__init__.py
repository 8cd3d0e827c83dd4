"""Logging infrastructure.

Structured logging on top of the standard library:

    from pagination_service.infra.logging import set_log_context
    import logging

    logger = logging.getLogger(__name__)

    set_log_context(request_id="abc-123")
    logger.info("Processing request")  # includes request_id
"""

from pagination_service.infra.logging.config import configure_logging, setup_logging
from pagination_service.infra.logging.context import (
    ContextInjectingFilter,
    clear_log_context,
    get_log_context,
    set_log_context,
)
from pagination_service.infra.logging.formatters import JSONFormatter

__all__ = [
    "ContextInjectingFilter",
    "JSONFormatter",
    "clear_log_context",
    "configure_logging",
    "get_log_context",
    "set_log_context",
    "setup_logging",
]
