"""Logging configuration setup.

Builds a ``logging.config.dictConfig`` dictionary from ``LoggingSettings``:
- JSONL or plain text formatter
- ContextInjectingFilter on every handler for request context
- console handler on stderr, optional rotating file handler
- all handlers on the root logger; application loggers propagate up
"""

from __future__ import annotations

import logging
import logging.config
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pagination_service.core.settings.logs import LoggingSettings

logger = logging.getLogger(__name__)
_LOGGING_INITIALIZED = False


def setup_logging(
    log_settings: LoggingSettings | None = None,
    *,
    force: bool = False,
    **configure_kwargs: Any,
) -> None:
    """Ensure logging is configured once across entrypoints.

    Args:
        log_settings: Optional logging settings instance. If omitted, settings
            are loaded via get_logging_settings().
        force: Reconfigure logging even if it was already initialized.
        **configure_kwargs: Explicit overrides for configure_logging().
    """
    global _LOGGING_INITIALIZED

    if _LOGGING_INITIALIZED and not force:
        return

    settings_obj = log_settings
    if settings_obj is None:
        from pagination_service.core.settings import get_logging_settings

        settings_obj = get_logging_settings()

    log_config = settings_obj.to_logging_kwargs()
    if configure_kwargs:
        log_config = {**log_config, **configure_kwargs}

    configure_logging(**log_config)
    _LOGGING_INITIALIZED = True


def configure_logging(
    log_level: str = "INFO",
    json_logs: bool = True,
    console_enabled: bool = True,
    file_path: str | Path | None = None,
    file_max_bytes: int = 10 * 1024 * 1024,
    file_backup_count: int = 5,
    service_name: str = "pagination-service",
) -> None:
    """Configure the root logger with dictConfig.

    Args:
        log_level: Root logger level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_logs: Enable JSONL (JSON Lines) structured logging.
        console_enabled: Enable console/stderr logging.
        file_path: Path to log file. None disables file logging.
        file_max_bytes: Maximum log file size before rotation.
        file_backup_count: Number of rotated log files to keep.
        service_name: Static ``service`` field added to JSON records.
    """
    file_path = Path(file_path) if file_path else None
    if file_path:
        file_path.parent.mkdir(parents=True, exist_ok=True)

    formatter_name = "json" if json_logs else "text"
    handlers: dict[str, Any] = {}

    if console_enabled:
        handlers["console"] = {
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
            "formatter": formatter_name,
            "filters": ["context"],
        }

    if file_path:
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": str(file_path),
            "maxBytes": file_max_bytes,
            "backupCount": file_backup_count,
            "encoding": "utf-8",
            "formatter": "json",
            "filters": ["context"],
        }

    logging_config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": _build_formatters_config(service_name),
        "filters": {
            "context": {
                "()": "pagination_service.infra.logging.context.ContextInjectingFilter",
            },
        },
        "handlers": handlers,
        "root": {
            "level": log_level.upper(),
            "handlers": list(handlers),
        },
        "loggers": {
            # Quiet botocore/aiobotocore chatter unless explicitly debugging
            "botocore": {"level": "WARNING"},
            "aiobotocore": {"level": "WARNING"},
        },
    }

    logging.config.dictConfig(logging_config)
    logging.captureWarnings(True)
    logger.debug(
        "Logging configured",
        extra={"level": log_level, "json": json_logs, "file": str(file_path) if file_path else None},
    )


def _build_formatters_config(service_name: str) -> dict[str, Any]:
    return {
        "json": {
            "()": "pagination_service.infra.logging.formatters.JSONFormatter",
            "fmt_keys": {
                "level": "levelname",
                "logger": "name",
                "message": "message",
            },
            "static": {"service": service_name},
        },
        "text": {
            "format": "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    }
