"""Logging configuration settings."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseSettings):
    """Structured logging configuration.

    Environment variables use LOG_ prefix.
    Example: LOG_LEVEL=INFO, LOG_JSON_LOGS=true, LOG_FILE_PATH=logs/service.jsonl
    """

    service_name: str = Field(
        default="pagination-service",
        description="Service name to include in log records (static field in JSON)",
    )

    level: LogLevel = Field(
        default="INFO",
        description="Root logger level (DEBUG|INFO|WARNING|ERROR|CRITICAL)",
    )

    json_logs: bool = Field(
        default=True,
        description="Enable JSON Lines (JSONL) formatted structured logs",
    )

    console_enabled: bool = Field(
        default=True, description="Enable console/stderr logging"
    )

    # ──────────────────────────────────────────────────────────────
    # File logging / rotation
    # ──────────────────────────────────────────────────────────────

    file_path: Path | None = Field(
        default=None,
        description="Path to log file. None disables file logging.",
    )
    file_max_bytes: int = Field(
        default=10_485_760,  # 10 MiB
        ge=1024,
        le=1_073_741_824,
        description="Maximum log file size in bytes before rotation.",
    )
    file_backup_count: int = Field(
        default=5, ge=0, le=100, description="Number of rotated log files to keep"
    )

    # ──────────────────────────────────────────────────────────────
    # Request logging
    # ──────────────────────────────────────────────────────────────

    include_request_id: bool = Field(
        default=True, description="Tag requests with X-Request-ID and log it"
    )
    log_slow_requests: bool = Field(
        default=True, description="Add X-Process-Time and warn on slow requests"
    )
    slow_request_threshold: float = Field(
        default=1.0, ge=0.1, le=60.0, description="Slow request threshold in seconds"
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """Normalize log level to uppercase."""
        if isinstance(v, str):
            return v.upper()
        return v

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )

    @property
    def level_int(self) -> int:
        """Get numeric log level."""
        import logging

        return getattr(logging, self.level.upper(), logging.INFO)

    def to_logging_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for ``configure_logging``."""
        return {
            "log_level": self.level,
            "json_logs": self.json_logs,
            "console_enabled": self.console_enabled,
            "file_path": self.file_path,
            "file_max_bytes": self.file_max_bytes,
            "file_backup_count": self.file_backup_count,
            "service_name": self.service_name,
        }
