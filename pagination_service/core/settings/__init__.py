"""Modular Pydantic Settings v2 configuration.

One frozen settings class per domain, each reading its own environment
prefix (APP_, LOG_, DYNAMODB_, PAGINATION_) and an optional .env file.

Import settings via the cached loaders:
    from pagination_service.core.settings import get_dynamodb_settings
"""

from __future__ import annotations

from .app import AppSettings
from .dynamodb import DynamoDBSettings
from .loader import (
    clear_all_caches,
    get_app_settings,
    get_dynamodb_settings,
    get_logging_settings,
    get_pagination_settings,
)
from .logs import LoggingSettings
from .pagination import PaginationSettings

__all__ = [
    "AppSettings",
    "DynamoDBSettings",
    "LoggingSettings",
    "PaginationSettings",
    "clear_all_caches",
    "get_app_settings",
    "get_dynamodb_settings",
    "get_logging_settings",
    "get_pagination_settings",
]
