"""LRU-cached settings loaders.

Settings are loaded and validated once, then cached for the lifetime of the
process, so every component sees the same immutable configuration.

Usage:
    from pagination_service.core.settings.loader import get_dynamodb_settings

    settings = get_dynamodb_settings()  # First call: loads and validates
    settings = get_dynamodb_settings()  # Subsequent calls: cached instance

Testing:
    clear_all_caches()  # force reload after changing the environment
"""

from __future__ import annotations

from functools import lru_cache

from .app import AppSettings
from .dynamodb import DynamoDBSettings
from .logs import LoggingSettings
from .pagination import PaginationSettings


@lru_cache(maxsize=1)
def get_app_settings() -> AppSettings:
    """Get cached application settings.

    Returns:
        Validated and frozen AppSettings instance.
    """
    return AppSettings()


@lru_cache(maxsize=1)
def get_logging_settings() -> LoggingSettings:
    """Get cached logging settings.

    Returns:
        Validated and frozen LoggingSettings instance.
    """
    return LoggingSettings()


@lru_cache(maxsize=1)
def get_dynamodb_settings() -> DynamoDBSettings:
    """Get cached DynamoDB settings.

    Returns:
        Validated and frozen DynamoDBSettings instance.
    """
    return DynamoDBSettings()


@lru_cache(maxsize=1)
def get_pagination_settings() -> PaginationSettings:
    """Get cached pagination settings.

    Returns:
        Validated and frozen PaginationSettings instance.
    """
    return PaginationSettings()


def clear_all_caches() -> None:
    """Clear all settings caches.

    Useful for testing or when you need to force reload settings.
    In production, prefer process restarts over cache clearing.
    """
    get_app_settings.cache_clear()
    get_logging_settings.cache_clear()
    get_dynamodb_settings.cache_clear()
    get_pagination_settings.cache_clear()
