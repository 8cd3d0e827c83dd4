"""Pagination settings for the paginate endpoint.

Environment variables use PAGINATION_ prefix.
Example: PAGINATION_DEFAULT_PAGE_SIZE=25, PAGINATION_MAX_PAGE_SIZE=500
"""

from __future__ import annotations

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PaginationSettings(BaseSettings):
    """Pagination configuration settings.

    Attributes:
        default_page: Page served when the request omits or mangles ``page``.
        default_page_size: Page size used when ``pagesize`` is missing,
            unparseable or not positive.
        max_page_size: Optional upper bound on ``pagesize``. Unset means any
            positive page size is honoured as requested.
    """

    default_page: int = Field(
        default=1,
        ge=1,
        description="Page number used when page is missing or invalid",
    )
    default_page_size: int = Field(
        default=10,
        ge=1,
        le=1000,
        description="Page size used when pagesize is missing or invalid",
    )
    max_page_size: int | None = Field(
        default=None,
        ge=1,
        description="Optional cap on page size (unset: no cap)",
    )

    model_config = SettingsConfigDict(
        env_prefix="PAGINATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )

    @model_validator(mode="after")
    def _check_limits(self) -> PaginationSettings:
        if self.max_page_size is not None and self.default_page_size > self.max_page_size:
            msg = "default_page_size must not exceed max_page_size"
            raise ValueError(msg)
        return self
