"""Application settings for FastAPI configuration."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

Environment = Literal["development", "staging", "production", "test"]


class AppSettings(BaseSettings):
    """FastAPI application settings.

    Environment variables use APP_ prefix.
    Example: APP_DEBUG=true, APP_PORT=8080
    """

    # Service identity
    service_name: str = Field(
        default="pagination-service",
        min_length=1,
        max_length=100,
        pattern=r"^[a-z0-9]+(-[a-z0-9]+)*$",
        description="Service name for logging (lowercase, hyphens allowed)",
    )
    title: str = Field(
        default="Pagination Service API",
        min_length=1,
        max_length=200,
        description="API title displayed in documentation",
    )
    description: str = Field(
        default="Page-number pagination over a cursor-only DynamoDB table",
        description="API description (supports Markdown)",
    )
    version: str = Field(
        default="1.0.0",
        min_length=1,
        max_length=50,
        pattern=r"^\d+\.\d+\.\d+(-[a-zA-Z0-9]+)?$",
        description="API version (semver format)",
    )
    environment: Environment = Field(
        default="development", description="Environment: development|staging|production|test",
    )
    api_prefix: str = Field(
        default="",
        max_length=255,
        pattern=r"^(/.*)?$",
        description="Base URL prefix for API routes (empty serves /paginate at the root)",
    )

    # FastAPI toggles
    debug: bool = Field(default=False, description="Enable debug mode")
    docs_url: str | None = Field(default="/docs", description="Swagger UI path")
    openapi_url: str | None = Field(default="/openapi.json", description="OpenAPI schema path")
    disable_docs: bool = Field(default=False, description="Disable all API documentation")

    # Server configuration
    host: str = Field(
        default="0.0.0.0", min_length=1, max_length=255, description="Server bind host",
    )
    port: int = Field(default=8080, ge=1, le=65535, description="Server port")

    # CORS configuration
    cors_origins: list[str] = Field(
        default_factory=list,
        description="Allowed CORS origins (JSON array)",
    )
    cors_allow_credentials: bool = Field(default=True, description="Allow credentials")

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )

    @property
    def docs_enabled(self) -> bool:
        """Whether API documentation is served."""
        return not self.disable_docs

    def get_docs_url(self) -> str | None:
        """Swagger UI path, or None when docs are disabled."""
        return self.docs_url if self.docs_enabled else None

    def get_openapi_url(self) -> str | None:
        """OpenAPI schema path, or None when docs are disabled."""
        return self.openapi_url if self.docs_enabled else None
