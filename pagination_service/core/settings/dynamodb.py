"""DynamoDB store settings.

Environment variables use DYNAMODB_ prefix.
Example: DYNAMODB_TABLE_NAME=entries, DYNAMODB_ENDPOINT_URL=http://localhost:8000
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

RetryMode = Literal["legacy", "standard", "adaptive"]


class DynamoDBSettings(BaseSettings):
    """Connection and schema settings for the backing DynamoDB table.

    Credentials are optional; when unset, the default botocore credential
    chain (environment, shared config, instance role) is used.
    """

    table_name: str = Field(
        default="TableName",
        min_length=3,
        max_length=255,
        description="DynamoDB table queried by the paginate endpoint",
    )
    region: str = Field(default="us-east-1", description="AWS region")
    endpoint_url: str | None = Field(
        default=None,
        description="Custom endpoint (DynamoDB Local, LocalStack)",
    )
    access_key: SecretStr | None = Field(default=None, description="AWS access key ID")
    secret_key: SecretStr | None = Field(default=None, description="AWS secret access key")

    # Table schema
    partition_key_attribute: str = Field(
        default="key_cond",
        min_length=1,
        description="Name of the partition (hash) key attribute",
    )
    sort_key_attribute: str = Field(
        default="sort_key",
        min_length=1,
        description="Name of the sort (range) key attribute",
    )

    # Client behaviour
    max_retries: int = Field(default=3, ge=0, le=10, description="botocore retry attempts")
    retry_mode: RetryMode = Field(default="standard", description="botocore retry mode")
    connect_timeout: float = Field(default=5.0, gt=0, le=60, description="Connect timeout in seconds")
    read_timeout: float = Field(default=10.0, gt=0, le=300, description="Read timeout in seconds")
    max_pool_connections: int = Field(default=10, ge=1, le=1000, description="HTTP pool size")

    model_config = SettingsConfigDict(
        env_prefix="DYNAMODB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )

    @property
    def has_static_credentials(self) -> bool:
        """Whether an explicit key pair is configured."""
        return self.access_key is not None and self.secret_key is not None
