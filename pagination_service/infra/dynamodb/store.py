"""DynamoDB-backed page store.

Wraps an aioboto3 DynamoDB client and exposes the one capability the
paginator needs: a cursor-driven range scan over a single partition,
optionally in reverse, surfaced as a lazy stream of ``QueryPage`` values.

Example:
    store = DynamoDBStore(get_dynamodb_settings())
    await store.startup()
    async for page in store.iter_pages("tenant-1", page_size=10):
        ...
    await store.shutdown()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import aioboto3
from boto3.dynamodb.types import TypeDeserializer
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError

from pagination_service.core.exceptions import (
    DeserializationError,
    StoreNotConfiguredError,
    StoreQueryError,
)
from pagination_service.core.pagination.schemas import Entry, QueryPage

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from pagination_service.core.settings.dynamodb import DynamoDBSettings

logger = logging.getLogger(__name__)

_deserializer = TypeDeserializer()


class DynamoDBStore:
    """Cursor-paginated reads from one DynamoDB table.

    The table name and key attribute names come from settings resolved once
    at startup; nothing here is mutated per request, so one instance is
    shared by all in-flight requests.

    Attributes:
        settings: DynamoDB configuration settings
        is_ready: Whether the client has been created
    """

    def __init__(self, settings: DynamoDBSettings) -> None:
        self.settings = settings
        self._session = aioboto3.Session()
        self._client: Any = None
        self._client_context: Any = None

    @property
    def table_name(self) -> str:
        """Name of the table being queried."""
        return self.settings.table_name

    @property
    def is_ready(self) -> bool:
        """Check if the store is initialized and ready."""
        return self._client is not None

    # ========================================================================
    # Lifecycle Management
    # ========================================================================

    async def startup(self) -> None:
        """Create the DynamoDB client and its connection pool."""
        if self._client is not None:
            logger.debug("DynamoDB store already initialized")
            return

        logger.info(
            "Initializing DynamoDB store",
            extra={
                "table": self.settings.table_name,
                "region": self.settings.region,
                "endpoint": self.settings.endpoint_url,
            },
        )

        boto_config = Config(
            retries={
                "max_attempts": self.settings.max_retries,
                "mode": self.settings.retry_mode,
            },
            connect_timeout=self.settings.connect_timeout,
            read_timeout=self.settings.read_timeout,
            max_pool_connections=self.settings.max_pool_connections,
        )

        self._client_context = self._session.client(
            "dynamodb",
            **self._get_client_config(),
            config=boto_config,
        )
        self._client = await self._client_context.__aenter__()

        logger.info("DynamoDB store initialized")

    async def shutdown(self) -> None:
        """Close the DynamoDB client."""
        if self._client_context is None:
            logger.debug("DynamoDB store not initialized, nothing to shutdown")
            return

        logger.info("Shutting down DynamoDB store")
        try:
            await self._client_context.__aexit__(None, None, None)
        finally:
            self._client = None
            self._client_context = None

    def _get_client_config(self) -> dict[str, Any]:
        """Get boto3 client configuration."""
        config: dict[str, Any] = {"region_name": self.settings.region}

        if self.settings.has_static_credentials:
            config["aws_access_key_id"] = self.settings.access_key.get_secret_value()
            config["aws_secret_access_key"] = self.settings.secret_key.get_secret_value()

        # DynamoDB Local / LocalStack
        if self.settings.endpoint_url:
            config["endpoint_url"] = self.settings.endpoint_url

        return config

    def _ensure_client(self) -> Any:
        if self._client is None:
            msg = "DynamoDB store not initialized. Call startup() first."
            raise StoreNotConfiguredError(msg)
        return self._client

    # ========================================================================
    # Queries
    # ========================================================================

    def build_query(
        self,
        partition_key: str,
        limit: int,
        exclusive_start_key: dict[str, Any] | None = None,
        descending: bool = False,
    ) -> dict[str, Any]:
        """Build the keyword arguments for a single ``Query`` call.

        Args:
            partition_key: Exact partition key value to match.
            limit: Maximum items the store evaluates for this page.
            exclusive_start_key: Cursor returned by the previous page, if any.
            descending: Scan the partition in reverse sort-key order.

        Returns:
            Parameters for ``client.query``.
        """
        params: dict[str, Any] = {
            "TableName": self.settings.table_name,
            "KeyConditionExpression": "#pk = :pk",
            "ExpressionAttributeNames": {"#pk": self.settings.partition_key_attribute},
            "ExpressionAttributeValues": {":pk": {"S": partition_key}},
            "Limit": limit,
            "ScanIndexForward": not descending,
        }
        if exclusive_start_key:
            params["ExclusiveStartKey"] = exclusive_start_key
        return params

    async def query_page(
        self,
        partition_key: str,
        limit: int,
        exclusive_start_key: dict[str, Any] | None = None,
        descending: bool = False,
    ) -> QueryPage:
        """Fetch one page of items from a partition.

        Raises:
            StoreQueryError: If DynamoDB rejects or fails the query.
        """
        client = self._ensure_client()
        params = self.build_query(partition_key, limit, exclusive_start_key, descending)

        try:
            response = await client.query(**params)
        except (ClientError, BotoCoreError) as e:
            logger.error(
                "DynamoDB query failed",
                extra={
                    "table": self.settings.table_name,
                    "partition_key": partition_key,
                    "error": str(e),
                },
            )
            msg = "Error in DynamoDB query"
            raise StoreQueryError(msg) from e

        return QueryPage(
            items=response.get("Items", []),
            last_evaluated_key=response.get("LastEvaluatedKey") or None,
        )

    async def iter_pages(
        self,
        partition_key: str,
        page_size: int,
        descending: bool = False,
    ) -> AsyncIterator[QueryPage]:
        """Lazily walk a partition page by page, following the store cursor.

        Each iteration issues exactly one query, so the caller pays one round
        trip per page consumed. The stream is finite and cannot be restarted;
        start a new one to read from the beginning again.
        """
        cursor: dict[str, Any] | None = None
        while True:
            page = await self.query_page(partition_key, page_size, cursor, descending)
            logger.debug(
                "Fetched store page",
                extra={"items": len(page.items), "has_more": page.has_more},
            )
            yield page
            if not page.has_more:
                return
            cursor = page.last_evaluated_key

    def to_entry(self, item: dict[str, Any]) -> Entry:
        """Deserialize a low-level attribute map into an ``Entry``.

        Raises:
            DeserializationError: If a key attribute is missing or not a string.
        """
        return deserialize_entry(
            item,
            partition_key_attribute=self.settings.partition_key_attribute,
            sort_key_attribute=self.settings.sort_key_attribute,
        )


def deserialize_entry(
    item: dict[str, Any],
    partition_key_attribute: str = "key_cond",
    sort_key_attribute: str = "sort_key",
) -> Entry:
    """Convert a DynamoDB attribute map (``{"S": ...}`` values) into an ``Entry``."""
    try:
        return Entry(
            partition_key=_deserializer.deserialize(item[partition_key_attribute]),
            sort_key=_deserializer.deserialize(item[sort_key_attribute]),
        )
    except (KeyError, TypeError, ValidationError) as e:
        logger.error("Malformed DynamoDB item", extra={"error": str(e)})
        msg = "Error unmarshalling DynamoDB item"
        raise DeserializationError(msg) from e
