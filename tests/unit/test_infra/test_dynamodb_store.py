"""Unit tests for the DynamoDB page store."""
from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

from botocore.exceptions import ClientError, EndpointConnectionError
import pytest

from pagination_service.core.exceptions import (
    DeserializationError,
    StoreNotConfiguredError,
    StoreQueryError,
)
from pagination_service.core.settings.dynamodb import DynamoDBSettings
from pagination_service.infra.dynamodb import DynamoDBStore, deserialize_entry
from tests.utils import cursor_after, make_item, query_response


@pytest.fixture
def settings() -> DynamoDBSettings:
    return DynamoDBSettings(table_name="entries-test", region="us-east-1")


@pytest.fixture
def client() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def store(settings: DynamoDBSettings, client: AsyncMock) -> DynamoDBStore:
    store = DynamoDBStore(settings)
    store._client = client
    return store


@pytest.mark.unit
class TestBuildQuery:
    """Tests for Query parameter construction."""

    def test_first_page_ascending(self, store: DynamoDBStore):
        params = store.build_query("test", 10)

        assert params == {
            "TableName": "entries-test",
            "KeyConditionExpression": "#pk = :pk",
            "ExpressionAttributeNames": {"#pk": "key_cond"},
            "ExpressionAttributeValues": {":pk": {"S": "test"}},
            "Limit": 10,
            "ScanIndexForward": True,
        }

    def test_descending_sets_scan_index_forward_false(self, store: DynamoDBStore):
        params = store.build_query("test", 10, descending=True)

        assert params["ScanIndexForward"] is False

    def test_cursor_becomes_exclusive_start_key(self, store: DynamoDBStore):
        cursor = cursor_after("item2")

        params = store.build_query("test", 2, exclusive_start_key=cursor)

        assert params["ExclusiveStartKey"] == cursor

    def test_partition_attribute_is_configurable(self, client: AsyncMock):
        store = DynamoDBStore(DynamoDBSettings(partition_key_attribute="key_condition"))
        store._client = client

        params = store.build_query("test", 5)

        assert params["ExpressionAttributeNames"] == {"#pk": "key_condition"}


@pytest.mark.unit
class TestQueryPage:
    """Tests for single-page queries."""

    async def test_returns_items_and_cursor(self, store: DynamoDBStore, client: AsyncMock):
        cursor = cursor_after("item2")
        client.query.return_value = query_response("item1", "item2", last_evaluated_key=cursor)

        page = await store.query_page("test", 2)

        assert page.items == [make_item("test", "item1"), make_item("test", "item2")]
        assert page.last_evaluated_key == cursor
        assert page.has_more is True

    async def test_missing_items_key_is_empty_page(self, store: DynamoDBStore, client: AsyncMock):
        client.query.return_value = {"Count": 0}

        page = await store.query_page("test", 10)

        assert page.items == []
        assert page.has_more is False

    async def test_empty_cursor_means_exhausted(self, store: DynamoDBStore, client: AsyncMock):
        client.query.return_value = {"Items": [], "LastEvaluatedKey": {}}

        page = await store.query_page("test", 10)

        assert page.has_more is False

    async def test_client_error_becomes_store_query_error(
        self, store: DynamoDBStore, client: AsyncMock
    ):
        client.query.side_effect = ClientError(
            {"Error": {"Code": "ResourceNotFoundException", "Message": "no table"}},
            "Query",
        )

        with pytest.raises(StoreQueryError) as exc_info:
            await store.query_page("test", 10)

        assert exc_info.value.detail == "Error in DynamoDB query"
        assert exc_info.value.extra == {}
        assert isinstance(exc_info.value.__cause__, ClientError)

    async def test_transport_error_becomes_store_query_error(
        self, store: DynamoDBStore, client: AsyncMock
    ):
        client.query.side_effect = EndpointConnectionError(endpoint_url="http://localhost:8000")

        with pytest.raises(StoreQueryError):
            await store.query_page("test", 10)

    async def test_not_started_store_raises(self, settings: DynamoDBSettings):
        store = DynamoDBStore(settings)

        with pytest.raises(StoreNotConfiguredError):
            await store.query_page("test", 10)


@pytest.mark.unit
class TestIterPages:
    """Tests for cursor-following iteration."""

    async def test_follows_cursor_until_exhausted(self, store: DynamoDBStore, client: AsyncMock):
        client.query.side_effect = [
            query_response("a", "b", last_evaluated_key=cursor_after("b")),
            query_response("c", "d", last_evaluated_key=cursor_after("d")),
            query_response("e"),
        ]

        pages = [page async for page in store.iter_pages("test", 2)]

        assert [len(p.items) for p in pages] == [2, 2, 1]
        assert client.query.await_count == 3
        second_call = client.query.await_args_list[1].kwargs
        assert second_call["ExclusiveStartKey"] == cursor_after("b")
        assert "ExclusiveStartKey" not in client.query.await_args_list[0].kwargs

    async def test_descending_applies_to_every_page(self, store: DynamoDBStore, client: AsyncMock):
        client.query.side_effect = [
            query_response("b", last_evaluated_key=cursor_after("b")),
            query_response("a"),
        ]

        async for _ in store.iter_pages("test", 1, descending=True):
            pass

        assert all(
            call.kwargs["ScanIndexForward"] is False for call in client.query.await_args_list
        )

    async def test_only_queries_pages_consumed(self, store: DynamoDBStore, client: AsyncMock):
        client.query.return_value = query_response("a", last_evaluated_key=cursor_after("a"))

        pages = store.iter_pages("test", 1)
        await pages.__anext__()
        await pages.aclose()

        assert client.query.await_count == 1


@pytest.mark.unit
class TestDeserializeEntry:
    """Tests for attribute-map deserialization."""

    def test_string_attributes(self):
        entry = deserialize_entry(make_item("test", "item1"))

        assert entry.partition_key == "test"
        assert entry.sort_key == "item1"

    def test_custom_attribute_names(self):
        item = {"pk": {"S": "test"}, "sk": {"S": "item1"}}

        entry = deserialize_entry(item, partition_key_attribute="pk", sort_key_attribute="sk")

        assert entry.sort_key == "item1"

    def test_missing_attribute(self):
        with pytest.raises(DeserializationError) as exc_info:
            deserialize_entry({"key_cond": {"S": "test"}})

        assert exc_info.value.detail == "Error unmarshalling DynamoDB item"

    def test_non_string_attribute(self):
        item = {"key_cond": {"S": "test"}, "sort_key": {"N": "42"}}

        with pytest.raises(DeserializationError):
            deserialize_entry(item)

    def test_store_uses_configured_attributes(self):
        store = DynamoDBStore(DynamoDBSettings(sort_key_attribute="range_key"))

        entry = store.to_entry({"key_cond": {"S": "test"}, "range_key": {"S": "x"}})

        assert entry.sort_key == "x"


@pytest.mark.unit
class TestLifecycle:
    """Tests for client startup and shutdown."""

    async def test_startup_and_shutdown(self, settings: DynamoDBSettings):
        store = DynamoDBStore(settings)
        fake_client = AsyncMock()
        context = MagicMock()
        context.__aenter__ = AsyncMock(return_value=fake_client)
        context.__aexit__ = AsyncMock(return_value=None)
        store._session = MagicMock()
        store._session.client.return_value = context

        await store.startup()

        assert store.is_ready is True
        assert store._client is fake_client
        args, kwargs = store._session.client.call_args
        assert args == ("dynamodb",)
        assert kwargs["region_name"] == "us-east-1"
        assert "aws_access_key_id" not in kwargs

        await store.shutdown()

        assert store.is_ready is False
        context.__aexit__.assert_awaited_once()

    async def test_startup_is_idempotent(self, store: DynamoDBStore):
        store._session = MagicMock()

        await store.startup()

        store._session.client.assert_not_called()

    async def test_shutdown_without_startup_is_noop(self, settings: DynamoDBSettings):
        await DynamoDBStore(settings).shutdown()

    def test_client_config_with_endpoint_and_credentials(self):
        store = DynamoDBStore(
            DynamoDBSettings(
                endpoint_url="http://localhost:8000",
                access_key="local",
                secret_key="local-secret",
            )
        )

        config = store._get_client_config()

        assert config["endpoint_url"] == "http://localhost:8000"
        assert config["aws_access_key_id"] == "local"
        assert config["aws_secret_access_key"] == "local-secret"
