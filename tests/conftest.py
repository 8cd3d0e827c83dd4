"""Pytest configuration and shared fixtures.

Organization:
    - Environment: settings that keep tests away from real AWS
    - Store Fixtures: DynamoDB store backed by a mocked aioboto3 client
    - Application Fixtures: FastAPI app and HTTP client
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
import os
from unittest.mock import AsyncMock

from httpx import ASGITransport, AsyncClient
import pytest

from tests.utils import query_response

# Ensure tests run without external infrastructure
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("LOG_JSON_LOGS", "false")
os.environ.setdefault("DYNAMODB_TABLE_NAME", "entries-test")
os.environ.setdefault("DYNAMODB_REGION", "us-east-1")


# ============================================================================
# Settings
# ============================================================================


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    """Reload settings for every test so env overrides take effect."""
    from pagination_service.core.settings import clear_all_caches

    clear_all_caches()
    yield
    clear_all_caches()


# ============================================================================
# Store Fixtures
# ============================================================================


@pytest.fixture
def dynamodb_client() -> AsyncMock:
    """Mocked aioboto3 DynamoDB client.

    Set ``dynamodb_client.query.return_value`` or ``side_effect`` per test.
    """
    client = AsyncMock()
    client.query.return_value = query_response()
    return client


@pytest.fixture
def store(dynamodb_client: AsyncMock):
    """DynamoDB store wired to the mocked client, skipping startup()."""
    from pagination_service.core.settings import get_dynamodb_settings
    from pagination_service.infra.dynamodb import DynamoDBStore

    store = DynamoDBStore(get_dynamodb_settings())
    store._client = dynamodb_client
    return store


# ============================================================================
# Application Fixtures
# ============================================================================


@pytest.fixture
def app(store):
    """FastAPI application using the mocked store."""
    from pagination_service.app.main import create_app

    return create_app(store=store)


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient]:
    """Async HTTP client talking to the app in-process."""
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac
