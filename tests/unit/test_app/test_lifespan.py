"""Tests for the application lifespan and factory."""
from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest

from pagination_service.app.lifespan import build_lifespan
from pagination_service.app.main import create_app
from pagination_service.infra.dynamodb import DynamoDBStore

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def _no_logging_setup():
    with patch("pagination_service.app.lifespan.setup_logging"):
        yield


async def test_lifespan_owns_store_it_creates():
    app = create_app()

    with (
        patch.object(DynamoDBStore, "startup", AsyncMock()) as startup,
        patch.object(DynamoDBStore, "shutdown", AsyncMock()) as shutdown,
    ):
        async with app.router.lifespan_context(app):
            assert isinstance(app.state.store, DynamoDBStore)
            assert app.state.store.table_name == "entries-test"
            startup.assert_awaited_once()
            shutdown.assert_not_awaited()

        shutdown.assert_awaited_once()


async def test_lifespan_leaves_injected_store_alone(store: DynamoDBStore):
    app = create_app(store=store)

    with (
        patch.object(DynamoDBStore, "startup", AsyncMock()) as startup,
        patch.object(DynamoDBStore, "shutdown", AsyncMock()) as shutdown,
    ):
        async with build_lifespan(store)(app):
            assert app.state.store is store

    startup.assert_not_awaited()
    shutdown.assert_not_awaited()


def test_routes_registered(app):
    assert app.url_path_for("paginate") == "/paginate"
    assert app.url_path_for("health") == "/health"


def test_api_prefix_moves_paginate_only(monkeypatch, store: DynamoDBStore):
    monkeypatch.setenv("APP_API_PREFIX", "/api/v1")

    app = create_app(store=store)

    assert app.url_path_for("paginate") == "/api/v1/paginate"
    assert app.url_path_for("health") == "/health"


def test_docs_can_be_disabled(monkeypatch, store: DynamoDBStore):
    monkeypatch.setenv("APP_DISABLE_DOCS", "true")

    app = create_app(store=store)

    assert app.docs_url is None
    assert app.openapi_url is None
