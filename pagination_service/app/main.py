"""FastAPI application factory."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import FastAPI

from pagination_service.app.exception_handlers import configure_exception_handlers
from pagination_service.app.lifespan import build_lifespan
from pagination_service.app.middleware import configure_middleware
from pagination_service.app.router import setup_routers
from pagination_service.core.settings import get_app_settings

if TYPE_CHECKING:
    from pagination_service.infra.dynamodb import DynamoDBStore


def create_app(store: DynamoDBStore | None = None) -> FastAPI:
    """Create and configure FastAPI application.

    Settings are loaded once and cached via LRU cache.

    Args:
        store: Optional pre-built store; by default one is created from
            DynamoDB settings at startup.

    Returns:
        Configured FastAPI application instance.
    """
    app_settings = get_app_settings()

    app = FastAPI(
        title=app_settings.title,
        description=app_settings.description,
        version=app_settings.version,
        docs_url=app_settings.get_docs_url(),
        redoc_url=None,
        openapi_url=app_settings.get_openapi_url(),
        debug=app_settings.debug,
        lifespan=build_lifespan(store),
    )
    if store is not None:
        app.state.store = store

    # Configure exception handlers (must be before middleware)
    configure_exception_handlers(app)

    configure_middleware(app)

    setup_routers(app, app_settings)

    return app
