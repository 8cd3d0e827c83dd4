"""Application lifespan: logging setup and the DynamoDB client lifecycle."""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
import logging
from typing import TYPE_CHECKING

from pagination_service.core.settings import (
    get_app_settings,
    get_dynamodb_settings,
    get_logging_settings,
)
from pagination_service.infra.dynamodb import DynamoDBStore
from pagination_service.infra.logging.config import setup_logging

if TYPE_CHECKING:
    from fastapi import FastAPI

logger = logging.getLogger(__name__)


def build_lifespan(
    store: DynamoDBStore | None = None,
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    """Create the lifespan context for an application.

    Args:
        store: Pre-built store to use instead of one created from
            DynamoDB settings (the caller keeps ownership of its client).

    Returns:
        Lifespan context manager factory for ``FastAPI(lifespan=...)``.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app_settings = get_app_settings()
        setup_logging(get_logging_settings())
        logger.info(
            "Application starting",
            extra={
                "service": app_settings.service_name,
                "environment": app_settings.environment,
                "version": app_settings.version,
            },
        )

        owned = store is None
        app.state.store = store if store is not None else DynamoDBStore(get_dynamodb_settings())
        if owned:
            await app.state.store.startup()

        try:
            yield
        finally:
            if owned:
                await app.state.store.shutdown()
            logger.info("Application shutdown complete")

    return lifespan
