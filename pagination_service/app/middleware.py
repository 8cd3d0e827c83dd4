"""Middleware configuration for FastAPI application."""
from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING
import uuid

from fastapi import Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from pagination_service.core.settings import get_app_settings, get_logging_settings
from pagination_service.infra.logging.context import clear_log_context, set_log_context

if TYPE_CHECKING:
    from fastapi import FastAPI

    from pagination_service.core.settings import AppSettings, LoggingSettings

logger = logging.getLogger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Add request ID to all requests and to the logging context."""

    async def dispatch(self, request: Request, call_next):
        """Process request and add request ID.

        Args:
            request: Incoming request.
            call_next: Next middleware/handler.

        Returns:
            Response with X-Request-ID header.
        """
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id
        set_log_context(request_id=request_id, path=request.url.path)

        try:
            response = await call_next(request)
        finally:
            clear_log_context()
        response.headers["X-Request-ID"] = request_id
        return response


class TimingMiddleware(BaseHTTPMiddleware):
    """Add timing information to responses and log each request."""

    def __init__(self, app, slow_request_threshold: float = 1.0) -> None:
        super().__init__(app)
        self.slow_request_threshold = slow_request_threshold

    async def dispatch(self, request: Request, call_next):
        """Process request, add X-Process-Time and log the outcome.

        Args:
            request: Incoming request.
            call_next: Next middleware/handler.

        Returns:
            Response with X-Process-Time header.
        """
        start_time = time.perf_counter()
        response = await call_next(request)
        process_time = time.perf_counter() - start_time
        response.headers["X-Process-Time"] = f"{process_time:.6f}"

        log = logger.warning if process_time > self.slow_request_threshold else logger.info
        log(
            "Request completed",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round(process_time * 1000, 2),
                "slow": process_time > self.slow_request_threshold,
            },
        )
        return response


def configure_middleware(
    app: FastAPI,
    app_settings: AppSettings | None = None,
    log_settings: LoggingSettings | None = None,
) -> None:
    """Configure middleware for the application.

    Starlette runs the most recently added middleware first, so the request
    ID is assigned before timing and logging see the request.

    Args:
        app: FastAPI application instance.
        app_settings: Optional application settings override.
        log_settings: Optional logging settings override.
    """
    app_settings = app_settings or get_app_settings()
    log_settings = log_settings or get_logging_settings()

    if app_settings.cors_origins:
        logger.info(f"Configuring CORS with origins: {app_settings.cors_origins}")
        app.add_middleware(
            CORSMiddleware,
            allow_origins=app_settings.cors_origins,
            allow_credentials=app_settings.cors_allow_credentials,
            allow_methods=["GET"],
            allow_headers=["*"],
            max_age=3600,
        )

    if log_settings.log_slow_requests:
        app.add_middleware(
            TimingMiddleware,
            slow_request_threshold=log_settings.slow_request_threshold,
        )

    if log_settings.include_request_id:
        app.add_middleware(RequestIDMiddleware)
