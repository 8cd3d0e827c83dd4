"""Global exception handlers for FastAPI application."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from pagination_service.core.exceptions import AppException
from pagination_service.core.schemas.error import (
    ProblemDetail,
    ValidationError,
    ValidationProblemDetail,
)

logger = logging.getLogger(__name__)

PROBLEM_JSON = "application/problem+json"


def _get_request_id(request: Request) -> str | None:
    """Extract request ID from request state."""
    return getattr(request.state, "request_id", None)


def _create_problem_detail(
    status_code: int,
    detail: str,
    type_: str = "about:blank",
    title: str | None = None,
    instance: str | None = None,
    extra: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Create RFC 7807 Problem Details response.

    Args:
        status_code: HTTP status code.
        detail: Human-readable error description.
        type_: Error type identifier.
        title: Short human-readable summary.
        instance: URI identifying this occurrence.
        extra: Additional context information.

    Returns:
        Dictionary representing the problem detail.
    """
    problem = ProblemDetail(
        type=type_,
        title=title or ProblemDetail.default_title(status_code),
        status=status_code,
        detail=detail,
        instance=instance,
    )

    response_data = problem.model_dump(exclude_none=True)
    if extra:
        response_data.update(extra)

    return response_data


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle custom application exceptions.

    Client errors are logged as warnings, server-side failures as errors.

    Args:
        request: The FastAPI request object.
        exc: The application exception that was raised.

    Returns:
        JSONResponse with RFC 7807 Problem Details format.
    """
    request_id = _get_request_id(request)

    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        "Application exception occurred",
        extra={
            "request_id": request_id,
            "path": request.url.path,
            "method": request.method,
            "exception_type": exc.type,
            "status_code": exc.status_code,
            "detail": exc.detail,
        },
    )

    problem_data = _create_problem_detail(
        status_code=exc.status_code,
        detail=exc.detail,
        type_=exc.type,
        title=exc.title,
        instance=exc.instance or str(request.url),
        extra=exc.extra,
    )
    if request_id:
        problem_data["request_id"] = request_id

    return JSONResponse(
        status_code=exc.status_code,
        content=problem_data,
        media_type=PROBLEM_JSON,
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle FastAPI request validation errors.

    Args:
        request: The FastAPI request object.
        exc: The validation error that was raised.

    Returns:
        JSONResponse with RFC 7807 Problem Details format.
    """
    request_id = _get_request_id(request)

    validation_errors = [
        ValidationError(
            field=".".join(str(loc) for loc in error["loc"]),
            message=error["msg"],
            type=error["type"],
            value=error.get("input"),
        )
        for error in exc.errors()
    ]

    logger.warning(
        "Request validation failed",
        extra={
            "request_id": request_id,
            "path": request.url.path,
            "method": request.method,
            "error_count": len(validation_errors),
        },
    )

    problem = ValidationProblemDetail(
        type="validation-error",
        title="Validation Error",
        status=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=f"Request validation failed for {len(validation_errors)} field(s)",
        instance=str(request.url),
        errors=validation_errors,
    )

    response_data = problem.model_dump(mode="json", exclude_none=True)
    if request_id:
        response_data["request_id"] = request_id

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=response_data,
        media_type=PROBLEM_JSON,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions.

    Catch-all for anything without a specific handler: logs the traceback
    and returns a generic 500 without internal details.

    Args:
        request: The FastAPI request object.
        exc: The exception that was raised.

    Returns:
        JSONResponse with RFC 7807 Problem Details format.
    """
    request_id = _get_request_id(request)

    logger.error(
        "Unexpected exception occurred",
        extra={
            "request_id": request_id,
            "path": request.url.path,
            "method": request.method,
            "exception_type": type(exc).__name__,
            "exception_message": str(exc),
        },
        exc_info=exc,
    )

    problem_data = _create_problem_detail(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred while processing your request",
        type_="internal-error",
        title="Internal Server Error",
        instance=str(request.url),
    )
    if request_id:
        problem_data["request_id"] = request_id

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=problem_data,
        media_type=PROBLEM_JSON,
    )


def configure_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers that render RFC 7807 Problem Details.

    Args:
        app: The FastAPI application instance.
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    logger.debug("Exception handlers configured")
