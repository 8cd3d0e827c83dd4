"""Custom exception classes for the application."""

from __future__ import annotations

from typing import Any


class AppException(Exception):
    """Base application exception.

    All custom exceptions should inherit from this class.
    Follows RFC 7807 Problem Details for HTTP APIs.

    Attributes:
        status_code: HTTP status code for the error.
        detail: Human-readable error message.
        type: Error type identifier (used in RFC 7807 problem details).
        title: Short, human-readable summary of the problem type.
        instance: URI reference that identifies the specific occurrence of the problem.
        extra: Additional context-specific information about the error.

    Example:
        raise AppException(
            status_code=400,
            detail="Invalid key_condition parameter",
            type="invalid-key-condition",
            extra={"parameter": "key_condition"},
        )
    """

    def __init__(
        self,
        status_code: int,
        detail: str,
        type: str = "about:blank",
        title: str | None = None,
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        """Initialize application exception.

        Args:
            status_code: HTTP status code.
            detail: Human-readable error message.
            type: Error type identifier.
            title: Short summary of the problem type.
            instance: URI reference identifying this specific occurrence.
            extra: Additional context about the error.
        """
        self.status_code = status_code
        self.detail = detail
        self.type = type
        self.title = title or self._default_title(status_code)
        self.instance = instance
        self.extra = extra or {}
        super().__init__(detail)

    @staticmethod
    def _default_title(status_code: int) -> str:
        """Get default title for HTTP status code.

        Args:
            status_code: HTTP status code.

        Returns:
            Human-readable title for the status code.
        """
        titles = {
            400: "Bad Request",
            404: "Not Found",
            422: "Unprocessable Entity",
            500: "Internal Server Error",
            502: "Bad Gateway",
            503: "Service Unavailable",
        }
        return titles.get(status_code, "Error")


class BadRequestException(AppException):
    """Exception raised when a request is missing a required parameter.

    No store access happens once this is raised.

    Example:
        raise BadRequestException(
            detail="Invalid key_condition parameter",
            extra={"parameter": "key_condition"},
        )
    """

    def __init__(
        self,
        detail: str,
        type: str = "bad-request",
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=400,
            detail=detail,
            type=type,
            title="Bad Request",
            instance=instance,
            extra=extra,
        )


class InternalServerException(AppException):
    """Base for failures that surface as HTTP 500.

    Subclasses distinguish where the request broke down; all of them are
    terminal for the request and never retried.
    """

    default_type = "internal-error"

    def __init__(
        self,
        detail: str,
        type: str | None = None,
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=500,
            detail=detail,
            type=type or self.default_type,
            title="Internal Server Error",
            instance=instance,
            extra=extra,
        )


class StoreQueryError(InternalServerException):
    """The backing store rejected or failed a query."""

    default_type = "store-query-error"


class DeserializationError(InternalServerException):
    """A store item did not have the expected attribute shape."""

    default_type = "deserialization-error"


class SerializationError(InternalServerException):
    """The response envelope could not be encoded."""

    default_type = "serialization-error"


class StoreNotConfiguredError(InternalServerException):
    """The store client was used before startup or after shutdown."""

    default_type = "store-not-ready"
