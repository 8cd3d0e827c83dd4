"""RFC 7807 Problem Details schemas for error responses."""

from __future__ import annotations

from pydantic import BaseModel, Field

_DEFAULT_TITLES = {
    400: "Bad Request",
    404: "Not Found",
    422: "Unprocessable Entity",
    500: "Internal Server Error",
}


class ProblemDetail(BaseModel):
    """Problem Details for HTTP APIs (RFC 7807).

    Example:
        {
            "type": "invalid-key-condition",
            "title": "Bad Request",
            "status": 400,
            "detail": "Invalid key_condition parameter",
            "instance": "http://testserver/paginate"
        }
    """

    type: str = Field(default="about:blank", description="Error type identifier")
    title: str = Field(description="Short summary of the problem type")
    status: int = Field(ge=400, le=599, description="HTTP status code")
    detail: str | None = Field(default=None, description="Human-readable explanation")
    instance: str | None = Field(default=None, description="URI of this occurrence")

    @staticmethod
    def default_title(status_code: int) -> str:
        """Default title for an HTTP status code."""
        return _DEFAULT_TITLES.get(status_code, "Error")


class ValidationError(BaseModel):
    """A single field-level validation failure."""

    field: str
    message: str
    type: str
    value: object | None = None


class ValidationProblemDetail(ProblemDetail):
    """Problem detail carrying field-level validation errors."""

    errors: list[ValidationError] = Field(default_factory=list)
