"""Request parameter extraction for the paginate endpoint.

Query parameters arrive as raw strings and are coerced leniently: a value
that does not parse, or is not positive, falls back to the configured
default instead of failing the request. Only ``key_condition`` is required.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Query, Request

from pagination_service.core.exceptions import BadRequestException, StoreNotConfiguredError
from pagination_service.core.pagination import PaginationRequest, Paginator
from pagination_service.core.settings import get_pagination_settings
from pagination_service.infra.dynamodb import DynamoDBStore


_INT64_MIN, _INT64_MAX = -(2**63), 2**63 - 1


def _parse_int(raw: str | None) -> int | None:
    """Strict base-10 parse: optional sign, ASCII digits only, 64-bit range.

    Whitespace, underscores and non-ASCII digits do not parse.
    """
    if raw is None:
        return None
    digits = raw[1:] if raw[:1] in ("+", "-") else raw
    if not (digits.isascii() and digits.isdigit()):
        return None
    value = int(raw)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return None
    return value


def coerce_page(raw: str | None, default: int = 1) -> int:
    """Parse ``page``; missing, malformed or non-positive values give ``default``."""
    value = _parse_int(raw)
    if value is None or value <= 0:
        return default
    return value


def coerce_page_size(raw: str | None, default: int = 10, maximum: int | None = None) -> int:
    """Parse ``pagesize``; missing, malformed or non-positive values give ``default``.

    When ``maximum`` is set, larger values are clamped to it; by default
    the requested size is used as is.
    """
    value = _parse_int(raw)
    if value is None or value <= 0:
        value = default
    if maximum is not None:
        value = min(value, maximum)
    return value


def get_pagination_request(
    key_condition: Annotated[
        str, Query(description="Exact-match partition key value (required)")
    ] = "",
    page: Annotated[
        str | None, Query(description="1-based page number (default 1)")
    ] = None,
    pagesize: Annotated[
        str | None, Query(description="Items per page (default 10)")
    ] = None,
    orderby: Annotated[
        str, Query(description="Prefix with '-' for descending sort-key order")
    ] = "",
    search: Annotated[
        str, Query(description="Case-insensitive substring filter on the sort key")
    ] = "",
) -> PaginationRequest:
    """Extract and coerce pagination parameters from the query string.

    Raises:
        BadRequestException: If ``key_condition`` is missing or empty.
    """
    if not key_condition:
        raise BadRequestException(
            detail="Invalid key_condition parameter",
            type="invalid-key-condition",
            extra={"parameter": "key_condition"},
        )

    settings = get_pagination_settings()
    return PaginationRequest(
        partition_key=key_condition,
        page=coerce_page(page, settings.default_page),
        page_size=coerce_page_size(
            pagesize, settings.default_page_size, settings.max_page_size
        ),
        order_by=orderby,
        search=search,
    )


def get_store(request: Request) -> DynamoDBStore:
    """Get the DynamoDB store created at application startup."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        msg = "DynamoDB store is not available"
        raise StoreNotConfiguredError(msg)
    return store


def get_paginator(store: Annotated[DynamoDBStore, Depends(get_store)]) -> Paginator:
    """Get a paginator bound to the application's store."""
    return Paginator(store)


PaginationRequestDep = Annotated[PaginationRequest, Depends(get_pagination_request)]
PaginatorDep = Annotated[Paginator, Depends(get_paginator)]
