"""Paginate API router."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Response, status

from pagination_service.core.exceptions import SerializationError
from pagination_service.core.pagination import PageResponse
from pagination_service.core.schemas.error import ProblemDetail
from pagination_service.features.paginate.dependencies import (
    PaginationRequestDep,
    PaginatorDep,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["paginate"])


def render_page(page: PageResponse) -> bytes:
    """Encode the response envelope with its wire field names.

    Raises:
        SerializationError: If the envelope cannot be encoded.
    """
    try:
        return page.model_dump_json(by_alias=True).encode()
    except ValueError as e:
        logger.exception("Failed to encode page response")
        msg = "Error converting items to JSON"
        raise SerializationError(msg) from e


@router.get(
    "/paginate",
    summary="Get one page of a partition",
    response_class=Response,
    responses={
        status.HTTP_200_OK: {"model": PageResponse, "description": "The requested page"},
        status.HTTP_400_BAD_REQUEST: {"model": ProblemDetail},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ProblemDetail},
    },
)
async def paginate(params: PaginationRequestDep, paginator: PaginatorDep) -> Response:
    """Return page ``page`` of the ``key_condition`` partition.

    Pages are reached by following the store cursor from the start of the
    partition, so the served ``Page`` can be lower than requested when the
    partition runs out first.

    Example:
        ```bash
        curl "http://localhost:8080/paginate?key_condition=test&page=2&pagesize=5&orderby=-sort_key&search=item"
        ```
    """
    page = await paginator.serve(params)
    logger.info(
        "Served page",
        extra={
            "partition_key": params.partition_key,
            "requested_page": params.page,
            "served_page": page.page,
            "size": page.size,
        },
    )
    return Response(
        content=render_page(page),
        status_code=status.HTTP_200_OK,
        media_type="application/json",
    )
