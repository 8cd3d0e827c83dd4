"""Page-number pagination over a cursor-based store.

Clients ask for ``page`` N of ``pagesize`` items; the store can only hand
back a page and an opaque cursor to continue from. ``Paginator`` bridges the
two by following the cursor page by page, filtering locally, and cutting the
requested window out of what it collected.

    paginator = Paginator(store)
    response = await paginator.serve(
        PaginationRequest(partition_key="tenant-1", page=3, page_size=20)
    )
"""

from pagination_service.core.pagination.paginator import (
    PageStore,
    Paginator,
    extract_window,
    matches_search,
)
from pagination_service.core.pagination.schemas import (
    Entry,
    PageResponse,
    PaginationRequest,
    QueryPage,
)

__all__ = [
    "Entry",
    "PageResponse",
    "PageStore",
    "PaginationRequest",
    "Paginator",
    "QueryPage",
    "extract_window",
    "matches_search",
]
