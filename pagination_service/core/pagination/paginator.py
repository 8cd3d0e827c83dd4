"""Page-number pagination emulated on top of a cursor-only store.

The store can only resume from an opaque cursor; it cannot jump to an
offset. Serving page N therefore means walking pages 1..N in order, keeping
everything that passes the search filter, and slicing the requested window
out of the accumulated result locally. That is one store round trip per page,
so deep pages get proportionally slower.

Filtering happens after each page-sized fetch, so a store page can shrink
once filtered. The window is cut from the whole filtered accumulation by
nominal page size rather than trusting per-page counts.
"""

from __future__ import annotations

from contextlib import aclosing
import logging
from typing import TYPE_CHECKING, Any, Protocol

from pagination_service.core.pagination.schemas import Entry, PageResponse

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Sequence

    from pagination_service.core.pagination.schemas import PaginationRequest, QueryPage

logger = logging.getLogger(__name__)


class PageStore(Protocol):
    """What the paginator needs from a store."""

    def iter_pages(
        self, partition_key: str, page_size: int, descending: bool = False
    ) -> AsyncIterator[QueryPage]: ...

    def to_entry(self, item: dict[str, Any]) -> Entry: ...


def matches_search(entry: Entry, search: str) -> bool:
    """Case-insensitive substring test on the sort key; empty search matches all."""
    if not search:
        return True
    return search.lower() in entry.sort_key.lower()


def extract_window(entries: Sequence[Entry], page: int, page_size: int) -> list[Entry]:
    """Slice the items of ``page`` out of the accumulated entries.

    Bounds are clamped to the sequence, so a page past the end yields an
    empty list rather than an error.
    """
    start = max((page - 1) * page_size, 0)
    end = min(page * page_size, len(entries))
    if start >= end:
        return []
    return list(entries[start:end])


class Paginator:
    """Serve numbered pages from a store that only paginates by cursor.

    Example:
        paginator = Paginator(store)
        response = await paginator.serve(request)
    """

    def __init__(self, store: PageStore) -> None:
        self._store = store

    async def paginate(
        self,
        partition_key: str,
        target_page: int,
        page_size: int,
        descending: bool = False,
        search: str = "",
    ) -> tuple[int, list[Entry]]:
        """Walk the partition until ``target_page`` or exhaustion.

        Args:
            partition_key: Partition to read.
            target_page: 1-based page the caller wants.
            page_size: Store page size and nominal window size.
            descending: Read the partition in reverse sort-key order.
            search: Optional case-insensitive sort-key substring filter.

        Returns:
            The page actually reached and every matching entry seen on the
            way there, in store order.

        Raises:
            StoreQueryError: A store query failed.
            DeserializationError: A store item had an unexpected shape.
        """
        current_page = 1
        matched: list[Entry] = []

        pages = self._store.iter_pages(partition_key, page_size, descending)
        async with aclosing(pages):
            async for query_page in pages:
                for item in query_page.items:
                    entry = self._store.to_entry(item)
                    if matches_search(entry, search):
                        matched.append(entry)

                if not query_page.has_more or current_page >= target_page:
                    break
                current_page += 1

        logger.debug(
            "Pagination walk finished",
            extra={
                "requested_page": target_page,
                "served_page": current_page,
                "matched": len(matched),
            },
        )
        return current_page, matched

    async def serve(self, request: PaginationRequest) -> PageResponse:
        """Resolve a pagination request into the response envelope."""
        served_page, matched = await self.paginate(
            request.partition_key,
            request.page,
            request.page_size,
            descending=request.descending,
            search=request.search,
        )
        window = extract_window(matched, served_page, request.page_size)
        return PageResponse(data=window, page=served_page, size=len(window))
