"""Data model for page-number pagination over a cursor-only store.

Three shapes move through a request:

1. ``PaginationRequest``: validated query parameters.
2. ``QueryPage``: one raw page as returned by the store, with its cursor.
3. ``PageResponse``: the window of ``Entry`` items served to the client.

Wire names differ from attribute names; the JSON envelope keeps the
``Data``/``Page``/``Size`` and ``key_cond``/``sort_key`` keys clients rely on.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr

DESCENDING_MARKER = "-"


class Entry(BaseModel):
    """One item read from the store.

    Attributes:
        partition_key: Value of the partition (hash) key attribute.
        sort_key: Value of the sort (range) key attribute.
    """

    partition_key: StrictStr = Field(alias="key_cond", description="Partition key value")
    sort_key: StrictStr = Field(alias="sort_key", description="Sort key value")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class PaginationRequest(BaseModel):
    """Pagination parameters after extraction and coercion.

    Attributes:
        partition_key: Exact-match partition key value (wire name ``key_condition``).
        page: 1-based page number requested.
        page_size: Items per store page and per served window.
        order_by: Raw ordering hint; only a leading ``-`` is honoured.
        search: Case-insensitive substring filter applied to ``sort_key``.
    """

    partition_key: str = Field(min_length=1)
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1)
    order_by: str = ""
    search: str = ""

    model_config = ConfigDict(frozen=True)

    @property
    def descending(self) -> bool:
        """Whether the store should be scanned in reverse sort-key order."""
        return self.order_by.startswith(DESCENDING_MARKER)


class PageResponse(BaseModel):
    """Response envelope for one served page.

    ``page`` can be lower than requested when the store ran out first, and
    ``size`` can be lower than the page size on the last page.
    """

    data: list[Entry] = Field(default_factory=list, alias="Data")
    page: int = Field(alias="Page", ge=1)
    size: int = Field(alias="Size", ge=0)

    model_config = ConfigDict(populate_by_name=True)


@dataclass
class QueryPage:
    """A single page of raw store items plus the cursor to resume after it.

    Attributes:
        items: Low-level attribute maps as returned by the store.
        last_evaluated_key: Opaque continuation cursor (None when exhausted).
    """

    items: list[dict[str, Any]] = field(default_factory=list)
    last_evaluated_key: dict[str, Any] | None = None

    @property
    def has_more(self) -> bool:
        """Returns True if the store has more pages after this one."""
        return self.last_evaluated_key is not None


__all__ = [
    "DESCENDING_MARKER",
    "Entry",
    "PageResponse",
    "PaginationRequest",
    "QueryPage",
]
