"""Commands that read pages straight from the table, bypassing HTTP."""

import click

from pagination_service.cli.utils import coro, error
from pagination_service.core.exceptions import AppException
from pagination_service.core.pagination import PaginationRequest, Paginator
from pagination_service.core.settings import get_dynamodb_settings, get_pagination_settings
from pagination_service.infra.dynamodb import DynamoDBStore
from pagination_service.infra.logging.config import setup_logging


@click.group(name="pages")
def pages() -> None:
    """Inspect table contents page by page."""


@pages.command()
@click.argument("partition_key")
@click.option("--page", default=1, type=click.IntRange(min=1), help="1-based page number")
@click.option(
    "--page-size",
    default=None,
    type=click.IntRange(min=1),
    help="Items per page (default: from settings)",
)
@click.option("--descending", is_flag=True, help="Read in reverse sort-key order")
@click.option("--search", default="", help="Case-insensitive sort-key substring filter")
@coro
async def fetch(
    partition_key: str,
    page: int,
    page_size: int | None,
    descending: bool,
    search: str,
) -> None:
    """Print one page of PARTITION_KEY as JSON, as GET /paginate would."""
    setup_logging()
    settings = get_pagination_settings()
    page_size = page_size or settings.default_page_size
    if settings.max_page_size is not None:
        page_size = min(page_size, settings.max_page_size)
    request = PaginationRequest(
        partition_key=partition_key,
        page=page,
        page_size=page_size,
        order_by="-" if descending else "",
        search=search,
    )

    store = DynamoDBStore(get_dynamodb_settings())
    await store.startup()
    try:
        response = await Paginator(store).serve(request)
    except AppException as e:
        error(e)
        raise SystemExit(1) from e
    finally:
        await store.shutdown()

    click.echo(response.model_dump_json(by_alias=True, indent=2))
