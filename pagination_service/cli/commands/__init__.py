"""CLI command modules."""

from pagination_service.cli.commands import config, pages, server

__all__ = [
    "config",
    "pages",
    "server",
]
