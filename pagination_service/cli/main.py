"""Main CLI entry point for pagination-service management commands."""

import click

from pagination_service.cli.commands import config, pages, server


@click.group()
@click.version_option(version="1.0.0", prog_name="pagination-service")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Pagination Service CLI.

    \b
    Command Groups:
      server     Run the HTTP server
      config     Inspect effective configuration
      pages      Read pages from the table directly

    \b
    Quick Start:
      pagination-service server serve --port 8080
      pagination-service config show --format json
      pagination-service pages fetch test --page 2 --page-size 5
    """
    ctx.ensure_object(dict)


cli.add_command(server.server)
cli.add_command(config.config)
cli.add_command(pages.pages)


def main() -> None:
    """Main entry point for the CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
