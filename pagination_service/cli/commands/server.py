"""Server management commands."""

import click
import uvicorn

from pagination_service.cli.utils import info
from pagination_service.core.settings import get_app_settings, get_logging_settings

APP_FACTORY = "pagination_service.app.main:create_app"


@click.group(name="server")
def server() -> None:
    """Server management commands."""


@server.command()
@click.option(
    "--host",
    default=None,
    help="Host to bind (default: from settings or 0.0.0.0)",
)
@click.option(
    "--port",
    default=None,
    type=int,
    help="Port to bind (default: from settings or 8080)",
)
@click.option(
    "--reload/--no-reload",
    default=False,
    help="Enable auto-reload on code changes",
)
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Run the HTTP server."""
    settings = get_app_settings()
    log_settings = get_logging_settings()
    host = host or settings.host
    port = port or settings.port

    info(f"Server will run at: http://{host}:{port}")
    info(f"Environment: {settings.environment}")

    uvicorn.run(
        APP_FACTORY,
        factory=True,
        host=host,
        port=port,
        reload=reload,
        access_log=settings.debug,
        log_level=log_settings.level.lower(),
    )
