"""Main entry point for pagination-service.

Routes between the CLI and the HTTP server:
- ``--server`` anywhere in the arguments: run the FastAPI server
- anything else: run the CLI (no arguments shows help)
"""

from __future__ import annotations

import sys
from typing import NoReturn


def run_fastapi_server() -> NoReturn:
    """Run the FastAPI application server with settings from configuration."""
    import uvicorn

    from pagination_service.core.settings import get_app_settings, get_logging_settings

    settings = get_app_settings()
    log_settings = get_logging_settings()

    uvicorn.run(
        "pagination_service.app.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        access_log=settings.debug,
        log_level=log_settings.level.lower(),
    )
    sys.exit(0)


def run_cli() -> NoReturn:
    """Run the CLI interface."""
    from pagination_service.cli.main import main as cli_main

    cli_main()
    sys.exit(0)


def main() -> NoReturn:
    """Route to the server or the CLI based on arguments."""
    if "--server" in sys.argv:
        sys.argv.remove("--server")
        run_fastapi_server()
    else:
        run_cli()


if __name__ == "__main__":
    main()
