"""Coloured status lines for CLI commands.

Status and progress lines go through ``click.secho`` so they can be told
apart from command output; errors go to stderr, leaving stdout clean for
the JSON that ``pages fetch`` and ``config show`` print.
"""

from __future__ import annotations

import click

from pagination_service.core.exceptions import AppException

_STYLES = {
    "success": ("✓", "green"),
    "error": ("✗", "red"),
    "warning": ("⚠", "yellow"),
    "info": ("ℹ", "blue"),
}


def _status(kind: str, message: str, *, err: bool = False) -> None:
    symbol, colour = _STYLES[kind]
    click.secho(f"{symbol} {message}", fg=colour, err=err)


def success(message: str) -> None:
    _status("success", message)


def warning(message: str) -> None:
    _status("warning", message)


def info(message: str) -> None:
    _status("info", message)


def error(problem: AppException | str) -> None:
    """Report a failure on stderr.

    Application exceptions are shown with their problem type, e.g.
    ``✗ Error in DynamoDB query [store-query-error]``.
    """
    if isinstance(problem, AppException):
        message = f"{problem.detail} [{problem.type}]"
    else:
        message = problem
    _status("error", message, err=True)
