"""Utilities for running async operations in CLI commands."""

import asyncio
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any


def coro(func: Callable[..., Awaitable[Any]]) -> Callable[..., Any]:
    """Run an async Click command body in a fresh event loop.

    Usage:
        @click.command()
        @coro
        async def my_command():
            await some_async_operation()
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return asyncio.run(func(*args, **kwargs))

    return wrapper
