"""Typer subclass that accepts ``async def`` commands."""

import asyncio
import inspect
from functools import wraps
from typing import Any, Callable

import typer


def _run_async(f: Callable) -> Callable:
    """Wrap a coroutine function so typer can call it synchronously."""

    @wraps(f)
    def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
        return asyncio.run(f(*args, **kwargs))

    return sync_wrapper


class ATyper(typer.Typer):
    """Typer with async command support.

    Each async command runs in its own event loop via ``asyncio.run``.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("no_args_is_help", True)
        super().__init__(*args, **kwargs)

    def command(  # type: ignore[override]
        self,
        name: str | None = None,
        **kwargs: Any,
    ) -> Any:
        """Register a command, wrapping async functions for execution."""

        def decorator(f: Callable) -> Callable:
            if inspect.iscoroutinefunction(f):
                typer.Typer.command(self, name, **kwargs)(_run_async(f))
                return f
            return typer.Typer.command(self, name, **kwargs)(f)

        return decorator
