"""@safe and @safe_async: decorator forms of wrap() and awrap()."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

import wrapt

from coded_result.adapters import awrap, wrap
from coded_result.result import Err, Ok

__all__ = ['safe', 'safe_async']


def safe[E](
    code: E,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
    causes: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Decorator that classifies raised exceptions under ``code``.

    The decorated function returns Ok(value) on success and Err(code, cause)
    when it raises one of ``exceptions``.

    Args:
        code: Classification code for the failure.
        exceptions: Exception types to catch. Defaults to the configured ones.
        causes: Caught exception types kept as cause. Defaults to the configured ones.

    Returns:
        A decorator turning a T-returning function into a Result-returning one.

    Example:
        ```python
        @safe('DIVISION_BY_ZERO', exceptions=(ZeroDivisionError,))
        def divide(a: int, b: int) -> float:
            return a / b

        divide(10, 2)
        # Ok(value=5.0)
        divide(10, 0)
        # Err(code='DIVISION_BY_ZERO', cause=ZeroDivisionError('division by zero'))
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[Any] | Err[E, Any]:
        return wrap(code, lambda: wrapped(*args, **kwargs), exceptions=exceptions, causes=causes)

    return wrapper


def safe_async[E](
    code: E,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
    causes: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Async decorator that classifies raised exceptions under ``code``.

    Example:
        ```python
        @safe_async('FETCH_FAILED')
        async def fetch(url: str) -> bytes:
            return await http_get(url)
        ```
    """

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[..., Awaitable[Any]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[Any] | Err[E, Any]:
        return await awrap(code, wrapped(*args, **kwargs), exceptions=exceptions, causes=causes)

    return wrapper
