"""Adapters from exception-raising code to Result values."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any

from coded_result._config import get_config
from coded_result._logging import get_logger
from coded_result.result import Err, Ok

__all__ = ['awrap', 'wrap']

logger = get_logger(__name__)


def _resolve(
    exceptions: tuple[type[BaseException], ...] | None,
    causes: tuple[type[BaseException], ...] | None,
) -> tuple[tuple[type[BaseException], ...], tuple[type[BaseException], ...], bool]:
    config = get_config()
    return (
        config.exceptions if exceptions is None else exceptions,
        config.causes if causes is None else causes,
        config.log_level is not None,
    )


def _classify[E](
    code: E,
    exc: BaseException,
    causes: tuple[type[BaseException], ...],
    log: bool,
) -> Err[E, Any]:
    kept = isinstance(exc, causes)
    if log:
        logger.debug(
            'fault_reclassified',
            code=str(code),
            exc_type=type(exc).__name__,
            kept_cause=kept,
        )
    if kept:
        return Err(code, exc)
    return Err(code)


def wrap[T, E](
    code: E,
    fn: Callable[[], T],
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
    causes: tuple[type[BaseException], ...] | None = None,
) -> Ok[T] | Err[E, Any]:
    """Call ``fn`` once and turn its outcome into a Result.

    A normal return becomes Ok(value). A caught exception becomes Err(code)
    with the exception as cause when it is an instance of ``causes``, and
    with no cause otherwise.

    Args:
        code: Classification code for the failure.
        fn: Zero-argument callable to invoke.
        exceptions: Exception types to catch. Defaults to the configured
            ones, (Exception,) unless changed with init(). Other exceptions
            propagate.
        causes: Caught exception types kept as cause. Defaults to the
            configured ones, (Exception,) unless changed with init().

    Returns:
        Ok(fn()) or Err(code, cause).

    Example:
        ```python
        wrap('PARSE_ERROR', lambda: int('42'))
        # Ok(value=42)
        wrap('PARSE_ERROR', lambda: int('x'))
        # Err(code='PARSE_ERROR', cause=ValueError(...))
        ```
    """
    catch, keep, log = _resolve(exceptions, causes)
    try:
        return Ok(fn())
    except catch as e:
        return _classify(code, e, keep, log)


async def awrap[T, E](
    code: E,
    awaitable: Awaitable[T],
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
    causes: tuple[type[BaseException], ...] | None = None,
) -> Ok[T] | Err[E, Any]:
    """Await a pending computation and turn its outcome into a Result.

    Same classification as wrap(). The awaitable may be a coroutine, a
    Future or a Task and is awaited exactly once. There is no timeout:
    if it never settles, neither does awrap().

    Args:
        code: Classification code for the failure.
        awaitable: The in-flight computation.
        exceptions: Exception types to catch. Defaults to the configured ones.
        causes: Caught exception types kept as cause. Defaults to the configured ones.

    Returns:
        Ok(await awaitable) or Err(code, cause).

    Raises:
        TypeError: If awaitable is not awaitable. This is never classified.
    """
    if not inspect.isawaitable(awaitable):
        msg = f'awrap() needs an awaitable, got {type(awaitable).__name__}'
        raise TypeError(msg)
    catch, keep, log = _resolve(exceptions, causes)
    try:
        return Ok(await awaitable)
    except catch as e:
        return _classify(code, e, keep, log)
