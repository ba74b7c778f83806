"""Package configuration: ResultConfig, init() and get_config()."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from coded_result._logging import LEVELS, configure_logging

__all__ = [
    'LOG_LEVEL_ENV',
    'ResultConfig',
    'get_config',
    'init',
]

LOG_LEVEL_ENV = 'CODED_RESULT_LOG_LEVEL'


@dataclass(frozen=True)
class ResultConfig:
    """Process-wide defaults for the exception adapters.

    Attributes:
        exceptions: Exception types that wrap()/awrap() catch. Anything else
            propagates.
        causes: Caught exception types kept as the Err cause. A caught
            exception outside this tuple yields an Err without cause.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
    """

    exceptions: tuple[type[BaseException], ...] = (Exception,)
    causes: tuple[type[BaseException], ...] = (Exception,)
    log_level: str | None = None


_config: ResultConfig | None = None


def _check_exception_types(name: str, types: object) -> tuple[type[BaseException], ...]:
    if not isinstance(types, tuple) or not all(
        isinstance(t, type) and issubclass(t, BaseException) for t in types
    ):
        msg = f'{name} must be a tuple of exception classes, got {types!r}'
        raise TypeError(msg)
    return types


def _detect_log_level() -> str | None:
    """Read the log level from CODED_RESULT_LOG_LEVEL, if set and valid."""
    env_level = os.environ.get(LOG_LEVEL_ENV, '').upper()
    if not env_level:
        return None
    if env_level not in LEVELS:
        logging.warning("Unknown %s value '%s', logging stays silent", LOG_LEVEL_ENV, env_level)
        return None
    return env_level


def init(
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
    causes: tuple[type[BaseException], ...] | None = None,
    log_level: str | None = None,
) -> ResultConfig:
    """Install the process-wide configuration.

    Args:
        exceptions: Exception types the adapters catch. Defaults to (Exception,).
        causes: Caught exception types kept as cause. Defaults to (Exception,).
        log_level: Logging level ("DEBUG", "INFO", etc.). Falls back to the
            CODED_RESULT_LOG_LEVEL environment variable; None = silent.

    Returns:
        The ResultConfig that was set.

    Raises:
        TypeError: If exceptions or causes is not a tuple of exception classes.
        ValueError: If log_level is not a known logging level.

    Example:
        ```python
        from coded_result import init

        # Only catch lookup failures, keep only KeyError as cause
        init(exceptions=(LookupError,), causes=(KeyError,), log_level='DEBUG')
        ```
    """
    global _config  # noqa: PLW0603

    defaults = ResultConfig()
    resolved_exceptions = (
        defaults.exceptions if exceptions is None else _check_exception_types('exceptions', exceptions)
    )
    resolved_causes = defaults.causes if causes is None else _check_exception_types('causes', causes)
    if log_level is None:
        resolved_level = _detect_log_level()
    elif log_level.upper() in LEVELS:
        resolved_level = log_level.upper()
    else:
        msg = f"Unknown log level {log_level!r}, expected one of {', '.join(LEVELS)}"
        raise ValueError(msg)

    _config = ResultConfig(
        exceptions=resolved_exceptions,
        causes=resolved_causes,
        log_level=resolved_level,
    )

    if resolved_level is not None:
        configure_logging(resolved_level)

    return _config


def get_config() -> ResultConfig:
    """Get the current configuration, or the defaults if init() was never called."""
    if _config is None:
        return ResultConfig()
    return _config
