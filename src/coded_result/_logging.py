"""Structured logging for coded-result.

Loggers are structlog wrappers around stdlib loggers under the
``coded_result`` namespace. Their processor chain is bound per logger, so
the host application's structlog configuration and root logger are left
alone. configure_logging() only installs output on the package logger.

Fault hooks let callers observe every event the package emits (for
metrics or alerting) without parsing rendered log lines.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'LEVELS',
    'PACKAGE_LOGGER',
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]

PACKAGE_LOGGER = 'coded_result'

LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

type LogHook = Callable[[dict[str, Any]], None]

_log_hooks: list[LogHook] = []

# Handler installed by configure_logging(); replaced, never duplicated.
_handler: logging.Handler | None = None


def _run_hooks(_logger: Any, _method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for hook in _log_hooks:
        try:
            hook(event_dict.copy())
        except Exception:
            pass  # Don't let hook failures break logging
    return event_dict


def _processors() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        _run_hooks,
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Send coded-result events to stderr at the given level.

    Only the ``coded_result`` stdlib logger is touched: its previous
    coded-result handler is swapped for a new one and it stops propagating,
    so events are not rendered twice by the application's root handlers.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON logs. If False, use colored console output.

    Raises:
        ValueError: If level is not one of LEVELS.
    """
    global _handler  # noqa: PLW0603

    if level.upper() not in LEVELS:
        msg = f'Unknown log level {level!r}, expected one of {", ".join(LEVELS)}'
        raise ValueError(msg)

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None:
        package_logger.removeHandler(_handler)
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level.upper()))
    package_logger.propagate = False
    _handler = handler


def get_logger(name: str = PACKAGE_LOGGER) -> Any:
    """Get a structlog logger bound to a stdlib logger of the package.

    Args:
        name: Logger name, normally the calling module's ``__name__``.

    Returns:
        A lazily bound structlog BoundLogger.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def add_log_hook(hook: LogHook) -> None:
    """Register a hook called with a copy of each event dict, e.g. ``fault_reclassified``."""
    _log_hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    """Remove a previously registered log hook."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    """Remove all registered log hooks."""
    _log_hooks.clear()
