"""Pytest configuration and shared fixtures for coded-result tests."""

import logging

import pytest
import structlog

from coded_result import _config, _logging


def _reset_logging() -> None:
    handler = _logging._handler
    package_logger = logging.getLogger(_logging.PACKAGE_LOGGER)
    if handler is not None:
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
    _logging._handler = None
    _logging.clear_log_hooks()
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    """Start every test unconfigured, with no log output or hooks installed."""
    monkeypatch.setattr(_config, '_config', None)
    monkeypatch.delenv(_config.LOG_LEVEL_ENV, raising=False)
    _reset_logging()
    yield
    _reset_logging()


@pytest.fixture
def root_handler():
    """A handler the host application installed on the root logger."""
    handler = logging.NullHandler()
    root_logger = logging.getLogger()
    level = root_logger.level
    root_logger.addHandler(handler)
    yield handler
    root_logger.removeHandler(handler)
    root_logger.setLevel(level)


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from coded_result import ok

    return ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value with an exception cause."""
    from coded_result import error

    return error('PARSE_ERROR', ValueError('test error'))
