"""coded-result: a Result type with classified failures for Python 3.13+.

A Result is Ok(value) or Err(code, cause). Failures carry a closed
classification code chosen by the caller and an optional cause, and flow
through map / map_error / map_or / match without raising.

Flat imports (preferred):
    from coded_result import ok, error, unwrap, unwrap_or, wrap, awrap
    from coded_result import Ok, Err, Result, ResultWithCause, NoValue

Submodule imports (for organization):
    from coded_result.result import Ok, Err
    from coded_result.adapters import wrap, awrap
    from coded_result.decorators import safe, safe_async
"""

# Configuration
from coded_result._config import ResultConfig, get_config, init

# Logging
from coded_result._logging import add_log_hook, clear_log_hooks, configure_logging, remove_log_hook

# Adapters
from coded_result.adapters import awrap, wrap

# Decorators
from coded_result.decorators import safe, safe_async

# Errors
from coded_result.errors import UnwrapError

# Result types
from coded_result.result import (
    Err,
    NoValue,
    NoValueType,
    Ok,
    Result,
    ResultWithCause,
    error,
    ok,
    unwrap,
    unwrap_or,
)

__all__ = [
    # Result types
    'Err',
    'NoValue',
    'NoValueType',
    'Ok',
    'Result',
    # Configuration
    'ResultConfig',
    'ResultWithCause',
    # Errors
    'UnwrapError',
    # Logging
    'add_log_hook',
    # Adapters
    'awrap',
    'clear_log_hooks',
    'configure_logging',
    'error',
    'get_config',
    'init',
    'ok',
    'remove_log_hook',
    # Decorators
    'safe',
    'safe_async',
    'unwrap',
    'unwrap_or',
    'wrap',
]
