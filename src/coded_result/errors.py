"""Unwrap error: the exception raised when an Err is unwrapped."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from coded_result.result import Err

__all__ = ['UnwrapError']


class UnwrapError(Exception):
    """An Err was unwrapped - exception variant.

    The message is the failure code. The cause payload is kept on ``cause``
    whatever its type; when it is an exception it is also chained as
    ``__cause__`` by ``Err.unwrap()``.
    """

    def __init__(self, code: Any, cause: Any = None) -> None:
        self.code = code
        self.cause = cause
        super().__init__(str(code))

    def to_result(self) -> Err[Any, Any]:
        """Convert back to Err for Result-based code."""
        from coded_result.result import Err

        return Err(self.code, self.cause)
