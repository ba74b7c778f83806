"""Result type: Ok[T] | Err[E, C] for explicit, classified error handling.

A Result is either a success carrying a value, or a failure carrying a
classification ``code`` and an optional ``cause``. Combinators never mutate
a Result; they return a new one, or the same instance when the operation
does not apply to the variant at hand.

Example:
    ```python
    from coded_result import error, ok

    ok(10).map(lambda x: x * 2).map(lambda x: x + 5)
    # Ok(value=25)

    error('DIVISION_BY_ZERO').map_error(str.lower).unwrap_or(-1)
    # -1
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, NoReturn, TypeIs, overload

import msgspec

from coded_result.errors import UnwrapError

__all__ = [
    'Err',
    'NoValue',
    'NoValueType',
    'Ok',
    'Result',
    'ResultWithCause',
    'error',
    'ok',
    'unwrap',
    'unwrap_or',
]


class NoValueType(msgspec.Struct, frozen=True, gc=False):
    """Payload of a success that carries nothing.

    This is a singleton - use the `NoValue` constant instead of
    instantiating directly. It is deliberately distinct from None, so
    ``ok()`` and ``ok(None)`` stay distinguishable.
    """

    def __repr__(self) -> str:
        return 'NoValue'


NoValue: NoValueType = NoValueType()
"""Singleton payload of ``ok()`` called without a value."""


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Error-side combinators (map_error, map_cause, with_error, ...) return
    this same instance untouched.

    Examples:
        >>> Ok(42).unwrap()
        42
        >>> Ok(42).map(lambda x: x * 2)
        Ok(value=84)
        >>> Ok(42).with_error('IGNORED')
        Ok(value=42)
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True if the result is Ok.

        This method provides type narrowing - after checking is_ok(),
        the type checker knows the result is Ok[T].
        """
        return True

    def is_err(self) -> TypeIs[Err[Any, Any]]:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained value. Always succeeds for Ok."""
        return self.value

    def unwrap_or(self, default: object) -> T:  # noqa: ARG002
        """Return the contained value verbatim, ignoring the default."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            A new Ok containing f(value).
        """
        return Ok(f(self.value))

    def map_or[U](self, default: U, f: Callable[[T], U]) -> Ok[U]:  # noqa: ARG002
        """Apply f to the contained value; the default is unused for Ok."""
        return Ok(f(self.value))

    def map_error(self, _f: Callable[[Any], Any]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def map_cause(self, _f: Callable[[Any], Any]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def with_error(self, _code: object) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def with_error_and_cause(self, _code: object, _cause: object) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def match[U](
        self,
        *,
        ok: Callable[[T], U],
        err: Callable[[Any, Any], U],  # noqa: ARG002
    ) -> U:
        """Dispatch on the variant: call ``ok(value)`` and return its result."""
        return ok(self.value)


class Err[E, C](msgspec.Struct, frozen=True):
    """Failure variant of Result with a classification code and optional cause.

    ``code`` is the caller's closed tag for the kind of failure (a string
    literal or an enum member). ``cause`` is whatever diagnostic payload was
    attached - an exception, plain data, or None when absent.

    Success-side combinators (map, unwrap_or) pass the failure through;
    map_or is the one that leaves the error track with a fallback.

    Examples:
        >>> err = Err('NOT_FOUND')
        >>> err.is_err()
        True
        >>> err.unwrap_or(0)
        0
        >>> err.with_error('MISSING')
        Err(code='MISSING', cause=None)
    """

    code: E
    cause: C | None = None

    def is_ok(self) -> TypeIs[Ok[Any]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E, C]]:
        """Return True if the result is Err.

        This method provides type narrowing - after checking is_err(),
        the type checker knows the result is Err[E, C].
        """
        return True

    def to_exception(self) -> UnwrapError:
        """Convert to exception for raise-based code.

        The returned exception is not raised; its ``__cause__`` is chained
        to the cause when the cause is itself an exception.
        """
        exc = UnwrapError(self.code, self.cause)
        if isinstance(self.cause, BaseException):
            exc.__cause__ = self.cause
        return exc

    def unwrap(self) -> NoReturn:
        """Raise since Err has no value to return.

        Raises:
            UnwrapError: Always. Its message is the code, and it is chained
                to the cause when the cause is an exception.
        """
        if isinstance(self.cause, BaseException):
            raise UnwrapError(self.code, self.cause) from self.cause
        raise UnwrapError(self.code, self.cause)

    def unwrap_or[U](self, default: U) -> U:
        """Return the default verbatim, whatever the code and cause are."""
        return default

    def map(self, _f: Callable[[Any], Any]) -> Err[E, C]:
        """Return self unchanged since this is Err."""
        return self

    def map_or[U](self, default: U, _f: Callable[[Any], U]) -> Ok[U]:
        """Recover with Ok(default). The function is never called."""
        return Ok(default)

    def map_error[F](self, f: Callable[[E], F]) -> Err[F, C]:
        """Reclassify the failure, keeping its cause.

        Args:
            f: Function mapping the current code to a new one.

        Returns:
            A new Err with code f(code) and the same cause.
        """
        return Err(f(self.code), self.cause)

    def map_cause[D](self, f: Callable[[C | None], D]) -> Err[E, D]:
        """Transform the cause, keeping the code.

        f is called even when there is no cause, in which case it receives None.
        """
        return Err(self.code, f(self.cause))

    def with_error[F](self, code: F) -> Err[F, C]:
        """Replace the code, keeping the cause."""
        return Err(code, self.cause)

    def with_error_and_cause[F, D](self, code: F, cause: D) -> Err[F, D]:
        """Replace both the code and the cause."""
        return Err(code, cause)

    def match[U](
        self,
        *,
        ok: Callable[[Any], U],  # noqa: ARG002
        err: Callable[[E, C | None], U],
    ) -> U:
        """Dispatch on the variant: call ``err(code, cause)`` and return its result."""
        return err(self.code, self.cause)


type Result[T, E = str] = Ok[T] | Err[E, None]
type ResultWithCause[T, E = str, C = BaseException] = Ok[T] | Err[E, C]


@overload
def ok() -> Ok[NoValueType]: ...


@overload
def ok[T](value: T) -> Ok[T]: ...


def ok(value: Any = NoValue) -> Ok[Any]:
    """Build a success.

    Called without arguments, the success carries `NoValue`. Any explicit
    value, None included, is stored verbatim.

    Examples:
        >>> ok()
        Ok(value=NoValue)
        >>> ok(None)
        Ok(value=None)
    """
    return Ok(value)


@overload
def error[E](code: E) -> Err[E, None]: ...


@overload
def error[E, C](code: E, cause: C) -> Err[E, C]: ...


def error(code: Any, cause: Any = None) -> Err[Any, Any]:
    """Build a failure with a classification code and an optional cause.

    The cause is stored as given, without wrapping or normalization.

    Examples:
        >>> error('TIMEOUT')
        Err(code='TIMEOUT', cause=None)
        >>> error('BAD_INPUT', {'field': 'age'})
        Err(code='BAD_INPUT', cause={'field': 'age'})
    """
    return Err(code, cause)


def unwrap[T](result: Ok[T] | Err[Any, Any]) -> T:
    """Return the value of an Ok, or raise UnwrapError for an Err.

    This is the one place where a represented failure turns back into an
    exception. The cause stays attached to the raised error.
    """
    return result.unwrap()


def unwrap_or[T, U](result: Ok[T] | Err[Any, Any], default: U) -> T | U:
    """Return the value of an Ok, or ``default`` for an Err."""
    return result.unwrap_or(default)
