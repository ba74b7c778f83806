"""Tests for wrap() and awrap()."""

import asyncio

import pytest
from hypothesis import given

from coded_result import awrap, error, init, ok, wrap

from tests.strategies import codes, values


def raise_(exc: BaseException):
    raise exc


class TestWrap:
    """Tests for the synchronous adapter."""

    def test_normal_return_is_ok(self):
        assert wrap('PARSE_ERROR', lambda: int('42')) == ok(42)

    @given(codes, values)
    def test_normal_return_property(self, code, value):
        assert wrap(code, lambda: value) == ok(value)

    def test_none_return_is_ok(self):
        """A function returning None still succeeds."""
        assert wrap('E', lambda: None) == ok(None)

    def test_exception_becomes_cause(self):
        exc = ValueError('bad digit')
        result = wrap('PARSE_ERROR', lambda: raise_(exc))
        assert result == error('PARSE_ERROR', exc)
        assert result.cause is exc

    def test_real_exception_from_callee(self):
        result = wrap('PARSE_ERROR', lambda: int('x'))
        assert result.is_err()
        assert result.code == 'PARSE_ERROR'
        assert isinstance(result.cause, ValueError)

    def test_fn_called_once(self):
        calls = []

        def fn():
            calls.append(1)
            return 'done'

        wrap('E', fn)
        assert calls == [1]

    def test_uncaught_type_propagates(self):
        """Exceptions outside `exceptions` are not classified."""
        with pytest.raises(TypeError):
            wrap('E', lambda: raise_(TypeError('nope')), exceptions=(ValueError,))

    def test_base_exception_propagates_by_default(self):
        with pytest.raises(KeyboardInterrupt):
            wrap('E', lambda: raise_(KeyboardInterrupt()))

    def test_unrecognized_fault_drops_cause(self):
        """A caught exception that is not a recognized cause yields no cause."""
        result = wrap(
            'LOOKUP_FAILED',
            lambda: raise_(IndexError('3')),
            exceptions=(LookupError,),
            causes=(KeyError,),
        )
        assert result == error('LOOKUP_FAILED')
        assert result.cause is None

    def test_recognized_fault_keeps_cause(self):
        exc = KeyError('k')
        result = wrap('LOOKUP_FAILED', lambda: raise_(exc), exceptions=(LookupError,), causes=(KeyError,))
        assert result.cause is exc

    def test_uses_configured_defaults(self):
        init(exceptions=(ValueError,), causes=())
        assert wrap('E', lambda: raise_(ValueError('x'))) == error('E')
        with pytest.raises(RuntimeError):
            wrap('E', lambda: raise_(RuntimeError('x')))

    def test_explicit_arguments_override_config(self):
        init(exceptions=(ValueError,), causes=())
        exc = RuntimeError('x')
        result = wrap('E', lambda: raise_(exc), exceptions=(RuntimeError,), causes=(RuntimeError,))
        assert result.cause is exc


class TestAwrap:
    """Tests for the asynchronous adapter."""

    @pytest.mark.asyncio
    async def test_resolved_coroutine(self):
        async def fetch():
            return 42

        assert await awrap('FETCH_FAILED', fetch()) == ok(42)

    @pytest.mark.asyncio
    async def test_rejected_coroutine(self):
        exc = ConnectionError('refused')

        async def fetch():
            raise exc

        result = await awrap('FETCH_FAILED', fetch())
        assert result == error('FETCH_FAILED', exc)

    @pytest.mark.asyncio
    async def test_resolved_future(self):
        future = asyncio.get_running_loop().create_future()
        future.set_result('value')
        assert await awrap('E', future) == ok('value')

    @pytest.mark.asyncio
    async def test_rejected_future(self):
        exc = ValueError('m')
        future = asyncio.get_running_loop().create_future()
        future.set_exception(exc)
        assert await awrap('E', future) == error('E', exc)

    @pytest.mark.asyncio
    async def test_task_settling_later(self):
        async def slow():
            await asyncio.sleep(0.01)
            return 'late'

        task = asyncio.create_task(slow())
        assert await awrap('E', task) == ok('late')

    @pytest.mark.asyncio
    async def test_unrecognized_fault_drops_cause(self):
        async def fetch():
            raise IndexError('3')

        result = await awrap('E', fetch(), exceptions=(LookupError,), causes=(KeyError,))
        assert result == error('E')

    @pytest.mark.asyncio
    async def test_uncaught_type_propagates(self):
        async def fetch():
            raise TypeError('nope')

        with pytest.raises(TypeError):
            await awrap('E', fetch(), exceptions=(ValueError,))

    @pytest.mark.asyncio
    async def test_cancellation_propagates(self):
        """Cancellation is a BaseException and is never classified."""
        future = asyncio.get_running_loop().create_future()
        future.cancel()
        with pytest.raises(asyncio.CancelledError):
            await awrap('E', future)

    @pytest.mark.asyncio
    @pytest.mark.parametrize('value', [5, None, 'pending', lambda: 1])
    async def test_non_awaitable_raises_type_error(self, value):
        """Passing something that cannot be awaited is a caller bug, not a failure."""
        with pytest.raises(TypeError, match='needs an awaitable'):
            await awrap('E', value)

    @pytest.mark.asyncio
    async def test_concurrent_calls_are_independent(self):
        async def value(v):
            await asyncio.sleep(0)
            return v

        async def fail():
            raise ValueError('x')

        results = await asyncio.gather(
            awrap('A', value(1)),
            awrap('B', fail()),
            awrap('C', value(3)),
        )
        assert results[0] == ok(1)
        assert results[1].code == 'B'
        assert results[2] == ok(3)
