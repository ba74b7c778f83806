"""Tests for UnwrapError and the Err <-> exception conversion."""

import pytest

from coded_result import Err, UnwrapError, error


class TestUnwrapError:
    """Tests for the exception variant."""

    def test_message_is_code(self):
        assert str(UnwrapError('TIMEOUT')) == 'TIMEOUT'

    def test_attributes(self):
        cause = {'retries': 3}
        exc = UnwrapError('TIMEOUT', cause)
        assert exc.code == 'TIMEOUT'
        assert exc.cause is cause

    def test_to_result(self):
        cause = OSError('disk')
        assert UnwrapError('IO', cause).to_result() == error('IO', cause)

    def test_round_trip_through_unwrap(self):
        """The raised error converts back to the failure it came from."""
        err = error('NOT_FOUND', KeyError('id'))
        with pytest.raises(UnwrapError) as exc_info:
            err.unwrap()
        assert exc_info.value.to_result() == err


class TestErrToException:
    """Tests for Err.to_exception()."""

    def test_builds_without_raising(self):
        exc = Err('E').to_exception()
        assert isinstance(exc, UnwrapError)
        assert str(exc) == 'E'
        assert exc.__cause__ is None

    def test_chains_exception_cause(self):
        cause = ValueError('x')
        assert error('E', cause).to_exception().__cause__ is cause

    def test_plain_cause_not_chained(self):
        exc = error('E', 'reason').to_exception()
        assert exc.__cause__ is None
        assert exc.cause == 'reason'
