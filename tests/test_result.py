"""Tests for Success/Failure results"""

import pytest

from pathdsl import Success, Failure, AboveRootError


def test_success_accessors():
    result = Success(3)
    assert result.is_success()
    assert not result.is_failure()
    assert result.get() == 3
    assert result.get_or_else(0) == 3
    assert result.error is None


def test_failure_accessors():
    error = AboveRootError()
    result = Failure(error)
    assert result.is_failure()
    assert result.get_or_else(0) == 0
    assert result.error is error
    with pytest.raises(AboveRootError):
        result.get()


def test_map_and_flat_map_on_success():
    assert Success(2).map(lambda x: x * 10) == Success(20)
    assert Success(2).flat_map(lambda x: Success(x + 1)) == Success(3)
    assert Success(2).flat_map(lambda x: Failure(AboveRootError())).is_failure()


def test_failure_short_circuits():
    """Test that map/flat_map never call the function on a Failure"""
    calls = []

    def record(value):
        calls.append(value)
        return Success(value)

    failure = Failure(AboveRootError())
    assert failure.flat_map(record) is failure
    assert failure.map(record) is failure
    assert calls == []
