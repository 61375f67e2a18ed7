"""Tests for floatrel.core.errors module."""

from floatrel.core.errors import ErrorCode


def test_ok_is_zero() -> None:
    assert ErrorCode.OK == 0


def test_failure_is_non_zero() -> None:
    assert ErrorCode.FAILURE == 1


def test_can_use_as_exit_code() -> None:
    code: int = ErrorCode.FAILURE
    assert int(code) == 1
