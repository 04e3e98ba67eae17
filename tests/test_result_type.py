"""Tests for the Result type and error codes."""

import inspect

import pytest

from services import error_codes
from services.result import Result


class TestResultOk:
    """Tests for successful Result creation."""

    def test_ok_without_value(self):
        """Result.ok() creates success without value."""
        result = Result.ok()
        assert result.success is True
        assert result.value is None
        assert result.error is None
        assert result.error_code is None

    def test_ok_with_value(self):
        result = Result.ok(42)
        assert result.success is True
        assert result.value == 42


class TestResultFail:
    """Tests for failed Result creation."""

    def test_fail_with_code(self):
        """Result.fail(msg, code) creates failure with code."""
        result = Result.fail("Player not found", code=error_codes.PLAYER_NOT_FOUND)
        assert result.success is False
        assert result.value is None
        assert result.error == "Player not found"
        assert result.error_code == error_codes.PLAYER_NOT_FOUND

    def test_fail_is_falsy(self):
        assert not Result.fail("error")
        assert Result.ok(0)


class TestResultUnwrap:
    """Tests for Result.unwrap()."""

    def test_unwrap_success(self):
        assert Result.ok(42).unwrap() == 42

    def test_unwrap_failure_raises(self):
        """unwrap() raises ValueError on failure."""
        result = Result.fail("Something went wrong")
        with pytest.raises(ValueError, match="Cannot unwrap failed result"):
            result.unwrap()


class TestResultMap:
    """Tests for Result.map() chaining."""

    def test_map_on_success(self):
        mapped = Result.ok(5).map(lambda x: Result.ok(x * 2))
        assert mapped.value == 10

    def test_map_on_failure(self):
        """map() returns original failure."""
        result = Result.fail("error", code="test_error")
        mapped = result.map(lambda x: Result.ok(x * 2))
        assert mapped is result


class TestErrorCodes:
    """Tests for error code constants."""

    def test_error_codes_are_unique(self):
        codes = [
            value
            for name, value in inspect.getmembers(error_codes)
            if not name.startswith("_") and isinstance(value, str)
        ]
        assert len(codes) == len(set(codes)), "Duplicate error codes found"

    def test_ladder_error_codes_exist(self):
        for name in (
            "VALIDATION_ERROR",
            "PLAYER_NOT_FOUND",
            "PLAYER_ALREADY_EXISTS",
            "MISSING_POLICY",
            "UNKNOWN_POLICY",
        ):
            assert isinstance(getattr(error_codes, name), str)
