# SPDX-License-Identifier: Apache-2.0
"""Unit tests for Result, Error and status mapping."""

from __future__ import annotations

import pytest

from apex.application.result import Error, Result, ResultStateError, status_code_for


class TestResult:
    """Tests for Result construction and access."""

    @pytest.mark.fast
    def test_success_with_value(self):
        result = Result.success(42)

        assert result.is_success
        assert not result.is_failure
        assert result.value == 42
        assert result.error == Error.NONE

    def test_success_without_value(self):
        assert Result.success().value is None

    def test_failure(self):
        error = Error("Customer.NotFound", "missing")
        result = Result.failure(error)

        assert result.is_failure
        assert result.error is error

    def test_reading_value_of_failure_fails_fast(self):
        with pytest.raises(ResultStateError, match="Customer.NotFound"):
            Result.failure(Error("Customer.NotFound", "missing")).value

    def test_inconsistent_construction(self):
        with pytest.raises(ResultStateError):
            Result(True, Error("X.Y", "z"))
        with pytest.raises(ResultStateError):
            Result.failure(Error.NONE)

    def test_result_state_error_is_not_business_failure(self):
        assert issubclass(ResultStateError, RuntimeError)


class TestStatusMapping:
    """Tests for status_code_for."""

    @pytest.mark.parametrize(
        "code,status",
        [
            ("Customer.NotFound", 404),
            ("Bond.NotFound", 404),
            ("Customer.AlreadyExists", 409),
            ("Customer.ValidationFailed", 400),
            ("Customer.InvalidQuery", 400),
            ("Customer.DomainError", 400),
            ("Whatever", 400),
        ],
    )
    def test_suffix_mapping(self, code, status):
        assert status_code_for(Error(code, "msg")) == status

    def test_error_str(self):
        assert str(Error("A.B", "text")) == "A.B: text"
        assert Error.NONE.is_none
