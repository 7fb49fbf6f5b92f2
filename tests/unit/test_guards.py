"""Tests for runtime type guards and the exception hierarchy."""

import pytest

from fpalgebra import (
    Absent,
    AlgebraError,
    Failure,
    InvalidPresentValueError,
    Present,
    Success,
    UnwrapError,
    VariantError,
    is_absent,
    is_failure,
    is_option,
    is_present,
    is_result,
    is_success,
)


class TestGuards:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (Present(1), True),
            (Absent(), True),
            (Success(1), False),
            (None, False),
            (1, False),
        ],
    )
    def test_is_option(self, value, expected):
        assert is_option(value) is expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (Success(1), True),
            (Failure("e"), True),
            (Present(1), False),
            ("e", False),
        ],
    )
    def test_is_result(self, value, expected):
        assert is_result(value) is expected

    def test_variant_guards(self):
        assert is_present(Present(0))
        assert not is_present(Absent())
        assert is_absent(Absent())
        assert not is_absent(Present(0))
        assert is_success(Success(None))
        assert not is_success(Failure(None))
        assert is_failure(Failure(None))
        assert not is_failure(Success(None))

    def test_algebras_are_independent(self):
        """An Option is never a Result and vice versa."""
        assert not is_result(Present(Success(1)))
        assert not is_option(Success(Present(1)))
        assert Present(Success(1)).flatten() == Present(Success(1))
        assert Success(Present(1)).flatten() == Success(Present(1))


class TestExceptions:
    def test_hierarchy(self):
        assert issubclass(UnwrapError, AlgebraError)
        assert issubclass(InvalidPresentValueError, ValueError)
        assert issubclass(VariantError, TypeError)

    def test_error_code_defaults_to_class_name(self):
        error = AlgebraError("boom")
        assert error.error_code == "AlgebraError"
        assert error.get_error_context() == {
            "error_type": "AlgebraError",
            "error_code": "AlgebraError",
            "message": "boom",
            "context": "{}",
        }

    def test_unwrap_error_context(self):
        with pytest.raises(UnwrapError) as exc_info:
            Failure(404).unwrap()
        context = exc_info.value.get_error_context()
        assert context["variant"] == "Failure"
        assert "404" in context["context"]

    def test_variant_error_message(self):
        error = VariantError("Result", "Pending")
        assert "Pending" in str(error)
        assert error.context == {"type": "Result", "subclass": "Pending"}
