"""
Type guard functions for runtime narrowing of Option and Result values.

These are useful at boundaries where a value of unknown type may or may not
already be wrapped, e.g. results returned from untyped callbacks.
"""

from typing import Any, TypeGuard

from .core.option import Absent, Option, Present
from .core.result import Failure, Result, Success


def is_option(value: Any) -> TypeGuard[Option[Any]]:
    """
    Check if value is an Option (Present or Absent).

    Args:
        value: Value to check

    Returns:
        True if value is one of the Option variants
    """
    return isinstance(value, Option)


def is_result(value: Any) -> TypeGuard[Result[Any, Any]]:
    """
    Check if value is a Result (Success or Failure).

    Args:
        value: Value to check

    Returns:
        True if value is one of the Result variants
    """
    return isinstance(value, Result)


def is_present(value: Any) -> TypeGuard[Present[Any]]:
    """Check if value is a Present option."""
    return isinstance(value, Present)


def is_absent(value: Any) -> TypeGuard[Absent[Any]]:
    """Check if value is an Absent option."""
    return isinstance(value, Absent)


def is_success(value: Any) -> TypeGuard[Success[Any, Any]]:
    """Check if value is a Success result."""
    return isinstance(value, Success)


def is_failure(value: Any) -> TypeGuard[Failure[Any, Any]]:
    """Check if value is a Failure result."""
    return isinstance(value, Failure)


__all__ = [
    "is_absent",
    "is_failure",
    "is_option",
    "is_present",
    "is_result",
    "is_success",
]
