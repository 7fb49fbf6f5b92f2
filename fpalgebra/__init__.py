"""
fpalgebra - Option and Result types for Python.

This package provides two small, closed algebraic data types with a uniform
set of combinators:
- Option: Present(value) or Absent, built with of() / absent()
- Result: Success(value) or Failure(error), built with success() / failure()

Usage:
    from fpalgebra import of, failure, success

    of(None).or_else(lambda: of(42)).map(lambda x: x * 2).get_or(-1)  # 84
    failure("bad").or_else(lambda e: success(len(e))).get_or(-1)  # 3
"""

from .core import (
    Absent,
    Failure,
    Option,
    Present,
    Result,
    Success,
    absent,
    compose_options,
    compose_results,
    failure,
    first_present,
    of,
    sequence_options,
    sequence_results,
    success,
    traverse_options,
    traverse_results,
    try_result,
)
from .exceptions import AlgebraError, InvalidPresentValueError, UnwrapError, VariantError
from .guards import (
    is_absent,
    is_failure,
    is_option,
    is_present,
    is_result,
    is_success,
)

__version__ = "0.1.0"
__description__ = "Closed Option and Result algebras with monadic combinators"

__all__ = [
    "Absent",
    "AlgebraError",
    "Failure",
    "InvalidPresentValueError",
    "Option",
    "Present",
    "Result",
    "Success",
    "UnwrapError",
    "VariantError",
    "absent",
    "compose_options",
    "compose_results",
    "failure",
    "first_present",
    "is_absent",
    "is_failure",
    "is_option",
    "is_present",
    "is_result",
    "is_success",
    "of",
    "sequence_options",
    "sequence_results",
    "success",
    "traverse_options",
    "traverse_results",
    "try_result",
]
