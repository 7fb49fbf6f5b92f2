"""
Functional Programming Core Components

This module provides the two closed algebraic types of the package:
- Option[T]: a value that may be absent (Present / Absent)
- Result[T, E]: a computation that may fail (Success / Failure)

The two are independent; neither module imports the other.
"""

from .option import (
    Absent,
    Option,
    Present,
    absent,
    compose_options,
    first_present,
    of,
    sequence_options,
    traverse_options,
)
from .result import (
    Failure,
    Result,
    Success,
    compose_results,
    failure,
    sequence_results,
    success,
    traverse_results,
    try_result,
)

__all__ = [
    # Option
    "Absent",
    "Option",
    "Present",
    "absent",
    "compose_options",
    "first_present",
    "of",
    "sequence_options",
    "traverse_options",
    # Result
    "Failure",
    "Result",
    "Success",
    "compose_results",
    "failure",
    "sequence_results",
    "success",
    "traverse_results",
    "try_result",
]
