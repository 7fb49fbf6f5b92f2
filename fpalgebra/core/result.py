"""
Result monad for computations that may fail with a typed error.

Success holds the value of a computation that worked, Failure holds the
caller-defined error of one that did not. Unlike Option, nothing is inferred
from the payload: callers pick the variant explicitly, and map never
re-classifies its output.

Monad Laws:
1. Left Identity: success(a).flat_map(f) == f(a)
2. Right Identity: m.flat_map(success) == m
3. Associativity: m.flat_map(f).flat_map(g) == m.flat_map(lambda x: f(x).flat_map(g))
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar, final

from fpalgebra.exceptions import UnwrapError, VariantError

logger = logging.getLogger(__name__)

T = TypeVar("T")
E = TypeVar("E")
F = TypeVar("F")
U = TypeVar("U")
V = TypeVar("V")
R = TypeVar("R")

_VARIANTS = frozenset({"Success", "Failure"})


class Result(Generic[T, E], ABC):
    """Abstract base class for the Result monad.

    Result is closed: Success and Failure are its only variants.
    """

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__ or cls.__name__ not in _VARIANTS:
            raise VariantError("Result", cls.__name__)

    @abstractmethod
    def is_ok(self) -> bool:
        """Check if this is a Success."""

    @abstractmethod
    def is_err(self) -> bool:
        """Check if this is a Failure."""

    @abstractmethod
    def get_or(self, default: T) -> T:
        """Get the success value or return default."""

    @abstractmethod
    def get_or_else(self, func: Callable[[E], T]) -> T:
        """Get the success value or compute one from the error."""

    @abstractmethod
    def or_else(self, func: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Return this if Success, otherwise recover from the error."""

    @abstractmethod
    def map(self, func: Callable[[T], U]) -> Result[U, E]:
        """Map function over success value."""

    @abstractmethod
    def map_err(self, func: Callable[[E], F]) -> Result[T, F]:
        """Map function over failure error."""

    @abstractmethod
    def flat_map(self, func: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Flat map function over success value."""

    @abstractmethod
    def flatten(self) -> Result[Any, Any]:
        """Remove one level of Result nesting."""

    @abstractmethod
    def match(
        self, *, success: Callable[[T], R], failure: Callable[[E], R]
    ) -> R:
        """Invoke exactly one of the branches."""

    @abstractmethod
    def tap(self, func: Callable[[T], object]) -> Result[T, E]:
        """Call func with the success value for its side effect."""

    @abstractmethod
    def tap_error(self, func: Callable[[E], object]) -> Result[T, E]:
        """Call func with the failure error for its side effect."""

    @abstractmethod
    def unwrap(self) -> T:
        """Extract the success value, raising UnwrapError on Failure."""

    @abstractmethod
    def unwrap_err(self) -> E:
        """Extract the failure error, raising UnwrapError on Success."""

    def catch(self, func: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Alias for or_else."""
        return self.or_else(func)

    def then(self, func: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Alias for flat_map."""
        return self.flat_map(func)


@final
@dataclass(frozen=True)
class Success(Result[T, E]):
    """Success result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def get_or(self, default: T) -> T:
        return self.value

    def get_or_else(self, func: Callable[[E], T]) -> T:
        return self.value

    def or_else(self, func: Callable[[E], Result[T, F]]) -> Result[T, F]:
        return self  # type: ignore[return-value]

    def map(self, func: Callable[[T], U]) -> Result[U, E]:
        return Success(func(self.value))

    def map_err(self, func: Callable[[E], F]) -> Result[T, F]:
        return self  # type: ignore[return-value]

    def flat_map(self, func: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return self.map(func).flatten()

    def flatten(self) -> Result[Any, Any]:
        if isinstance(self.value, Result):
            return self.value
        return self

    def match(
        self, *, success: Callable[[T], R], failure: Callable[[E], R]
    ) -> R:
        return success(self.value)

    def tap(self, func: Callable[[T], object]) -> Result[T, E]:
        func(self.value)
        return self

    def tap_error(self, func: Callable[[E], object]) -> Result[T, E]:
        return self

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise UnwrapError(
            "Called unwrap_err on Success",
            variant="Success",
            context={"value": repr(self.value)},
        )

    def __str__(self) -> str:
        return f"Success({self.value})"

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@final
@dataclass(frozen=True)
class Failure(Result[T, E]):
    """Failure result containing an error."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def get_or(self, default: T) -> T:
        return default

    def get_or_else(self, func: Callable[[E], T]) -> T:
        return func(self.error)

    def or_else(self, func: Callable[[E], Result[T, F]]) -> Result[T, F]:
        return func(self.error)

    def map(self, func: Callable[[T], U]) -> Result[U, E]:
        return self  # type: ignore[return-value]

    def map_err(self, func: Callable[[E], F]) -> Result[T, F]:
        return Failure(func(self.error))

    def flat_map(self, func: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return self  # type: ignore[return-value]

    def flatten(self) -> Result[Any, Any]:
        return self

    def match(
        self, *, success: Callable[[T], R], failure: Callable[[E], R]
    ) -> R:
        return failure(self.error)

    def tap(self, func: Callable[[T], object]) -> Result[T, E]:
        return self

    def tap_error(self, func: Callable[[E], object]) -> Result[T, E]:
        func(self.error)
        return self

    def unwrap(self) -> NoReturn:
        error = UnwrapError(
            f"Called unwrap on Failure: {self.error}",
            variant="Failure",
            context={"error": repr(self.error)},
        )
        if isinstance(self.error, BaseException):
            raise error from self.error
        raise error

    def unwrap_err(self) -> E:
        return self.error

    def __str__(self) -> str:
        return f"Failure({self.error})"

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


# Utility functions for creating Result instances
def success(value: T) -> Result[T, Any]:
    """Create a Success result."""
    return Success(value)


def failure(error: E) -> Result[Any, E]:
    """Create a Failure result."""
    return Failure(error)


def try_result(
    func: Callable[[], T], *exceptions: type[Exception]
) -> Result[T, Exception]:
    """Call func, capturing the listed exceptions as Failure.

    Exceptions not listed propagate unchanged. Defaults to Exception.
    """
    catch = exceptions or (Exception,)
    try:
        return Success(func())
    except catch as e:
        logger.debug("Captured %s into Failure: %s", type(e).__name__, e)
        return Failure(e)


def sequence_results(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Transform Results into a Result of list.

    Returns Success with all values if all succeed, otherwise the first Failure.
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Failure):
            return result  # type: ignore[return-value]
        values.append(result.unwrap())
    return Success(values)


def traverse_results(
    items: Iterable[T], func: Callable[[T], Result[U, E]]
) -> Result[list[U], E]:
    """Apply function to each item and sequence results, stopping at the first Failure."""
    values: list[U] = []
    for item in items:
        result = func(item)
        if isinstance(result, Failure):
            return result  # type: ignore[return-value]
        values.append(result.unwrap())
    return Success(values)


def compose_results(
    f: Callable[[T], Result[U, E]], g: Callable[[U], Result[V, E]]
) -> Callable[[T], Result[V, E]]:
    """Compose two functions that return Results."""
    return lambda x: f(x).flat_map(g)


__all__ = [
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
