"""
Option monad for handling nullable values in functional programming.

This module provides an Option type for representing values that may or may not exist,
with Present holding a value and Absent representing its absence.

Monad Laws:
1. Left Identity: of(a).flat_map(f) == f(a)
2. Right Identity: m.flat_map(of) == m
3. Associativity: m.flat_map(f).flat_map(g) == m.flat_map(lambda x: f(x).flat_map(g))

Example:
    >>> of(None).or_else(lambda: of(42)).map(lambda x: x * 2).get_or(-1)
    84
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar, final

from fpalgebra.exceptions import InvalidPresentValueError, UnwrapError, VariantError

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")
R = TypeVar("R")

_VARIANTS = frozenset({"Present", "Absent"})


class Option(Generic[T], ABC):
    """Abstract base class for the Option monad.

    Option is closed: Present and Absent are its only variants.
    """

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__ or cls.__name__ not in _VARIANTS:
            raise VariantError("Option", cls.__name__)

    @abstractmethod
    def is_present(self) -> bool:
        """Check if this is Present (has value)."""

    @abstractmethod
    def is_absent(self) -> bool:
        """Check if this is Absent (no value)."""

    @abstractmethod
    def get_or(self, default: T) -> T:
        """Get the value or return default."""

    @abstractmethod
    def get_or_else(self, func: Callable[[], T]) -> T:
        """Get the value or compute a fallback."""

    @abstractmethod
    def or_else(self, func: Callable[[], Option[T]]) -> Option[T]:
        """Return this if Present, otherwise the Option produced by func."""

    @abstractmethod
    def map(self, func: Callable[[T], U | None]) -> Option[U]:
        """Map function over Present value, re-classifying the result."""

    @abstractmethod
    def flat_map(self, func: Callable[[T], Option[U]]) -> Option[U]:
        """Flat map function over Present value."""

    @abstractmethod
    def flatten(self) -> Option[Any]:
        """Remove one level of Option nesting."""

    @abstractmethod
    def match(self, *, present: Callable[[T], R], absent: Callable[[], R]) -> R:
        """Invoke exactly one of the branches."""

    @abstractmethod
    def tap(self, func: Callable[[T], object]) -> Option[T]:
        """Call func with the Present value for its side effect."""

    @abstractmethod
    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Filter value based on predicate."""

    @abstractmethod
    def to_list(self) -> list[T]:
        """Convert Option to list (empty list for Absent, single-item list for Present)."""

    @abstractmethod
    def unwrap(self) -> T:
        """Extract the value, raising UnwrapError on Absent."""


@final
@dataclass(frozen=True)
class Present(Option[T]):
    """Present variant of Option holding a value."""

    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise InvalidPresentValueError(
                "Present cannot contain None - use Absent instead"
            )

    def is_present(self) -> bool:
        return True

    def is_absent(self) -> bool:
        return False

    def get_or(self, default: T) -> T:
        return self.value

    def get_or_else(self, func: Callable[[], T]) -> T:
        return self.value

    def or_else(self, func: Callable[[], Option[T]]) -> Option[T]:
        return self

    def map(self, func: Callable[[T], U | None]) -> Option[U]:
        # A mapper returning None collapses to Absent
        return of(func(self.value))

    def flat_map(self, func: Callable[[T], Option[U]]) -> Option[U]:
        return self.map(func).flatten()

    def flatten(self) -> Option[Any]:
        if isinstance(self.value, Option):
            return self.value
        return self

    def match(self, *, present: Callable[[T], R], absent: Callable[[], R]) -> R:
        return present(self.value)

    def tap(self, func: Callable[[T], object]) -> Option[T]:
        func(self.value)
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        return self if predicate(self.value) else Absent()

    def to_list(self) -> list[T]:
        return [self.value]

    def unwrap(self) -> T:
        return self.value

    def __str__(self) -> str:
        return f"Present({self.value})"

    def __repr__(self) -> str:
        return f"Present({self.value!r})"


@final
@dataclass(frozen=True)
class Absent(Option[T]):
    """Absent variant of Option representing absence of value."""

    def is_present(self) -> bool:
        return False

    def is_absent(self) -> bool:
        return True

    def get_or(self, default: T) -> T:
        return default

    def get_or_else(self, func: Callable[[], T]) -> T:
        return func()

    def or_else(self, func: Callable[[], Option[T]]) -> Option[T]:
        return func()

    def map(self, func: Callable[[T], U | None]) -> Option[U]:
        return self  # type: ignore[return-value]

    def flat_map(self, func: Callable[[T], Option[U]]) -> Option[U]:
        return self  # type: ignore[return-value]

    def flatten(self) -> Option[Any]:
        return self

    def match(self, *, present: Callable[[T], R], absent: Callable[[], R]) -> R:
        return absent()

    def tap(self, func: Callable[[T], object]) -> Option[T]:
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        return self

    def to_list(self) -> list[T]:
        return []

    def unwrap(self) -> NoReturn:
        raise UnwrapError("Called unwrap on Absent", variant="Absent")

    def __str__(self) -> str:
        return "Absent"

    def __repr__(self) -> str:
        return "Absent()"


# Utility functions for creating Option instances
def of(raw: T | None) -> Option[T]:
    """Create an Option from a possibly-None value.

    Only None is treated as absence; falsy values such as 0, False or []
    are Present.
    """
    if raw is None:
        return Absent()
    return Present(raw)


def absent() -> Option[T]:
    """Create an Absent Option."""
    return Absent()


def sequence_options(options: Iterable[Option[T]]) -> Option[list[T]]:
    """Transform Options into an Option of list.

    Returns Absent if any option is Absent, otherwise Present with all values.
    """
    values: list[T] = []
    for option in options:
        if not isinstance(option, Present):
            return Absent()
        values.append(option.value)
    return Present(values)


def traverse_options(
    items: Iterable[T], func: Callable[[T], Option[U]]
) -> Option[list[U]]:
    """Apply function to each item and sequence results."""
    return sequence_options([func(item) for item in items])


def first_present(options: Iterable[Option[T]]) -> Option[T]:
    """Return the first Present option, or Absent if there is none."""
    for option in options:
        if option.is_present():
            return option
    return Absent()


def compose_options(
    f: Callable[[T], Option[U]], g: Callable[[U], Option[V]]
) -> Callable[[T], Option[V]]:
    """Compose two functions that return Options."""
    return lambda x: f(x).flat_map(g)


__all__ = [
    "Absent",
    "Option",
    "Present",
    "absent",
    "compose_options",
    "first_present",
    "of",
    "sequence_options",
    "traverse_options",
]
