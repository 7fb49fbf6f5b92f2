"""
Exception hierarchy for fpalgebra.

The Option and Result combinators never raise on their own. The classes here
cover the few places that leave the algebra by raising: explicit unwrapping,
constructing a Present without a value, and attempts to add a third variant
to one of the closed types.
"""

from typing import TypeAlias

# Type alias for error context data
ErrorContextData: TypeAlias = str | int | float | bool | None
ErrorContextDict: TypeAlias = dict[str, ErrorContextData]


class AlgebraError(Exception):
    """
    Base exception for all fpalgebra errors.

    Carries a message, an error code and structured context for logging.
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        context: ErrorContextDict | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}

    def get_error_context(self) -> ErrorContextDict:
        """Get structured error context for logging and debugging."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "context": str(self.context),
        }


class UnwrapError(AlgebraError):
    """Raised when unwrapping the wrong variant (Absent, Failure, or Success for errors)."""

    def __init__(
        self,
        message: str,
        variant: str,
        context: ErrorContextDict | None = None,
    ):
        super().__init__(message, context=context)
        self.variant = variant

    def get_error_context(self) -> ErrorContextDict:
        context = super().get_error_context()
        context["variant"] = self.variant
        return context


class InvalidPresentValueError(AlgebraError, ValueError):
    """Raised when Present is constructed with None."""


class VariantError(AlgebraError, TypeError):
    """Raised when a closed algebra is subclassed outside its two variants."""

    def __init__(self, type_name: str, subclass_name: str):
        super().__init__(
            f"{type_name} is closed; cannot define variant {subclass_name!r}",
            context={"type": type_name, "subclass": subclass_name},
        )
        self.type_name = type_name
        self.subclass_name = subclass_name
