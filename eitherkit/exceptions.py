"""
Exception hierarchy for eitherkit.

Failures that belong to the caller's domain travel as ``Left`` values and
never show up here. These classes cover misuse of the library itself and
invalid configuration.
"""

from datetime import UTC, datetime

# Type alias for error context data
type ErrorContextData = str | int | float | bool | datetime | None
type ErrorContextDict = dict[str, ErrorContextData]


class EitherKitError(Exception):
    """
    Base exception for all eitherkit errors.

    Carries an error code and a flat context mapping so handlers can log
    a structured record without inspecting the concrete subclass.
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
        self.timestamp = datetime.now(UTC)

    def get_error_context(self) -> ErrorContextDict:
        """Get structured error context for logging and debugging."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "context": str(self.context),
            "timestamp": self.timestamp.isoformat(),
        }


class InvalidVariantAccess(EitherKitError):
    """Raised when an unchecked accessor is called on the wrong variant."""

    def __init__(
        self,
        expected: str,
        actual: str,
        **kwargs: ErrorContextData,
    ):
        super().__init__(
            f"Cannot take the {expected} value of a {actual}",
            context=dict(kwargs) or None,
        )
        self.expected = expected
        self.actual = actual

    def get_error_context(self) -> ErrorContextDict:
        context = super().get_error_context()
        context.update({"expected": self.expected, "actual": self.actual})
        return context


class ConfigurationError(EitherKitError):
    """Invalid eitherkit settings in the environment."""

    def __init__(
        self,
        message: str,
        field_name: str | None = None,
        invalid_value: ErrorContextData = None,
        **kwargs: ErrorContextData,
    ):
        super().__init__(message, context=dict(kwargs) or None)
        self.field_name = field_name
        self.invalid_value = invalid_value

    def get_error_context(self) -> ErrorContextDict:
        context = super().get_error_context()
        context.update(
            {
                "field_name": self.field_name,
                "invalid_value": (
                    str(self.invalid_value) if self.invalid_value is not None else None
                ),
            }
        )
        return context


__all__ = [
    "ConfigurationError",
    "EitherKitError",
    "ErrorContextData",
    "ErrorContextDict",
    "InvalidVariantAccess",
]
