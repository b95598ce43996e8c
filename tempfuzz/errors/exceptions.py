"""
Exception hierarchy for the tempfuzz package.

Every error raised by the fuzzy algebra, the triggers or the temporal
factories derives from FuzzyError, so callers can catch the whole family
with a single except clause while still getting a machine-readable error
code and structured details.
"""

from typing import Any, Optional

from tempfuzz.errors.error_codes import ErrorCodes


class FuzzyError(Exception):
    """
    Base exception class for all tempfuzz errors.

    Attributes:
        message: Human-readable error message
        error_code: Optional error code for reference and documentation
        details: Optional dictionary with additional error details
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize a new FuzzyError.

        Args:
            message: Human-readable error message
            error_code: Optional error code for reference and documentation
            details: Optional dictionary with additional error details
        """
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize error to a dictionary.

        Returns:
            Dictionary with message, error code and details
        """
        return {
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details,
        }

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


# --- Validation Errors ---


class ValidationError(FuzzyError):
    """
    Base class for invalid arguments passed to the fuzzy API.

    The fix requires **changing the call**, not editing configuration.
    """

    pass


class RangeError(ValidationError, ValueError):
    """
    Exception raised when a truth value lies outside [-1, +1].

    Raised eagerly by TruthValue construction and by the AND/OR operations,
    before any rounding or combination takes place.

    Examples:
        >>> raise RangeError.for_value(1.5)
        Traceback (most recent call last):
        ...
        tempfuzz.errors.exceptions.RangeError: [VALUE-OutOfRange] Value must be between -1.0 and +1.0, got 1.5
    """

    @classmethod
    def for_value(
        cls,
        value: Any,
        argument: str = "magnitude",
        error_code: str = ErrorCodes.VALUE_OUT_OF_RANGE,
        minimum: float = -1.0,
        maximum: float = 1.0,
    ) -> "RangeError":
        """
        Factory method for an out-of-range value.

        Args:
            value: The offending value
            argument: Name of the argument that carried the value
            error_code: Error code to attach
            minimum: Lower bound of the valid range
            maximum: Upper bound of the valid range

        Returns:
            RangeError describing the violation
        """
        return cls(
            message=f"Value must be between {minimum:+.1f} and {maximum:+.1f}, got {value}",
            error_code=error_code,
            details={
                "argument": argument,
                "value": value,
                "min": minimum,
                "max": maximum,
            },
        )


class NullArgumentError(ValidationError, TypeError):
    """Exception raised when a required collaborator is None."""

    @classmethod
    def for_argument(cls, argument: str) -> "NullArgumentError":
        """
        Factory method for a missing argument.

        Args:
            argument: Name of the missing argument

        Returns:
            NullArgumentError naming the argument
        """
        return cls(
            message=f"Argument '{argument}' must not be None",
            error_code=ErrorCodes.ARGUMENT_MISSING,
            details={"argument": argument},
        )


# --- Configuration Errors ---


class ConfigurationError(FuzzyError):
    """
    Error raised for invalid trigger configurations or settings.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code
        context: Where the error occurred (setting, field)
        details: Dictionary with structured error data
        suggestion: How to fix the error

    Examples:
        >>> raise ConfigurationError(
        ...     message="Unknown trigger type: sometimes",
        ...     error_code="TRIGGER-UnknownType",
        ...     details={"type": "sometimes"},
        ...     suggestion="Use one of: positive, strong, above, ...",
        ... )
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[dict[str, Any]] = None,
        details: Optional[dict[str, Any]] = None,
        suggestion: str = "",
    ) -> None:
        super().__init__(message, error_code, details)
        self.context = context or {}
        self.suggestion = suggestion

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize error to a dictionary.

        Returns:
            Dictionary with all error information
        """
        return {
            "message": self.message,
            "error_code": self.error_code,
            "context": self.context,
            "details": self.details,
            "suggestion": self.suggestion,
        }

    def format_user_message(self) -> str:
        """
        Format a user-friendly error message with all context.

        Returns:
            Formatted error message string
        """
        parts = [f"Error: {self.message}"]

        if self.error_code:
            parts.append(f"Code: {self.error_code}")

        if self.context:
            context_parts = [f"{key}: {value}" for key, value in self.context.items()]
            parts.append("Location: " + ", ".join(context_parts))

        if self.suggestion:
            parts.append(f"\nSuggestion: {self.suggestion}")

        return "\n".join(parts)
