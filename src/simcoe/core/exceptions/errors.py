"""Custom exception classes for the tracking facade.

Every exception carries a message plus optional context information. All of
them inherit from SimcoeError, so callers can catch any library error with a
single except clause.

Generation errors are special: the tracking adapters catch them and report
their ``description`` through an error TrackingResult instead of letting them
escape.
"""

from typing import Any, Dict, Optional, Tuple


class SimcoeError(Exception):
    """Base exception for all tracking facade errors.

    Attributes:
        message: Error message
        context: Optional dictionary with additional context
        original_error: Optional original exception that caused this error
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Error message
            context: Optional context dictionary
            original_error: Optional original exception
        """
        self.message = message
        self.context = context or {}
        self.original_error = original_error

        full_message = message
        if context:
            context_str = ", ".join(f"{k}={v}" for k, v in context.items())
            full_message = f"{message} (Context: {context_str})"
        if original_error:
            full_message = f"{full_message} (Caused by: {str(original_error)})"

        super().__init__(full_message)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(SimcoeError):
    """Raised when tracker configuration cannot be loaded or is invalid."""

    pass


# =============================================================================
# Tracking Errors
# =============================================================================


class TrackingError(SimcoeError):
    """Base exception for errors raised while preparing a tracking call."""

    pass


class EventGenerationError(TrackingError):
    """Raised when a vendor event cannot be generated from a property bag.

    Each generation error is attributable to exactly one required key.

    Attributes:
        key: The offending property key
    """

    def __init__(
        self,
        key: str,
        message: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize the exception.

        Args:
            key: The property key that is missing or malformed
            message: Human-readable description of the problem
            context: Optional context dictionary
        """
        super().__init__(message, context)
        self.key = key

    @property
    def description(self) -> str:
        """Human-readable description surfaced to tracking callers."""
        return self.message


class MissingEventKeyError(EventGenerationError):
    """Raised when a required event key is absent from the property bag."""

    def __init__(self, key: str) -> None:
        """Initialize the exception.

        Args:
            key: Name of the missing key
        """
        super().__init__(key, f"Missing required event property: {key}")


class InvalidEventKeyError(EventGenerationError):
    """Raised when a required event key holds a value of the wrong type."""

    def __init__(
        self,
        key: str,
        value: Any,
        expected: Tuple[type, ...],
        reason: Optional[str] = None,
    ) -> None:
        """Initialize the exception.

        Args:
            key: Name of the malformed key
            value: The rejected value
            expected: Types the key accepts
            reason: Optional explanation replacing the type mismatch text
        """
        if reason is None:
            expected_names = " or ".join(t.__name__ for t in expected)
            reason = f"expected {expected_names}, got {type(value).__name__}"
        super().__init__(key, f"Invalid event property {key}: {reason}")
        self.value = value
        self.expected = expected
