"""
Custom exception classes for the travel dates selector.

Token decoding never raises; these are reserved for misuse of the
controllers and for the HTTP layer.
"""


class TravelDatesError(Exception):
    """Base exception for all travel dates errors."""

    def __init__(self, message: str, context: dict = None):
        """
        Initialize exception with message and optional context.

        Args:
            message: Error message
            context: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class PermanentError(TravelDatesError):
    """
    Exception for errors that repeating the same call will not fix.

    Examples:
        - Unknown duration class or month name
        - Mutating a closed dropdown
        - Missing session
    """
    pass


class ValidationError(PermanentError):
    """Exception for data validation failures."""
    pass


class InvalidSelectionError(ValidationError):
    """Exception for a duration class or month name outside the fixed vocabulary."""
    pass


class DropdownClosedError(PermanentError):
    """Exception for pending-state mutations attempted while the dropdown is closed."""
    pass


class SessionNotFoundError(PermanentError):
    """Exception for lookups of an unknown or expired selector session."""
    pass


class ConfigurationError(PermanentError):
    """Exception for configuration errors."""
    pass
