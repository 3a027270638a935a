from abc import ABC


class UserError(ABC, Exception):
    """Base class for user-related errors.

    All errors that inherit from UserError will have their messages
    displayed to the user. These errors should not contain any
    sensitive information.
    """


class NotFoundError(UserError):
    """Raised when a requested resource is not found."""

    def __init__(self, message: str = "Not found") -> None:
        super().__init__(message)


class AuthenticationError(UserError):
    """Raised when authentication fails or the session lacks the required role."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


class ValidationError(UserError):
    """Raised when user input fails validation."""


class UpstreamError(UserError):
    """Raised when the outbound webhook fails or rejects a delivery."""

    def __init__(self, message: str = "Webhook delivery failed", details: str | None = None, status_code: int = 502) -> None:
        super().__init__(message)
        self.details = details
        self.status_code = status_code


class StorageError(Exception):
    """Raised when the order file cannot be read strictly or written."""
