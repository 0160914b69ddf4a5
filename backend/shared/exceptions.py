"""
Base exception classes for the accounts backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps the base kinds to HTTP responses, so a new exception
only needs to pick the right parent.
"""

from typing import Optional, Any


class AccountsError(Exception):
    """
    Base exception for all accounts errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(AccountsError):
    """Resource not found."""

    pass


class ValidationError(AccountsError):
    """Input validation failed."""

    pass


class ConflictError(AccountsError):
    """Request conflicts with existing state."""

    pass


class AuthenticationError(AccountsError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class ConfigurationError(AccountsError):
    """Required configuration is missing or invalid."""

    pass


class ExternalServiceError(AccountsError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class UniqueViolationError(AccountsError):
    """A store-level uniqueness constraint rejected a write."""

    def __init__(self, field: str, value: str):
        super().__init__(
            f"Duplicate value for unique field: {field}",
            code="UNIQUE_VIOLATION",
            details={"field": field},
        )
        self.field = field
        self.value = value


class StoreUnavailableError(ExternalServiceError):
    """The backing store could not complete a request."""

    def __init__(self, service: str, message: str):
        super().__init__(
            f"{service} is unavailable: {message}",
            service=service,
            code="STORE_UNAVAILABLE",
        )
