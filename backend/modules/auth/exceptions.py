"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from typing import Any

from shared.exceptions import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)


class RequestValidationError(ValidationError):
    """Raised when request input violates one or more constraints."""

    def __init__(self, violations: list[dict[str, Any]]):
        fields = ", ".join(sorted({v["field"] for v in violations}))
        super().__init__(
            f"Invalid input: {fields}",
            code="VALIDATION_FAILED",
            details={"violations": violations},
        )
        self.violations = violations


class DuplicateEmailError(ConflictError):
    """Raised when signing up with an email that is already registered."""

    def __init__(self, message: str = "Email already exists"):
        super().__init__(message, code="DUPLICATE_EMAIL")


class InvalidCredentialsError(AuthenticationError):
    """
    Raised when login fails.

    Same message whether the email or the password was wrong.
    """

    def __init__(self):
        super().__init__("Invalid email or password", code="INVALID_CREDENTIALS")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class InvalidTokenError(AuthenticationError):
    """Base class for tokens that fail verification."""

    pass


class MalformedTokenError(InvalidTokenError):
    """Raised when a token cannot be decoded or lacks required claims."""

    def __init__(self, message: str = "Malformed authentication token"):
        super().__init__(message, code="MALFORMED_TOKEN")


class BadSignatureError(InvalidTokenError):
    """Raised when a token's signature does not match."""

    def __init__(self, message: str = "Invalid token signature"):
        super().__init__(message, code="BAD_SIGNATURE")


class ExpiredTokenError(InvalidTokenError):
    """Raised when a JWT token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class UserNotFoundError(NotFoundError):
    """Raised when a user ID does not exist in the store."""

    def __init__(self, user_id: str):
        super().__init__(
            "User not found",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )
