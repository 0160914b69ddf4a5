"""
Input validation for signup and login.

Each function checks every constraint before raising, so a client gets
the full list of problems in one RequestValidationError rather than one
at a time. Validation runs before the service touches the store.
"""

import re
from typing import Any

from email_validator import EmailNotValidError, validate_email

from .exceptions import RequestValidationError

NAME_MIN_LENGTH = 3
PASSWORD_MIN_LENGTH = 8
# bcrypt only accepts inputs up to 72 bytes
PASSWORD_MAX_BYTES = 72
PASSWORD_SPECIALS = '!@#$%^&*(),.?":{}|<>'

_PASSWORD_PATTERN = re.compile(
    r'^(?=.*[A-Za-z])(?=.*\d)(?=.*[!@#$%^&*(),.?":{}|<>])[A-Za-z\d!@#$%^&*(),.?":{}|<>]{8,}$'
)

PASSWORD_POLICY_MESSAGE = (
    f"password must be at least {PASSWORD_MIN_LENGTH} characters long, contain at least "
    f"one letter, one number, and one special character ({PASSWORD_SPECIALS})."
)


def _violation(field: str, message: str) -> dict[str, Any]:
    return {"field": field, "message": message}


def _check_email(email: Any, violations: list[dict[str, Any]]) -> str:
    """Validate syntax and return the normalized address."""
    if not isinstance(email, str) or not email.strip():
        violations.append(_violation("email", "email should not be empty"))
        return ""
    try:
        result = validate_email(email.strip(), check_deliverability=False)
    except EmailNotValidError as e:
        violations.append(_violation("email", f"email must be an email: {e}"))
        return ""
    return result.normalized


def is_strong_password(value: Any) -> bool:
    """Check a password against the strength policy."""
    if not isinstance(value, str):
        return False
    return _PASSWORD_PATTERN.match(value) is not None


def validate_signup(name: Any, email: Any, password: Any) -> tuple[str, str, str]:
    """
    Validate signup input.

    Returns:
        Tuple of (name, normalized email, password)

    Raises:
        RequestValidationError: Listing every violated constraint
    """
    violations: list[dict[str, Any]] = []

    clean_name = name.strip() if isinstance(name, str) else ""
    if not clean_name:
        violations.append(_violation("name", "name should not be empty"))
    elif len(clean_name) < NAME_MIN_LENGTH:
        violations.append(
            _violation("name", f"name must be longer than or equal to {NAME_MIN_LENGTH} characters")
        )

    normalized_email = _check_email(email, violations)

    if not isinstance(password, str) or not password:
        violations.append(_violation("password", "password should not be empty"))
    elif len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        violations.append(
            _violation("password", f"password must be at most {PASSWORD_MAX_BYTES} bytes long")
        )
    elif not is_strong_password(password):
        violations.append(_violation("password", PASSWORD_POLICY_MESSAGE))

    if violations:
        raise RequestValidationError(violations)
    return clean_name, normalized_email, password


def validate_login(email: Any, password: Any) -> tuple[str, str]:
    """
    Validate login input.

    Only the shape is checked here. A weak password is not a validation
    error at login; it simply fails verification.

    Raises:
        RequestValidationError: Listing every violated constraint
    """
    violations: list[dict[str, Any]] = []

    normalized_email = _check_email(email, violations)
    if not isinstance(password, str) or not password:
        violations.append(_violation("password", "password should not be empty"))

    if violations:
        raise RequestValidationError(violations)
    return normalized_email, password
