"""
Authentication module.

Handles signup, login, password hashing, JWT issuance and verification,
and per-request identity resolution.

Public API:
- IAuthService: Interface for auth operations
- PublicProfile: Password-free view of a user
- LoginResponse: Profile plus bearer token
- Auth exceptions: DuplicateEmailError, InvalidCredentialsError, etc.
"""

from .interfaces import IAuthService, IUserRepository, IPasswordHasher, ITokenService
from .models import User, PublicProfile, LoginResponse, TokenClaims, to_public_profile
from .exceptions import (
    RequestValidationError,
    DuplicateEmailError,
    InvalidCredentialsError,
    MissingTokenError,
    InvalidTokenError,
    MalformedTokenError,
    BadSignatureError,
    ExpiredTokenError,
    UserNotFoundError,
)

__all__ = [
    # Interfaces
    "IAuthService",
    "IUserRepository",
    "IPasswordHasher",
    "ITokenService",
    # Models
    "User",
    "PublicProfile",
    "LoginResponse",
    "TokenClaims",
    "to_public_profile",
    # Exceptions
    "RequestValidationError",
    "DuplicateEmailError",
    "InvalidCredentialsError",
    "MissingTokenError",
    "InvalidTokenError",
    "MalformedTokenError",
    "BadSignatureError",
    "ExpiredTokenError",
    "UserNotFoundError",
]
