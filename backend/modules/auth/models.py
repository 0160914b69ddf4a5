"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class User(BaseModel):
    """
    Stored user record.

    Holds the password hash, so it must never cross the API boundary.
    Use to_public_profile() for anything returned to a client.
    """

    id: str = Field(..., description="Opaque user ID assigned by the store")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Unique email address")
    password_hash: str = Field(..., repr=False, description="bcrypt digest")
    created_at: Optional[datetime] = Field(None, description="Account creation time")

    model_config = {"frozen": True}


class PublicProfile(BaseModel):
    """Outward, password-free projection of a User."""

    id: str = Field(..., description="User ID")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address")

    model_config = {"frozen": True}


def to_public_profile(user: User) -> PublicProfile:
    """Project a stored user onto its public profile."""
    return PublicProfile(id=user.id, name=user.name, email=user.email)


class TokenClaims(BaseModel):
    """Decoded bearer token claims."""

    sub: str = Field(..., description="Subject (user ID)")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")


class SignupRequest(BaseModel):
    """
    Signup request body.

    Fields are plain strings; the constraints are checked by
    validation.validate_signup so every violation is reported at once.
    """

    name: str = Field(..., description="User full name", examples=["John Doe"])
    email: str = Field(..., description="User email address", examples=["john.doe@example.com"])
    password: str = Field(..., repr=False, description="User password (must be strong)", examples=["StrongP@ssw0rd123"])


class LoginRequest(BaseModel):
    """Login credentials. Discarded once verified."""

    email: str = Field(..., description="User email address", examples=["john.doe@example.com"])
    password: str = Field(..., repr=False, description="User password")


class LoginResponse(BaseModel):
    """Result of a successful login."""

    user: PublicProfile = Field(..., description="User information")
    token: str = Field(..., description="JWT authentication token")
