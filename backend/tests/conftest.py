"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
from typing import Optional
import jwt  # PyJWT

from shared.background import BackgroundTasks
from shared.config import Settings
from modules.audit.repository import InMemoryAuditSink
from modules.audit.service import AuditRecorder
from modules.auth.passwords import BcryptPasswordHasher
from modules.auth.repository import InMemoryUserRepository
from modules.auth.service import AuthService
from modules.auth.tokens import TokenService


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

# Minimum bcrypt cost, keeps the suite fast
TEST_BCRYPT_ROUNDS = 4


def create_test_token(
    user_id: str = "test-user-123",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
    extra: Optional[dict] = None,
) -> str:
    """
    Create a test JWT token.

    Args:
        user_id: User ID to put in the ``sub`` claim
        expired: If True, creates an expired token
        secret: Signing secret
        extra: Claims to add or override

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    if expired:
        iat = now - timedelta(hours=101)
        exp = now - timedelta(hours=1)
    else:
        iat = now
        exp = now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "iat": int(iat.timestamp()),
        "exp": int(exp.timestamp()),
    }
    payload.update(extra or {})
    return jwt.encode(payload, secret, algorithm="HS256")


def make_settings(**overrides) -> Settings:
    """Build settings without reading the environment or a .env file."""
    values = {
        "jwt_secret": TEST_JWT_SECRET,
        "bcrypt_rounds": TEST_BCRYPT_ROUNDS,
        "email_user": "",
        "email_pass": "",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=TEST_BCRYPT_ROUNDS)


@pytest.fixture
def tokens() -> TokenService:
    return TokenService(TEST_JWT_SECRET)


@pytest.fixture
def tasks() -> BackgroundTasks:
    return BackgroundTasks()


@pytest.fixture
def audit_sink() -> InMemoryAuditSink:
    return InMemoryAuditSink()


@pytest.fixture
def audit(audit_sink, tasks) -> AuditRecorder:
    return AuditRecorder(audit_sink, tasks)


@pytest.fixture
def auth_service(users, hasher, tokens, audit, tasks) -> AuthService:
    """Auth service over in-memory collaborators, without a notifier."""
    return AuthService(users=users, hasher=hasher, tokens=tokens, audit=audit, tasks=tasks)
