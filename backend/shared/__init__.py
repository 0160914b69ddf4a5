"""
Shared infrastructure for the accounts backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- background: Fire-and-forget task spawning

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .background import BackgroundTasks
from .exceptions import (
    AccountsError,
    NotFoundError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    ConfigurationError,
    ExternalServiceError,
    UniqueViolationError,
    StoreUnavailableError,
)

__all__ = [
    "Settings",
    "get_settings",
    "BackgroundTasks",
    "AccountsError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "AuthenticationError",
    "ConfigurationError",
    "ExternalServiceError",
    "UniqueViolationError",
    "StoreUnavailableError",
]
