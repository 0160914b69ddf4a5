"""
Accounts API package.

Provides the FastAPI application factory for the accounts service.
"""

from .app import create_app

__all__ = ["create_app"]
