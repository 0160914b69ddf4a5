"""
Error response models.

Standardized error responses for the API, as produced by
api.errors.accounts_error_handler.
"""

from pydantic import BaseModel, Field
from typing import Any


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
