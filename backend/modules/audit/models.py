"""
Audit module data models.
"""

from datetime import datetime, timezone
from typing import Any, Optional
from pydantic import BaseModel, Field


class AuditEvent(BaseModel):
    """
    Append-only audit record.

    ``user_id`` is a weak reference: it is stored as given and never
    resolved, so events outlive the users they mention.
    """

    action: str = Field(..., description="Action name, e.g. user.signup")
    body: Optional[dict[str, Any]] = Field(None, description="Free-form payload")
    service: Optional[str] = Field(None, description="Originating service tag")
    user_id: Optional[str] = Field(None, description="Acting user ID, if any")
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = {"frozen": True}
