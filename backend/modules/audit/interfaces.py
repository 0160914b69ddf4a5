"""
Audit module interface.

Sinks are append-only. Callers go through AuditRecorder, which writes
to the sink in the background.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import AuditEvent


@runtime_checkable
class IAuditSink(Protocol):
    """Append-only store for audit events."""

    async def record(self, event: AuditEvent) -> None:
        """Append one event."""
        ...

    async def list_events(
        self,
        user_id: Optional[str] = None,
        limit: int = 100,
    ) -> list[AuditEvent]:
        """
        Return recent events, newest first.

        Args:
            user_id: Only events carrying this user ID
            limit: Maximum number of events
        """
        ...
