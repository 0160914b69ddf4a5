"""
Audit recording.

AuditRecorder is what other modules hold. It stamps events and hands the
write to the background task spawner, so a slow or failing sink never
delays or fails the request that produced the event.
"""

import logging
from typing import Any, Optional

from shared.background import BackgroundTasks

from .interfaces import IAuditSink
from .models import AuditEvent

logger = logging.getLogger(__name__)


class AuditRecorder:
    """Fire-and-forget front for an audit sink."""

    def __init__(self, sink: IAuditSink, tasks: BackgroundTasks):
        self._sink = sink
        self._tasks = tasks

    @property
    def sink(self) -> IAuditSink:
        return self._sink

    def emit(
        self,
        action: str,
        body: Optional[dict[str, Any]] = None,
        service: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> AuditEvent:
        """Build an event and schedule its write. Returns immediately."""
        event = AuditEvent(action=action, body=body, service=service, user_id=user_id)
        self._tasks.spawn(self._write(event), name=f"audit:{action}")
        return event

    async def _write(self, event: AuditEvent) -> None:
        try:
            await self._sink.record(event)
        except Exception:
            logger.exception("Failed to record audit event %s", event.action)
