"""
Audit module.

Append-only event log fed by the auth service and identity middleware.

Public API:
- IAuditSink: Interface for audit storage
- AuditEvent: Event record
- AuditRecorder: Fire-and-forget emitter
"""

from .interfaces import IAuditSink
from .models import AuditEvent
from .service import AuditRecorder

__all__ = [
    "IAuditSink",
    "AuditEvent",
    "AuditRecorder",
]
