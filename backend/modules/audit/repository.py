"""
Audit sinks.

InMemoryAuditSink for development and tests, SupabaseAuditSink for the
``audit_logs`` table.
"""

import asyncio
from typing import Any, Optional

from postgrest.exceptions import APIError

from shared.exceptions import StoreUnavailableError
from shared.repository import BaseRepository

from .models import AuditEvent


class InMemoryAuditSink:
    """Audit sink kept in process memory."""

    def __init__(self) -> None:
        self._events: list[AuditEvent] = []

    async def record(self, event: AuditEvent) -> None:
        self._events.append(event)

    async def list_events(
        self,
        user_id: Optional[str] = None,
        limit: int = 100,
    ) -> list[AuditEvent]:
        events = [
            e for e in reversed(self._events)
            if user_id is None or e.user_id == user_id
        ]
        return events[:limit]


class SupabaseAuditSink(BaseRepository[AuditEvent]):
    """Audit sink writing to the Supabase ``audit_logs`` table."""

    table = "audit_logs"

    async def record(self, event: AuditEvent) -> None:
        row = event.model_dump(mode="json")

        def insert():
            return self._query().insert(row).execute()

        await self._run(insert)

    async def list_events(
        self,
        user_id: Optional[str] = None,
        limit: int = 100,
    ) -> list[AuditEvent]:
        def select():
            query = self._query().select("*")
            if user_id is not None:
                query = query.eq("user_id", user_id)
            return query.order("created_at", desc=True).limit(limit).execute()

        result = await self._run(select)
        return [self._map_to_event(row) for row in result.data or []]

    async def _run(self, query):
        try:
            return await asyncio.to_thread(query)
        except APIError as e:
            raise StoreUnavailableError("supabase", e.message or "query failed")

    @staticmethod
    def _map_to_event(row: dict[str, Any]) -> AuditEvent:
        return AuditEvent(
            action=row["action"],
            body=row.get("body"),
            service=row.get("service"),
            user_id=row.get("user_id"),
            created_at=row["created_at"],
        )
