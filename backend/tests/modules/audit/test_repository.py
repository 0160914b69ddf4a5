import pytest
from unittest.mock import MagicMock

from postgrest.exceptions import APIError

from shared.exceptions import StoreUnavailableError
from modules.audit.models import AuditEvent
from modules.audit.repository import SupabaseAuditSink


class TestSupabaseAuditSink:
    @pytest.fixture
    def db(self):
        return MagicMock()

    @pytest.fixture
    def sink(self, db):
        return SupabaseAuditSink(db)

    @pytest.mark.asyncio
    async def test_record_inserts_row(self, db, sink):
        event = AuditEvent(action="user.signup", service="auth", user_id="user-123")

        await sink.record(event)

        db.table.assert_called_with("audit_logs")
        row = db.table.return_value.insert.call_args.args[0]
        assert row["action"] == "user.signup"
        assert row["user_id"] == "user-123"
        assert isinstance(row["created_at"], str)

    @pytest.mark.asyncio
    async def test_list_events_filters_by_user(self, db, sink):
        query = db.table.return_value.select.return_value.eq.return_value
        query.order.return_value.limit.return_value.execute.return_value.data = [
            {
                "action": "user.login",
                "body": None,
                "service": "auth",
                "user_id": "user-123",
                "created_at": "2024-01-01T00:00:00+00:00",
            }
        ]

        events = await sink.list_events(user_id="user-123", limit=10)

        db.table.return_value.select.return_value.eq.assert_called_once_with("user_id", "user-123")
        query.order.assert_called_once_with("created_at", desc=True)
        query.order.return_value.limit.assert_called_once_with(10)
        assert [e.action for e in events] == ["user.login"]

    @pytest.mark.asyncio
    async def test_errors_are_unavailable(self, db, sink):
        db.table.return_value.insert.return_value.execute.side_effect = APIError(
            {"message": "boom", "code": "XX000", "hint": None, "details": None}
        )
        with pytest.raises(StoreUnavailableError):
            await sink.record(AuditEvent(action="user.signup"))
