"""
User repositories (the credential store).

InMemoryUserRepository backs development and tests.
SupabaseUserRepository stores users in the Supabase ``users`` table,
which must carry a unique index on ``email``.
"""

import asyncio
import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Optional

from postgrest.exceptions import APIError

from shared.exceptions import StoreUnavailableError, UniqueViolationError
from shared.repository import BaseRepository, INVALID_TEXT_REPRESENTATION, UNIQUE_VIOLATION

from .models import User

logger = logging.getLogger(__name__)


class InMemoryUserRepository:
    """
    Credential store kept in process memory.

    Enforces the unique-email constraint on create, like the database
    index does for the Supabase store.
    """

    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._ids_by_email: dict[str, str] = {}

    async def create(self, name: str, email: str, password_hash: str) -> User:
        if email in self._ids_by_email:
            raise UniqueViolationError("email", email)

        user = User(
            id=str(uuid.uuid4()),
            name=name,
            email=email,
            password_hash=password_hash,
            created_at=datetime.now(timezone.utc),
        )
        self._users[user.id] = user
        self._ids_by_email[email] = user.id
        return user

    async def get_by_id(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)

    async def get_by_email(self, email: str) -> Optional[User]:
        user_id = self._ids_by_email.get(email)
        return self._users.get(user_id) if user_id else None

    async def list_all(self) -> list[User]:
        return list(self._users.values())

    async def ping(self) -> bool:
        return True


class SupabaseUserRepository(BaseRepository[User]):
    """
    Credential store backed by Supabase.

    The Supabase client is synchronous, so each query runs in a worker
    thread to keep the event loop free.
    """

    table = "users"

    async def create(self, name: str, email: str, password_hash: str) -> User:
        data = {"name": name, "email": email, "password_hash": password_hash}

        def insert():
            return self._query().insert(data).execute()

        result = await self._run(insert, on_unique=("email", email))
        return self._map_to_user(result.data[0])

    async def get_by_id(self, user_id: str) -> Optional[User]:
        def select():
            return self._query().select("*").eq("id", user_id).limit(1).execute()

        try:
            result = await asyncio.to_thread(select)
        except APIError as e:
            # An id the column type cannot parse matches no row
            if e.code == INVALID_TEXT_REPRESENTATION:
                return None
            raise self._unavailable(e)
        return self._map_to_user(result.data[0]) if result.data else None

    async def get_by_email(self, email: str) -> Optional[User]:
        def select():
            return self._query().select("*").eq("email", email).limit(1).execute()

        result = await self._run(select)
        return self._map_to_user(result.data[0]) if result.data else None

    async def list_all(self) -> list[User]:
        def select():
            return self._query().select("*").execute()

        result = await self._run(select)
        return [self._map_to_user(row) for row in result.data or []]

    async def ping(self) -> bool:
        def select():
            return self._query().select("id").limit(1).execute()

        try:
            await self._run(select)
        except StoreUnavailableError:
            return False
        return True

    async def _run(self, query, on_unique: Optional[tuple[str, str]] = None):
        try:
            return await asyncio.to_thread(query)
        except APIError as e:
            if on_unique is not None and e.code == UNIQUE_VIOLATION:
                raise UniqueViolationError(*on_unique)
            raise self._unavailable(e)

    def _unavailable(self, error: APIError) -> StoreUnavailableError:
        logger.error("Supabase query on %s failed: %s", self.table, error.message)
        return StoreUnavailableError("supabase", error.message or "query failed")

    @staticmethod
    def _map_to_user(row: dict[str, Any]) -> User:
        return User(
            id=str(row["id"]),
            name=row["name"],
            email=row["email"],
            password_hash=row["password_hash"],
            created_at=row.get("created_at"),
        )

