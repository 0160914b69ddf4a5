"""
Base repository class for Supabase-backed storage.

Wraps the Supabase client so concrete repositories only deal with their
own tables and with mapping rows to Pydantic models.
"""

from typing import TypeVar, Generic
from supabase import Client


T = TypeVar("T")

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"

# Postgres SQLSTATE for invalid_text_representation (e.g. a non-UUID id)
INVALID_TEXT_REPRESENTATION = "22P02"


class BaseRepository(Generic[T]):
    """
    Base class for Supabase repositories.

    Subclasses set ``table`` and implement domain-specific access methods,
    handling dict-to-model mapping internally.

    Example:
        class UserRepository(BaseRepository[User]):
            table = "users"

            def get_by_id(self, user_id: str) -> Optional[User]:
                result = self._query().select("*").eq("id", user_id).execute()
                return self._map(result.data[0]) if result.data else None
    """

    table: str = ""

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _query(self):
        """Start a query builder on this repository's table."""
        return self._db.table(self.table)
