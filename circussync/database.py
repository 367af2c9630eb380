# circussync/database.py
"""
Persistence capability shared by every repository.

`Database` is the one interface business logic talks to. Two
implementations exist:

  - InMemoryDatabase  (circussync/core/memory_db.py)   USE_MOCK_DATA=true
  - SupabaseDatabase  (circussync/core/supabase_db.py) live backend

Records cross this boundary as plain dicts that are already encoded
(see `circussync.core.timestamps`); every dict returned carries its
`id` key.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Literal

from circussync.core.config import get_settings

Operator = Literal["==", "!=", "<", "<=", ">", ">=", "array_contains"]

OPERATORS: frozenset[str] = frozenset({"==", "!=", "<", "<=", ">", ">=", "array_contains"})


@dataclass(frozen=True)
class Filter:
    """
    One query clause.

    `field` may be a dotted path into nested objects
    (e.g. "next_follow_up.date", "related_to.id").
    """

    field: str
    op: Operator
    value: Any

    def __post_init__(self) -> None:
        if self.op not in OPERATORS:
            raise ValueError(f"Unsupported filter operator: {self.op!r}")


@dataclass(frozen=True)
class Query:
    filters: tuple[Filter, ...] = ()
    order_by: str | None = None
    descending: bool = False
    limit: int | None = None


class Database(ABC):
    """Generic CRUD + query over named collections ("kinds")."""

    @abstractmethod
    async def add(self, kind: str, data: dict[str, Any]) -> str:
        """Insert a record, let the backend assign its id, return the id."""

    @abstractmethod
    async def set(
        self,
        kind: str,
        record_id: str,
        data: dict[str, Any],
        merge: bool = False,
    ) -> None:
        """Write a record under a caller-chosen id (replace, or merge if asked)."""

    @abstractmethod
    async def get(self, kind: str, record_id: str) -> dict[str, Any] | None:
        """Return the record or None if it does not exist."""

    @abstractmethod
    async def update(self, kind: str, record_id: str, data: dict[str, Any]) -> None:
        """
        Merge top-level fields into an existing record.

        Raises:
            NotFoundError: if the record does not exist.
        """

    @abstractmethod
    async def delete(self, kind: str, record_id: str) -> None:
        """
        Delete a record.

        Raises:
            NotFoundError: if the record does not exist.
        """

    @abstractmethod
    async def list_all(self, kind: str) -> list[dict[str, Any]]:
        """Return every record of a kind."""

    @abstractmethod
    async def query(self, kind: str, query: Query) -> list[dict[str, Any]]:
        """Return records matching every filter, ordered and limited."""

    async def close(self) -> None:
        """Release backend resources (no-op by default)."""


@lru_cache
def get_database() -> Database:
    """
    Process-wide database selected by configuration.

    FastAPI dependency; tests override it with their own InMemoryDatabase.
    """
    settings = get_settings()
    if settings.USE_MOCK_DATA:
        from circussync.core.memory_db import InMemoryDatabase

        return InMemoryDatabase()

    from circussync.core.supabase_db import SupabaseDatabase

    return SupabaseDatabase()
