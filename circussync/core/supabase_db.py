# circussync/core/supabase_db.py
"""
Hosted backend: one Supabase (PostgREST) table per kind.

Expected table layout:
  - id           uuid primary key default gen_random_uuid()
                 (text for "users", which are keyed by the auth uid)
  - one column per top-level field; nested objects and arrays are jsonb
  - created_at / updated_at timestamptz

Array-contains filters use jsonb containment (`@>`), so every array
column must be jsonb. Nested date fields are stored as canonical
timestamp strings (see circussync.core.timestamps), which keeps
`->>` comparisons chronological.
"""

import json
import logging
from contextlib import contextmanager
from typing import Any, Iterator

import httpx
from postgrest.exceptions import APIError
from supabase import AsyncClient

from circussync.core.errors import NotFoundError, StorageError, TransportError
from circussync.core.supabase_client import supabase_admin
from circussync.database import Database, Filter, Query

logger = logging.getLogger(__name__)


def column_for(path: str) -> str:
    """
    Translate a dotted field path into a PostgREST column expression.

    "status"              -> "status"
    "next_follow_up.date" -> "next_follow_up->>date"
    "a.b.c"               -> "a->b->>c"
    """
    parts = path.split(".")
    if len(parts) == 1:
        return path
    return "->".join(parts[:-1]) + "->>" + parts[-1]


def _format_operand(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


@contextmanager
def _translate_errors(kind: str, operation: str) -> Iterator[None]:
    try:
        yield
    except APIError as exc:
        logger.error("Supabase %s on %s failed: %s", operation, kind, exc)
        raise StorageError(
            f"Database {operation} on {kind} failed",
            {"code": getattr(exc, "code", None)},
        ) from exc
    except httpx.HTTPError as exc:
        logger.error("Supabase %s on %s unreachable: %s", operation, kind, exc)
        raise TransportError(f"Database unreachable during {operation} on {kind}") from exc


class SupabaseDatabase(Database):
    def __init__(self, client: AsyncClient | None = None) -> None:
        self._client = client

    async def _get_client(self) -> AsyncClient:
        if self._client is None:
            self._client = await supabase_admin()
        return self._client

    async def close(self) -> None:
        """Close the REST and auth HTTP sessions of the cached client."""
        if self._client is None:
            return
        client, self._client = self._client, None
        await client.postgrest.aclose()
        await client.auth.close()

    @staticmethod
    def _apply_filter(builder: Any, flt: Filter) -> Any:
        column = column_for(flt.field)
        value = _format_operand(flt.value)

        if flt.op == "==":
            if value is None:
                return builder.is_(column, "null")
            return builder.eq(column, value)
        if flt.op == "!=":
            return builder.neq(column, value)
        if flt.op == "<":
            return builder.lt(column, value)
        if flt.op == "<=":
            return builder.lte(column, value)
        if flt.op == ">":
            return builder.gt(column, value)
        if flt.op == ">=":
            return builder.gte(column, value)
        # array_contains: jsonb containment of a one-element array; the
        # path must stay json (->), not text (->>).
        json_column = "->".join(flt.field.split("."))
        return builder.contains(json_column, json.dumps([flt.value]))

    async def add(self, kind: str, data: dict[str, Any]) -> str:
        client = await self._get_client()
        body = {k: v for k, v in data.items() if k != "id"}
        with _translate_errors(kind, "insert"):
            res = await client.table(kind).insert(body).execute()
        if not res.data:
            raise StorageError(f"Insert into {kind} returned no row")
        return str(res.data[0]["id"])

    async def set(
        self,
        kind: str,
        record_id: str,
        data: dict[str, Any],
        merge: bool = False,
    ) -> None:
        # PostgREST upsert only touches the columns it is given, so `merge`
        # and replace behave the same for columns present in `data`.
        client = await self._get_client()
        body = {**data, "id": record_id}
        with _translate_errors(kind, "upsert"):
            await client.table(kind).upsert(body).execute()

    async def get(self, kind: str, record_id: str) -> dict[str, Any] | None:
        client = await self._get_client()
        with _translate_errors(kind, "select"):
            res = await client.table(kind).select("*").eq("id", record_id).limit(1).execute()
        if not res.data:
            return None
        row = dict(res.data[0])
        row["id"] = str(row["id"])
        return row

    async def update(self, kind: str, record_id: str, data: dict[str, Any]) -> None:
        client = await self._get_client()
        body = {k: v for k, v in data.items() if k != "id"}
        with _translate_errors(kind, "update"):
            res = await client.table(kind).update(body).eq("id", record_id).execute()
        if not res.data:
            raise NotFoundError(kind, record_id)

    async def delete(self, kind: str, record_id: str) -> None:
        client = await self._get_client()
        with _translate_errors(kind, "delete"):
            res = await client.table(kind).delete().eq("id", record_id).execute()
        if not res.data:
            raise NotFoundError(kind, record_id)

    async def list_all(self, kind: str) -> list[dict[str, Any]]:
        client = await self._get_client()
        with _translate_errors(kind, "select"):
            res = await client.table(kind).select("*").execute()
        return [{**row, "id": str(row["id"])} for row in res.data or []]

    async def query(self, kind: str, query: Query) -> list[dict[str, Any]]:
        client = await self._get_client()
        builder = client.table(kind).select("*")
        for flt in query.filters:
            builder = self._apply_filter(builder, flt)
        if query.order_by:
            builder = builder.order(column_for(query.order_by), desc=query.descending)
        if query.limit is not None:
            builder = builder.limit(query.limit)

        with _translate_errors(kind, "query"):
            res = await builder.execute()
        return [{**row, "id": str(row["id"])} for row in res.data or []]
