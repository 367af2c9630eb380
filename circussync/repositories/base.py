# circussync/repositories/base.py
"""
Generic typed repository on top of the `Database` capability.

Every entity repository extends `Repository` and only adds its own
query helpers:

    class AgentRepository(Repository[Agent]):
        kind = "agents"
        model = Agent

        async def list_by_specialization(self, tag: str) -> list[Agent]:
            return await self.find(Filter("specialization", "array_contains", tag))
"""

import logging
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from circussync.core.errors import StorageError
from circussync.core.timestamps import encode_for_storage, encode_value, utcnow
from circussync.database import Database, Filter, Query
from circussync.models.base import SERVER_FIELDS

ModelT = TypeVar("ModelT", bound=BaseModel)

logger = logging.getLogger(__name__)


class Repository(Generic[ModelT]):
    """
    Data access layer for one kind of record.

    Responsibilities:
      - encode dates on every write, decode them on every read
      - stamp created_at once and updated_at on every write
      - validate stored records against the entity model
      - no business logic, no HTTP
    """

    kind: ClassVar[str]
    model: ClassVar[type[BaseModel]]

    def __init__(self, db: Database):
        self.db = db

    # ----- Conversion -----

    def to_model(self, raw: dict[str, Any]) -> ModelT:
        """Validate a stored row; canonical date strings parse into `datetime` fields."""
        try:
            return self.model.model_validate(raw)  # type: ignore[return-value]
        except ValidationError as exc:
            logger.error("Malformed %s record %s: %s", self.kind, raw.get("id"), exc)
            raise StorageError(
                f"Malformed {self.kind} record",
                {"id": raw.get("id")},
            ) from exc

    @staticmethod
    def _strip_server_fields(data: dict[str, Any]) -> dict[str, Any]:
        return {k: v for k, v in data.items() if k not in SERVER_FIELDS}

    # ----- Basic CRUD -----

    async def add(self, data: dict[str, Any]) -> str:
        """Insert a new record and return its server-assigned id."""
        now = utcnow()
        body = {**self._strip_server_fields(data), "created_at": now, "updated_at": now}
        return await self.db.add(self.kind, encode_for_storage(body))

    async def get(self, record_id: str) -> ModelT | None:
        """Return a record by id, or None if not found."""
        raw = await self.db.get(self.kind, record_id)
        if raw is None:
            return None
        return self.to_model(raw)

    async def update(self, record_id: str, data: dict[str, Any]) -> None:
        """Merge fields into an existing record; created_at is never touched."""
        body = {**self._strip_server_fields(data), "updated_at": utcnow()}
        await self.db.update(self.kind, record_id, encode_for_storage(body))

    async def delete(self, record_id: str) -> None:
        await self.db.delete(self.kind, record_id)

    async def list_all(self) -> list[ModelT]:
        rows = await self.db.list_all(self.kind)
        return [self.to_model(row) for row in rows]

    async def find(
        self,
        *filters: Filter,
        order_by: str | None = None,
        descending: bool = False,
        limit: int | None = None,
    ) -> list[ModelT]:
        """
        Run a query; filter operands are encoded the same way as stored data
        so date ranges compare like with like.
        """
        encoded = tuple(Filter(f.field, f.op, encode_value(f.value)) for f in filters)
        query = Query(filters=encoded, order_by=order_by, descending=descending, limit=limit)
        rows = await self.db.query(self.kind, query)
        return [self.to_model(row) for row in rows]
