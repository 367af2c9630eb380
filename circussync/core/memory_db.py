# circussync/core/memory_db.py
import copy
import logging
import uuid
from typing import Any

from circussync.core.errors import NotFoundError
from circussync.database import Database, Filter, Query

logger = logging.getLogger(__name__)

_MISSING = object()


def resolve_path(record: dict[str, Any], path: str) -> Any:
    """Follow a dotted path into nested dicts; `_MISSING` if any hop is absent."""
    value: Any = record
    for part in path.split("."):
        if not isinstance(value, dict) or part not in value:
            return _MISSING
        value = value[part]
    return value


def _element_contains(element: Any, expected: Any) -> bool:
    # Object operands match elements holding at least those keys (jsonb @> semantics).
    if isinstance(expected, dict):
        if not isinstance(element, dict):
            return False
        return all(k in element and element[k] == v for k, v in expected.items())
    return element == expected


def matches(record: dict[str, Any], flt: Filter) -> bool:
    value = resolve_path(record, flt.field)

    if flt.op == "==":
        return value is not _MISSING and value == flt.value
    if flt.op == "!=":
        return value is not _MISSING and value != flt.value
    if flt.op == "array_contains":
        return isinstance(value, list) and any(
            _element_contains(el, flt.value) for el in value
        )

    # Range operators never match missing/null or mismatched types.
    if value is _MISSING or value is None or flt.value is None:
        return False
    try:
        if flt.op == "<":
            return value < flt.value
        if flt.op == "<=":
            return value <= flt.value
        if flt.op == ">":
            return value > flt.value
        return value >= flt.value
    except TypeError:
        return False


class InMemoryDatabase(Database):
    """
    Process-local implementation used for local development and tests.

    Records are deep-copied on the way in and out so callers can never
    mutate stored state by accident.
    """

    def __init__(self) -> None:
        self._collections: dict[str, dict[str, dict[str, Any]]] = {}

    def _collection(self, kind: str) -> dict[str, dict[str, Any]]:
        return self._collections.setdefault(kind, {})

    @staticmethod
    def _out(record_id: str, record: dict[str, Any]) -> dict[str, Any]:
        return {**copy.deepcopy(record), "id": record_id}

    async def add(self, kind: str, data: dict[str, Any]) -> str:
        record_id = str(uuid.uuid4())
        body = copy.deepcopy(data)
        body.pop("id", None)
        self._collection(kind)[record_id] = body
        logger.debug("memory add %s/%s", kind, record_id)
        return record_id

    async def set(
        self,
        kind: str,
        record_id: str,
        data: dict[str, Any],
        merge: bool = False,
    ) -> None:
        body = copy.deepcopy(data)
        body.pop("id", None)
        collection = self._collection(kind)
        if merge and record_id in collection:
            collection[record_id].update(body)
        else:
            collection[record_id] = body

    async def get(self, kind: str, record_id: str) -> dict[str, Any] | None:
        record = self._collection(kind).get(record_id)
        if record is None:
            return None
        return self._out(record_id, record)

    async def update(self, kind: str, record_id: str, data: dict[str, Any]) -> None:
        collection = self._collection(kind)
        if record_id not in collection:
            raise NotFoundError(kind, record_id)
        body = copy.deepcopy(data)
        body.pop("id", None)
        collection[record_id].update(body)

    async def delete(self, kind: str, record_id: str) -> None:
        collection = self._collection(kind)
        if record_id not in collection:
            raise NotFoundError(kind, record_id)
        del collection[record_id]

    async def list_all(self, kind: str) -> list[dict[str, Any]]:
        return [self._out(rid, rec) for rid, rec in self._collection(kind).items()]

    async def query(self, kind: str, query: Query) -> list[dict[str, Any]]:
        results = [
            self._out(rid, rec)
            for rid, rec in self._collection(kind).items()
            if all(matches(rec, flt) for flt in query.filters)
        ]

        if query.order_by:
            field = query.order_by
            # Records without the ordering field are excluded, as hosted stores do.
            results = [r for r in results if resolve_path(r, field) not in (_MISSING, None)]
            results.sort(key=lambda r: resolve_path(r, field), reverse=query.descending)

        if query.limit is not None:
            results = results[: query.limit]
        return results

    def clear(self) -> None:
        self._collections.clear()
