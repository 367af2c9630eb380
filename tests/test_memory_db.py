import asyncio

import pytest

from circussync.core.errors import NotFoundError
from circussync.database import Filter, Query


def test_add_get_and_missing(db) -> None:
    async def run():
        record_id = await db.add("clients", {"name": "Acme", "tags": ["a"]})
        return record_id, await db.get("clients", record_id), await db.get("clients", "nope")

    record_id, record, missing = asyncio.run(run())

    assert record == {"id": record_id, "name": "Acme", "tags": ["a"]}
    assert missing is None


def test_returned_records_are_copies(db) -> None:
    async def run():
        record_id = await db.add("clients", {"name": "Acme", "tags": ["a"]})
        first = await db.get("clients", record_id)
        first["tags"].append("b")
        return await db.get("clients", record_id)

    assert asyncio.run(run())["tags"] == ["a"]


def test_update_merges_top_level_fields(db) -> None:
    async def run():
        record_id = await db.add("clients", {"name": "Acme", "status": "lead"})
        await db.update("clients", record_id, {"status": "active"})
        return await db.get("clients", record_id)

    record = asyncio.run(run())

    assert record["name"] == "Acme"
    assert record["status"] == "active"


def test_update_and_delete_of_missing_record_raise(db) -> None:
    async def run():
        record_id = await db.add("clients", {"name": "Acme"})
        await db.delete("clients", record_id)
        with pytest.raises(NotFoundError):
            await db.delete("clients", record_id)
        with pytest.raises(NotFoundError):
            await db.update("clients", record_id, {"name": "x"})

    asyncio.run(run())


def test_query_filters_order_and_limit(db) -> None:
    async def run():
        await db.add("events", {"title": "c", "date": "2024-03-01", "status": "confirmed"})
        await db.add("events", {"title": "a", "date": "2024-01-01", "status": "confirmed"})
        await db.add("events", {"title": "b", "date": "2024-02-01", "status": "pending"})
        await db.add("events", {"title": "no date", "status": "confirmed"})

        confirmed = await db.query(
            "events",
            Query(filters=(Filter("status", "==", "confirmed"),), order_by="date"),
        )
        newest = await db.query(
            "events",
            Query(order_by="date", descending=True, limit=2),
        )
        ranged = await db.query(
            "events",
            Query(filters=(Filter("date", ">", "2024-01-01"), Filter("date", "<=", "2024-03-01"))),
        )
        return confirmed, newest, ranged

    confirmed, newest, ranged = asyncio.run(run())

    assert [e["title"] for e in confirmed] == ["a", "c"]
    assert [e["title"] for e in newest] == ["c", "b"]
    assert sorted(e["title"] for e in ranged) == ["b", "c"]


def test_dotted_paths_and_partial_object_containment(db) -> None:
    async def run():
        await db.add(
            "events",
            {
                "title": "gala",
                "venue": {"city": "Chicago"},
                "performers": [{"performer": "p1", "role": "juggler"}],
            },
        )
        await db.add("events", {"title": "fair", "venue": {"city": "Denver"}, "performers": []})

        in_chicago = await db.query(
            "events", Query(filters=(Filter("venue.city", "==", "Chicago"),))
        )
        with_p1 = await db.query(
            "events",
            Query(filters=(Filter("performers", "array_contains", {"performer": "p1"}),)),
        )
        return in_chicago, with_p1

    in_chicago, with_p1 = asyncio.run(run())

    assert [e["title"] for e in in_chicago] == ["gala"]
    assert [e["title"] for e in with_p1] == ["gala"]


def test_unknown_operator_is_rejected() -> None:
    with pytest.raises(ValueError):
        Filter("name", "like", "Ac%")
