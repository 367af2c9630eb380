import asyncio
from datetime import timedelta

import pytest

from circussync.core.errors import NotFoundError
from circussync.core.timestamps import utcnow


def test_status_change_moves_client_between_status_queries(client_service) -> None:
    async def run():
        client_id = await client_service.add({"name": "Acme", "status": "lead"})
        leads_before = await client_service.get_by_status("lead")

        await client_service.update(client_id, {"status": "active"})
        leads_after = await client_service.get_by_status("lead")
        active_after = await client_service.get_by_status("active")
        return client_id, leads_before, leads_after, active_after

    client_id, leads_before, leads_after, active_after = asyncio.run(run())

    assert client_id in [c.id for c in leads_before]
    assert client_id not in [c.id for c in leads_after]
    assert client_id in [c.id for c in active_after]


def test_get_by_status_is_ordered_by_name(client_service) -> None:
    async def run():
        for name in ("Zirkus", "Acme", "Midway"):
            await client_service.add({"name": name, "status": "active"})
        return await client_service.get_by_status("active")

    assert [c.name for c in asyncio.run(run())] == ["Acme", "Midway", "Zirkus"]


def test_search_matches_name_contact_and_email(client_service) -> None:
    async def run():
        await client_service.add({"name": "Pritzker Elementary", "contact_person": "Principal Jones"})
        await client_service.add({"name": "Schwab Rehab", "email": "activities@example.com"})
        return (
            await client_service.search("pritzker"),
            await client_service.search("JONES"),
            await client_service.search("activities@"),
            await client_service.search("   "),
        )

    by_name, by_contact, by_email, blank = asyncio.run(run())

    assert [c.name for c in by_name] == ["Pritzker Elementary"]
    assert [c.name for c in by_contact] == ["Pritzker Elementary"]
    assert [c.name for c in by_email] == ["Schwab Rehab"]
    assert len(blank) == 2


def test_follow_ups_within_window(client_service) -> None:
    now = utcnow()

    async def run():
        await client_service.add(
            {"name": "Soon", "next_follow_up": {"date": now + timedelta(days=2), "task": "call"}}
        )
        await client_service.add(
            {"name": "Later", "next_follow_up": {"date": now + timedelta(days=30), "task": "call"}}
        )
        await client_service.add({"name": "Never"})
        return await client_service.get_for_follow_up(7)

    assert [c.name for c in asyncio.run(run())] == ["Soon"]


def test_server_fields_in_input_are_ignored(client_service) -> None:
    async def run():
        client_id = await client_service.add({"id": "mine", "name": "Acme"})
        return client_id, await client_service.get(client_id)

    client_id, client = asyncio.run(run())

    assert client_id != "mine"
    assert client.name == "Acme"


def test_update_and_delete_of_missing_client_raise(client_service) -> None:
    async def run():
        with pytest.raises(NotFoundError):
            await client_service.update("missing", {"notes": "x"})
        with pytest.raises(NotFoundError):
            await client_service.delete("missing")

    asyncio.run(run())


def test_delete_removes_client_from_get_all(client_service) -> None:
    async def run():
        keep = await client_service.add({"name": "Keep"})
        drop = await client_service.add({"name": "Drop"})
        await client_service.delete(drop)
        return keep, [c.id for c in await client_service.get_all()]

    keep, ids = asyncio.run(run())

    assert ids == [keep]
