import asyncio
from datetime import datetime, timezone

from circussync.repositories.client_repo import ClientRepository
from circussync.repositories.task_repo import TaskRepository
from circussync.services.task_service import TaskService


def test_get_after_add_returns_the_input_plus_server_fields(db) -> None:
    repo = ClientRepository(db)
    data = {
        "name": "Acme",
        "contact_person": "Wile E.",
        "email": "wile@example.com",
        "status": "lead",
        "event_types": ["Corporate Event"],
        "last_contacted": datetime(2024, 6, 1, 10, 0, tzinfo=timezone.utc),
        "next_follow_up": {"date": datetime(2024, 7, 1, tzinfo=timezone.utc), "task": "call"},
    }

    async def run():
        record_id = await service.add({**data, "id": "caller-id", "created_at": "ignored"})
        return record_id, await repo.get(record_id)

    record_id, client = asyncio.run(run())

    assert client.id == record_id != "caller-id"
    assert client.created_at is not None
    assert client.updated_at == client.created_at
    dumped = client.model_dump(exclude={"id", "created_at", "updated_at"})
    assert {key: dumped[key] for key in data} == data


def test_update_keeps_created_at_and_refreshes_updated_at(db) -> None:
    repo = ClientRepository(db)

    async def run():
        record_id = await service.add({"name": "Acme"})
        before = await repo.get(record_id)
        await repo.update(record_id, {"notes": "called", "created_at": datetime(2000, 1, 1)})
        return before, await repo.get(record_id)

    before, after = asyncio.run(run())

    assert after.created_at == before.created_at
    assert after.updated_at >= before.updated_at
    assert after.notes == "called"


def test_open_tasks_due_in_window(db) -> None:
    service = TaskService(TaskRepository(db))
    start = datetime(2024, 7, 1, tzinfo=timezone.utc)
    end = datetime(2024, 7, 8, tzinfo=timezone.utc)

    async def run():
        await service.add({"title": "in", "assigned_to": "u1", "due_date": datetime(2024, 7, 3, tzinfo=timezone.utc)})
        await service.add({"title": "done", "assigned_to": "u1", "completed": True, "due_date": datetime(2024, 7, 3, tzinfo=timezone.utc)})
        await service.add({"title": "late", "assigned_to": "u1", "due_date": datetime(2024, 7, 20, tzinfo=timezone.utc)})
        await service.add({"title": "other", "assigned_to": "u2", "due_date": datetime(2024, 7, 3, tzinfo=timezone.utc)})
        return await service.repo.list_open_due_between("u1", start, end)

    assert [t.title for t in asyncio.run(run())] == ["in"]


def test_timestamp_like_strings_survive_in_text_fields(db) -> None:
    repo = ClientRepository(db)
    data = {
        "name": "2024-07-01T10:00:00Z",
        "contact_person": "2024-07-01T10:00:00.000000+00:00",
        "notes": "2024-07-01T10:00:00Z",
        "event_types": ["2024-07-01T10:00:00Z"],
        "next_follow_up": {"date": None, "task": "2024-08-01T09:00:00+02:00"},
    }

    async def run():
        record_id = await repo.add(data)
        return await repo.get(record_id)

    client = asyncio.run(run())

    dumped = client.model_dump(exclude={"id", "created_at", "updated_at"})
    assert {key: dumped[key] for key in data} == data


def test_one_timestamp_like_text_does_not_break_listing(db) -> None:
    repo = ClientRepository(db)

    async def run():
        await repo.add({"name": "Plain"})
        await repo.add({"name": "Odd", "contact_person": "2024-07-01T10:00:00Z"})
        return await repo.list_all()

    assert sorted(c.name for c in asyncio.run(run())) == ["Odd", "Plain"]
