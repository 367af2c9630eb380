import asyncio
import time

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from circussync.core.config import get_settings
from circussync.core.memory_db import InMemoryDatabase
from circussync.database import get_database
from circussync.main import app
from circussync.repositories.user_repo import UserRepository

API = get_settings().API_V1_STR


def _token(uid: str, email: str) -> str:
    settings = get_settings()
    claims = {"sub": uid, "email": email, "exp": int(time.time()) + 3600}
    return jwt.encode(claims, settings.SUPABASE_JWT_SECRET, algorithm=settings.SUPABASE_JWT_ALG)


@pytest.fixture
def api_db():
    db = InMemoryDatabase()
    app.dependency_overrides[get_database] = lambda: db
    yield db
    app.dependency_overrides.clear()


@pytest.fixture
def client(api_db) -> TestClient:
    return TestClient(app)


def _login_as(api_db, role: str) -> dict[str, str]:
    uid = f"{role}-uid"
    email = f"{role}@example.com"
    asyncio.run(UserRepository(api_db).create_with_id(uid, {"email": email, "name": role, "role": role}))
    return {"Authorization": f"Bearer {_token(uid, email)}"}


def test_health(client) -> None:
    assert client.get("/").json()["status"] == "ok"


def test_requests_without_token_are_rejected(client) -> None:
    assert client.get(f"{API}/clients").status_code == 401


def test_invalid_token_is_rejected(client) -> None:
    response = client.get(f"{API}/clients", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401


def test_first_request_provisions_readonly_profile(client, api_db) -> None:
    headers = {"Authorization": f"Bearer {_token('new-uid', 'newbie@example.com')}"}

    me = client.get(f"{API}/users/me", headers=headers)

    assert me.status_code == 200
    assert me.json()["role"] == "readonly"
    assert me.json()["name"] == "newbie"


def test_readonly_can_read_but_not_write(client, api_db) -> None:
    headers = _login_as(api_db, "readonly")

    assert client.get(f"{API}/clients", headers=headers).status_code == 200
    response = client.post(f"{API}/clients", json={"name": "Acme"}, headers=headers)
    assert response.status_code == 403


def test_manager_client_lifecycle(client, api_db) -> None:
    headers = _login_as(api_db, "manager")

    created = client.post(f"{API}/clients", json={"name": "Acme", "status": "lead"}, headers=headers)
    assert created.status_code == 201
    client_id = created.json()["id"]

    leads = client.get(f"{API}/clients", params={"status": "lead"}, headers=headers).json()
    assert [c["id"] for c in leads] == [client_id]

    patched = client.patch(f"{API}/clients/{client_id}", json={"status": "active"}, headers=headers)
    assert patched.json()["status"] == "active"
    assert patched.json()["created_at"] == created.json()["created_at"]

    assert client.delete(f"{API}/clients/{client_id}", headers=headers).status_code == 204
    assert client.get(f"{API}/clients/{client_id}", headers=headers).status_code == 404
    assert client.delete(f"{API}/clients/{client_id}", headers=headers).status_code == 404


def test_create_rejects_server_fields(client, api_db) -> None:
    headers = _login_as(api_db, "manager")

    response = client.post(f"{API}/clients", json={"id": "mine", "name": "Acme"}, headers=headers)

    assert response.status_code == 422


def test_performer_can_set_availability(client, api_db) -> None:
    manager = _login_as(api_db, "manager")
    performer = _login_as(api_db, "performer")
    performer_id = client.post(f"{API}/performers", json={"name": "Ruby"}, headers=manager).json()["id"]

    body = {"date": "2024-07-01T00:00:00+00:00", "status": "unavailable"}
    client.put(f"{API}/performers/{performer_id}/availability", json=body, headers=performer)
    body["status"] = "available"
    response = client.put(f"{API}/performers/{performer_id}/availability", json=body, headers=performer)

    assert response.status_code == 200
    assert [a["status"] for a in response.json()] == ["available"]


def test_event_lineup_includes_placeholders(client, api_db) -> None:
    headers = _login_as(api_db, "manager")
    performer_id = client.post(f"{API}/performers", json={"name": "Marco"}, headers=headers).json()["id"]
    event = client.post(
        f"{API}/events",
        json={
            "title": "Gala",
            "date": "2024-09-18T19:00:00+00:00",
            "performers": [{"performer": performer_id}, {"performer": "ghost"}],
        },
        headers=headers,
    ).json()

    lineup = client.get(f"{API}/events/{event['id']}/performers", headers=headers).json()

    assert [p["resolved"] for p in lineup] == [True, False]
    assert lineup[1]["performer"]["id"] == "ghost"


def test_role_change_requires_admin(client, api_db) -> None:
    manager = _login_as(api_db, "manager")
    admin = _login_as(api_db, "admin")

    denied = client.patch(f"{API}/users/readonly-uid/role", json={"role": "admin"}, headers=manager)
    assert denied.status_code == 403

    _login_as(api_db, "readonly")
    allowed = client.patch(f"{API}/users/readonly-uid/role", json={"role": "performer"}, headers=admin)
    assert allowed.status_code == 200
    assert allowed.json()["role"] == "performer"


def test_notifications_start_unread_and_can_be_marked_read(client, api_db) -> None:
    manager = _login_as(api_db, "manager")
    reader = _login_as(api_db, "readonly")

    created = client.post(
        f"{API}/notifications",
        json={"user_id": "readonly-uid", "message": "New booking"},
        headers=manager,
    ).json()
    assert created["read"] is False

    unread = client.get(f"{API}/notifications/me", headers=reader).json()
    assert [n["id"] for n in unread] == [created["id"]]

    assert client.post(f"{API}/notifications/{created['id']}/read", headers=reader).status_code == 204
    assert client.get(f"{API}/notifications/me", headers=reader).json() == []
