"""Shared fixtures: every test runs against a fresh InMemoryDatabase."""

import os
import sys

# Settings are read once and cached; pin the test configuration before
# anything under circussync is imported.
os.environ.setdefault("USE_MOCK_DATA", "true")
os.environ.setdefault("SEED_MOCK_DATA", "false")
os.environ.setdefault("SUPABASE_JWT_SECRET", "test-jwt-secret")

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

import pytest  # noqa: E402

from circussync.core.identity import InMemoryIdentityProvider  # noqa: E402
from circussync.core.memory_db import InMemoryDatabase  # noqa: E402
from circussync.repositories.client_repo import ClientRepository  # noqa: E402
from circussync.repositories.event_repo import EventRepository  # noqa: E402
from circussync.repositories.performer_repo import PerformerRepository  # noqa: E402
from circussync.repositories.user_repo import UserRepository  # noqa: E402
from circussync.services.client_service import ClientService  # noqa: E402
from circussync.services.event_service import EventService  # noqa: E402
from circussync.services.performer_service import PerformerService  # noqa: E402
from circussync.services.user_service import UserService  # noqa: E402


@pytest.fixture
def db() -> InMemoryDatabase:
    return InMemoryDatabase()


@pytest.fixture
def client_service(db) -> ClientService:
    return ClientService(ClientRepository(db))


@pytest.fixture
def performer_service(db) -> PerformerService:
    return PerformerService(PerformerRepository(db))


@pytest.fixture
def event_service(db) -> EventService:
    return EventService(EventRepository(db), PerformerRepository(db))


@pytest.fixture
def user_service(db) -> UserService:
    return UserService(UserRepository(db))


@pytest.fixture
def provider() -> InMemoryIdentityProvider:
    return InMemoryIdentityProvider()
