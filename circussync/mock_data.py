# circussync/mock_data.py
"""
Sample records for mock mode (USE_MOCK_DATA=true, SEED_MOCK_DATA=true).

Records are written under fixed ids so events can reference the sample
clients and performers.
"""

import logging
from datetime import datetime, timezone
from typing import Any

from circussync.core.timestamps import encode_for_storage
from circussync.database import Database

logger = logging.getLogger(__name__)


def _d(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


MOCK_CLIENTS: dict[str, dict[str, Any]] = {
    "mock-client-1": {
        "name": "Pritzker Elementary",
        "contact_person": "Principal Jones",
        "email": "pjones@example.com",
        "phone": "555-1111",
        "address": "123 School St, Chicago",
        "event_types": ["School Event", "Festival"],
        "services_used": ["Balloon Art", "Juggling"],
        "last_performed": _d(2023, 9, 15),
        "last_contacted": _d(2024, 7, 5),
        "next_follow_up": {"date": _d(2024, 8, 1), "task": "Confirm details for Back To School Bash"},
        "notes": "Loves the balloon dog act.",
        "status": "active",
        "events": ["mock-event-1"],
        "created_at": _d(2023, 2, 1),
        "updated_at": _d(2024, 7, 5),
    },
    "mock-client-2": {
        "name": "Agudath Jacob Synagogue",
        "contact_person": "Rabbi Cohen",
        "email": "rcohen@example.com",
        "phone": "555-2222",
        "address": "456 Temple Rd, Chicago",
        "event_types": ["Holiday Event", "Religious Event"],
        "services_used": ["Fire Performance", "LED Performance"],
        "last_performed": _d(2023, 12, 10),
        "last_contacted": _d(2024, 7, 1),
        "next_follow_up": {"date": _d(2024, 7, 14), "task": "Discuss Hannukah event details"},
        "notes": "Needs fire safety plan approval.",
        "status": "yearly",
        "events": [],
        "created_at": _d(2022, 6, 1),
        "updated_at": _d(2024, 7, 1),
    },
    "mock-client-3": {
        "name": "Schwab Rehab Hospital",
        "contact_person": "Activity Director",
        "email": "activities@example.com",
        "phone": "555-3333",
        "address": "789 Health Ave, Chicago",
        "event_types": ["Corporate Event"],
        "services_used": ["Ambient Entertainment", "Magic"],
        "last_performed": None,
        "last_contacted": _d(2024, 6, 25),
        "next_follow_up": {"date": None, "task": ""},
        "notes": "Initial inquiry for Sept 18th event.",
        "status": "lead",
        "events": [],
        "created_at": _d(2024, 6, 25),
        "updated_at": _d(2024, 6, 25),
    },
}

MOCK_PERFORMERS: dict[str, dict[str, Any]] = {
    "mock-performer-1": {
        "name": "Ruby Flame",
        "email": "ruby@example.com",
        "phone": "555-4444",
        "bio": "Fire spinner and LED poi artist.",
        "skills": [
            {"name": "Fire Poi", "category": "fire", "description": "Double staff and poi"},
            {"name": "LED Poi", "category": "led", "description": ""},
        ],
        "availability": [{"date": _d(2024, 7, 1), "status": "unavailable", "notes": "Touring"}],
        "notes": "",
        "created_at": _d(2023, 1, 10),
        "updated_at": _d(2024, 6, 1),
    },
    "mock-performer-2": {
        "name": "Marco the Juggler",
        "email": "marco@example.com",
        "phone": "555-5555",
        "bio": "Juggling and balloon twisting for all ages.",
        "skills": [
            {"name": "Juggling", "category": "juggling", "description": "Clubs, rings, balls"},
            {"name": "Balloon Art", "category": "balloon", "description": ""},
        ],
        "availability": [],
        "notes": "Prefers school events.",
        "created_at": _d(2023, 3, 2),
        "updated_at": _d(2023, 3, 2),
    },
}

MOCK_EVENTS: dict[str, dict[str, Any]] = {
    "mock-event-1": {
        "title": "Back To School Bash",
        "date": _d(2024, 8, 28),
        "status": "confirmed",
        "client": "mock-client-1",
        "location": "123 School St, Chicago",
        "notes": "",
        "performers": [
            {
                "performer": "mock-performer-2",
                "role": "Juggler",
                "fee": 350.0,
                "payment_terms": "Net 30",
                "confirmed": True,
            },
        ],
        "created_at": _d(2024, 7, 5),
        "updated_at": _d(2024, 7, 5),
    },
}


async def seed_mock_data(db: Database) -> None:
    """Write the sample clients, performers and events into `db`."""
    for kind, records in (
        ("clients", MOCK_CLIENTS),
        ("performers", MOCK_PERFORMERS),
        ("events", MOCK_EVENTS),
    ):
        for record_id, data in records.items():
            await db.set(kind, record_id, encode_for_storage(data))
        logger.info("Seeded %d mock %s", len(records), kind)
