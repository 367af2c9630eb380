# circussync/models/performer.py
from datetime import datetime
from typing import Literal

from sqlmodel import SQLModel, Field

from circussync.models.base import Record

AvailabilityStatus = Literal["available", "unavailable", "tentative"]

UNKNOWN_PERFORMER_NAME = "Unknown performer"


class Skill(SQLModel):
    name: str
    category: str = Field(description="Skill category, e.g. 'juggling', 'fire', 'balloon art'")
    description: str | None = None


class Availability(SQLModel):
    """At most one entry per calendar day (UTC) per performer."""

    date: datetime
    status: AvailabilityStatus
    notes: str | None = None


class PerformerBase(SQLModel):
    name: str = Field(min_length=1, max_length=200)
    email: str = ""
    phone: str = ""
    bio: str = ""
    skills: list[Skill] = Field(default_factory=list)
    availability: list[Availability] = Field(default_factory=list)
    notes: str = ""


class Performer(PerformerBase, Record):
    """Performer record as stored."""


def placeholder_performer(performer_id: str) -> Performer:
    """Stand-in for an assignment whose performer record cannot be resolved."""
    return Performer(id=performer_id, name=UNKNOWN_PERFORMER_NAME)
