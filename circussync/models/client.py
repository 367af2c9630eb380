# circussync/models/client.py
from datetime import datetime
from typing import Literal

from sqlmodel import SQLModel, Field

from circussync.models.base import Record

ClientStatus = Literal["lead", "active", "yearly", "inactive"]


class FollowUp(SQLModel):
    """The single pending follow-up for a client (date may be unset)."""

    date: datetime | None = None
    task: str = ""


class ClientBase(SQLModel):
    """
    Shared client fields.

    `events` holds ids of related Event records.
    """

    name: str = Field(min_length=1, max_length=200)
    contact_person: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    event_types: list[str] = Field(default_factory=list)
    services_used: list[str] = Field(default_factory=list)
    status: ClientStatus = "lead"
    last_performed: datetime | None = None
    last_contacted: datetime | None = None
    next_follow_up: FollowUp = Field(default_factory=FollowUp)
    notes: str = ""
    events: list[str] = Field(default_factory=list)


class Client(ClientBase, Record):
    """Organization contact record as stored."""
