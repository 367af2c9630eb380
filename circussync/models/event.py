# circussync/models/event.py
from datetime import datetime
from typing import Literal

from sqlmodel import SQLModel, Field

from circussync.models.base import Record
from circussync.models.performer import Performer

EventStatus = Literal["inquiry", "pending", "confirmed", "completed", "cancelled"]


class PerformerAssignment(SQLModel):
    """
    Join between an Event and a Performer.

    `performer` is the Performer record id.
    """

    performer: str
    role: str = ""
    fee: float | None = Field(default=None, ge=0)
    payment_terms: str | None = None
    confirmed: bool = False


class EventBase(SQLModel):
    title: str = Field(min_length=1, max_length=200)
    date: datetime
    status: EventStatus = "inquiry"
    client: str | None = Field(default=None, description="Client record id")
    location: str = ""
    notes: str = ""
    performers: list[PerformerAssignment] = Field(default_factory=list)


class Event(EventBase, Record):
    """Event record as stored."""


class EventPerformer(SQLModel):
    """
    A resolved assignment: the assignment itself plus the performer it
    points at (or a placeholder when `resolved` is False).
    """

    assignment: PerformerAssignment
    performer: Performer
    resolved: bool = True
