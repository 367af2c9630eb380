# circussync/models/agent.py
from sqlmodel import SQLModel, Field

from circussync.models.base import Record


class AgentBase(SQLModel):
    name: str = Field(min_length=1, max_length=200)
    email: str = ""
    phone: str = ""
    specialization: list[str] = Field(default_factory=list)
    notes: str = ""


class Agent(AgentBase, Record):
    """Booking agent record as stored."""
